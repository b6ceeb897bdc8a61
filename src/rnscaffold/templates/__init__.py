"""Project templates and post-init instructions."""

from rnscaffold.templates.engine import (
    copy_project_template_and_replace,
    create_from_remote_template,
    create_project_from_template,
    install_template_dependencies,
    template_package,
)
from rnscaffold.templates.instructions import print_run_instructions

__all__ = [
    "copy_project_template_and_replace",
    "create_from_remote_template",
    "create_project_from_template",
    "install_template_dependencies",
    "print_run_instructions",
    "template_package",
]

"""Project initializer: argument parsing, peer lookup, manifest patch."""

from rnscaffold.project.args import parse_init_args
from rnscaffold.project.initializer import dev_dependencies, generate_project, init
from rnscaffold.project.manifest import add_jest_to_manifest, add_jest_to_package_json
from rnscaffold.project.peer import read_react_version

__all__ = [
    "add_jest_to_manifest",
    "add_jest_to_package_json",
    "dev_dependencies",
    "generate_project",
    "init",
    "parse_init_args",
    "read_react_version",
]

"""Create a new React Native app from the template and wire up its tooling."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from rnscaffold.contracts.collaborators import PackageManagerFactory, TemplateEngine
from rnscaffold.contracts.exceptions import PeerDependencyError, UsageError
from rnscaffold.contracts.project import InitOptions, ProjectDescriptor
from rnscaffold.project.args import parse_init_args
from rnscaffold.project.manifest import add_jest_to_package_json
from rnscaffold.project.peer import read_react_version
from rnscaffold.package_manager import PackageManager
from rnscaffold.templates import create_project_from_template, print_run_instructions

logger = logging.getLogger(__name__)

# Arguments after `<prog> init <name>` in the process argv.
_PROCESS_ARGS_OFFSET = 3


def dev_dependencies(react_version: str) -> list[str]:
    return [
        "@babel/core",
        "@babel/runtime",
        "jest",
        "babel-jest",
        "metro-react-native-babel-preset",
        f"react-test-renderer@{react_version}",
    ]


def _collect_args(args_or_name: Sequence[str] | str | None, argv: Sequence[str] | None) -> list[str]:
    if args_or_name is None:
        return []
    if isinstance(args_or_name, str):
        if not args_or_name:
            return []
        extra = sys.argv[_PROCESS_ARGS_OFFSET:] if argv is None else argv
        return [args_or_name, *extra]
    return list(args_or_name)


def init(
    project_dir: str | Path,
    args_or_name: Sequence[str] | str | None,
    *,
    argv: Sequence[str] | None = None,
    package_manager_factory: PackageManagerFactory = PackageManager,
    template_engine: TemplateEngine = create_project_from_template,
    console: Console | None = None,
) -> ProjectDescriptor | None:
    """Create a project in *project_dir*.

    *args_or_name* is either the full argument list for the generator
    (``["AwesomeApp", "--template", "navigation"]``) or just the project name,
    in which case the remaining process arguments (or *argv*) are appended.

    Usage errors and a missing peer dependency are logged and ``None`` is
    returned before anything is written. Failures of the template copy, the
    installs or the manifest rewrite propagate to the caller and leave the
    partially generated project on disk.
    """
    args = _collect_args(args_or_name, argv)
    if not args:
        logger.error("init requires a project name.")
        return None

    try:
        options = parse_init_args(args)
    except UsageError as exc:
        logger.error("%s", exc)
        return None

    destination = Path(project_dir).resolve()
    logger.info("Setting up new React Native app in %s", destination)
    try:
        return generate_project(
            destination,
            options,
            package_manager_factory=package_manager_factory,
            template_engine=template_engine,
            console=console,
        )
    except PeerDependencyError as exc:
        logger.error("%s", exc)
        return None


def generate_project(
    destination_root: Path,
    options: InitOptions,
    *,
    package_manager_factory: PackageManagerFactory = PackageManager,
    template_engine: TemplateEngine = create_project_from_template,
    console: Console | None = None,
) -> ProjectDescriptor:
    """Run template instantiation, installs and the manifest patch in order.

    Raises :class:`PeerDependencyError` before touching the filesystem when the
    installed framework does not declare its ``react`` peer dependency.
    """
    react_version = read_react_version(destination_root)
    project = ProjectDescriptor(destination=destination_root, name=options.name, template=options.template)

    package_manager = package_manager_factory(destination_root, force_npm=options.npm, verbose=options.verbose)

    template_engine(
        destination_root,
        project.name,
        project.template,
        destination_root,
        package_manager=package_manager,
    )

    logger.info("Adding required dependencies")
    package_manager.install([f"react@{react_version}"])

    logger.info("Adding required dev dependencies")
    package_manager.install_dev(dev_dependencies(react_version))

    add_jest_to_package_json(destination_root)
    print_run_instructions(destination_root, project.name, console=console)
    return project

"""Materialize a project from the built-in template or a published one."""

from __future__ import annotations

import json
import logging
import re
import shutil
from collections.abc import Collection
from pathlib import Path

from rnscaffold.contracts.collaborators import PackageManager
from rnscaffold.resolve import resolve_package_dir

logger = logging.getLogger(__name__)

PLACEHOLDER_NAME = "HelloWorld"
TEMPLATE_PACKAGE_PREFIX = "react-native-template-"
TEMPLATE_METADATA_FILES = ("package.json", "dependencies.json", "devDependencies.json")

_BINARY_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".gif", ".ico", ".webp", ".jar", ".keystore", ".ttf", ".otf"})
# `_gitignore` ships as `.gitignore`; `__tests__` and friends stay as they are.
_DOTFILE_RE = re.compile(r"^_(?!_)")


def _target_relpath(relpath: Path, project_name: str) -> Path:
    parts = [
        part.replace(PLACEHOLDER_NAME, project_name).replace(PLACEHOLDER_NAME.lower(), project_name.lower())
        for part in relpath.parts
    ]
    parts[-1] = _DOTFILE_RE.sub(".", parts[-1])
    return Path(*parts)


def copy_project_template_and_replace(
    src_path: Path,
    dest_path: Path,
    project_name: str,
    *,
    ignore_paths: Collection[str] = (),
) -> list[Path]:
    """Copy *src_path* into *dest_path*, renaming the placeholder app name.

    Returns the written files. Top-level entries named in *ignore_paths* are
    skipped. Existing files in *dest_path* are overwritten.
    """
    written: list[Path] = []
    for source in sorted(src_path.rglob("*")):
        if not source.is_file():
            continue
        relpath = source.relative_to(src_path)
        if relpath.parts[0] in ignore_paths:
            continue

        target = dest_path / _target_relpath(relpath, project_name)
        target.parent.mkdir(parents=True, exist_ok=True)
        if source.suffix.lower() in _BINARY_SUFFIXES:
            shutil.copyfile(source, target)
        else:
            try:
                content = source.read_text(encoding="utf-8")
            except UnicodeDecodeError:
                logger.debug("Copying undecodable template file verbatim: %s", relpath)
                shutil.copyfile(source, target)
            else:
                content = content.replace(PLACEHOLDER_NAME, project_name).replace(
                    PLACEHOLDER_NAME.lower(), project_name.lower()
                )
                target.write_text(content, encoding="utf-8")
        written.append(target)
    return written


def template_package(template_id: str) -> tuple[str, str]:
    """Return ``(install_spec, package_name)`` for a ``--template`` value."""
    if "://" in template_id:
        return template_id, template_id.rstrip("/").rsplit("/", 1)[-1]
    name = f"{TEMPLATE_PACKAGE_PREFIX}{template_id}"
    return name, name


def _read_dependency_specs(path: Path) -> list[str]:
    if not path.exists():
        return []
    dependencies = json.loads(path.read_text(encoding="utf-8"))
    return [f"{name}@{version}" for name, version in dependencies.items()]


def install_template_dependencies(template_path: Path, package_manager: PackageManager) -> None:
    specs = _read_dependency_specs(template_path / "dependencies.json")
    if not specs:
        logger.info("No additional dependencies.")
    else:
        logger.info("Adding dependencies for the project...")
        package_manager.install(specs)

    dev_specs = _read_dependency_specs(template_path / "devDependencies.json")
    if dev_specs:
        logger.info("Adding develop dependencies for the project...")
        package_manager.install_dev(dev_specs)


def create_from_remote_template(
    template_id: str,
    dest_path: Path,
    project_name: str,
    package_manager: PackageManager,
) -> None:
    install_spec, package_name = template_package(template_id)
    logger.info("Fetching template %s...", install_spec)
    try:
        package_manager.install([install_spec])
        template_path = dest_path / "node_modules" / package_name
        copy_project_template_and_replace(
            template_path,
            dest_path,
            project_name,
            ignore_paths=TEMPLATE_METADATA_FILES,
        )
        install_template_dependencies(template_path, package_manager)
    finally:
        package_manager.uninstall([package_name])


def create_project_from_template(
    dest_root: Path,
    project_name: str,
    template_id: str | None,
    copy_from: Path,
    *,
    package_manager: PackageManager,
) -> None:
    """Copy the built-in template, then layer *template_id* on top when given."""
    builtin = resolve_package_dir("react-native", copy_from) / "template"
    copy_project_template_and_replace(builtin, dest_root, project_name)
    if template_id is None:
        return
    create_from_remote_template(template_id, dest_root, project_name, package_manager)

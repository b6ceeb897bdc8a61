"""Contracts for the external tools the initializer and loader drive."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import Any, Protocol

from rnscaffold.contracts.metro import MetroConfig, PluginConfig


class PackageManager(Protocol):
    def install(self, packages: Sequence[str]) -> None: ...

    def install_dev(self, packages: Sequence[str]) -> None: ...

    def uninstall(self, packages: Sequence[str]) -> None: ...


class PackageManagerFactory(Protocol):
    def __call__(self, project_dir: Path, *, force_npm: bool = False, verbose: bool = False) -> PackageManager: ...


class TemplateEngine(Protocol):
    def __call__(
        self,
        dest_root: Path,
        project_name: str,
        template_id: str | None,
        copy_from: Path,
        *,
        package_manager: PackageManager,
    ) -> None: ...


PluginFinder = Callable[[Path], Awaitable[PluginConfig]]
BaseConfigLoader = Callable[[Path, dict[str, Any]], Awaitable[MetroConfig]]
SymlinkFinder = Callable[[Path, Sequence[Path]], list[Path]]

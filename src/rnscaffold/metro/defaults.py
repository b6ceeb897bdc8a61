"""Defaults React Native layers over the bundler's own configuration."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rnscaffold.contracts.collaborators import SymlinkFinder
from rnscaffold.metro.blacklist import create_blacklist
from rnscaffold.metro.source import ConfigSource
from rnscaffold.metro.symlinks import find_symlinked_modules
from rnscaffold.resolve import resolve_package_dir

DEFAULT_PORT = 8081
RESOLVER_MAIN_FIELDS = ("react-native", "browser", "main")
FIXTURES_PATTERN = r".*/__fixtures__/.*"
ASSET_REGISTRY_PATH = "react-native/Libraries/Image/AssetRegistry"
POLYFILLS = (
    "Libraries/polyfills/console.js",
    "Libraries/polyfills/error-guard.js",
    "Libraries/polyfills/Object.es7.js",
)


@dataclass(frozen=True)
class ReactNativePaths:
    package_dir: Path
    transformer: Path

    @property
    def initialize_core(self) -> Path:
        return self.package_dir / "Libraries" / "Core" / "InitializeCore.js"

    @property
    def haste_impl(self) -> Path:
        return self.package_dir / "jest" / "hasteImpl.js"

    @property
    def polyfills(self) -> list[Path]:
        return [self.package_dir / p for p in POLYFILLS]


def locate_react_native(project_root: Path) -> ReactNativePaths:
    """Find the installed react-native and the bundler transformer it ships with."""
    package_dir = resolve_package_dir("react-native", project_root)
    metro_dir = resolve_package_dir("metro", package_dir)
    return ReactNativePaths(package_dir=package_dir, transformer=metro_dir / "src" / "reactNativeTransformer.js")


def get_project_root(source: ConfigSource) -> Path:
    """Guess the app root from where the loader is installed.

    Under CocoaPods the loader sits in ``Pods/React/packager`` four levels
    below the app; from ``node_modules`` it is two levels below.
    """
    loader_dir = source.loader_dir
    if loader_dir.match("Pods/React/packager"):
        return Path(os.path.normpath(loader_dir / "../../../.."))
    return Path(os.path.normpath(loader_dir / "../.."))


def get_watch_folders(source: ConfigSource, *, symlink_finder: SymlinkFinder = find_symlinked_modules) -> list[Path]:
    if not source.app_root:
        return []
    roots = [Path(os.path.abspath(source.app_root))]
    folders = list(roots)
    for root in roots:
        folders.extend(symlink_finder(root, roots))
    return folders


def _constant(paths: list[Path]) -> Callable[..., list[str]]:
    values = [str(p) for p in paths]

    def _provider(*_args: Any) -> list[str]:
        return list(values)

    return _provider


def get_default_config(
    paths: ReactNativePaths,
    source: ConfigSource,
    *,
    symlink_finder: SymlinkFinder = find_symlinked_modules,
) -> dict[str, Any]:
    return {
        "resolver": {
            "resolverMainFields": list(RESOLVER_MAIN_FIELDS),
            "blacklistRE": create_blacklist([FIXTURES_PATTERN]),
        },
        "serializer": {
            "getModulesRunBeforeMainModule": _constant([paths.initialize_core]),
            "getPolyfills": _constant(paths.polyfills),
        },
        "server": {
            "port": source.metro_port or DEFAULT_PORT,
        },
        "transformer": {
            "babelTransformerPath": str(paths.transformer),
        },
        "watchFolders": get_watch_folders(source, symlink_finder=symlink_finder),
    }

"""Find rnpm plugins and haste settings declared by a project's dependencies."""

from __future__ import annotations

import asyncio
import json
import logging
import posixpath
from pathlib import Path
from typing import Any

from rnscaffold.contracts.metro import HasteConfig, PluginConfig

logger = logging.getLogger(__name__)

RNPM_PLUGIN_PREFIX = "rnpm-plugin-"
REACT_NATIVE_PREFIX = "react-native-"


def _read_package(folder: Path) -> dict[str, Any] | None:
    try:
        payload = json.loads((folder / "package.json").read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.debug("No readable package.json in %s", folder)
        return None
    return payload if isinstance(payload, dict) else None


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _rnpm_entry(package: dict[str, Any], key: str) -> list[str]:
    rnpm = package.get("rnpm") or {}
    entry = rnpm.get(key)
    if not entry:
        return []
    return [posixpath.join(package.get("name", ""), entry)]


def find_plugins(folder: str | Path) -> PluginConfig:
    """Collect plugin commands, platforms and haste settings for *folder*.

    ``rnpm-plugin-*`` dependencies are commands themselves; ``react-native-*``
    dependencies may declare ``rnpm.plugin``, ``rnpm.platform`` and
    ``rnpm.haste`` in their own manifest.
    """
    root = Path(folder)
    package = _read_package(root)
    if package is None:
        return PluginConfig()

    dependencies = _unique([*(package.get("dependencies") or {}), *(package.get("devDependencies") or {})])

    commands: list[str] = []
    platforms: list[str] = []
    haste_platforms: list[str] = []
    provides_module_node_modules: list[str] = []
    for name in dependencies:
        if name.startswith(RNPM_PLUGIN_PREFIX):
            commands.append(name)
        if not name.startswith(REACT_NATIVE_PREFIX):
            continue
        dependency = _read_package(root / "node_modules" / name)
        if dependency is None:
            continue
        commands.extend(_rnpm_entry(dependency, "plugin"))
        platforms.extend(_rnpm_entry(dependency, "platform"))
        haste = (dependency.get("rnpm") or {}).get("haste") or {}
        haste_platforms.extend(_as_list(haste.get("platforms")))
        provides_module_node_modules.extend(_as_list(haste.get("providesModuleNodeModules")))

    return PluginConfig(
        commands=_unique(commands),
        platforms=_unique(platforms),
        haste=HasteConfig(
            platforms=_unique(haste_platforms),
            provides_module_node_modules=_unique(provides_module_node_modules),
        ),
    )


async def find_plugins_async(folder: Path) -> PluginConfig:
    return await asyncio.to_thread(find_plugins, folder)

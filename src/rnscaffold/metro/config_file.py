"""Base bundler config: built-in defaults overlaid with the project's config file."""

from __future__ import annotations

import asyncio
import json
import math
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rnscaffold.contracts.exceptions import ConfigError
from rnscaffold.contracts.metro import MetroConfig
from rnscaffold.metro.blacklist import create_blacklist

CONFIG_FILENAMES = ("metro.config.json", "rn-cli.config.json")
PACKAGE_CONFIG_KEY = "metro"

ASSET_EXTS = [
    "bmp", "gif", "jpg", "jpeg", "png", "psd", "svg", "webp",
    "m4v", "mov", "mp4", "mpeg", "mpg", "webm",
    "aac", "aiff", "caf", "m4a", "mp3", "wav",
    "html", "pdf", "ttf", "otf",
]  # fmt: skip


def get_max_workers(cores: int | None = None) -> int:
    cores = cores or os.cpu_count() or 1
    return max(1, math.ceil(cores * (0.5 + 0.5 * math.exp(-cores * 0.07)) - 1))


def _no_modules(*_args: Any) -> list[str]:
    return []


def builtin_defaults(project_root: Path) -> dict[str, Any]:
    """The bundler's own defaults, before any tool or project settings."""
    return {
        "resolver": {
            "assetExts": list(ASSET_EXTS),
            "platforms": ["ios", "android"],
            "sourceExts": ["js", "json", "ts", "tsx"],
            "providesModuleNodeModules": ["react-native"],
            "resolverMainFields": ["browser", "main"],
            "hasteImplModulePath": None,
            "blacklistRE": create_blacklist(),
        },
        "serializer": {
            "getModulesRunBeforeMainModule": _no_modules,
            "getPolyfills": _no_modules,
        },
        "server": {"port": 8080},
        "transformer": {
            "assetRegistryPath": "missing-asset-registry-path",
            "babelTransformerPath": "metro/src/defaultTransformer",
        },
        "watchFolders": [],
        "resetCache": False,
        "maxWorkers": get_max_workers(),
        "projectRoot": project_root,
    }


def merge_layers(*layers: dict[str, Any]) -> dict[str, Any]:
    """Overlay *layers* left to right; nested sections merge one level deep."""
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = {**current, **value}
            else:
                merged[key] = value
    return merged


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {path}") from exc


def read_project_config(cwd: Path) -> dict[str, Any]:
    """Return the first project config found in *cwd*, or an empty mapping."""
    for filename in CONFIG_FILENAMES:
        path = cwd / filename
        if path.is_file():
            payload = _read_json(path)
            break
    else:
        package_json = cwd / "package.json"
        if not package_json.is_file():
            return {}
        payload = _read_json(package_json).get(PACKAGE_CONFIG_KEY) or {}

    if not isinstance(payload, dict):
        raise ConfigError(f"bundler config in {cwd} must be a JSON object")
    return payload


async def load_config(cwd: Path, defaults: dict[str, Any]) -> MetroConfig:
    """Load the project's bundler config on top of the built-in and tool defaults."""
    project_config = await asyncio.to_thread(read_project_config, cwd)
    merged = merge_layers(builtin_defaults(cwd), defaults, project_config)
    try:
        return MetroConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid bundler config: {exc}") from exc

"""Patch the generated ``package.json`` so the project runs its tests with Jest."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

MANIFEST_NAME = "package.json"
TEST_COMMAND = "jest"
JEST_PRESET = "react-native"


def add_jest_to_manifest(manifest: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *manifest* with the ``test`` script and Jest preset set."""
    patched = copy.deepcopy(manifest)
    scripts = dict(patched.get("scripts") or {})
    scripts["test"] = TEST_COMMAND
    patched["scripts"] = scripts
    patched["jest"] = {"preset": JEST_PRESET}
    return patched


def write_manifest(manifest: dict[str, Any], path: Path) -> None:
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def add_jest_to_package_json(project_dir: str | Path) -> Path:
    """Rewrite ``<project_dir>/package.json`` in place and return its path."""
    manifest_path = Path(project_dir) / MANIFEST_NAME
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    write_manifest(add_jest_to_manifest(manifest), manifest_path)
    return manifest_path

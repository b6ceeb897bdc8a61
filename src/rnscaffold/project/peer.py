"""Peer dependency lookup in the installed framework manifest."""

from __future__ import annotations

import json
from pathlib import Path

from rnscaffold.contracts.exceptions import PeerDependencyError
from rnscaffold.resolve import resolve_module

FRAMEWORK_PACKAGE = "react-native"
UI_LIBRARY = "react"

_MISSING_PEER = "Missing React peer dependency in React Native's package.json. Aborting."


def read_react_version(search_from: str | Path) -> str:
    """Return the ``react`` version range declared by react-native's peerDependencies."""
    manifest_path = resolve_module(f"{FRAMEWORK_PACKAGE}/package.json", search_from)
    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))

    peer_dependencies = manifest.get("peerDependencies")
    if not peer_dependencies:
        raise PeerDependencyError(_MISSING_PEER)
    version = peer_dependencies.get(UI_LIBRARY)
    if not version:
        raise PeerDependencyError(_MISSING_PEER)
    return version

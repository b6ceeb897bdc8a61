"""Discover packages linked into ``node_modules`` (monorepos, ``yarn link``)."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path


def _is_sub_path_of(path: Path, roots: Sequence[Path]) -> bool:
    return any(path == root or path.is_relative_to(root) for root in roots)


def _resolve_symlink_paths(candidates: Sequence[Path], ignored: Sequence[Path]) -> list[Path]:
    links: list[Path] = []
    for candidate in candidates:
        if not candidate.is_symlink():
            continue
        resolved = Path(os.path.realpath(candidate))
        if not _is_sub_path_of(resolved, ignored):
            links.append(resolved)
    return links


def _find_module_symlinks(modules_path: Path, ignored: Sequence[Path]) -> list[Path]:
    if not modules_path.is_dir():
        return []

    symlinks: list[Path] = []
    for entry in sorted(modules_path.iterdir()):
        if entry.name.startswith("@") and entry.is_dir() and not entry.is_symlink():
            candidates = sorted(entry.iterdir())
        else:
            candidates = [entry]
        symlinks.extend(_resolve_symlink_paths(candidates, ignored))

    nested: list[Path] = []
    for link in symlinks:
        nested.extend(_find_module_symlinks(link / "node_modules", [*ignored, *symlinks]))

    return list(dict.fromkeys([*symlinks, *nested]))


def find_symlinked_modules(project_root: Path, ignored_roots: Sequence[Path] = ()) -> list[Path]:
    """Return the targets of packages symlinked under ``<project_root>/node_modules``.

    Targets inside *ignored_roots* or the project root itself are skipped, and
    linked packages are searched recursively for their own links.
    """
    root = Path(os.path.realpath(project_root))
    ignored = [Path(os.path.realpath(p)) for p in ignored_roots]
    return _find_module_symlinks(root / "node_modules", [*ignored, root])


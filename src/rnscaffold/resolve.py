"""Node-style module resolution against ``node_modules`` directories."""

from __future__ import annotations

from pathlib import Path

from rnscaffold.contracts.exceptions import ModuleResolutionError

_EXTENSIONS = ("", ".js", ".json")


def _candidates(base: Path) -> list[Path]:
    found = [base.with_name(base.name + ext) for ext in _EXTENSIONS]
    found.append(base / "index.js")
    return found


def resolve_module(request: str, base_dir: str | Path) -> Path:
    """Resolve *request* (e.g. ``react-native/package.json``) from *base_dir*.

    Looks in ``node_modules`` of *base_dir* and each of its parents, trying the
    path itself, then with ``.js`` / ``.json`` appended, then ``index.js``.
    Raises :class:`ModuleResolutionError` when nothing matches.
    """
    start = Path(base_dir).resolve()
    for directory in (start, *start.parents):
        target = directory / "node_modules" / request
        for candidate in _candidates(target):
            if candidate.is_file():
                return candidate
    raise ModuleResolutionError(f"Cannot find module '{request}' from {start}", request=request)


def resolve_package_dir(package: str, base_dir: str | Path) -> Path:
    """Return the directory of an installed *package* by locating its manifest."""
    return resolve_module(f"{package}/package.json", base_dir).parent

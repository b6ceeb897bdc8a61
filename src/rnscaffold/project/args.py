"""Argument parsing for the ``init`` flow."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rnscaffold.contracts.exceptions import UsageError
from rnscaffold.contracts.project import InitOptions


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="init", add_help=False, exit_on_error=False)
    parser.add_argument("name", nargs="?")
    parser.add_argument("--template", default=None)
    parser.add_argument("--npm", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser


def parse_init_args(args: Sequence[str]) -> InitOptions:
    """Parse ``["AwesomeApp", "--template", "navigation"]`` into :class:`InitOptions`.

    Flags this flow does not know about are kept in ``extra`` instead of
    failing, since the same argument list is shared with the outer tool.
    """
    try:
        namespace, extra = _build_parser().parse_known_args(list(args))
    except argparse.ArgumentError as exc:
        raise UsageError(f"invalid init arguments: {exc}") from exc

    if not namespace.name:
        raise UsageError("init requires a project name.")

    return InitOptions(
        name=namespace.name,
        template=namespace.template,
        npm=namespace.npm,
        verbose=namespace.verbose,
        extra=tuple(extra),
    )

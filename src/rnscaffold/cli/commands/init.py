"""Init command handler."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rnscaffold.contracts.exceptions import UsageError
from rnscaffold.project.args import parse_init_args


def _destination(args: argparse.Namespace, name: str) -> Path:
    if args.directory:
        return Path(args.directory)
    return Path.cwd() / name


def _confirm_non_empty(destination: Path) -> bool:
    import questionary

    try:
        answer = questionary.confirm(f"Directory {destination} is not empty. Continue?", default=False).ask()
    except KeyboardInterrupt:
        return False
    return bool(answer)


def _generator_args(args: argparse.Namespace) -> list[str]:
    generator_args = [args.name] if args.name else []
    if args.template:
        generator_args += ["--template", args.template]
    if args.npm:
        generator_args.append("--npm")
    if args.verbose:
        generator_args.append("--verbose")
    return [*generator_args, *getattr(args, "extra", [])]


def run_init(args: argparse.Namespace) -> int:
    """Create the destination directory and run the initializer in it."""
    import rnscaffold.cli as cli

    generator_args = _generator_args(args)
    try:
        options = parse_init_args(generator_args)
    except UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    destination = _destination(args, options.name)
    if destination.is_dir() and any(destination.iterdir()) and not args.yes:
        if not _confirm_non_empty(destination):
            print("Aborted.")
            return 2

    destination.mkdir(parents=True, exist_ok=True)
    project = cli.init(destination, generator_args)
    if project is None:
        return 3
    return 0


__all__ = ["run_init"]

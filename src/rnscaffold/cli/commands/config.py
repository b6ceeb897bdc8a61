"""Config command handler."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from rnscaffold.contracts.metro import ConfigOptions, MetroConfig


def options_from_args(args: argparse.Namespace) -> ConfigOptions:
    return ConfigOptions(
        max_workers=args.max_workers,
        port=args.port,
        reset_cache=args.reset_cache,
        project_root=Path(args.project_root) if args.project_root else Path.cwd(),
        watch_folders=[Path(p).resolve() for p in args.watch_folders] if args.watch_folders else None,
        source_exts=args.source_exts,
    )


def format_config(config: MetroConfig) -> str:
    payload: dict[str, Any] = config.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=2, sort_keys=True)


async def run_config(args: argparse.Namespace) -> None:
    import rnscaffold.cli as cli

    config = await cli.load(options_from_args(args))
    print(format_config(config))


__all__ = ["format_config", "options_from_args", "run_config"]

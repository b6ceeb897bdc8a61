"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import subprocess
import sys

from rnscaffold import ConfigError, ModuleResolutionError, RNScaffoldError


def _configure_logging(verbose: bool) -> None:
    import rnscaffold.cli as cli

    if verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)
    else:
        cli.logging.basicConfig(level=cli.logging.INFO, format="%(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    import rnscaffold.cli as cli

    parser = cli.build_parser()
    args, extra = parser.parse_known_args(argv)
    if args.command == "init":
        args.extra = extra
    elif extra:
        parser.error(f"unrecognized arguments: {' '.join(extra)}")
    _configure_logging(args.verbose)

    try:
        if args.command == "init":
            return cli._run_init(args)
        if args.command == "config":
            cli.asyncio.run(cli._run_config(args))
        return 0
    except (ConfigError, ModuleResolutionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except subprocess.CalledProcessError as exc:
        print(f"error: command failed with exit code {exc.returncode}: {' '.join(map(str, exc.cmd))}", file=sys.stderr)
        return 4
    except RNScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]

"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("rnscaffold")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rnscaffold")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Generate a new React Native project")
    init_parser.add_argument(
        "--directory",
        "-d",
        default=None,
        help="Destination directory (default: ./<name>)",
    )
    init_parser.add_argument("--yes", "-y", action="store_true", help="Do not ask before using a non-empty directory")
    init_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging and verbose package manager output"
    )
    init_parser.add_argument("name", nargs="?", default=None, help="Project name")
    init_parser.add_argument("--template", default=None, help="Template package suffix or URL")
    init_parser.add_argument("--npm", action="store_true", help="Use npm even when yarn is available")

    config_parser = subparsers.add_parser("config", help="Print the resolved bundler configuration")
    config_parser.add_argument("--project-root", default=None, help="Project root (default: current directory)")
    config_parser.add_argument("--max-workers", type=int, default=None, help="Number of bundler workers")
    config_parser.add_argument("--port", type=int, default=None, help="Bundler server port")
    config_parser.add_argument("--reset-cache", action="store_true", help="Clear the bundler cache on start")
    config_parser.add_argument("--watch-folders", nargs="+", default=None, help="Extra folders to watch")
    config_parser.add_argument("--source-exts", nargs="+", default=None, help="Extra source file extensions")
    config_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]

"""Command-line interface for rnscaffold."""

from __future__ import annotations

import asyncio
import logging as logging

from rnscaffold import init as init
from rnscaffold import load as load
from rnscaffold.cli.app import main as main
from rnscaffold.cli.commands import config as config_command
from rnscaffold.cli.commands import init as init_command
from rnscaffold.cli.parser import build_parser as build_parser

_run_init = init_command.run_init
_run_config = config_command.run_config
_format_config = config_command.format_config

__all__ = ["asyncio", "build_parser", "init", "load", "logging", "main"]

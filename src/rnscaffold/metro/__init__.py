"""Bundler (Metro) configuration loading."""

from rnscaffold.metro.blacklist import create_blacklist
from rnscaffold.metro.config_file import load_config
from rnscaffold.metro.defaults import get_default_config, get_project_root, get_watch_folders, locate_react_native
from rnscaffold.metro.loader import load
from rnscaffold.metro.merge import merge_config
from rnscaffold.metro.plugins import find_plugins, find_plugins_async
from rnscaffold.metro.source import ConfigSource, EnvironmentConfigSource, StaticConfigSource
from rnscaffold.metro.symlinks import find_symlinked_modules

__all__ = [
    "ConfigSource",
    "EnvironmentConfigSource",
    "StaticConfigSource",
    "create_blacklist",
    "find_plugins",
    "find_plugins_async",
    "find_symlinked_modules",
    "get_default_config",
    "get_project_root",
    "get_watch_folders",
    "load",
    "load_config",
    "locate_react_native",
    "merge_config",
]

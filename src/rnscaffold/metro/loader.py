"""Load the bundler configuration for a React Native project."""

from __future__ import annotations

import logging
from pathlib import Path

from rnscaffold.contracts.collaborators import BaseConfigLoader, PluginFinder, SymlinkFinder
from rnscaffold.contracts.metro import ConfigOptions, MetroConfig
from rnscaffold.metro.config_file import load_config
from rnscaffold.metro.defaults import get_default_config, get_project_root, locate_react_native
from rnscaffold.metro.merge import merge_config
from rnscaffold.metro.plugins import find_plugins_async
from rnscaffold.metro.source import ConfigSource, EnvironmentConfigSource
from rnscaffold.metro.symlinks import find_symlinked_modules

logger = logging.getLogger(__name__)


async def load(
    options: ConfigOptions | None = None,
    *,
    source: ConfigSource | None = None,
    find_plugins: PluginFinder = find_plugins_async,
    base_loader: BaseConfigLoader = load_config,
    symlink_finder: SymlinkFinder = find_symlinked_modules,
) -> MetroConfig:
    """Load the bundler config and apply *options* on top of it.

    Command-line options always win over the project's config file.
    """
    options = options or ConfigOptions()
    source = source or EnvironmentConfigSource()
    project_root = Path(options.project_root) if options.project_root else get_project_root(source)
    logger.debug("Loading bundler config for %s", project_root)

    plugins = await find_plugins(project_root)
    paths = locate_react_native(project_root)
    defaults = get_default_config(paths, source, symlink_finder=symlink_finder)

    config = await base_loader(project_root, defaults)
    return merge_config(config, plugins, options, haste_impl_path=paths.haste_impl)

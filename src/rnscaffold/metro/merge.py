"""Pure merge steps applied to a loaded bundler config.

Each function takes one section and returns a new one; nothing is mutated.
"""

from __future__ import annotations

from pathlib import Path

from rnscaffold.contracts.metro import (
    ConfigOptions,
    MetroConfig,
    PluginConfig,
    ResolverConfig,
    ServerConfig,
    TransformerConfig,
)
from rnscaffold.metro.defaults import ASSET_REGISTRY_PATH


def merge_source_exts(current: list[str], requested: list[str] | None) -> list[str]:
    """Prepend *requested* unless it is the very list the config already holds."""
    if not requested or requested is current:
        return current
    return [*requested, *current]


def merge_resolver(
    resolver: ResolverConfig,
    plugins: PluginConfig,
    options: ConfigOptions,
    *,
    haste_impl_path: Path,
) -> ResolverConfig:
    return resolver.model_copy(
        update={
            "haste_impl_module_path": resolver.haste_impl_module_path or str(haste_impl_path),
            "platforms": [*resolver.platforms, *plugins.haste.platforms],
            "provides_module_node_modules": [
                *resolver.provides_module_node_modules,
                *plugins.haste.provides_module_node_modules,
            ],
            "source_exts": merge_source_exts(resolver.source_exts, options.source_exts),
        }
    )


def merge_server(server: ServerConfig, options: ConfigOptions) -> ServerConfig:
    if not options.port:
        return server
    return server.model_copy(update={"port": options.port})


def merge_transformer(transformer: TransformerConfig) -> TransformerConfig:
    return transformer.model_copy(update={"asset_registry_path": ASSET_REGISTRY_PATH})


def apply_overrides(config: MetroConfig, options: ConfigOptions) -> MetroConfig:
    update: dict[str, object] = {}
    if options.max_workers:
        update["max_workers"] = options.max_workers
    if options.reporter:
        update["reporter"] = options.reporter
    if options.reset_cache:
        update["reset_cache"] = options.reset_cache
    if options.watch_folders:
        update["watch_folders"] = list(options.watch_folders)
    if not update:
        return config
    return config.model_copy(update=update)


def merge_config(
    config: MetroConfig,
    plugins: PluginConfig,
    options: ConfigOptions,
    *,
    haste_impl_path: Path,
) -> MetroConfig:
    """Apply React Native's fixed settings, plugin haste entries and caller overrides."""
    merged = config.model_copy(
        update={
            "resolver": merge_resolver(config.resolver, plugins, options, haste_impl_path=haste_impl_path),
            "server": merge_server(config.server, options),
            "transformer": merge_transformer(config.transformer),
        }
    )
    return apply_overrides(merged, options)

"""Shared contracts: data models, collaborator protocols and exceptions."""

from rnscaffold.contracts.exceptions import (
    ConfigError,
    ModuleResolutionError,
    PeerDependencyError,
    RNScaffoldError,
    UsageError,
)
from rnscaffold.contracts.metro import (
    ConfigOptions,
    HasteConfig,
    MetroConfig,
    PluginConfig,
    ResolverConfig,
    SerializerConfig,
    ServerConfig,
    TransformerConfig,
)
from rnscaffold.contracts.project import InitOptions, ProjectDescriptor

__all__ = [
    "ConfigError",
    "ConfigOptions",
    "HasteConfig",
    "InitOptions",
    "MetroConfig",
    "ModuleResolutionError",
    "PeerDependencyError",
    "PluginConfig",
    "ProjectDescriptor",
    "RNScaffoldError",
    "ResolverConfig",
    "SerializerConfig",
    "ServerConfig",
    "TransformerConfig",
    "UsageError",
]

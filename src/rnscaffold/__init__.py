"""Public API surface for rnscaffold."""

__version__ = "0.1.0"

from rnscaffold.contracts import (
    ConfigError,
    ConfigOptions,
    InitOptions,
    MetroConfig,
    ModuleResolutionError,
    PeerDependencyError,
    PluginConfig,
    ProjectDescriptor,
    RNScaffoldError,
    UsageError,
)
from rnscaffold.project import add_jest_to_manifest, add_jest_to_package_json, init, parse_init_args
from rnscaffold.metro import (
    ConfigSource,
    EnvironmentConfigSource,
    StaticConfigSource,
    find_plugins,
    find_symlinked_modules,
    load,
)
from rnscaffold.package_manager import PackageManager
from rnscaffold.templates import create_project_from_template, print_run_instructions

__all__ = [
    "ConfigError",
    "ConfigOptions",
    "ConfigSource",
    "EnvironmentConfigSource",
    "InitOptions",
    "MetroConfig",
    "ModuleResolutionError",
    "PackageManager",
    "PeerDependencyError",
    "PluginConfig",
    "ProjectDescriptor",
    "RNScaffoldError",
    "StaticConfigSource",
    "UsageError",
    "__version__",
    "add_jest_to_manifest",
    "add_jest_to_package_json",
    "create_project_from_template",
    "find_plugins",
    "find_symlinked_modules",
    "init",
    "load",
    "parse_init_args",
    "print_run_instructions",
]

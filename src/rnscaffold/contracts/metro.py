"""Bundler configuration contracts.

Field names are snake_case in Python and serialize to the bundler's camelCase
keys (``sourceExts``, ``blacklistRE`` ...). Sections accept unknown keys so a
project config file can carry settings this package does not interpret.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from re import Pattern
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_SECTION_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow")


class ResolverConfig(BaseModel):
    model_config = _SECTION_CONFIG

    asset_exts: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    source_exts: list[str] = Field(default_factory=list)
    provides_module_node_modules: list[str] = Field(default_factory=list)
    resolver_main_fields: list[str] = Field(default_factory=list)
    haste_impl_module_path: str | None = None
    blacklist_re: Pattern[str] | None = Field(default=None, alias="blacklistRE")


class SerializerConfig(BaseModel):
    model_config = _SECTION_CONFIG

    get_modules_run_before_main_module: Callable[..., list[str]] | None = Field(default=None, exclude=True)
    get_polyfills: Callable[..., list[str]] | None = Field(default=None, exclude=True)


class ServerConfig(BaseModel):
    model_config = _SECTION_CONFIG

    port: int = 8080


class TransformerConfig(BaseModel):
    model_config = _SECTION_CONFIG

    asset_registry_path: str = "missing-asset-registry-path"
    babel_transformer_path: str | None = None


class MetroConfig(BaseModel):
    model_config = _SECTION_CONFIG

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    serializer: SerializerConfig = Field(default_factory=SerializerConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    transformer: TransformerConfig = Field(default_factory=TransformerConfig)
    watch_folders: list[Path] = Field(default_factory=list)
    reporter: Any = Field(default=None, exclude=True)
    reset_cache: bool = False
    max_workers: int = 1
    project_root: Path | None = None


@dataclass(frozen=True)
class ConfigOptions:
    """Caller overrides applied on top of the loaded configuration.

    A plain dataclass rather than a model: ``source_exts`` is compared by
    identity against the loaded list, so it must not be copied on construction.
    """

    max_workers: int | None = None
    port: int | None = None
    reset_cache: bool = False
    project_root: Path | None = None
    watch_folders: list[Path] | None = None
    source_exts: list[str] | None = None
    reporter: Any = None


class HasteConfig(BaseModel):
    model_config = _SECTION_CONFIG

    platforms: list[str] = Field(default_factory=list)
    provides_module_node_modules: list[str] = Field(default_factory=list)


class PluginConfig(BaseModel):
    model_config = _SECTION_CONFIG

    commands: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    haste: HasteConfig = Field(default_factory=HasteConfig)

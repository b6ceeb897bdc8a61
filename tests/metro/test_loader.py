"""Tests for the async bundler config loader."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from rnscaffold.contracts.exceptions import ModuleResolutionError
from rnscaffold.contracts.metro import ConfigOptions, HasteConfig, MetroConfig, PluginConfig, ResolverConfig
from rnscaffold.metro.loader import load
from rnscaffold.metro.source import StaticConfigSource
from tests.conftest import write_json
from tests.fakes.collaborators import FakeBaseLoader, FakePluginFinder


@pytest.mark.asyncio
async def test_load_merges_plugins_and_options_with_fakes(rn_project: Path) -> None:
    base = FakeBaseLoader(MetroConfig(resolver=ResolverConfig(source_exts=["js", "json"], platforms=["ios"])))
    finder = FakePluginFinder(PluginConfig(haste=HasteConfig(platforms=["windows"])))

    config = await load(
        ConfigOptions(project_root=rn_project, source_exts=["jsx"], max_workers=4),
        source=StaticConfigSource(),
        find_plugins=finder,
        base_loader=base,
    )

    assert config.resolver.source_exts == ["jsx", "js", "json"]
    assert config.resolver.platforms == ["ios", "windows"]
    assert config.max_workers == 4
    assert finder.roots == [rn_project]
    ((cwd, defaults),) = base.received
    assert cwd == rn_project
    assert defaults["server"] == {"port": 8081}


@pytest.mark.asyncio
async def test_load_uses_project_root_heuristic_without_option(rn_project: Path) -> None:
    loader_dir = rn_project / "node_modules" / "rnscaffold"
    base = FakeBaseLoader(MetroConfig())
    finder = FakePluginFinder()

    await load(
        ConfigOptions(),
        source=StaticConfigSource(_loader_dir=loader_dir),
        find_plugins=finder,
        base_loader=base,
    )

    assert finder.roots == [Path(os.path.normpath(loader_dir / "../.."))]
    assert base.received[0][0] == rn_project


@pytest.mark.asyncio
async def test_load_end_to_end_defaults(rn_project: Path) -> None:
    config = await load(ConfigOptions(project_root=rn_project), source=StaticConfigSource())

    rn_dir = (rn_project / "node_modules" / "react-native").resolve()
    assert config.server.port == 8081
    assert config.resolver.resolver_main_fields == ["react-native", "browser", "main"]
    assert config.resolver.source_exts == ["js", "json", "ts", "tsx"]
    assert config.resolver.haste_impl_module_path == str(rn_dir / "jest" / "hasteImpl.js")
    assert config.transformer.asset_registry_path == "react-native/Libraries/Image/AssetRegistry"
    assert config.transformer.babel_transformer_path.endswith("reactNativeTransformer.js")
    assert config.serializer.get_modules_run_before_main_module is not None
    assert config.serializer.get_modules_run_before_main_module("index.js") == [
        str(rn_dir / "Libraries" / "Core" / "InitializeCore.js")
    ]
    assert config.watch_folders == []
    assert config.resolver.blacklist_re is not None
    assert config.resolver.blacklist_re.search(f"{rn_project}/src/__fixtures__/a.js")


@pytest.mark.asyncio
async def test_load_project_file_and_env_port(rn_project: Path) -> None:
    write_json(
        rn_project / "metro.config.json",
        {"resolver": {"hasteImplModulePath": "/custom/hasteImpl.js"}, "resetCache": True},
    )

    config = await load(ConfigOptions(project_root=rn_project), source=StaticConfigSource(_metro_port=9191))

    assert config.resolver.haste_impl_module_path == "/custom/hasteImpl.js"
    assert config.reset_cache is True
    assert config.server.port == 9191


@pytest.mark.asyncio
async def test_port_option_beats_environment(rn_project: Path) -> None:
    config = await load(ConfigOptions(project_root=rn_project, port=7000), source=StaticConfigSource(_metro_port=9191))

    assert config.server.port == 7000


@pytest.mark.asyncio
async def test_app_root_watch_folders_include_symlink_targets(tmp_path: Path, rn_project: Path) -> None:
    shared = tmp_path / "packages" / "shared"
    shared.mkdir(parents=True)
    os.symlink(shared, rn_project / "node_modules" / "shared")

    config = await load(
        ConfigOptions(project_root=rn_project),
        source=StaticConfigSource(_app_root=str(rn_project)),
    )

    assert config.watch_folders == [rn_project, shared]


@pytest.mark.asyncio
async def test_plugins_discovered_from_project_dependencies(rn_project: Path) -> None:
    write_json(rn_project / "package.json", {"name": "AwesomeApp", "dependencies": {"react-native-windows": "0.57"}})
    write_json(
        rn_project / "node_modules" / "react-native-windows" / "package.json",
        {"name": "react-native-windows", "rnpm": {"haste": {"platforms": ["windows"]}}},
    )

    config = await load(ConfigOptions(project_root=rn_project), source=StaticConfigSource())

    assert config.resolver.platforms == ["ios", "android", "windows"]


@pytest.mark.asyncio
async def test_missing_react_native_install_raises(tmp_path: Path) -> None:
    with pytest.raises(ModuleResolutionError):
        await load(ConfigOptions(project_root=tmp_path), source=StaticConfigSource())

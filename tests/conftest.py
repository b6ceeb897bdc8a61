"""Shared test fixtures for rnscaffold tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from rich.console import Console

from tests.fakes.collaborators import FakePackageManagerFactory, FakeTemplateEngine


def write_json(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def rn_project(tmp_path: Path) -> Path:
    """An app directory with react-native, its template and metro installed."""
    project = tmp_path / "AwesomeApp"
    rn_dir = project / "node_modules" / "react-native"
    write_json(
        rn_dir / "package.json",
        {"name": "react-native", "version": "0.57.0", "peerDependencies": {"react": "16.6.0-alpha.8af6728"}},
    )
    template = rn_dir / "template"
    write_json(template / "package.json", {"name": "HelloWorld", "version": "0.0.1", "scripts": {"start": "x"}})
    (template / "App.js").write_text("export default class HelloWorld {}\n", encoding="utf-8")
    (template / "_gitignore").write_text("node_modules/\n", encoding="utf-8")
    (template / "ios" / "HelloWorld").mkdir(parents=True)
    (template / "ios" / "HelloWorld" / "AppDelegate.m").write_text('moduleName:@"HelloWorld"\n', encoding="utf-8")
    (template / "android" / "app").mkdir(parents=True)
    (template / "android" / "app" / "BUCK").write_text('package = "com.helloworld"\n', encoding="utf-8")
    (template / "android" / "app" / "icon.png").write_bytes(b"\x89PNG\r\n\x1a\nHelloWorld\xff")
    (template / "__tests__").mkdir()
    (template / "__tests__" / "App.js").write_text("import App from '../App';\n", encoding="utf-8")

    write_json(project / "node_modules" / "metro" / "package.json", {"name": "metro", "version": "0.48.0"})
    return project


@pytest.fixture
def package_managers() -> FakePackageManagerFactory:
    return FakePackageManagerFactory()


@pytest.fixture
def template_engine() -> FakeTemplateEngine:
    return FakeTemplateEngine()


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=200)

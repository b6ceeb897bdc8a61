"""Tests for the rnscaffold module entrypoints."""

from __future__ import annotations

import importlib
import runpy
import sys
import tomllib
from pathlib import Path

import pytest


class _ExitCode:
    """Stand-in for ``rnscaffold.cli.main`` that counts invocations."""

    def __init__(self, code: int) -> None:
        self.code = code
        self.invocations = 0

    def __call__(self) -> int:
        self.invocations += 1
        return self.code


@pytest.mark.parametrize("module_name", ["rnscaffold.__main__", "rnscaffold.cli.__main__"])
def test_entrypoints_dispatch_to_cli_main_only_when_executed(
    module_name: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    import rnscaffold.cli

    fake_main = _ExitCode(5)
    monkeypatch.setattr(rnscaffold.cli, "main", fake_main)
    monkeypatch.delitem(sys.modules, module_name, raising=False)

    module = importlib.import_module(module_name)
    assert module.main is fake_main
    assert fake_main.invocations == 0

    monkeypatch.delitem(sys.modules, module_name, raising=False)
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module(module_name, run_name="__main__")

    assert exc_info.value.code == 5
    assert fake_main.invocations == 1


def test_pyproject_defines_rnscaffold_script() -> None:
    pyproject_path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    pyproject_data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))

    assert pyproject_data["project"]["scripts"]["rnscaffold"] == "rnscaffold.cli:main"


def test_public_api_exports() -> None:
    import rnscaffold

    for name in rnscaffold.__all__:
        assert hasattr(rnscaffold, name), name
    assert callable(rnscaffold.init)
    assert callable(rnscaffold.load)

"""Where the loader reads its environment-dependent inputs from."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rnscaffold.contracts.exceptions import ConfigError

APP_ROOT_ENV = "REACT_NATIVE_APP_ROOT"
METRO_PORT_ENV = "RCT_METRO_PORT"


class ConfigSource(ABC):
    @property
    @abstractmethod
    def app_root(self) -> str | None:
        """Root of the app whose symlinked packages should be watched."""

    @property
    @abstractmethod
    def metro_port(self) -> int | None:
        """Port requested through the environment, if any."""

    @property
    @abstractmethod
    def loader_dir(self) -> Path:
        """Directory the loader is installed in."""


class EnvironmentConfigSource(ConfigSource):
    """Reads the process environment once, at construction time."""

    def __init__(self, environ: Mapping[str, str] | None = None, loader_dir: Path | None = None) -> None:
        env = os.environ if environ is None else environ
        self._app_root = env.get(APP_ROOT_ENV) or None
        self._metro_port = _parse_port(env.get(METRO_PORT_ENV))
        self._loader_dir = loader_dir or Path(__file__).resolve().parent

    @property
    def app_root(self) -> str | None:
        return self._app_root

    @property
    def metro_port(self) -> int | None:
        return self._metro_port

    @property
    def loader_dir(self) -> Path:
        return self._loader_dir


@dataclass(frozen=True)
class StaticConfigSource(ConfigSource):
    _app_root: str | None = None
    _metro_port: int | None = None
    _loader_dir: Path = Path("/")

    @property
    def app_root(self) -> str | None:
        return self._app_root

    @property
    def metro_port(self) -> int | None:
        return self._metro_port

    @property
    def loader_dir(self) -> Path:
        return self._loader_dir


def _parse_port(raw: str | None) -> int | None:
    value = (raw or "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"{METRO_PORT_ENV} must be an integer, got {raw!r}") from exc

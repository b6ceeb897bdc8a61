"""Exception hierarchy for rnscaffold."""

from __future__ import annotations


class RNScaffoldError(Exception):
    """Base exception for all rnscaffold errors."""


class UsageError(RNScaffoldError):
    """Command arguments are missing or malformed."""


class PeerDependencyError(RNScaffoldError):
    """The framework manifest does not declare the required peer dependency."""


class ConfigError(RNScaffoldError):
    """Bundler configuration loading or validation failure."""


class ModuleResolutionError(RNScaffoldError):
    """A node-style module request could not be resolved on disk."""

    def __init__(self, message: str, *, request: str) -> None:
        super().__init__(message)
        self.request = request

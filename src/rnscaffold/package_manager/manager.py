"""yarn / npm wrapper bound to a project directory."""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Sequence
from functools import cached_property
from pathlib import Path

logger = logging.getLogger(__name__)

_MIN_YARN_VERSION = (0, 16)
_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)")


def get_yarn_version_if_available() -> str | None:
    """Return the installed yarn version when it is recent enough, else ``None``."""
    try:
        result = subprocess.run(["yarn", "--version"], capture_output=True, text=True, timeout=10)
    except (OSError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None

    version = result.stdout.strip()
    match = _VERSION_RE.match(version)
    if not match:
        return None
    major, minor = int(match.group(1)), int(match.group(2))
    if (major, minor) < _MIN_YARN_VERSION:
        return None
    return version


def is_project_using_yarn(project_dir: Path) -> bool:
    return (project_dir / "yarn.lock").exists()


class PackageManager:
    """Installs packages with yarn when the project uses it, npm otherwise.

    Commands run with *project_dir* as working directory and inherit the
    terminal, so the tool's own progress output is shown to the user. A
    failing command raises :class:`subprocess.CalledProcessError`. With
    *verbose* the tool is asked for its detailed output.
    """

    def __init__(self, project_dir: Path | None = None, *, force_npm: bool = False, verbose: bool = False) -> None:
        self.project_dir = project_dir
        self.force_npm = force_npm
        self.verbose = verbose

    @cached_property
    def uses_yarn(self) -> bool:
        if self.force_npm:
            return False
        if self.project_dir is not None and not is_project_using_yarn(self.project_dir):
            return False
        return get_yarn_version_if_available() is not None

    def _execute(self, command: list[str]) -> None:
        if self.verbose:
            command = [*command, "--verbose"]
        logger.debug("Running: %s", " ".join(command))
        subprocess.run(command, cwd=self.project_dir, check=True)

    def install(self, packages: Sequence[str]) -> None:
        if self.uses_yarn:
            self._execute(["yarn", "add", *packages])
        else:
            self._execute(["npm", "install", *packages, "--save", "--save-exact"])

    def install_dev(self, packages: Sequence[str]) -> None:
        if self.uses_yarn:
            self._execute(["yarn", "add", "-D", *packages])
        else:
            self._execute(["npm", "install", *packages, "--save-dev", "--save-exact"])

    def uninstall(self, packages: Sequence[str]) -> None:
        if self.uses_yarn:
            self._execute(["yarn", "remove", *packages])
        else:
            self._execute(["npm", "uninstall", *packages, "--save"])

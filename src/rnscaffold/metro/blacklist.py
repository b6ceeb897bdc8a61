"""Build the bundler's blacklist regular expression."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

SHARED_BLACKLIST = (
    r"node_modules[/\\]react[/\\]dist[/\\].*",
    r"website/node_modules/.*",
    r"heapCapture/bundle\.js",
    r".*/__tests__/.*",
)


def _with_platform_separator(pattern: str, sep: str) -> str:
    if sep == "/":
        return pattern
    return pattern.replace("/", re.escape(sep))


def create_blacklist(additional: Iterable[str] = (), *, sep: str = os.sep) -> re.Pattern[str]:
    """Combine *additional* with the shared patterns into one anchored regex."""
    patterns = [*additional, *SHARED_BLACKLIST]
    return re.compile("(" + "|".join(_with_platform_separator(p, sep) for p in patterns) + ")$")

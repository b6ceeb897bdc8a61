from __future__ import annotations

import pytest

from rnscaffold.metro.blacklist import create_blacklist
from rnscaffold.metro.defaults import FIXTURES_PATTERN


@pytest.mark.parametrize(
    "path",
    [
        "/app/src/__fixtures__/data.js",
        "/app/src/__tests__/App.test.js",
        "/app/node_modules/react/dist/react.js",
        "/app/website/node_modules/foo/index.js",
        "/app/heapCapture/bundle.js",
    ],
)
def test_blacklisted_paths(path: str) -> None:
    assert create_blacklist([FIXTURES_PATTERN], sep="/").search(path)


@pytest.mark.parametrize("path", ["/app/src/App.js", "/app/node_modules/react/index.js", "/app/heapCapture/bundleXjs.map"])
def test_allowed_paths(path: str) -> None:
    assert not create_blacklist([FIXTURES_PATTERN], sep="/").search(path)


def test_fixtures_not_blacklisted_by_default() -> None:
    assert not create_blacklist(sep="/").search("/app/src/__fixtures__/data.js")


def test_windows_separator() -> None:
    blacklist = create_blacklist([FIXTURES_PATTERN], sep="\\")

    assert blacklist.search("C:\\app\\src\\__fixtures__\\data.js")
    assert blacklist.search("C:\\app\\src\\__tests__\\App.js")

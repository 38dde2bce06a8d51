"""Shared fixtures for pathhelper tests.

``make_tree`` creates a real directory tree under ``tmp_path``;
``FakeLister`` serves the same shape from memory for pure walk tests.
"""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


class FakeLister:
    """In-memory ``DirectoryLister``.

    ``tree`` maps a directory path to its child names.  Any path that is
    a key is a directory; every other path is a file.
    """

    def __init__(self, tree: dict[str, list[str]]) -> None:
        self.tree = tree
        self.listed: list[str] = []

    def list_children(self, path: Path) -> list[str]:
        self.listed.append(str(path))
        return list(self.tree[str(path)])

    def is_directory(self, path: Path) -> bool:
        return str(path) in self.tree


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Create directories (and ``.tsx`` files) below ``tmp_path``.

    Entries ending in ``/`` are directories, anything else is a file.
    Returns the project root.
    """

    def _make(entries: Iterable[str]) -> Path:
        for entry in entries:
            target = tmp_path / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("export default function Page() {}\n")
        return tmp_path

    return _make


SAMPLE_TREE = (
    "app/page.tsx",
    "app/users/page.tsx",
    "app/users/[userId]/page.tsx",
    "app/users/profile/",
    "app/(auth)/login/page.tsx",
    "app/example/[id]/sub/[subId]/",
)


@pytest.fixture
def sample_project(make_tree: Callable[[Iterable[str]], Path]) -> Path:
    """Project root with the sample ``app/`` tree."""
    return make_tree(SAMPLE_TREE)


@pytest.fixture
def fake_lister() -> type[FakeLister]:
    """The ``FakeLister`` class, for building in-memory trees."""
    return FakeLister

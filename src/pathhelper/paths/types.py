"""Data models for directory-based route discovery.

Route entries are frozen dataclasses: ``label``, ``path``, ``group`` and
``kind`` are fixed at discovery (or insert) time.  Only the ``navs`` list
is mutated in place by the registry's tag helpers; replacing anything
else goes through ``PathRegistry.update()``.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Protocol

# A bracketed dynamic segment, e.g. ``[userId]``
DYNAMIC_SEGMENT_RE = re.compile(r"\[.*?\]")


class RouteKind(StrEnum):
    """Whether a route's URL contains dynamic segments."""

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True, slots=True)
class PathBuilder:
    """Build a concrete URL from a relative route path.

    Positional arguments replace bracketed segments left to right,
    regardless of the name inside the brackets::

        build = PathBuilder("users/[userId]/posts/[postId]")
        build(7, "hello")  # "/users/7/posts/hello"

    Extra arguments are ignored.  Missing arguments leave the remaining
    brackets in the output untouched.
    """

    template: str

    def __call__(self, *args: str | int) -> str:
        url = f"/{self.template}"
        for arg in args:
            match = DYNAMIC_SEGMENT_RE.search(url)
            if match is None:
                break
            url = f"{url[: match.start()]}{arg}{url[match.end() :]}"
        return url

    @property
    def arity(self) -> int:
        """Number of dynamic segments the builder substitutes."""
        return len(DYNAMIC_SEGMENT_RE.findall(self.template))


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One discovered or manually registered route.

    Attributes:
        label: Human-readable display name.
        path: Callable producing the concrete URL from positional
            substitutions for each dynamic segment.
        navs: Navigation tags, in order of first addition, no duplicates.
        group: Nearest enclosing ``(group)`` directory name, if any.
        kind: ``RouteKind.DYNAMIC`` if the path has a bracketed segment.
    """

    label: str
    path: Callable[..., str]
    navs: list[str] = field(default_factory=list)
    group: str | None = None
    kind: RouteKind = RouteKind.STATIC


@dataclass(frozen=True, slots=True)
class NavLink:
    """A navigation link: what the tag queries hand back to templates."""

    label: str
    path: Callable[..., str]


@dataclass(frozen=True, slots=True)
class DiscoveredPath:
    """A route found by the directory walk, before registration.

    Attributes:
        key: Generated registry key (e.g. ``viewUser``).
        relative_path: Forward-slash path relative to the route root,
            with ``(group)`` directories left out.
        entry: The route entry to register under ``key``.
    """

    key: str
    relative_path: str
    entry: RouteEntry


class DirectoryLister(Protocol):
    """Directory listing capability used by the walk.

    Implementations may raise ``OSError``; the resolver never catches it.
    """

    def list_children(self, path: Path) -> list[str]:
        """Return the names of the immediate children of ``path``."""
        ...

    def is_directory(self, path: Path) -> bool:
        """Return True if ``path`` exists and is a directory."""
        ...

"""Directory-to-route resolution.

Turns an ``app/`` directory tree into route metadata:

- every directory below the route root is a route
- ``[param]`` in a directory name marks a dynamic segment
- ``(name)`` directories are route groups: they add no route of their own
  and tag every route beneath them with ``name``

Files never produce routes.  The functions here are stateless; the
registry owns the resulting entries.

Example tree::

    app/
      users/             -> users      "/users"
        [userId]/        -> viewUser   "/users/[userId]"
      (auth)/
        login/           -> login      "/login", group "auth"
"""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from pathhelper.paths.types import (
    DYNAMIC_SEGMENT_RE,
    DirectoryLister,
    DiscoveredPath,
    PathBuilder,
    RouteEntry,
    RouteKind,
)

logger = logging.getLogger("pathhelper.resolve")

# Route root locations checked in order, relative to the project root
DEFAULT_CANDIDATES: tuple[str, ...] = ("app", "src/app")


class FilesystemLister:
    """Default ``DirectoryLister`` backed by ``os``.

    Children are returned sorted so walks are deterministic across
    platforms.
    """

    def list_children(self, path: Path) -> list[str]:
        return sorted(os.listdir(path))

    def is_directory(self, path: Path) -> bool:
        return os.path.isdir(path)


def locate_route_root(
    project_root: str | Path,
    candidates: Iterable[str] = DEFAULT_CANDIDATES,
    lister: DirectoryLister | None = None,
) -> Path | None:
    """Find the route root below ``project_root``.

    Args:
        project_root: Directory the candidates are relative to.
        candidates: Relative locations to try, in order.
        lister: Directory lister; defaults to the real filesystem.

    Returns:
        The first candidate that is an existing directory, or ``None``
        when none is.  A missing root is an expected outcome, not an error.
    """
    lister = lister or FilesystemLister()
    root = Path(project_root)
    for candidate in candidates:
        path = root.joinpath(*candidate.split("/"))
        if lister.is_directory(path):
            return path
    return None


def is_dynamic_segment(name: str) -> bool:
    """True if ``name`` contains a ``[...]`` segment."""
    return DYNAMIC_SEGMENT_RE.search(name) is not None


def is_group_segment(name: str) -> bool:
    """True if ``name`` is wrapped in parentheses, e.g. ``(auth)``."""
    return name.startswith("(") and name.endswith(")")


def singularise(word: str) -> str:
    """Strip a single trailing ``s``.

    Naive on purpose: ``categories`` becomes ``categorie``.  Generated keys
    are stable identifiers, so this must not get smarter.
    """
    return word[:-1] if word.endswith("s") else word


def _capitalise(word: str) -> str:
    return word[:1].upper() + word[1:]


def _lower_first(word: str) -> str:
    return word[:1].lower() + word[1:]


def derive_key_and_label(relative_path: str, leaf_name: str) -> tuple[str, str]:
    """Derive the registry key and display label for a route.

    A route whose last (non-group) segment is dynamic is a "view" route:
    its static segments are capitalised, singularised and joined::

        derive_key_and_label("users/[userId]", "users")
        # ("viewUser", "View User")

    Any other route is named after its leaf directory::

        derive_key_and_label("users/profile", "profile")
        # ("profile", "Profile")

    Args:
        relative_path: Forward-slash path relative to the route root.
        leaf_name: Directory name with its first bracketed token removed.

    Returns:
        ``(key, label)``.
    """
    segments = [
        segment for segment in relative_path.split("/") if segment and not is_group_segment(segment)
    ]
    last_segment = segments[-1] if segments else ""

    if is_dynamic_segment(last_segment):
        words = [
            singularise(_capitalise(segment))
            for segment in segments
            if not is_dynamic_segment(segment)
        ]
        key = _lower_first("view" + "".join(words))
        return key, "View " + " ".join(words)

    return _lower_first(leaf_name), _capitalise(leaf_name)


def build_path_fn(relative_path: str) -> PathBuilder:
    """Return the URL builder for ``relative_path``.

    The builder takes one positional argument per bracketed segment.
    """
    return PathBuilder(relative_path)


def relative_route_path(directory: Path, base_directory: Path) -> str:
    """Forward-slash path of ``directory`` below the route root, groups removed.

    ``app/(auth)/login`` relative to ``app`` is ``login``.
    """
    parts = directory.relative_to(base_directory).parts
    return "/".join(part for part in parts if not is_group_segment(part))


def make_entry(relative_path: str, leaf_name: str, group: str | None = None) -> DiscoveredPath:
    """Build the registry candidate for one route directory."""
    key, label = derive_key_and_label(relative_path, leaf_name)
    kind = RouteKind.DYNAMIC if is_dynamic_segment(relative_path) else RouteKind.STATIC
    entry = RouteEntry(
        label=label,
        path=build_path_fn(relative_path),
        navs=[],
        group=group,
        kind=kind,
    )
    return DiscoveredPath(key=key, relative_path=relative_path, entry=entry)


def walk(
    directory: str | Path,
    base_directory: str | Path,
    current_group: str | None = None,
    lister: DirectoryLister | None = None,
) -> Iterator[DiscoveredPath]:
    """Walk ``directory`` depth-first and yield a route per subdirectory.

    A directory's own route is yielded before its descendants.  Group
    directories yield nothing and replace the group carried into their
    subtree.  Listing errors propagate unchanged.

    Args:
        directory: Directory whose children are visited.
        base_directory: Route root that relative paths are computed from.
        current_group: Group inherited from the nearest ``(group)`` parent.
        lister: Directory lister; defaults to the real filesystem.
    """
    lister = lister or FilesystemLister()
    directory = Path(directory)
    base_directory = Path(base_directory)

    for name in lister.list_children(directory):
        child = directory / name
        if not lister.is_directory(child):
            continue

        if is_group_segment(name):
            yield from walk(child, base_directory, name[1:-1], lister)
            continue

        relative_path = relative_route_path(child, base_directory)
        leaf_name = DYNAMIC_SEGMENT_RE.sub("", name, count=1)
        discovered = make_entry(relative_path, leaf_name, current_group)
        logger.debug("Discovered %s -> %s", discovered.key, relative_path)
        yield discovered
        yield from walk(child, base_directory, current_group, lister)

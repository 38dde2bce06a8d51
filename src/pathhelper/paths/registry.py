"""Route registry: the mutable store of resolved routes.

Entries are keyed by the generated identifier from
``derive_key_and_label`` (or any key a caller chooses for manual
entries).  Hard failures (duplicate keys, malformed entries) raise;
soft misses in the tag helpers are logged and skipped so navigation
wiring code needs no per-call guards::

    registry = PathRegistry(PathConfig(project_root="site")).initialize()
    registry.add_tag_to_many(["home", "users", "viewUser"], "main")
    for link in registry.query_by_tag("main"):
        print(link.label, link.path(42))

Thread safety:
    None.  ``insert``, ``update`` and ``rebuild`` mutate shared state
    without locking; hosts with several threads must serialise access
    (``pathhelper.watch.PathWatcher`` does this for its own rebuilds).
"""

import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from pathhelper.config import PathConfig
from pathhelper.errors import DuplicateKeyError, InvalidEntryError
from pathhelper.paths.resolve import build_path_fn, locate_route_root, walk
from pathhelper.paths.types import DirectoryLister, NavLink, RouteEntry, RouteKind

logger = logging.getLogger("pathhelper.registry")

HOME_KEY = "home"


def validate_entry(entry: RouteEntry) -> None:
    """Check an entry's field types.

    Raises:
        InvalidEntryError: Naming the first offending field.
    """
    if not isinstance(entry.label, str):
        raise InvalidEntryError("label", "should be a string")
    if not callable(entry.path):
        raise InvalidEntryError("path", "should be callable")
    if not isinstance(entry.navs, list):
        raise InvalidEntryError("navs", "should be a list")
    if entry.group is not None and not isinstance(entry.group, str):
        raise InvalidEntryError("group", "should be a string")
    if not isinstance(entry.kind, RouteKind):
        raise InvalidEntryError("kind", "should be either 'static' or 'dynamic'")


def _with_own_navs(entry: RouteEntry) -> RouteEntry:
    return dataclasses.replace(entry, navs=list(dict.fromkeys(entry.navs)))


def _home_entry(label: str) -> RouteEntry:
    return RouteEntry(label=label, path=build_path_fn(""), navs=[], kind=RouteKind.STATIC)


class PathRegistry:
    """Mapping of route key to ``RouteEntry``.

    Construction has no side effects: call ``initialize()`` (or
    ``rebuild()``) to populate the registry from the route root.
    """

    __slots__ = ("_config", "_lister", "_paths")

    def __init__(
        self,
        config: PathConfig | None = None,
        *,
        lister: DirectoryLister | None = None,
    ) -> None:
        self._config = config or PathConfig()
        self._lister = lister
        self._paths: dict[str, RouteEntry] = {}

    @property
    def config(self) -> PathConfig:
        return self._config

    # -- CRUD -------------------------------------------------------------

    def insert(self, key: str, entry: RouteEntry) -> None:
        """Register ``entry`` under a new ``key``.

        The registry stores a copy of ``entry`` with its own ``navs`` list
        (duplicate tags collapsed), so later changes to the caller's list
        do not reach the registry.  Tags on stored entries should be changed
        through ``add_tags`` and ``remove_tag`` only.

        Raises:
            DuplicateKeyError: If ``key`` is already registered.
            InvalidEntryError: If ``entry`` fails validation.
        """
        if key in self._paths:
            raise DuplicateKeyError(key)
        validate_entry(entry)
        self._paths[key] = _with_own_navs(entry)

    def update(self, key: str, entry: RouteEntry) -> None:
        """Validate ``entry`` and store a copy under ``key``, replacing any prior entry."""
        validate_entry(entry)
        self._paths[key] = _with_own_navs(entry)

    def get(self, key: str) -> RouteEntry | None:
        """Look up an entry by key. Returns ``None`` if not found."""
        return self._paths.get(key)

    def get_all(self) -> Mapping[str, RouteEntry]:
        """Return a read-only live view of every entry, in registry order."""
        return MappingProxyType(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, key: object) -> bool:
        return key in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    # -- Navigation tags --------------------------------------------------

    def add_tags(self, key: str, *tags: str) -> None:
        """Append each tag not already on the entry, keeping first-added order."""
        entry = self._paths.get(key)
        if entry is None:
            logger.error("Path '%s' not found.", key)
            return
        for tag in tags:
            if tag not in entry.navs:
                entry.navs.append(tag)

    def add_tag_to_many(self, keys: Iterable[str], tag: str) -> None:
        """Add ``tag`` to every entry in ``keys``.

        Missing keys are logged one by one; the rest are still tagged.
        """
        for key in keys:
            self.add_tags(key, tag)

    def remove_tag(self, key: str, tag: str) -> None:
        """Remove ``tag`` from the entry if present."""
        entry = self._paths.get(key)
        if entry is None:
            logger.error("Path '%s' not found.", key)
            return
        if tag in entry.navs:
            entry.navs.remove(tag)

    def query_by_tag(self, tag: str) -> list[NavLink]:
        """Return links for every entry tagged ``tag``, in registry order."""
        return [
            NavLink(label=entry.label, path=entry.path)
            for entry in self._paths.values()
            if tag in entry.navs
        ]

    def order_by_keys(self, keys: Iterable[str]) -> list[NavLink]:
        """Return links for ``keys`` in exactly the given order.

        Missing keys are logged and left out.
        """
        links: list[NavLink] = []
        for key in keys:
            entry = self._paths.get(key)
            if entry is None:
                logger.error("Path '%s' not found.", key)
                continue
            links.append(NavLink(label=entry.label, path=entry.path))
        return links

    # -- Discovery --------------------------------------------------------

    def locate_root(self) -> Path | None:
        """Return the route root for the configured project, or ``None``."""
        return locate_route_root(
            self._config.resolve_project_root(),
            self._config.candidates,
            self._lister,
        )

    def rebuild(self) -> None:
        """Re-discover every route from the route root.

        The new contents (the implicit ``home`` entry followed by the walk
        results) are collected in a staging registry and swapped in only
        when the whole walk succeeds.  Manually inserted entries are
        dropped.  If the route root cannot be found the current contents
        are left untouched and an error is logged.

        Raises:
            OSError: If listing a directory fails.
            DuplicateKeyError: If two directories derive the same key.
        """
        project_root = self._config.resolve_project_root()
        route_root = self.locate_root()
        if route_root is None:
            logger.error("App directory not found in the project root: %s", project_root)
            return

        staging = PathRegistry(self._config, lister=self._lister)
        staging.insert(HOME_KEY, _home_entry(self._config.home_label))
        for discovered in walk(route_root, route_root, lister=self._lister):
            staging.insert(discovered.key, discovered.entry)

        self._paths = staging._paths
        logger.info("App router detected %s", route_root)
        logger.info("Paths have been generated (%d routes)", len(self._paths))

    def initialize(self) -> "PathRegistry":
        """Run the first build and return the registry for chaining."""
        self.rebuild()
        return self

"""pathhelper: a route index for app-router directory trees.

Scans ``app/`` (or ``src/app/``), derives a key, label and URL builder
for every route directory, and groups routes into navigation lists.

Basic usage::

    from pathhelper import PathRegistry

    paths = PathRegistry().initialize()
    paths.add_tag_to_many(["home", "users"], "main")

    for link in paths.query_by_tag("main"):
        print(link.label, link.path())

    paths.get("viewUser").path(42)  # "/users/42"

Keeping the index fresh while developing::

    from pathhelper.watch import PathWatcher

    with PathWatcher(paths):
        ...
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateKeyError",
    "InvalidEntryError",
    "NavLink",
    "PathConfig",
    "PathHelperError",
    "PathRegistry",
    "PathWatcher",
    "RouteEntry",
    "RouteKind",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathhelper`` fast and defers loading watchdog until
    the watcher is actually used.
    """
    if name == "PathRegistry":
        from pathhelper.paths.registry import PathRegistry

        return PathRegistry

    if name == "PathConfig":
        from pathhelper.config import PathConfig

        return PathConfig

    if name in ("NavLink", "RouteEntry", "RouteKind"):
        from pathhelper.paths import types

        return getattr(types, name)

    if name == "PathWatcher":
        from pathhelper.watch import PathWatcher

        return PathWatcher

    if name in ("ConfigurationError", "DuplicateKeyError", "InvalidEntryError", "PathHelperError"):
        from pathhelper import errors

        return getattr(errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

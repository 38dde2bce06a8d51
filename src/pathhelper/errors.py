"""pathhelper exception hierarchy.

Shared across the resolver, registry, watcher and CLI so every module
raises and catches the same types.

Only hard failures are exceptions.  Soft lookup misses (unknown keys in
the tag helpers, a missing route root) are reported through logging.
"""


class PathHelperError(Exception):
    """Base for all pathhelper-specific errors."""


class ConfigurationError(PathHelperError):
    """Raised when a ``PathConfig`` is invalid."""


class DuplicateKeyError(PathHelperError):
    """Raised by ``insert()`` when the key is already registered.

    ``update()`` is the sanctioned way to replace an entry.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Path '{key}' already exists.")


class InvalidEntryError(PathHelperError):
    """Raised when a route entry fails validation.

    Attributes:
        field: Name of the offending ``RouteEntry`` attribute.
        detail: Human-readable description of the expected value.
    """

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(f"Invalid route entry: '{field}' {detail}.")

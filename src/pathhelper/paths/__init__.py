"""Directory-based route discovery and the route registry.

The directory structure below ``app/`` (or ``src/app/``) defines the
routes, their display labels and their groups.

Conventions::

    app/
      users/                 # key "users",    label "Users",     "/users"
        [userId]/            # key "viewUser", label "View User", "/users/[userId]"
      (auth)/                # group: no route, tags descendants with "auth"
        login/               # key "login",    label "Login",     group "auth"
"""

from pathhelper.paths.registry import HOME_KEY, PathRegistry, validate_entry
from pathhelper.paths.resolve import (
    FilesystemLister,
    build_path_fn,
    derive_key_and_label,
    is_dynamic_segment,
    is_group_segment,
    locate_route_root,
    singularise,
    walk,
)
from pathhelper.paths.types import (
    DirectoryLister,
    DiscoveredPath,
    NavLink,
    PathBuilder,
    RouteEntry,
    RouteKind,
)

__all__ = [
    "HOME_KEY",
    "DirectoryLister",
    "DiscoveredPath",
    "FilesystemLister",
    "NavLink",
    "PathBuilder",
    "PathRegistry",
    "RouteEntry",
    "RouteKind",
    "build_path_fn",
    "derive_key_and_label",
    "is_dynamic_segment",
    "is_group_segment",
    "locate_route_root",
    "singularise",
    "validate_entry",
    "walk",
]

"""``pathhelper list``: print the discovered routes.

Builds a registry for the project root and prints a table of KEY,
LABEL, PATH, KIND and GROUP.
"""

import argparse
import sys

from pathhelper.cli import configure_logging
from pathhelper.config import PathConfig
from pathhelper.errors import PathHelperError
from pathhelper.paths.registry import PathRegistry
from pathhelper.paths.types import PathBuilder, RouteEntry


def _describe_path(entry: RouteEntry) -> str:
    if isinstance(entry.path, PathBuilder):
        return f"/{entry.path.template}"
    return repr(entry.path)


def run_list(args: argparse.Namespace) -> None:
    """List routes discovered below ``args.root``.

    Exits with status 1 when no route root exists or the tree cannot be
    indexed.
    """
    overrides: dict[str, object] = {"project_root": args.root}
    if args.log_level:
        overrides["log_level"] = args.log_level
    config = PathConfig(**overrides)
    configure_logging(config)

    registry = PathRegistry(config)
    if registry.locate_root() is None:
        print(
            f"Error: no app/ or src/app/ directory in {config.resolve_project_root()}",
            file=sys.stderr,
        )
        raise SystemExit(1)
    try:
        registry.rebuild()
    except (OSError, PathHelperError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows = [
        (key, entry.label, _describe_path(entry), str(entry.kind), entry.group or "")
        for key, entry in registry.get_all().items()
    ]

    headers = ("KEY", "LABEL", "PATH", "KIND", "GROUP")
    widths = [max(len(header), *(len(row[i]) for row in rows)) for i, header in enumerate(headers)]
    fmt = "  ".join(f"{{:<{width}}}" for width in widths)
    print(fmt.format(*headers).rstrip())
    print("-" * min(sum(widths) + 2 * (len(widths) - 1), 80))
    for row in rows:
        print(fmt.format(*row).rstrip())

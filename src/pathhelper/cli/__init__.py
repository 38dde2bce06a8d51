"""pathhelper CLI: list discovered routes and watch the route tree.

Entry point registered as ``pathhelper`` in ``pyproject.toml``::

    [project.scripts]
    pathhelper = "pathhelper.cli:main"
"""

import argparse
import logging
import sys

from pathhelper.config import PathConfig

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(config: PathConfig) -> None:
    """Send pathhelper's log records to stderr at the configured level."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathhelper`` command."""
    parser = argparse.ArgumentParser(
        prog="pathhelper",
        description="pathhelper: route index for app-router directory trees.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Logging level (default: info)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathhelper list --------------------------------------------------
    list_parser = subparsers.add_parser("list", help="List discovered routes")
    list_parser.add_argument(
        "--root",
        default=None,
        help="Project root containing app/ or src/app/ (default: cwd)",
    )

    # -- pathhelper watch -------------------------------------------------
    watch_parser = subparsers.add_parser("watch", help="Rebuild routes on directory changes")
    watch_parser.add_argument(
        "--root",
        default=None,
        help="Project root containing app/ or src/app/ (default: cwd)",
    )
    watch_parser.add_argument(
        "--debounce",
        type=float,
        default=None,
        help="Seconds to coalesce bursts of changes",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "list":
        from pathhelper.cli._list import run_list

        run_list(args)
    elif args.command == "watch":
        from pathhelper.cli._watch import run_watch

        run_watch(args)

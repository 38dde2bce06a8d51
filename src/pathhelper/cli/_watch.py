"""``pathhelper watch``: keep the route index fresh during development.

Refuses to start in production (``PATHHELPER_ENV=production``).
"""

import argparse
import sys
import time

from pathhelper.cli import configure_logging
from pathhelper.config import PathConfig
from pathhelper.errors import PathHelperError
from pathhelper.paths.registry import PathRegistry
from pathhelper.watch import PathWatcher


def run_watch(args: argparse.Namespace) -> None:
    """Build the registry for ``args.root`` and rebuild it on changes.

    Blocks until interrupted with Ctrl-C.
    """
    overrides: dict[str, object] = {"project_root": args.root}
    if args.debounce is not None:
        overrides["debounce"] = args.debounce
    if args.log_level:
        overrides["log_level"] = args.log_level
    config = PathConfig(**overrides)

    if config.is_production:
        print("Watcher is not started in production environment.")
        return

    configure_logging(config)
    try:
        registry = PathRegistry(config).initialize()
    except (OSError, PathHelperError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    watcher = PathWatcher(registry)
    if not watcher.start():
        print(
            f"Error: no app/ or src/app/ directory in {config.resolve_project_root()}",
            file=sys.stderr,
        )
        raise SystemExit(1)

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()

"""Keep a registry fresh while the route tree changes.

Watches the route root with a watchdog ``Observer`` and rebuilds the
registry whenever a directory is added, removed or moved.  File
creations and moves are ignored: files never produce routes.  Every
deletion below the root triggers a rebuild.

Rebuilds re-walk the whole tree, so bursts of events (``mkdir -p``,
``git checkout``) are coalesced with a short debounce window and run
one at a time behind a lock.

Usage::

    registry = PathRegistry(config).initialize()
    with PathWatcher(registry):
        ...  # registry follows the filesystem
"""

import logging
import os
import threading
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from pathhelper.errors import PathHelperError
from pathhelper.paths.registry import PathRegistry

logger = logging.getLogger("pathhelper.watch")


def _is_hidden(path: Path, root: Path) -> bool:
    try:
        parts = path.relative_to(root).parts
    except ValueError:
        parts = path.parts
    return any(part.startswith(".") for part in parts)


class _DirectoryEventHandler(FileSystemEventHandler):
    """Translate watchdog directory events into watcher callbacks."""

    def __init__(self, watcher: "PathWatcher", root: Path) -> None:
        super().__init__()
        self._watcher = watcher
        self._root = root

    def _accept(
        self, event: FileSystemEvent, raw_path: str | bytes, *, any_kind: bool = False
    ) -> Path | None:
        if not (event.is_directory or any_kind):
            return None
        path = Path(os.fsdecode(raw_path))
        if self._watcher.ignore_hidden and _is_hidden(path, self._root):
            return None
        return path

    def on_created(self, event: FileSystemEvent) -> None:
        path = self._accept(event, event.src_path)
        if path is not None:
            self._watcher.handle_added(path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        # Some backends report a removed directory as a file deletion.
        path = self._accept(event, event.src_path, any_kind=True)
        if path is not None:
            self._watcher.handle_removed(path)

    def on_moved(self, event: FileSystemEvent) -> None:
        path = self._accept(event, event.dest_path)
        if path is not None:
            self._watcher.handle_added(path)


class PathWatcher:
    """Rebuild a ``PathRegistry`` on directory changes below its route root.

    Args:
        registry: The registry to keep fresh.
        debounce: Seconds to wait for more events before rebuilding.
            Defaults to ``registry.config.debounce``; ``0`` rebuilds
            inline on the event thread.
    """

    def __init__(self, registry: PathRegistry, *, debounce: float | None = None) -> None:
        self.registry = registry
        self.debounce = registry.config.debounce if debounce is None else debounce
        self.ignore_hidden = registry.config.ignore_hidden
        self.root: Path | None = None
        self._observer: Observer | None = None
        self._timer: threading.Timer | None = None
        self._timer_lock = threading.Lock()
        self._rebuild_lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._observer is not None

    def start(self) -> bool:
        """Start watching the route root.

        Returns:
            ``False`` (after logging) if the route root cannot be found.
        """
        if self._observer is not None:
            return True
        root = self.registry.locate_root()
        if root is None:
            logger.error(
                "App directory not found in the project root: %s",
                self.registry.config.resolve_project_root(),
            )
            return False

        observer = Observer()
        observer.schedule(_DirectoryEventHandler(self, root), str(root), recursive=True)
        observer.start()
        self.root = root
        self._observer = observer
        logger.info("Watching for directory changes in %s", root)
        return True

    def stop(self) -> None:
        """Stop the observer and drop any pending rebuild."""
        with self._timer_lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        observer, self._observer = self._observer, None
        if observer is not None:
            observer.stop()
            observer.join()
            logger.info("Stopped watching %s", self.root)

    def __enter__(self) -> "PathWatcher":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # -- Event callbacks --------------------------------------------------

    def handle_added(self, path: str | Path) -> None:
        logger.info("Directory %s has been added", path)
        self._schedule_rebuild()

    def handle_removed(self, path: str | Path) -> None:
        logger.info("Directory %s has been removed", path)
        self._schedule_rebuild()

    def handle_error(self, error: BaseException | str) -> None:
        logger.error("Watcher error: %s", error)

    # -- Rebuild ----------------------------------------------------------

    def _schedule_rebuild(self) -> None:
        if self.debounce <= 0:
            self._run_rebuild()
            return
        with self._timer_lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.debounce, self._run_rebuild)
            self._timer.daemon = True
            self._timer.start()

    def _run_rebuild(self) -> None:
        with self._rebuild_lock:
            logger.info("Change identified, rebuilding path list...")
            try:
                self.registry.rebuild()
            except (OSError, PathHelperError) as exc:
                self.handle_error(exc)
                return
            logger.info("Path list rebuilt successfully.")

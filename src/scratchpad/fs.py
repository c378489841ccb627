"""Local-disk implementation of :class:`~scratchpad.ports.FileSystemPort`.

Directory watching is delegated to :mod:`watchfiles`, run on a daemon thread
per subscription.  Only entry events reach the callback: a file added to or
deleted from the directory (a rename arrives as one of each).  Content
``modified`` events are dropped, so saving a note does not re-list the
directory.  There is no debouncing on top of what ``watchfiles`` batches
itself.

Callbacks run on the watcher thread, never on the thread that called
:meth:`LocalFileSystem.watch`.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from pathlib import Path

import watchfiles

from scratchpad.log import get_logger

logger = get_logger(__name__)

ENTRY_CHANGES = frozenset({watchfiles.Change.added, watchfiles.Change.deleted})


def entry_changes(changes: Iterable[tuple[watchfiles.Change, str]]) -> list[tuple[watchfiles.Change, str]]:
    """Keep the add / delete events from a ``watchfiles`` batch, in a stable order."""
    return sorted(
        ((change, path) for change, path in changes if change in ENTRY_CHANGES),
        key=lambda item: (item[1], item[0].value),
    )


class LocalWatcher:
    """Background ``watchfiles`` loop over a single, non-recursive directory.

    The callback is invoked from the watcher's own daemon thread.
    """

    def __init__(self, path: Path, callback: Callable[[], None], *, debounce: int = 50) -> None:
        self.path = Path(path)
        self._callback = callback
        self._debounce = debounce
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name=f"scratchpad-watch:{self.path.name}", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        for changes in watchfiles.watch(
            self.path,
            stop_event=self._stop,
            recursive=False,
            debounce=self._debounce,
            raise_interrupt=False,
        ):
            for change, changed_path in entry_changes(changes):
                logger.debug("watch event %s %s", change.name, changed_path)
                try:
                    self._callback()
                except Exception:  # noqa: BLE001
                    # Keep the watcher alive for the next event
                    logger.exception("watch callback failed for %s", self.path)

    @property
    def active(self) -> bool:
        return self._thread.is_alive() and not self._stop.is_set()

    def close(self) -> None:
        self._stop.set()
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join(timeout=5)


class LocalFileSystem:
    """:class:`~scratchpad.ports.FileSystemPort` over :mod:`pathlib`."""

    def __init__(self, *, encoding: str = "utf-8", watch_debounce: int = 50) -> None:
        self.encoding = encoding
        self.watch_debounce = watch_debounce

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def mkdir(self, path: Path) -> None:
        Path(path).mkdir(parents=True)

    def listdir(self, path: Path) -> list[str]:
        return sorted(p.name for p in Path(path).iterdir() if p.is_file())

    def read(self, path: Path) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def write(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding=self.encoding)

    def remove(self, path: Path) -> None:
        Path(path).unlink()

    def watch(self, path: Path, callback: Callable[[], None]) -> LocalWatcher:
        return LocalWatcher(path, callback, debounce=self.watch_debounce)

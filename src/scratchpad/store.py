"""NotesStore: CRUD façade over a single directory of markdown notes.

Every note is ``<notes_dir>/<slug>.md``; nothing below ``notes_dir`` is
traversed.  The store owns no state besides the directory path, its event
listeners and (at most) one watch subscription, so anything it reports is a
fresh read of the directory.

Events
------
``"changed"``
    The directory contents changed (note created or removed by this store, or
    any entry event reported by the watcher).  Listeners take no arguments.
    When the change comes from :meth:`NotesStore.watch` the listener runs on
    the watcher's thread, not the host's; hosts that own a UI thread must
    hand the work over themselves.
``"opened"``
    A note was handed to the editor.  Listeners receive the filename.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from pathlib import Path
from typing import Any

from scratchpad.config import DEFAULT_CURSOR, DEFAULT_INITIAL_CONTENT
from scratchpad.log import get_logger
from scratchpad.note import NOTE_SUFFIX, Note, is_note_name
from scratchpad.ports import EditorHandle, EditorPort, FileSystemPort, Watcher
from scratchpad.slug import slugify

logger = get_logger(__name__)

EVENTS = ("changed", "opened")
NOT_FOUND_MESSAGE = "Notes not found."
SEARCH_PLACEHOLDER = "Notes Search"


class NotesStore:
    """Lists, creates, opens, removes and watches the notes in *notes_dir*."""

    def __init__(
        self,
        fs: FileSystemPort,
        editor: EditorPort,
        notes_dir: Path,
        *,
        initial_content: str = DEFAULT_INITIAL_CONTENT,
        cursor: tuple[int, int] = DEFAULT_CURSOR,
    ) -> None:
        self.fs = fs
        self.editor = editor
        self.notes_dir = Path(notes_dir)
        self.initial_content = initial_content
        self.cursor = cursor
        self._listeners: dict[str, list[Callable[..., Any]]] = {event: [] for event in EVENTS}
        self._watcher: Watcher | None = None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unknown event '{event}'; expected one of {EVENTS}.")
        self._listeners[event].append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in list(self._listeners[event]):
            callback(*args)

    def refresh(self) -> None:
        """Tell every ``"changed"`` listener to re-list the directory."""
        logger.debug("refresh %s", self.notes_dir)
        self._emit("changed")

    # ------------------------------------------------------------------
    # Directory
    # ------------------------------------------------------------------

    def ensure_directory(self) -> Path:
        """Create the notes directory if it is missing and return its path."""
        if not self.fs.exists(self.notes_dir):
            try:
                self.fs.mkdir(self.notes_dir)
            except FileExistsError:
                # Created between the check and the mkdir
                pass
            else:
                logger.info("created notes directory %s", self.notes_dir)
        return self.notes_dir

    def list(self) -> list[Note]:
        """Return a snapshot of every ``*.md`` file in the notes directory."""
        notes_dir = self.ensure_directory()
        return [Note.from_name(notes_dir, name) for name in self.fs.listdir(notes_dir) if is_note_name(name)]

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, title: str | None) -> Note | None:
        """Write a new placeholder note named after *title* and open it.

        An empty or cancelled title is a no-op.  An existing note with the
        same slug is overwritten.  A title with no usable characters yields
        the bare ``.md`` file.
        """
        if not title:
            logger.debug("note creation cancelled")
            return None

        note = Note.from_name(self.ensure_directory(), f"{slugify(title)}{NOTE_SUFFIX}")
        self.fs.write(note.path, self.initial_content)
        logger.debug("created note %s", note.path)

        self.refresh()
        self.open(note.name)
        return note

    def open(self, filename: str | None) -> Future[EditorHandle] | None:
        """Hand *filename* to the editor and place the cursor once it is ready.

        Returns the editor's future; the cursor is set from its done-callback,
        at most once, and only if the open succeeded.
        """
        if not filename:
            return None

        path = self.ensure_directory() / filename
        future = self.editor.open_file(path)
        future.add_done_callback(self._place_cursor)
        logger.debug("opening %s", path)
        self._emit("opened", filename)
        return future

    def _place_cursor(self, future: Future[EditorHandle]) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.warning("editor failed to open note: %s", exc)
            return
        row, column = self.cursor
        future.result().set_cursor(row, column)

    def remove(self, filename: str | None) -> bool:
        """Delete *filename* from the notes directory.

        Failures are reported to the user and logged, never raised.  Returns
        ``True`` when the file was deleted.
        """
        if not filename:
            return False

        path = self.notes_dir / filename
        try:
            self.fs.remove(path)
        except Exception as exc:  # noqa: BLE001
            logger.warning("could not remove %s: %s", path, exc)
            self.editor.show_message(f"Unable to remove note: {exc}", error=True)
            return False

        logger.debug("removed note %s", path)
        self.refresh()
        return True

    def search(self) -> Note | None:
        """Pick a note from a choice palette and open it."""
        notes = self.list()
        if not notes:
            self.editor.show_message(NOT_FOUND_MESSAGE)
            return None

        index = self.editor.show_choice([note.name for note in notes], SEARCH_PLACEHOLDER)
        if index is None:
            return None

        note = notes[index]
        self.editor.open_file(note.path)
        return note

    # ------------------------------------------------------------------
    # Watch / lifecycle
    # ------------------------------------------------------------------

    @property
    def watching(self) -> bool:
        return self._watcher is not None

    def watch(self) -> Watcher:
        """Subscribe to directory events; each one triggers :meth:`refresh`."""
        if self._watcher is None:
            self._watcher = self.fs.watch(self.ensure_directory(), self.refresh)
            logger.debug("watching %s", self.notes_dir)
        return self._watcher

    def dispose(self) -> None:
        if self._watcher is not None:
            self._watcher.close()
            self._watcher = None

    def __enter__(self) -> "NotesStore":
        return self

    def __exit__(self, *_: object) -> None:
        self.dispose()

"""Host-facing ports the notes store is built against.

The store never touches the filesystem or the editor UI directly.  Everything
goes through two small protocols so the host (the marimo app, an editor
plugin, a test fake) can be swapped without changing call sites:

- :class:`FileSystemPort`: directory and file primitives plus a watch hook.
- :class:`EditorPort`: opening files and the input / choice / message palettes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import Future
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Watcher(Protocol):
    """A standing directory-watch subscription."""

    def close(self) -> None:
        """Stop delivering change events.  Safe to call more than once."""
        ...


@runtime_checkable
class FileSystemPort(Protocol):
    """Filesystem primitives used by :class:`~scratchpad.store.NotesStore`."""

    # ------------------------------------------------------------ directories

    def exists(self, path: Path) -> bool:
        """Return ``True`` when *path* exists."""
        ...

    def mkdir(self, path: Path) -> None:
        """Create *path* (and parents); raise ``FileExistsError`` if present."""
        ...

    def listdir(self, path: Path) -> list[str]:
        """Return the names of the regular files directly inside *path*."""
        ...

    # ------------------------------------------------------------------ files

    def read(self, path: Path) -> str:
        ...

    def write(self, path: Path, content: str) -> None:
        """Write *content* to *path*, truncating any existing file."""
        ...

    def remove(self, path: Path) -> None:
        """Delete the file at *path*; raise ``OSError`` on failure."""
        ...

    # ------------------------------------------------------------------ watch

    def watch(self, path: Path, callback: Callable[[], None]) -> Watcher:
        """Call *callback* once for every entry created, deleted or renamed in *path*.

        The callback may run on a thread owned by the watcher.
        """
        ...


@runtime_checkable
class EditorHandle(Protocol):
    """An open editor returned once :meth:`EditorPort.open_file` completes."""

    def set_cursor(self, row: int, column: int) -> None:
        ...


@runtime_checkable
class EditorPort(Protocol):
    """Editor and palette surface provided by the host UI shell."""

    def open_file(self, path: Path) -> Future[EditorHandle]:
        """Ask the host to open *path*; the future resolves when the editor is ready."""
        ...

    def show_input(self, prompt: str) -> str | None:
        """Free-text palette.  ``None`` (or ``""``) means the user cancelled."""
        ...

    def show_choice(self, items: Sequence[str], placeholder: str = "") -> int | None:
        """Choice palette.  Returns the selected index or ``None`` when dismissed."""
        ...

    def show_message(self, text: str, *, error: bool = False) -> None:
        ...

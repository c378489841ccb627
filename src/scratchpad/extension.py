"""Host glue for the scratchpad sidebar.

A host (the marimo app in ``notebooks/``, or any editor integration) builds a
:class:`ScratchpadExtension` from a config and two ports, calls
:meth:`~ScratchpadExtension.activate`, renders
:attr:`~ScratchpadExtension.tree` as its sidebar, forwards tree selection
changes, and binds the registered command names to user actions:

==================== ==================================================
``scratchpad.add``    ask for a title, create the note and open it
``scratchpad.remove`` delete the selected note
``scratchpad.open``   open the selected note
``scratchpad.search`` pick any note from a choice palette and open it
==================== ==================================================
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any

from scratchpad.config import ScratchpadConfig
from scratchpad.log import get_logger
from scratchpad.note import Note
from scratchpad.ports import EditorHandle, EditorPort, FileSystemPort
from scratchpad.store import NotesStore

logger = get_logger(__name__)

ADD = "scratchpad.add"
REMOVE = "scratchpad.remove"
OPEN = "scratchpad.open"
SEARCH = "scratchpad.search"

NOTE_CONTEXT = "scratchpad.note"
NOTE_IMAGE = "__builtin.path"
ADD_PROMPT = "Enter note name"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class CommandRegistry:
    """Named, user-invocable actions."""

    def __init__(self) -> None:
        self._commands: dict[str, Callable[..., Any]] = {}

    def register(self, name: str, fn: Callable[..., Any]) -> None:
        if name in self._commands:
            raise ValueError(f"Command '{name}' is already registered.")
        self._commands[name] = fn

    def unregister(self, name: str) -> None:
        self._commands.pop(name, None)

    def execute(self, name: str, *args: Any) -> Any:
        return self._commands[name](*args)

    def names(self) -> list[str]:
        return sorted(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands


# ---------------------------------------------------------------------------
# Tree view
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TreeItem:
    label: str
    identifier: str
    context_value: str = NOTE_CONTEXT
    image: str = NOTE_IMAGE
    command: str = OPEN


class NotesTreeProvider:
    """Flat tree of notes: the root lists the directory, notes have no children.

    :meth:`reload` may be called from the store's watcher thread.  Hosts that
    cannot touch their UI from there poll :attr:`generation` instead of
    registering an :meth:`on_reload` callback.
    """

    def __init__(self, store: NotesStore) -> None:
        self.store = store
        self._reload_listeners: list[Callable[[], None]] = []
        self._generation = 0
        self._lock = threading.Lock()

    def get_children(self, element: Note | None = None) -> list[Note]:
        if element is not None:
            return []
        return self.store.list()

    def get_tree_item(self, element: Note) -> TreeItem:
        return TreeItem(label=element.label, identifier=element.name)

    def on_reload(self, callback: Callable[[], None]) -> None:
        self._reload_listeners.append(callback)

    @property
    def generation(self) -> int:
        """Number of reloads so far."""
        with self._lock:
            return self._generation

    def reload(self) -> None:
        with self._lock:
            self._generation += 1
        for callback in list(self._reload_listeners):
            callback()


# ---------------------------------------------------------------------------
# Extension
# ---------------------------------------------------------------------------


class ScratchpadExtension:
    """Wires a :class:`NotesStore` to a tree view and a set of commands."""

    def __init__(self, config: ScratchpadConfig, fs: FileSystemPort, editor: EditorPort) -> None:
        self.config = config
        self.editor = editor
        self.store = NotesStore(
            fs,
            editor,
            config.notes_dir,
            initial_content=config.initial_content,
            cursor=config.cursor,
        )
        self.tree = NotesTreeProvider(self.store)
        self.commands = CommandRegistry()
        self.selection: Note | None = None
        self.active = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def activate(self) -> None:
        if self.active:
            return
        self.store.ensure_directory()
        self.store.subscribe("changed", self.tree.reload)

        self.commands.register(ADD, self.add_note)
        self.commands.register(REMOVE, self.remove_note)
        self.commands.register(OPEN, self.open_note)
        self.commands.register(SEARCH, self.search_notes)

        self.store.watch()
        self.active = True
        logger.info("scratchpad activated for %s", self.config.notes_dir)

    def deactivate(self) -> None:
        self.store.dispose()
        if not self.active:
            return
        self.store.unsubscribe("changed", self.tree.reload)
        for name in (ADD, REMOVE, OPEN, SEARCH):
            self.commands.unregister(name)
        self.selection = None
        self.active = False

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def on_selection_change(self, selection: Sequence[Note]) -> None:
        self.selection = selection[0] if selection else None

    @property
    def selected_name(self) -> str | None:
        return self.selection.name if self.selection is not None else None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_note(self) -> Note | None:
        title = self.editor.show_input(ADD_PROMPT)
        if not title:
            logger.debug("add cancelled")
            return None
        return self.store.create(title)

    def remove_note(self) -> bool:
        removed = self.store.remove(self.selected_name)
        if removed:
            self.selection = None
        return removed

    def open_note(self) -> Future[EditorHandle] | None:
        return self.store.open(self.selected_name)

    def search_notes(self) -> Note | None:
        return self.store.search()

"""Scratchpad: markdown notes kept in a workspace-local directory."""

from scratchpad.config import ScratchpadConfig, load_config
from scratchpad.extension import CommandRegistry, NotesTreeProvider, ScratchpadExtension, TreeItem
from scratchpad.fs import LocalFileSystem
from scratchpad.note import Note
from scratchpad.ports import EditorHandle, EditorPort, FileSystemPort, Watcher
from scratchpad.slug import slugify
from scratchpad.store import NotesStore

__all__ = [
    "Note",
    "NotesStore",
    "slugify",
    "ScratchpadConfig",
    "load_config",
    "ScratchpadExtension",
    "NotesTreeProvider",
    "TreeItem",
    "CommandRegistry",
    "LocalFileSystem",
    "FileSystemPort",
    "EditorPort",
    "EditorHandle",
    "Watcher",
]

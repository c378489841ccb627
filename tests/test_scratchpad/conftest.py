"""Shared fixtures: a recording editor fake and stores over ``tmp_path``."""

from __future__ import annotations

from pathlib import Path

import pytest
from fakes import FakeEditor, RecordingFileSystem

from scratchpad.config import ScratchpadConfig
from scratchpad.store import NotesStore


@pytest.fixture()
def editor() -> FakeEditor:
    return FakeEditor()


@pytest.fixture()
def fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture()
def notes_dir(tmp_path: Path) -> Path:
    return tmp_path / ".scratchpad"


@pytest.fixture()
def store(fs: RecordingFileSystem, editor: FakeEditor, notes_dir: Path) -> NotesStore:
    return NotesStore(fs, editor, notes_dir)


@pytest.fixture()
def config(tmp_path: Path) -> ScratchpadConfig:
    return ScratchpadConfig(workspace=tmp_path)

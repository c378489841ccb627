"""Scratchpad configuration.

Settings live in an optional ``scratchpad.toml`` at the workspace root::

    [scratchpad]
    notes_subdir    = ".scratchpad"   # workspace-relative notes directory
    initial_content = "# "            # body written into every new note
    log_level       = "INFO"

Environment variables (applied after the file; direct kwargs to
:func:`load_config` take precedence over both):
    SCRATCHPAD_DIR         – overrides ``notes_subdir``
    SCRATCHPAD_LOG_LEVEL   – overrides ``log_level``
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "scratchpad.toml"
DEFAULT_NOTES_SUBDIR = ".scratchpad"
DEFAULT_INITIAL_CONTENT = "# "
#: Cursor placed in a freshly opened note (row, column)
DEFAULT_CURSOR = (2, 2)


@dataclass
class ScratchpadConfig:
    workspace: Path
    notes_subdir: str = DEFAULT_NOTES_SUBDIR
    initial_content: str = DEFAULT_INITIAL_CONTENT
    cursor: tuple[int, int] = DEFAULT_CURSOR
    log_level: str = "WARNING"

    @property
    def notes_dir(self) -> Path:
        return Path(self.workspace) / self.notes_subdir

    @classmethod
    def from_dict(cls, workspace: Path, data: dict[str, Any]) -> "ScratchpadConfig":
        section = data.get("scratchpad", data)
        cursor = section.get("cursor", DEFAULT_CURSOR)
        return cls(
            workspace=Path(workspace),
            notes_subdir=section.get("notes_subdir", DEFAULT_NOTES_SUBDIR),
            initial_content=section.get("initial_content", DEFAULT_INITIAL_CONTENT),
            cursor=(int(cursor[0]), int(cursor[1])),
            log_level=section.get("log_level", "WARNING"),
        )


def load_config(
    workspace: Path,
    path: Path | None = None,
    *,
    notes_subdir: str | None = None,
    log_level: str | None = None,
) -> ScratchpadConfig:
    """Build a :class:`ScratchpadConfig` for *workspace*.

    *path* defaults to ``<workspace>/scratchpad.toml``; a missing file means
    all defaults.  A malformed file raises :class:`tomllib.TOMLDecodeError`.
    """
    workspace = Path(workspace)
    path = Path(path) if path is not None else workspace / CONFIG_FILENAME

    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "rb") as fh:
            data = tomllib.load(fh)

    config = ScratchpadConfig.from_dict(workspace, data)
    config.notes_subdir = notes_subdir or os.getenv("SCRATCHPAD_DIR") or config.notes_subdir
    config.log_level = log_level or os.getenv("SCRATCHPAD_LOG_LEVEL") or config.log_level
    return config

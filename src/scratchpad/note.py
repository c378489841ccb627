"""Core Note dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

NOTE_SUFFIX = ".md"


@dataclass(frozen=True)
class Note:
    """A single markdown note inside the scratchpad directory."""

    name: str
    path: Path

    @property
    def slug(self) -> str:
        """Filesystem-stable identifier derived from the filename stem."""
        return self.path.stem

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_name(cls, notes_dir: Path, name: str) -> "Note":
        return cls(name=name, path=Path(notes_dir) / name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "slug": self.slug,
            "path": str(self.path),
        }


def is_note_name(name: str) -> bool:
    return name.endswith(NOTE_SUFFIX)

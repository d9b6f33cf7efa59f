"""Utility helpers for working with note files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from notesum.config import NOTE_SUFFIX
from notesum.errors import NotesDirectoryError


def iter_note_paths(directory: Path, suffix: str = NOTE_SUFFIX) -> Iterator[Path]:
    """Yield note files directly inside ``directory``, sorted by path.

    Subdirectories are not descended into.
    """
    if not directory.is_dir():
        raise NotesDirectoryError(directory)
    for child in sorted(directory.iterdir()):
        if child.is_file() and child.name.endswith(suffix):
            yield child

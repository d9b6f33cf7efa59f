"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from notesum.errors import NotesDirectoryError
from notesum.utils.files import iter_note_paths


class TestIterNotePaths:
    """Test iter_note_paths function."""

    def test_directory_with_notes(self, tmp_path: Path) -> None:
        """Should find markdown notes and skip other files."""
        (tmp_path / "doc1.md").write_text("one")
        (tmp_path / "doc2.md").write_text("two")
        (tmp_path / "not_note.txt").write_text("text")

        paths = list(iter_note_paths(tmp_path))

        assert [p.name for p in paths] == ["doc1.md", "doc2.md"]

    def test_sorted_listing(self, tmp_path: Path) -> None:
        """Should yield paths in a stable order."""
        for name in ["c.md", "a.md", "b.md"]:
            (tmp_path / name).write_text(name)

        assert [p.name for p in iter_note_paths(tmp_path)] == ["a.md", "b.md", "c.md"]

    def test_not_recursive(self, tmp_path: Path) -> None:
        """Should ignore notes in subdirectories."""
        subdir = tmp_path / "archive"
        subdir.mkdir()
        (subdir / "old.md").write_text("old")
        (tmp_path / "root.md").write_text("root")

        assert [p.name for p in iter_note_paths(tmp_path)] == ["root.md"]

    def test_skips_directories_named_like_notes(self, tmp_path: Path) -> None:
        (tmp_path / "folder.md").mkdir()

        assert list(iter_note_paths(tmp_path)) == []

    def test_custom_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "b.txt").write_text("b")

        assert [p.name for p in iter_note_paths(tmp_path, ".txt")] == ["b.txt"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Should handle empty directory."""
        assert list(iter_note_paths(tmp_path)) == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Should raise NotesDirectoryError."""
        with pytest.raises(NotesDirectoryError):
            list(iter_note_paths(tmp_path / "missing"))

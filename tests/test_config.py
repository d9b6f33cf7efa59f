"""Tests for application configuration."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from notesum.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.endpoint == "http://localhost:11434/api/generate"
        assert config.model == "llama3:instruct"
        assert config.notes_dir == Path("notes")
        assert config.suffix == ".md"
        assert config.timeout is None

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(
            endpoint="http://remote:11434/api/generate",
            model="mistral",
            notes_dir=Path("/custom/notes"),
            timeout=60.0,
        )

        assert config.endpoint == "http://remote:11434/api/generate"
        assert config.model == "mistral"
        assert config.notes_dir == Path("/custom/notes")
        assert config.timeout == 60.0

    def test_config_is_frozen(self) -> None:
        """Should not allow mutation after startup."""
        config = AppConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.model = "other"  # type: ignore[misc]

    def test_resolve_notes_dir_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(notes_dir=Path("/absolute/notes"))

        assert config.resolve_notes_dir(Path("/base")) == Path("/absolute/notes")

    def test_resolve_notes_dir_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        config = AppConfig(notes_dir=Path("relative/notes"))

        assert config.resolve_notes_dir(base_dir=None) == Path("relative/notes")

    def test_resolve_notes_dir_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig(notes_dir=Path("relative/notes"))

        assert config.resolve_notes_dir(Path("/base")) == Path("/base/relative/notes")

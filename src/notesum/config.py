"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_ENDPOINT = "http://localhost:11434/api/generate"
DEFAULT_MODEL = "llama3:instruct"
DEFAULT_NOTES_DIR = Path("./notes")
NOTE_SUFFIX = ".md"

ENDPOINT_ENV = "URL_LLM"
MODEL_ENV = "MODEL_LLM"
NOTES_DIR_ENV = "PATH_NOTES"


@dataclass(slots=True, frozen=True)
class AppConfig:
    endpoint: str = DEFAULT_ENDPOINT
    model: str = DEFAULT_MODEL
    notes_dir: Path = field(default_factory=lambda: DEFAULT_NOTES_DIR)
    suffix: str = NOTE_SUFFIX
    # None disables the httpx timeout; generation can take minutes.
    timeout: float | None = None

    def resolve_notes_dir(self, base_dir: Path | None = None) -> Path:
        if Path(self.notes_dir).is_absolute() or base_dir is None:
            return Path(self.notes_dir)
        return base_dir / self.notes_dir

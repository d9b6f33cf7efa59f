"""Exceptions raised by the notesum pipeline."""

from __future__ import annotations

from pathlib import Path


class NoteSummaryError(Exception):
    """Base class for every fatal notesum failure."""


class NotesDirectoryError(NoteSummaryError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Notes directory not found: {path}")
        self.path = path


class FileReadError(NoteSummaryError):
    """A note file could not be read as UTF-8 text."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Failed to read {path}: {cause}")
        self.path = path
        self.cause = cause


class MalformedDocument(NoteSummaryError):
    """A note opens a frontmatter block that is never closed."""

    def __init__(self, reason: str, path: Path | None = None) -> None:
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}{reason}")
        self.reason = reason
        self.path = path


class TransportError(NoteSummaryError):
    """The generation service could not be reached."""

    def __init__(self, endpoint: str, cause: Exception) -> None:
        super().__init__(f"Could not reach {endpoint}: {cause}")
        self.endpoint = endpoint
        self.cause = cause


class GenerationRequestFailed(NoteSummaryError):
    """The generation service answered with a non-success status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Failed to get a valid response from LLM (HTTP {status_code})")
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(NoteSummaryError):
    """A success response did not match the expected generation schema."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Malformed generation response: {detail}")
        self.detail = detail

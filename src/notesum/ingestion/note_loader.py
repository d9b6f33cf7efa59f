"""Note loading and frontmatter handling.

A note may open with a frontmatter block fenced by ``---`` lines::

    ---
    tags: [work]
    ---
    The body that ends up in the prompt.

Notes without the fence are used verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from notesum.errors import FileReadError, MalformedDocument
from notesum.models import Document

LOGGER = logging.getLogger(__name__)

FRONTMATTER_MARKER = "---"


@dataclass(slots=True, frozen=True)
class NoFrontmatter:
    body: str


@dataclass(slots=True, frozen=True)
class WithFrontmatter:
    metadata: str
    body: str


@dataclass(slots=True, frozen=True)
class Malformed:
    reason: str


SplitResult = Union[NoFrontmatter, WithFrontmatter, Malformed]


def split_frontmatter(text: str) -> SplitResult:
    """Separate the frontmatter block from the note body.

    Only the fenced path trims whitespace; a note without frontmatter keeps
    its text exactly as read.
    """
    if not text.startswith(FRONTMATTER_MARKER):
        return NoFrontmatter(body=text)

    parts = text.split(FRONTMATTER_MARKER, 2)
    if len(parts) < 3:
        return Malformed(reason="Invalid note format: not enough parts after split.")
    return WithFrontmatter(metadata=parts[1].strip(), body=parts[2].strip())


def parse_note(text: str, path: Path | None = None) -> Document:
    """Build a :class:`Document`, raising :class:`MalformedDocument` on a broken fence."""
    result = split_frontmatter(text)
    if isinstance(result, Malformed):
        raise MalformedDocument(result.reason, path=path)
    if isinstance(result, WithFrontmatter):
        return Document(metadata=result.metadata, body=result.body, path=path)
    return Document(metadata="", body=result.body, path=path)


def read_note(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, exc) from exc


def load_notes(paths: Iterable[Path]) -> List[Document]:
    """Read and parse every path in order, stopping at the first failure."""
    documents: List[Document] = []
    for path in paths:
        LOGGER.debug("Reading note %s", path)
        documents.append(parse_note(read_note(path), path=path))
    return documents

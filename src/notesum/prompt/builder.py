"""Prompt construction for note summaries."""

from __future__ import annotations

from typing import Iterable

from notesum.models import Document

NOTE_DELIMITER = "===\n---\n===\n"

# The delimiter is quoted in escaped form so the raw sequence only ever
# appears after a note body.
PREAMBLE = f"Summarize the following notes delimited by {NOTE_DELIMITER!r}: \n"
POSTAMBLE = (
    "okay now you have all my notes, summarize them for me. "
    "and ignore the delimiter please\n"
)


def build_prompt(documents: Iterable[Document]) -> str:
    """Join note bodies in order, each followed by :data:`NOTE_DELIMITER`."""
    parts = [PREAMBLE]
    for document in documents:
        parts.append(document.body)
        parts.append(NOTE_DELIMITER)
    parts.append(POSTAMBLE)
    return "".join(parts)

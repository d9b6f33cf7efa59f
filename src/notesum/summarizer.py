"""Note summarization pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from notesum.config import AppConfig
from notesum.generation.client import GenerationClient
from notesum.ingestion.note_loader import load_notes
from notesum.models import GenerationResponse
from notesum.prompt.builder import build_prompt

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SummaryResult:
    note_count: int
    prompt: str
    response: GenerationResponse

    @property
    def text(self) -> str:
        return self.response.response


class Summarizer:
    """Coordinates note loading, prompt construction and generation."""

    def __init__(self, config: AppConfig, client: GenerationClient | None = None) -> None:
        self.config = config
        self.client = client

    def summarize(self, paths: Sequence[Path]) -> SummaryResult:
        """Summarize the notes at ``paths`` in the given order.

        Every note is read and parsed before the request is sent, so a bad
        file aborts the run without contacting the service.
        """
        documents = load_notes(paths)
        LOGGER.info("got %d notes", len(documents))
        prompt = build_prompt(documents)

        if self.client is not None:
            response = self.client.generate(self.config.endpoint, self.config.model, prompt)
        else:
            with GenerationClient(timeout=self.config.timeout) as client:
                response = client.generate(self.config.endpoint, self.config.model, prompt)

        return SummaryResult(note_count=len(documents), prompt=prompt, response=response)

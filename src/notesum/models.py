"""Core notesum data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


@dataclass(slots=True, frozen=True)
class Document:
    """One parsed note: optional frontmatter and the body that gets summarized."""

    metadata: str
    body: str
    path: Path | None = None


@dataclass(slots=True, frozen=True)
class GenerationRequest:
    endpoint: str
    model: str
    prompt: str
    stream: bool = False

    def payload(self) -> Dict[str, Any]:
        return {"model": self.model, "prompt": self.prompt, "stream": self.stream}


class GenerationResponse(BaseModel):
    """Body of a non-streaming ``/api/generate`` reply."""

    model: str
    created_at: str
    response: str
    done: bool
    context: List[int]
    total_duration: float
    load_duration: float
    prompt_eval_count: int
    prompt_eval_duration: float
    eval_count: int
    eval_duration: float
    err: Optional[str] = None

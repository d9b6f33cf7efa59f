"""Client for the Ollama ``/api/generate`` endpoint."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional, Type

import httpx
from pydantic import ValidationError

from notesum.errors import GenerationRequestFailed, ResponseDecodeError, TransportError
from notesum.models import GenerationRequest, GenerationResponse

LOGGER = logging.getLogger(__name__)


class GenerationClient:
    """Sends one non-streaming generation request per call.

    There is no retry and no timeout unless one is passed explicitly. The
    client created here follows redirects. An ``http_client`` handed in by
    the caller is left open on :meth:`close`.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=timeout, follow_redirects=True)
        self._http = http_client

    def __enter__(self) -> "GenerationClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def generate(self, endpoint: str, model: str, prompt: str) -> GenerationResponse:
        request = GenerationRequest(endpoint=endpoint, model=model, prompt=prompt)
        LOGGER.info("Requesting summary from %s (model %s)", endpoint, model)
        LOGGER.debug("Prompt length: %d characters", len(prompt))

        try:
            response = self._http.post(
                request.endpoint,
                json=request.payload(),
                headers={"Content-Type": "application/json"},
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            LOGGER.error("Generation request failed: %s", exc)
            raise TransportError(endpoint, exc) from exc

        if not response.is_success:
            raise GenerationRequestFailed(response.status_code, response.text)

        try:
            result = GenerationResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseDecodeError(str(exc)) from exc

        if not result.done:
            LOGGER.warning("Generation response is not marked as done")
        if result.err:
            LOGGER.warning("Generation service reported: %s", result.err)
        LOGGER.debug(
            "Generated %d tokens in %.0f ns", result.eval_count, result.eval_duration
        )
        return result

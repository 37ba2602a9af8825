"""Gemini client with Google Search grounding."""

import logging
from typing import Optional

from google import genai
from google.genai import types

from src.models.grounding import ModelResponse, chunk_from_raw
from src.research.clients.base import BaseModelClient

logger = logging.getLogger(__name__)


class GeminiClient(BaseModelClient):
    """Calls ``generate_content`` with the ``google_search`` tool.

    Structured output (``response_mime_type``) cannot be combined with the
    search tool, so answers come back as free text.
    """

    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(self, api_key: str, model: str | None = None):
        super().__init__(name="gemini", api_key=api_key, model=model or self.DEFAULT_MODEL)
        self._client: genai.Client | None = None

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _generate(self, prompt: str, use_search: bool) -> ModelResponse:
        tools = [types.Tool(google_search=types.GoogleSearch())] if use_search else None
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(tools=tools),
        )
        return ModelResponse(
            text=response.text or "",
            grounding_chunks=self._grounding_chunks(response),
        )

    @staticmethod
    def _grounding_chunks(response) -> Optional[list]:
        """Read chunks from the first candidate's grounding metadata."""
        candidates = response.candidates or []
        if not candidates:
            return None

        metadata = candidates[0].grounding_metadata
        if metadata is None or not metadata.grounding_chunks:
            return None

        chunks = [chunk_from_raw(chunk) for chunk in metadata.grounding_chunks]

        logger.debug(f"Gemini returned {len(chunks)} grounding chunks")
        return chunks

"""Claude client with the server-side web search tool."""

import logging
from typing import Optional

from anthropic import Anthropic

from src.models.grounding import ModelResponse, OtherChunk, WebChunk
from src.research.clients.base import BaseModelClient

logger = logging.getLogger(__name__)


class ClaudeClient(BaseModelClient):
    """Calls ``messages.create`` with ``web_search`` enabled.

    Search results arrive as ``web_search_tool_result`` blocks; each result
    becomes one web grounding chunk.
    """

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    DEFAULT_MAX_TOKENS = 4000
    WEB_SEARCH_TOOL = "web_search_20250305"

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        max_tokens: int | None = None,
        search_max_uses: int = 5,
    ):
        super().__init__(name="claude", api_key=api_key, model=model or self.DEFAULT_MODEL)
        self.max_tokens = max_tokens or self.DEFAULT_MAX_TOKENS
        self.search_max_uses = search_max_uses
        self._client: Anthropic | None = None

    @property
    def client(self) -> Anthropic:
        if self._client is None:
            self._client = Anthropic(api_key=self.api_key)
        return self._client

    def _generate(self, prompt: str, use_search: bool) -> ModelResponse:
        kwargs = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if use_search:
            kwargs["tools"] = [
                {
                    "type": self.WEB_SEARCH_TOOL,
                    "name": "web_search",
                    "max_uses": self.search_max_uses,
                }
            ]

        message = self.client.messages.create(**kwargs)

        text = "".join(
            block.text for block in message.content if block.type == "text"
        )
        return ModelResponse(text=text, grounding_chunks=self._grounding_chunks(message))

    @staticmethod
    def _grounding_chunks(message) -> Optional[list]:
        chunks = []
        for block in message.content:
            if block.type != "web_search_tool_result":
                continue
            # An error result is a single object instead of a list
            if not isinstance(block.content, list):
                chunks.append(OtherChunk())
                continue
            for result in block.content:
                if result.type == "web_search_result":
                    chunks.append(WebChunk(title=result.title, uri=result.url))
                else:
                    chunks.append(OtherChunk())

        return chunks or None

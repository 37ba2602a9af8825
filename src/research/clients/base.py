"""Base class for hosted model clients."""

import asyncio
import logging
from abc import ABC, abstractmethod

from src.models.grounding import ModelResponse
from src.research.errors import ApiError, ConfigError, TransportError

logger = logging.getLogger(__name__)


class BaseModelClient(ABC):
    """Prompt in, text plus optional grounding chunks out.

    Subclasses implement the blocking SDK call in ``_generate``; it runs in a
    worker thread so the caller's event loop is not blocked.
    """

    def __init__(self, name: str, api_key: str, model: str):
        """Initialize the client.

        Args:
            name: Provider identifier used in logs.
            api_key: Provider API key. May be empty; checked per call.
            model: Provider model name.
        """
        self.name = name
        self.api_key = api_key
        self.model = model

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def ensure_configured(self) -> None:
        """Raise ConfigError if no API key is set."""
        if not self.is_configured:
            raise ConfigError(f"API key is missing for provider '{self.name}'.")

    async def generate(self, prompt: str, use_search: bool = True) -> ModelResponse:
        """Invoke the model.

        Args:
            prompt: Prompt text.
            use_search: Enable the provider's web search tool.

        Returns:
            Normalized model response.

        Raises:
            ConfigError: If no API key is configured.
            TransportError: If the provider call fails.
        """
        self.ensure_configured()
        try:
            return await asyncio.to_thread(self._generate, prompt, use_search)
        except ApiError:
            raise
        except Exception as e:
            logger.error(f"{self.name} API error: {e}")
            raise TransportError(str(e)) from e

    @abstractmethod
    def _generate(self, prompt: str, use_search: bool) -> ModelResponse:
        """Blocking provider call."""
        pass

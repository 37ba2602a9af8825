"""Build the model client selected in settings."""

from src.config.settings import Settings
from src.research.clients.base import BaseModelClient
from src.research.clients.claude_client import ClaudeClient
from src.research.clients.gemini_client import GeminiClient


def create_model_client(settings: Settings) -> BaseModelClient:
    """Create the client for ``settings.research.provider``.

    Args:
        settings: Loaded settings.

    Returns:
        A Gemini or Claude client. The key may be empty; fetchers check it.

    Raises:
        ValueError: If the provider is unknown.
    """
    research = settings.research

    if research.provider == "gemini":
        return GeminiClient(api_key=settings.gemini.api_key, model=research.gemini_model)
    if research.provider == "claude":
        return ClaudeClient(
            api_key=settings.anthropic.api_key,
            model=research.claude_model,
            max_tokens=research.max_tokens,
            search_max_uses=research.search_max_uses,
        )

    raise ValueError(f"Unknown model provider: {research.provider}")

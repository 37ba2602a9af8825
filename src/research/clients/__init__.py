"""Hosted model clients."""

from src.research.clients.base import BaseModelClient
from src.research.clients.claude_client import ClaudeClient
from src.research.clients.factory import create_model_client
from src.research.clients.gemini_client import GeminiClient

__all__ = ["BaseModelClient", "ClaudeClient", "GeminiClient", "create_model_client"]

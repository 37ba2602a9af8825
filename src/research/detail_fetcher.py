# src/research/detail_fetcher.py

"""Detail Fetcher - short-term analysis of a single symbol."""

import logging

from src.models.stock import StockDetails
from src.research.clients.base import BaseModelClient
from src.research.errors import ApiError, ParseError
from src.research.extractor import extract_json
from src.research.prompts import build_detail_prompt

logger = logging.getLogger(__name__)


class DetailFetcher:
    """Asks the model for a technical and fundamental view of one symbol.

    Unparseable answers degrade to ``StockDetails.unavailable()`` so the
    detail view always has something to render.
    """

    def __init__(self, client: BaseModelClient):
        self._client = client

    async def fetch(self, symbol: str) -> StockDetails:
        """Fetch the analysis for ``symbol``.

        Raises:
            ConfigError: If the client has no API key. No call is made.
            TransportError: If the model call fails.
        """
        self._client.ensure_configured()

        try:
            response = await self._client.generate(build_detail_prompt(symbol), use_search=True)
        except ApiError as e:
            logger.error(f"Detail fetch failed for {symbol}: {e}")
            raise

        try:
            payload = extract_json(response.text)
            if not isinstance(payload, dict):
                raise ParseError(f"Expected a JSON object, got {type(payload).__name__}.")
        except ParseError as e:
            logger.warning(f"Using placeholder analysis for {symbol}: {e}")
            return StockDetails.unavailable()

        return StockDetails.from_payload(payload)

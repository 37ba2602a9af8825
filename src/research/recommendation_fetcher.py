# src/research/recommendation_fetcher.py

"""Recommendation Fetcher - trending short-term picks for a sector and risk."""

import logging
from datetime import datetime
from typing import Union

from src.models.grounding import sources_from_chunks
from src.models.stock import AnalysisResult, RiskLevel, Sector, Stock
from src.research.clients.base import BaseModelClient
from src.research.errors import ApiError, ParseError
from src.research.extractor import extract_json
from src.research.prompts import build_recommendation_prompt

logger = logging.getLogger(__name__)


class RecommendationFetcher:
    """Asks the model for stock picks and collects its grounding sources."""

    def __init__(self, client: BaseModelClient, pick_count: int = 10):
        """Initialize the fetcher.

        Args:
            client: Model client with search grounding.
            pick_count: Number of picks requested in the prompt.
        """
        self._client = client
        self._pick_count = pick_count

    async def fetch(
        self,
        sector: Union[Sector, str],
        risk: Union[RiskLevel, str],
    ) -> AnalysisResult:
        """Fetch picks for the given filters.

        Args:
            sector: Sector filter.
            risk: Risk tolerance.

        Returns:
            Picks and sources from a single model call.

        Raises:
            ConfigError: If the client has no API key. No call is made.
            TransportError: If the model call fails.
            ParseError: If the answer holds no JSON array of objects.
        """
        self._client.ensure_configured()

        prompt = build_recommendation_prompt(sector, risk, count=self._pick_count)

        start_time = datetime.now()
        try:
            response = await self._client.generate(prompt, use_search=True)
            stocks = self._parse_stocks(response.text)
        except ApiError as e:
            logger.error(f"Recommendation fetch failed: {e}")
            raise

        sources = sources_from_chunks(response.grounding_chunks)

        logger.info(
            f"Fetched {len(stocks)} picks and {len(sources)} sources "
            f"in {(datetime.now() - start_time).total_seconds():.1f}s"
        )

        return AnalysisResult(stocks=stocks, sources=sources)

    @staticmethod
    def _parse_stocks(text: str) -> list[Stock]:
        """Turn the model's JSON array into Stock records.

        Field values are not validated; only the array-of-objects shape is.
        """
        payload = extract_json(text)

        if not isinstance(payload, list):
            raise ParseError(f"Expected a JSON array of stocks, got {type(payload).__name__}.")

        stocks = []
        for item in payload:
            if not isinstance(item, dict):
                raise ParseError(f"Expected a stock object, got {type(item).__name__}.")
            stocks.append(Stock.from_payload(item))

        return stocks

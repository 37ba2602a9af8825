"""Research services: prompts, response extraction and the two fetchers."""

from src.research.errors import ApiError, ConfigError, ParseError, TransportError
from src.research.extractor import extract_json
from src.research.recommendation_fetcher import RecommendationFetcher
from src.research.detail_fetcher import DetailFetcher
from src.research.prompts import (
    build_detail_prompt,
    build_recommendation_prompt,
)

__all__ = [
    "ApiError",
    "ConfigError",
    "ParseError",
    "TransportError",
    "extract_json",
    "RecommendationFetcher",
    "DetailFetcher",
    "build_detail_prompt",
    "build_recommendation_prompt",
]

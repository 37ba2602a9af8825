# src/research/prompts/__init__.py

"""Prompts for the recommendation and detail fetchers."""

from src.research.prompts.templates import (
    DIVERSE_SECTORS,
    build_detail_prompt,
    build_recommendation_prompt,
    sector_label,
)

__all__ = [
    "DIVERSE_SECTORS",
    "build_detail_prompt",
    "build_recommendation_prompt",
    "sector_label",
]

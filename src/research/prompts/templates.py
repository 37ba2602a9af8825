# src/research/prompts/templates.py

"""Prompt templates for stock recommendations and per-symbol analysis."""

from typing import Union

from src.models.stock import RiskLevel, Sector

DIVERSE_SECTORS = "diverse sectors"

RECOMMENDATION_PROMPT = """Find {count} currently trending stocks in the Indian Stock Market (NSE/BSE) suitable for a {risk} risk short-term investment strategy (1-3 months horizon).
Focus on the {sector} sector in India.

Use Google Search to find the most recent price data (in INR), percentage change from the last session, and key catalysts.

CRITICAL OUTPUT INSTRUCTIONS:
You must output the result strictly as a valid JSON array inside a markdown code block like ```json ... ```.
Do not add any conversational text outside the code block.

The JSON array must contain objects with this exact schema:
{{
  "symbol": "Ticker Symbol (e.g., RELIANCE or TCS)",
  "name": "Company Name",
  "price": "Current Price in INR (e.g., ₹2,450.00)",
  "change": "Change string (e.g., +1.2% or -0.5%)",
  "changePercent": number (e.g., 1.2 or -0.5),
  "reason": "A concise (15-20 words) explanation of why this is a good short-term pick based on recent Indian market news.",
  "sector": "Sector Name",
  "riskLevel": "Low" | "Medium" | "High"
}}"""


DETAIL_PROMPT = """Perform a comprehensive short-term investment analysis (1-3 months) for {symbol} in the Indian Stock Market.
Use Google Search to find the latest technical indicators, news, and earnings reports.

CRITICAL OUTPUT INSTRUCTIONS:
Output strictly valid JSON inside a code block. The JSON must follow this schema:
{{
  "technicalAnalysis": "Detailed paragraph (approx 50-70 words) covering Moving Averages, RSI, MACD, and chart patterns.",
  "fundamentalAnalysis": "Detailed paragraph (approx 50-70 words) covering recent earnings, news catalysts, and sector performance.",
  "targetPrice": "Specific price target in INR (e.g., ₹2,800)",
  "stopLoss": "Specific stop loss price in INR (e.g., ₹2,350)",
  "upsidePotential": "Percentage string (e.g., +12.5%)",
  "confidenceScore": number (0-100, representing the probability of reaching the target based on current indicators),
  "supportLevels": ["Level 1", "Level 2"],
  "resistanceLevels": ["Level 1", "Level 2"]
}}"""


def _label(value: Union[Sector, RiskLevel, str]) -> str:
    return value.value if isinstance(value, (Sector, RiskLevel)) else str(value)


def sector_label(sector: Union[Sector, str]) -> str:
    """Text used for the sector in the prompt."""
    label = _label(sector)
    if label == Sector.ALL.value:
        return DIVERSE_SECTORS
    return label


def build_recommendation_prompt(
    sector: Union[Sector, str],
    risk: Union[RiskLevel, str],
    count: int = 10,
) -> str:
    """Build the prompt asking for trending short-term picks.

    Args:
        sector: Sector filter; ALL becomes "diverse sectors".
        risk: Risk tolerance label.
        count: Number of picks requested.

    Returns:
        Prompt text.
    """
    return RECOMMENDATION_PROMPT.format(
        count=count,
        risk=_label(risk),
        sector=sector_label(sector),
    )


def build_detail_prompt(symbol: str) -> str:
    """Build the prompt asking for a single-symbol analysis object."""
    return DETAIL_PROMPT.format(symbol=symbol)

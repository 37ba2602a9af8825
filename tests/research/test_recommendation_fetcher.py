# tests/research/test_recommendation_fetcher.py

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.models.grounding import ModelResponse, OtherChunk, WebChunk
from src.models.stock import AnalysisResult, GroundingSource, RiskLevel, Sector
from src.research.errors import ApiError, ConfigError, ParseError, TransportError
from src.research.recommendation_fetcher import RecommendationFetcher

PICKS = [
    {
        "symbol": "TCS",
        "name": "Tata Consultancy Services",
        "price": "₹3,950.00",
        "change": "+1.2%",
        "changePercent": 1.2,
        "reason": "Large deal wins and stable margins ahead of results.",
        "sector": "Technology",
        "riskLevel": "Low",
    },
    {
        "symbol": "ADANIENT",
        "name": "Adani Enterprises",
        "price": "₹2,450.00",
        "change": "-0.5%",
        "changePercent": -0.5,
        "reason": "Airport traffic growth offsets regulatory noise.",
        "sector": "Energy",
        "riskLevel": "High",
    },
]


def make_client(response=None, configured=True):
    client = MagicMock()
    client.is_configured = configured
    if not configured:
        client.ensure_configured.side_effect = ConfigError("API key is missing.")
    client.generate = AsyncMock(return_value=response)
    return client


def fenced(payload) -> str:
    return f"Here you go:\n```json\n{json.dumps(payload)}\n```\nGood luck!"


class TestRecommendationFetcher:
    @pytest.mark.asyncio
    async def test_fetch_returns_stocks_and_sources(self):
        response = ModelResponse(
            text=fenced(PICKS),
            grounding_chunks=[
                WebChunk(title="A", uri="u1"),
                OtherChunk(),
                WebChunk(title="B", uri="u2"),
            ],
        )
        fetcher = RecommendationFetcher(make_client(response))

        result = await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

        assert isinstance(result, AnalysisResult)
        assert [s.symbol for s in result.stocks] == ["TCS", "ADANIENT"]
        assert result.stocks[1].change_percent == -0.5
        assert result.sources == [
            GroundingSource(title="A", uri="u1"),
            GroundingSource(title="B", uri="u2"),
        ]

    @pytest.mark.asyncio
    async def test_no_grounding_metadata_yields_empty_sources(self):
        fetcher = RecommendationFetcher(make_client(ModelResponse(text=fenced(PICKS))))

        result = await fetcher.fetch(Sector.TECH, RiskLevel.LOW)

        assert result.sources == []

    @pytest.mark.asyncio
    async def test_prompt_uses_diverse_sectors_for_all(self):
        client = make_client(ModelResponse(text=fenced([])))
        fetcher = RecommendationFetcher(client)

        await fetcher.fetch(Sector.ALL, RiskLevel.HIGH)

        prompt = client.generate.call_args.args[0]
        assert "diverse sectors" in prompt
        assert client.generate.call_args.kwargs["use_search"] is True

    @pytest.mark.asyncio
    async def test_prompt_uses_sector_label(self):
        client = make_client(ModelResponse(text=fenced([])))
        fetcher = RecommendationFetcher(client, pick_count=3)

        await fetcher.fetch(Sector.HEALTHCARE, RiskLevel.LOW)

        prompt = client.generate.call_args.args[0]
        assert "Healthcare" in prompt
        assert "Find 3 currently" in prompt

    @pytest.mark.asyncio
    async def test_unfenced_json_is_accepted(self):
        fetcher = RecommendationFetcher(make_client(ModelResponse(text=json.dumps(PICKS))))

        result = await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

        assert len(result.stocks) == 2

    @pytest.mark.asyncio
    async def test_malformed_fields_pass_through(self):
        payload = [{"symbol": "XYZ", "riskLevel": "Speculative", "changePercent": "1.2%"}]
        fetcher = RecommendationFetcher(make_client(ModelResponse(text=fenced(payload))))

        result = await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

        assert result.stocks[0].risk_level == "Speculative"
        assert result.stocks[0].change_percent == "1.2%"
        assert result.stocks[0].name == ""

    @pytest.mark.asyncio
    async def test_parse_failure_propagates(self):
        fetcher = RecommendationFetcher(make_client(ModelResponse(text="No data today, sorry.")))

        with pytest.raises(ParseError):
            await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

    @pytest.mark.asyncio
    async def test_object_instead_of_array_is_parse_error(self):
        fetcher = RecommendationFetcher(make_client(ModelResponse(text=fenced({"stocks": PICKS}))))

        with pytest.raises(ParseError):
            await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

    @pytest.mark.asyncio
    async def test_non_object_items_are_parse_error(self):
        fetcher = RecommendationFetcher(make_client(ModelResponse(text=fenced(["TCS", "INFY"]))))

        with pytest.raises(ParseError):
            await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        client = make_client()
        client.generate.side_effect = TransportError("quota exceeded")
        fetcher = RecommendationFetcher(client)

        with pytest.raises(TransportError, match="quota exceeded"):
            await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

    @pytest.mark.asyncio
    async def test_missing_credential_fails_before_call(self):
        client = make_client(configured=False)
        fetcher = RecommendationFetcher(client)

        with pytest.raises(ConfigError):
            await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

        client.generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_errors_are_api_errors(self):
        fetcher = RecommendationFetcher(make_client(ModelResponse(text="nope")))

        with pytest.raises(ApiError):
            await fetcher.fetch(Sector.ALL, RiskLevel.MEDIUM)

"""Domain models for stock picks, details and grounding metadata."""

from src.models.stock import (
    AnalysisResult,
    GroundingSource,
    RiskLevel,
    Sector,
    Stock,
    StockDetails,
)
from src.models.grounding import (
    GroundingChunk,
    ModelResponse,
    OtherChunk,
    WebChunk,
    chunk_from_raw,
    sources_from_chunks,
)

__all__ = [
    "AnalysisResult",
    "GroundingSource",
    "RiskLevel",
    "Sector",
    "Stock",
    "StockDetails",
    "GroundingChunk",
    "ModelResponse",
    "OtherChunk",
    "WebChunk",
    "chunk_from_raw",
    "sources_from_chunks",
]

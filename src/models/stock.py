# src/models/stock.py
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


UNAVAILABLE_TEXT = "Analysis currently unavailable."
NOT_AVAILABLE = "N/A"


class RiskLevel(str, Enum):
    """Risk tolerance offered in the filters."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    AGGRESSIVE = "Aggressive"


class Sector(str, Enum):
    """Sector filter. ALL widens the prompt to diverse sectors."""
    ALL = "All Sectors"
    TECH = "Technology"
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"
    ENERGY = "Energy"
    CONSUMER = "Consumer Goods"


class _ModelOutput(BaseModel):
    """Base for records parsed out of model text.

    Field names are snake_case, the model writes camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    @classmethod
    def from_payload(cls, payload: dict[str, Any]):
        """Build a record from model JSON without validating field values."""
        return cls.model_construct(**payload)


class Stock(_ModelOutput):
    """A single short-term stock pick."""

    symbol: str = ""
    name: str = ""
    price: str = ""  # e.g. "₹2,450.00"
    change: str = ""  # e.g. "+1.2%"
    change_percent: float = 0.0
    reason: str = ""
    sector: str = ""
    risk_level: str = ""  # Low / Medium / High, not enforced

    @property
    def is_positive(self) -> bool:
        """True when the last session closed flat or up."""
        try:
            return float(self.change_percent) >= 0
        except (TypeError, ValueError):
            return not str(self.change).strip().startswith("-")


class GroundingSource(BaseModel):
    """Web citation reported by the model's search tool."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    uri: str = ""


class AnalysisResult(BaseModel):
    """Picks and sources from one recommendation fetch."""

    model_config = ConfigDict(frozen=True)

    stocks: list[Stock] = Field(default_factory=list)
    sources: list[GroundingSource] = Field(default_factory=list)


class StockDetails(_ModelOutput):
    """Short-term technical and fundamental view of one symbol."""

    technical_analysis: str = ""
    fundamental_analysis: str = ""
    target_price: str = ""
    stop_loss: str = ""
    upside_potential: str = ""
    confidence_score: int = 0
    support_levels: list[str] = Field(default_factory=list)
    resistance_levels: list[str] = Field(default_factory=list)

    @classmethod
    def unavailable(cls) -> "StockDetails":
        """Placeholder shown when the model's answer could not be parsed."""
        return cls(
            technical_analysis=UNAVAILABLE_TEXT,
            fundamental_analysis=UNAVAILABLE_TEXT,
            target_price=NOT_AVAILABLE,
            stop_loss=NOT_AVAILABLE,
            upside_potential=NOT_AVAILABLE,
            confidence_score=0,
            support_levels=[],
            resistance_levels=[],
        )

    @property
    def is_unavailable(self) -> bool:
        return self == StockDetails.unavailable()

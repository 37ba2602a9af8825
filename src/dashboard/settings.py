"""Settings for the Streamlit dashboard."""
from typing import Literal

from pydantic import BaseModel, Field

from src.models.stock import RiskLevel, Sector


class DashboardSettings(BaseModel):
    """Configuration for the dashboard."""

    default_sector: Sector = Sector.ALL
    default_risk: RiskLevel = RiskLevel.MEDIUM
    sparkline_points: int = Field(default=20, ge=2, le=200)
    cards_per_row: int = Field(default=3, ge=1, le=6)
    theme: Literal["light", "dark"] = "dark"

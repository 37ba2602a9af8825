"""Streamlit dashboard for AI-generated Indian stock picks."""

from src.dashboard.settings import DashboardSettings
from src.dashboard.state import DashboardState

__all__ = [
    "DashboardSettings",
    "DashboardState",
]

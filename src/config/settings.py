# src/config/settings.py
from pathlib import Path
from typing import Literal

import yaml
from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.dashboard.settings import DashboardSettings


class SystemConfig(BaseModel):
    name: str = "MarketPulse India"
    version: str = "1.0.0"


class ResearchSettings(BaseModel):
    """Settings for the recommendation and detail fetchers."""

    provider: Literal["gemini", "claude"] = "gemini"
    gemini_model: str = "gemini-2.5-flash"
    claude_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = Field(default=4000, ge=256, le=16000)
    search_max_uses: int = Field(default=5, ge=1, le=20)
    pick_count: int = Field(default=10, ge=1, le=25)


class GeminiConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GEMINI_", populate_by_name=True)

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"),
    )


class AnthropicConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ANTHROPIC_")

    api_key: str = ""


class Settings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    research: ResearchSettings = Field(default_factory=ResearchSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    anthropic: AnthropicConfig = Field(default_factory=AnthropicConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file with env var overrides."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        gemini = GeminiConfig()
        anthropic = AnthropicConfig()

        return cls(
            **data,
            gemini=gemini,
            anthropic=anthropic,
        )

# tests/config/test_settings.py
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.config.settings import (
    AnthropicConfig,
    GeminiConfig,
    ResearchSettings,
    Settings,
)
from src.models.stock import RiskLevel, Sector


class TestResearchSettings:
    def test_defaults(self):
        research = ResearchSettings()

        assert research.provider == "gemini"
        assert research.gemini_model == "gemini-2.5-flash"
        assert research.pick_count == 10

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValidationError):
            ResearchSettings(provider="openai")

    def test_pick_count_bounds(self):
        with pytest.raises(ValidationError):
            ResearchSettings(pick_count=0)


class TestProviderConfigs:
    def test_gemini_reads_api_key(self):
        with patch.dict(os.environ, {"API_KEY": "from-api-key"}, clear=True):
            assert GeminiConfig().api_key == "from-api-key"

    def test_gemini_reads_gemini_api_key(self):
        with patch.dict(os.environ, {"GEMINI_API_KEY": "from-gemini"}, clear=True):
            assert GeminiConfig().api_key == "from-gemini"

    def test_gemini_empty_without_env(self):
        with patch.dict(os.environ, {}, clear=True):
            assert GeminiConfig().api_key == ""

    def test_anthropic_reads_env(self):
        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "sk-ant"}, clear=True):
            assert AnthropicConfig().api_key == "sk-ant"


class TestSettings:
    def test_from_yaml(self, tmp_path: Path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(
            "research:\n"
            "  provider: claude\n"
            "  pick_count: 6\n"
            "dashboard:\n"
            "  default_sector: Finance\n"
            "  default_risk: High\n"
        )

        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "sk-ant"}, clear=True):
            settings = Settings.from_yaml(config_file)

        assert settings.research.provider == "claude"
        assert settings.research.pick_count == 6
        assert settings.dashboard.default_sector == Sector.FINANCE
        assert settings.dashboard.default_risk == RiskLevel.HIGH
        assert settings.anthropic.api_key == "sk-ant"

    def test_from_empty_yaml(self, tmp_path: Path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("")

        settings = Settings.from_yaml(config_file)

        assert settings.system.name == "MarketPulse India"

    def test_project_settings_file_loads(self):
        settings = Settings.from_yaml(Path("config/settings.yaml"))
        assert settings.research.provider in ("gemini", "claude")


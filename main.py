# main.py
"""Main entry point for the MarketPulse India dashboard."""
import os
import subprocess
import sys
import logging
from pathlib import Path

from dotenv import load_dotenv

from src.config.settings import Settings


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config/settings.yaml")
DASHBOARD_PATH = Path(__file__).parent / "src" / "dashboard" / "Home.py"

PROVIDER_ENV_VARS = {
    "gemini": ["API_KEY", "GEMINI_API_KEY"],
    "claude": ["ANTHROPIC_API_KEY"],
}


def validate_env_vars(provider: str = "gemini") -> None:
    """Validate the API key for the selected provider is set.

    Args:
        provider: Model provider from settings.

    Raises:
        SystemExit: If none of the provider's env vars is set.
    """
    candidates = PROVIDER_ENV_VARS.get(provider)
    if candidates is None:
        logger.error(f"Unknown model provider: {provider}")
        sys.exit(1)

    if not any(os.getenv(var) for var in candidates):
        logger.error(f"Missing API key for {provider}: set one of {', '.join(candidates)}")
        logger.error("Please check your .env file")
        sys.exit(1)


def print_startup_banner(settings: Settings) -> None:
    """Print system startup banner."""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.system.name}")
    logger.info(f"Provider: {settings.research.provider}")
    logger.info(f"Version: {settings.system.version}")
    logger.info("=" * 60)


def load_and_validate_config(config_path: Path = CONFIG_PATH) -> Settings:
    """Load and validate configuration.

    Returns:
        Settings object loaded from YAML.

    Raises:
        SystemExit: If config file missing, env vars invalid, or YAML parsing fails.
    """
    # Load environment variables
    load_dotenv()
    logger.info("✓ Loaded environment variables")

    if not config_path.exists():
        logger.error(f"{config_path} not found")
        sys.exit(1)

    try:
        settings = Settings.from_yaml(config_path)
        logger.info(f"✓ Settings loaded from {config_path}")
    except Exception as e:
        logger.error(f"Failed to parse {config_path}: {e}")
        sys.exit(1)

    validate_env_vars(settings.research.provider)
    logger.info("✓ Environment variables validated")

    return settings


def launch_dashboard(extra_args: list[str] | None = None) -> int:
    """Run the Streamlit dashboard in a child process.

    Returns:
        Exit code of the Streamlit process.
    """
    command = [sys.executable, "-m", "streamlit", "run", str(DASHBOARD_PATH), *(extra_args or [])]
    logger.info(f"Launching dashboard: {' '.join(command)}")
    return subprocess.call(command)


def main() -> None:
    """Main entry point."""
    settings = load_and_validate_config()
    print_startup_banner(settings)

    try:
        code = launch_dashboard(sys.argv[1:])
    except KeyboardInterrupt:
        logger.info("Shutdown requested")
        code = 0

    logger.info("Dashboard stopped")
    sys.exit(code)


if __name__ == "__main__":
    main()

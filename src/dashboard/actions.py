"""Dashboard actions that run the fetchers and update state."""
import logging

from src.dashboard.state import DashboardState
from src.models.stock import Stock
from src.research.detail_fetcher import DetailFetcher
from src.research.errors import ApiError
from src.research.recommendation_fetcher import RecommendationFetcher

logger = logging.getLogger(__name__)


async def refresh_recommendations(state: DashboardState, fetcher: RecommendationFetcher) -> bool:
    """Fetch picks for the current filters.

    Returns:
        True if the result was replaced, False if an error was recorded.
    """
    try:
        result = await fetcher.fetch(state.sector, state.risk)
    except ApiError as e:
        logger.error(f"Refresh failed ({type(e).__name__}): {e}")
        state.apply_error()
        return False

    state.apply_result(result)
    return True


async def load_details(state: DashboardState, fetcher: DetailFetcher, stock: Stock) -> bool:
    """Open the detail view for ``stock`` and fetch its analysis."""
    state.select_stock(stock)
    try:
        details = await fetcher.fetch(stock.symbol)
    except ApiError as e:
        logger.error(f"Failed to load details for {stock.symbol}: {e}")
        state.apply_detail_error()
        return False

    state.apply_details(details)
    return True


def close_details(state: DashboardState) -> None:
    state.close_details()

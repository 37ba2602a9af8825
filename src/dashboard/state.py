"""Dashboard state management."""
from collections.abc import MutableMapping
from typing import ClassVar, Optional

from src.models.stock import AnalysisResult, RiskLevel, Sector, Stock, StockDetails

FETCH_ERROR_MESSAGE = (
    "Failed to fetch stock data. The AI service might be busy or the API key limit reached."
)
DETAIL_ERROR_MESSAGE = "Failed to load details. Please try again."


class DashboardState:
    """Per-session state for the dashboard.

    The analysis result is only ever replaced as a whole. A failed refresh
    records an error and keeps the previous result on screen.
    """

    SESSION_KEY: ClassVar[str] = "dashboard_state"

    def __init__(
        self,
        sector: Sector = Sector.ALL,
        risk: RiskLevel = RiskLevel.MEDIUM,
    ) -> None:
        """Initialize dashboard state."""
        self.sector = sector
        self.risk = risk
        self.initialized = False

        self._result: Optional[AnalysisResult] = None
        self._error: Optional[str] = None

        self._selected_stock: Optional[Stock] = None
        self._details: Optional[StockDetails] = None
        self._detail_error: Optional[str] = None

    @classmethod
    def get_instance(cls, store: MutableMapping, **defaults) -> "DashboardState":
        """Get or create the state kept in a session mapping.

        Args:
            store: Session mapping (``st.session_state``).
            **defaults: Constructor arguments for a newly created state.
        """
        if cls.SESSION_KEY not in store:
            store[cls.SESSION_KEY] = cls(**defaults)
        return store[cls.SESSION_KEY]

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self._result

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def stocks(self) -> list[Stock]:
        return self._result.stocks if self._result else []

    @property
    def is_empty(self) -> bool:
        """Nothing to show and no error to explain why."""
        return not self.stocks and self._error is None

    def apply_result(self, result: AnalysisResult) -> None:
        """Replace the whole analysis result and clear any error."""
        self._result = result
        self._error = None

    def apply_error(self, message: str = FETCH_ERROR_MESSAGE) -> None:
        """Record a failed refresh, keeping the previous result."""
        self._error = message

    @property
    def selected_stock(self) -> Optional[Stock]:
        return self._selected_stock

    @property
    def details(self) -> Optional[StockDetails]:
        return self._details

    @property
    def detail_error(self) -> Optional[str]:
        return self._detail_error

    def select_stock(self, stock: Stock) -> None:
        """Open the detail view for ``stock``, dropping any previous details."""
        self._selected_stock = stock
        self._details = None
        self._detail_error = None

    def apply_details(self, details: StockDetails) -> None:
        self._details = details
        self._detail_error = None

    def apply_detail_error(self, message: str = DETAIL_ERROR_MESSAGE) -> None:
        self._details = None
        self._detail_error = message

    def close_details(self) -> None:
        self._selected_stock = None
        self._details = None
        self._detail_error = None

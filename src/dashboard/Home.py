"""MarketPulse India - AI-driven short-term picks for NSE/BSE."""
import asyncio
import logging
from datetime import date
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from src.config.settings import Settings
from src.dashboard.actions import close_details, load_details, refresh_recommendations
from src.dashboard.charts import (
    generate_sparkline,
    plotly_template,
    risk_badge_color,
    sparkline_figure,
)
from src.dashboard.formatting import confidence_percent, display_text, level_list
from src.dashboard.state import DashboardState
from src.models.stock import RiskLevel, Sector, Stock
from src.research.clients import create_model_client
from src.research.detail_fetcher import DetailFetcher
from src.research.recommendation_fetcher import RecommendationFetcher

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

st.set_page_config(page_title="MarketPulse India", page_icon="📈", layout="wide")

CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "settings.yaml"


@st.cache_resource
def get_settings() -> Settings:
    if CONFIG_PATH.exists():
        return Settings.from_yaml(CONFIG_PATH)
    return Settings()


@st.cache_resource
def get_fetchers() -> tuple[RecommendationFetcher, DetailFetcher]:
    settings = get_settings()
    client = create_model_client(settings)
    return (
        RecommendationFetcher(client, pick_count=settings.research.pick_count),
        DetailFetcher(client),
    )


@st.cache_data
def cached_sparkline(symbol: str, positive: bool, points: int):
    return generate_sparkline(1.0 if positive else -1.0, points=points)


def render_card(stock: Stock, index: int, points: int) -> None:
    """Render one pick card."""
    positive = stock.is_positive
    with st.container(border=True):
        head, move = st.columns([3, 2])
        with head:
            color = risk_badge_color(stock.risk_level)
            st.markdown(f"### {stock.symbol} :{color}[{stock.risk_level} Risk]")
            st.caption(stock.name)
        with move:
            arrow = "▲" if positive else "▼"
            st.markdown(f"#### :{'green' if positive else 'red'}[{arrow} {stock.change}]")

        st.markdown(f"## {stock.price}")
        st.plotly_chart(
            sparkline_figure(
                cached_sparkline(stock.symbol, positive, points),
                positive,
                template=plotly_template(settings.dashboard.theme),
            ),
            use_container_width=True,
            config={"displayModeBar": False, "staticPlot": True},
            key=f"spark-{index}-{stock.symbol}",
        )

        st.markdown("**AI INSIGHT**")
        st.write(stock.reason)
        st.caption(stock.sector)

        if st.button("Click for Analysis", key=f"detail-{index}-{stock.symbol}", use_container_width=True):
            with st.spinner(f"Analyzing {stock.symbol}..."):
                asyncio.run(load_details(state, detail_fetcher, stock))
            st.rerun()


def render_details(stock: Stock) -> None:
    """Render the detail view for the selected pick."""
    with st.container(border=True):
        title, close = st.columns([6, 1])
        with title:
            color = "green" if stock.is_positive else "red"
            st.markdown(f"## {stock.symbol} :{color}[{stock.change}]")
            st.caption(stock.name)
            st.markdown(f"### {stock.price}")
        with close:
            if st.button("✕ Close", key="close-details"):
                close_details(state)
                st.rerun()

        details = state.details
        if details is None:
            st.warning(state.detail_error or "Failed to load details. Please try again.")
            return

        if details.is_unavailable:
            st.caption("The AI response for this symbol could not be read. Showing placeholder values.")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("🎯 Target Price", display_text(details.target_price))
            st.caption(f"Potential: {display_text(details.upside_potential)}")
        with col2:
            st.metric("🛡️ Stop Loss", display_text(details.stop_loss))
            st.caption("Manage Risk")
        with col3:
            confidence = confidence_percent(details.confidence_score)
            st.metric("📊 Probability", f"{confidence}%")
            st.progress(confidence)

        tech, fund = st.columns(2)
        with tech:
            st.subheader("📈 Technical Analysis")
            st.write(display_text(details.technical_analysis))
            st.markdown("**KEY LEVELS**")
            support, resistance = st.columns(2)
            with support:
                st.markdown(":green[Support]")
                for level in level_list(details.support_levels):
                    st.markdown(f"- {level}")
            with resistance:
                st.markdown(":red[Resistance]")
                for level in level_list(details.resistance_levels):
                    st.markdown(f"- {level}")
        with fund:
            st.subheader("🥧 Fundamental Analysis")
            st.write(display_text(details.fundamental_analysis))
            st.info(
                f"**Short Term Strategy**\n\n"
                f"Suggested entry around CMP ({stock.price}) with a strict stop loss at "
                f"{display_text(details.stop_loss)}. Target horizon is 1-3 months."
            )


settings = get_settings()
recommendation_fetcher, detail_fetcher = get_fetchers()
state = DashboardState.get_instance(
    st.session_state,
    sector=settings.dashboard.default_sector,
    risk=settings.dashboard.default_risk,
)

# Header
header, refresh_col = st.columns([4, 1])
with header:
    st.title("✨ MarketPulse India")
    st.caption("Real-time, AI-driven short term stock picks for the Indian Market (NSE/BSE).")
with refresh_col:
    refresh = st.button("🔄 Refresh Analysis", type="primary", use_container_width=True)

# Filters
with st.container(border=True):
    st.markdown("**🎚️ Market Filters**")
    sector_col, risk_col = st.columns(2)
    with sector_col:
        sectors = list(Sector)
        state.sector = st.selectbox(
            "Sector",
            options=sectors,
            index=sectors.index(Sector(state.sector)),
            format_func=lambda s: s.value,
        )
    with risk_col:
        risks = list(RiskLevel)
        state.risk = st.selectbox(
            "Risk Tolerance",
            options=risks,
            index=risks.index(RiskLevel(state.risk)),
            format_func=lambda r: r.value,
        )

if refresh or not state.initialized:
    state.initialized = True
    with st.spinner("Analyzing Market..."):
        asyncio.run(refresh_recommendations(state, recommendation_fetcher))

if state.error:
    st.error(state.error, icon="⚠️")

if state.selected_stock is not None:
    render_details(state.selected_stock)

st.warning(
    "**Disclaimer:** This application uses Artificial Intelligence to generate financial "
    "information for the Indian market. This is *not* professional financial advice. "
    "Market data may be delayed. Always conduct your own due diligence before investing.",
    icon="ℹ️",
)

stocks = state.stocks
per_row = settings.dashboard.cards_per_row
for row_start in range(0, len(stocks), per_row):
    columns = st.columns(per_row)
    for offset, stock in enumerate(stocks[row_start:row_start + per_row]):
        with columns[offset]:
            render_card(stock, row_start + offset, settings.dashboard.sparkline_points)

if state.result and state.result.sources:
    st.divider()
    st.subheader("🔗 Sources & Grounding")
    st.markdown(" · ".join(f"[{source.title}]({source.uri})" for source in state.result.sources))

if state.is_empty:
    st.info("No stocks found. Try adjusting filters or refreshing.")

st.divider()
st.caption(f"© {date.today().year} {settings.system.name}. Powered by {settings.research.provider.title()}.")

"""Sparklines and badge colors for the pick cards."""
from typing import Optional

import numpy as np
import pandas as pd
import plotly.graph_objects as go

POSITIVE_COLOR = "#4ade80"
NEGATIVE_COLOR = "#f87171"

RISK_BADGE_COLORS = {
    "High": "red",
    "Medium": "orange",
}

PLOTLY_TEMPLATES = {
    "dark": "plotly_dark",
    "light": "plotly_white",
}


def generate_sparkline(
    change_percent: float,
    points: int = 20,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    """Generate a decorative price path that trends with ``change_percent``.

    The values are not market data. The last point is pinned to 110 for a
    non-negative change and 90 otherwise.

    Args:
        change_percent: Signed session change of the pick.
        points: Number of points.
        rng: Random generator, seeded in tests.

    Returns:
        DataFrame with a single ``value`` column.
    """
    rng = rng or np.random.default_rng()
    positive = change_percent >= 0
    trend = 0.5 if positive else -0.5

    values = []
    current = 100.0
    for _ in range(points):
        volatility = rng.uniform(0, 5)
        current = current + trend + (volatility if rng.random() > 0.5 else -volatility)
        values.append(current)

    values[-1] = 110.0 if positive else 90.0
    return pd.DataFrame({"value": values})


def sparkline_figure(data: pd.DataFrame, positive: bool, template: str = "plotly_dark") -> go.Figure:
    """Small filled area chart without axes."""
    color = POSITIVE_COLOR if positive else NEGATIVE_COLOR
    fig = go.Figure(
        data=[
            go.Scatter(
                y=data["value"],
                mode="lines",
                line=dict(color=color, width=2, shape="spline"),
                fill="tozeroy",
                fillcolor=_with_alpha(color, 0.15),
                hoverinfo="skip",
            )
        ]
    )
    fig.update_layout(
        template=template,
        height=80,
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False, range=[data["value"].min(), data["value"].max()])
    return fig


def plotly_template(theme: str) -> str:
    """Plotly template for the dashboard theme."""
    return PLOTLY_TEMPLATES.get(theme, "plotly_dark")


def risk_badge_color(risk_level: str) -> str:
    """Streamlit color name for a risk badge. Unknown levels render green."""
    return RISK_BADGE_COLORS.get(str(risk_level), "green")


def _with_alpha(hex_color: str, alpha: float) -> str:
    r, g, b = (int(hex_color[i:i + 2], 16) for i in (1, 3, 5))
    return f"rgba({r},{g},{b},{alpha})"

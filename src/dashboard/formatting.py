"""Display helpers for detail fields built from unvalidated model output."""
from typing import Any

from src.models.stock import NOT_AVAILABLE


def display_text(value: Any) -> str:
    """Render a scalar field, N/A when the model left it out."""
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def level_list(value: Any) -> list[str]:
    """Support/resistance levels as a list of strings.

    A bare string becomes a single level; anything else that is not a list
    renders as no levels.
    """
    if isinstance(value, list):
        return [str(level) for level in value if level is not None]
    if isinstance(value, str) and value.strip():
        return [value]
    return []


def confidence_percent(value: Any) -> int:
    """Confidence score clamped to 0-100, 0 when it is not a number."""
    try:
        score = int(float(value))
    except (TypeError, ValueError):
        return 0
    return min(max(score, 0), 100)

# src/research/extractor.py

"""Extract the JSON payload from a free-text model answer."""

import json
import logging
import re
from typing import Any, Optional

from src.research.errors import ParseError

logger = logging.getLogger(__name__)

# ```json\n ... \n```
JSON_FENCE = re.compile(r"```json\n(.*?)\n```", re.DOTALL)
# ``` ... ``` with any (or no) language tag
ANY_FENCE = re.compile(r"```(.*?)```", re.DOTALL)


def find_fenced_block(text: str) -> Optional[str]:
    """Return the interior of the first ```json fence, else of any fence."""
    match = JSON_FENCE.search(text) or ANY_FENCE.search(text)
    if match and match.group(1):
        return match.group(1)
    return None


def extract_json(text: Optional[str]) -> Any:
    """Parse the JSON value embedded in a model response.

    Tries, in order: a fenced ```json block, any fenced block, then the
    whole text. A fence that is found but holds invalid JSON does not fall
    through to the raw-text attempt.

    Args:
        text: Raw response text from the model.

    Returns:
        The decoded JSON value.

    Raises:
        ParseError: If no tier yields valid JSON.
    """
    if not text:
        raise ParseError("Model returned an empty response.")

    block = find_fenced_block(text)
    if block is not None:
        try:
            return json.loads(block)
        except json.JSONDecodeError as e:
            logger.debug(f"Fenced block is not valid JSON: {e}")
            raise ParseError(f"Fenced block is not valid JSON: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Response text is not valid JSON: {e}")
        raise ParseError(f"No JSON found in model response: {e}") from e

# src/models/grounding.py
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from src.models.stock import GroundingSource


class WebChunk(BaseModel):
    """Grounding chunk backed by a web page."""
    kind: Literal["web"] = "web"
    title: Optional[str] = None
    uri: Optional[str] = None


class OtherChunk(BaseModel):
    """Any grounding chunk that is not a web citation."""
    kind: Literal["other"] = "other"


GroundingChunk = Annotated[Union[WebChunk, OtherChunk], Field(discriminator="kind")]


class ModelResponse(BaseModel):
    """Normalized answer from a model provider."""

    text: str = ""
    # None when the provider returned no grounding metadata at all
    grounding_chunks: Optional[list[GroundingChunk]] = None


def chunk_from_raw(raw: Any) -> Union[WebChunk, OtherChunk]:
    """Convert a raw grounding chunk into a tagged chunk.

    Accepts ``{"web": {"title", "uri"}}`` mappings as well as SDK objects
    exposing a ``web`` attribute with ``title`` and ``uri``.
    """
    if isinstance(raw, dict):
        web = raw.get("web")
    else:
        web = getattr(raw, "web", None)

    if web is None:
        return OtherChunk()
    if isinstance(web, dict):
        return WebChunk(title=web.get("title"), uri=web.get("uri"))
    return WebChunk(title=getattr(web, "title", None), uri=getattr(web, "uri", None))



def sources_from_chunks(
    chunks: Optional[list[Union[WebChunk, OtherChunk]]],
) -> list[GroundingSource]:
    """Collect title/uri pairs from web chunks, preserving order.

    Args:
        chunks: Grounding chunks of a response, or None.

    Returns:
        One source per web chunk. Non-web chunks are skipped.
    """
    sources: list[GroundingSource] = []
    for chunk in chunks or []:
        if isinstance(chunk, WebChunk):
            sources.append(GroundingSource(title=chunk.title or "", uri=chunk.uri or ""))
    return sources

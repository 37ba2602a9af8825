# src/research/errors.py

"""Errors raised by the research fetchers and model clients."""


class ApiError(Exception):
    """Base class for failures surfaced to the dashboard."""


class ConfigError(ApiError):
    """No API key is configured for the selected provider."""


class TransportError(ApiError):
    """The model invocation itself failed (network, auth, quota)."""


class ParseError(ApiError):
    """No usable JSON could be extracted from the model's answer."""

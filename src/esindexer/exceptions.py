"""Custom exception hierarchy for esindexer.

Transport failures are deliberately absent: whatever the poster raises reaches
the caller as the same exception object, so callers can compare by identity.
"""

from __future__ import annotations


class EsIndexerError(Exception):
    """Base class for all esindexer exceptions."""


class ConfigError(EsIndexerError):
    """Raised when configuration loading or validation fails."""


class SerializationError(EsIndexerError, TypeError):
    """Raised when a payload cannot be converted to its JSON wire form."""

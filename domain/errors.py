"""
Error types raised by the harvester.

The extractor propagates these to the driver, which decides whether a failed
domain aborts the whole run.
"""

from typing import Any, Dict, Optional


class HarvestError(Exception):
    """Base error for all harvesting failures."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        if self.original_error:
            base = f"{base} [caused by: {type(self.original_error).__name__}: {self.original_error}]"
        return base


class FetchError(HarvestError):
    """Raised when a FAOSTAT resource cannot be downloaded or parsed."""


class InvalidInputError(HarvestError, ValueError):
    """Raised when a domain value object cannot be mapped to a record."""

"""Exceptions raised by field aggregation.

Every error aborts the whole call; no partial report is returned.
"""

from __future__ import annotations

from typing import Any


class AggregationError(Exception):
    """Base class for all fieldagg errors."""


class ValidationError(AggregationError, ValueError):
    """Raised when the options object fails schema checks.

    Attributes:
        errors: Structured error details from the schema model, if any.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class ConflictError(AggregationError, ValueError):
    """Raised when a field appears in both includes and excludes."""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(
            f"Conflicting fields in includes and excludes: {', '.join(self.fields)}"
        )


class UnsupportedAggregationError(AggregationError, ValueError):
    """Raised when a requested metric kind is not a known aggregation type."""

    def __init__(self, aggregation_type: Any):
        self.aggregation_type = aggregation_type
        super().__init__(f"Unsupported aggregation type: {aggregation_type}")

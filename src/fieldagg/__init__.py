"""Summary statistics over flat records.

Structure:
- models/       - AggregationOptions schema and shared types
- core/         - errors, options validation, field selection
- metrics/      - per-field reductions (sum, median, changePercentage, ...)
- aggregation/  - report assembly
"""

from fieldagg.aggregation.summary import aggregate_fields_data
from fieldagg.core.errors import (
    AggregationError,
    ConflictError,
    UnsupportedAggregationError,
    ValidationError,
)
from fieldagg.core.selection import should_include_field
from fieldagg.core.validation import validate_options
from fieldagg.metrics.calculator import (
    FieldStatistics,
    calculate_aggregate,
    compute_field_statistics,
)
from fieldagg.models.types import (
    DEFAULT_AGGREGATION_TYPES,
    METRIC_KINDS,
    AggregationOptions,
    MetricKind,
)

aggregate = aggregate_fields_data

__all__ = [
    # Entry points
    "aggregate",
    "aggregate_fields_data",
    "calculate_aggregate",
    "compute_field_statistics",
    "should_include_field",
    "validate_options",
    # Types
    "AggregationOptions",
    "DEFAULT_AGGREGATION_TYPES",
    "FieldStatistics",
    "METRIC_KINDS",
    "MetricKind",
    # Errors
    "AggregationError",
    "ConflictError",
    "UnsupportedAggregationError",
    "ValidationError",
]

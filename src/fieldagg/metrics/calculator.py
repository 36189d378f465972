"""Aggregate calculator - pure reductions over one field of a dataset.

Metrics:
- sum, product, count, min, max: over numeric values only
- average: sum / count
- first, last: first and last numeric value in dataset order
- median: middle of all collected values (see _median)
- changePercentage: average of the values after the first, relative to the first

Degenerate inputs (no numeric values, a single value) follow IEEE float
semantics: NaN and +/-inf are returned, never raised.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Iterable

from fieldagg.core.errors import UnsupportedAggregationError
from fieldagg.models.types import Record

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    """bool is an int subclass but never counts as a number here."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising ZeroDivisionError."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or numerator != numerator:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _median(values: list[Any]) -> float | None:
    """Median of the collected values.

    Numbers sort ascending; non-numeric entries (missing fields included)
    keep their encounter order after every number. An odd-length median
    landing on a non-numeric entry is None, like first/last without a
    number. Averaging a middle pair that holds a non-numeric entry gives
    NaN, as does the median of an empty list.
    """
    ordered = sorted(v for v in values if _is_number(v))
    ordered.extend(v for v in values if not _is_number(v))
    if not ordered:
        return math.nan

    mid = len(ordered) // 2
    if len(ordered) % 2 != 0:
        middle = ordered[mid]
        return middle if _is_number(middle) else None

    low, high = ordered[mid - 1], ordered[mid]
    if not (_is_number(low) and _is_number(high)):
        return math.nan
    return (low + high) / 2


@dataclass
class FieldStatistics:
    """Accumulators for one field after a single scan of the dataset.

    Attributes:
        field_name: Field the statistics were collected for.
        sum: Sum of numeric values (0 when there are none).
        product: Product of numeric values (1 when there are none).
        count: Number of numeric values.
        min: Smallest numeric value (inf when there are none).
        max: Largest numeric value (-inf when there are none).
        first: First numeric value in dataset order, or None.
        last: Last numeric value in dataset order, or None.
        values: Every value seen for the field, numeric or not, one per record.
    """

    field_name: str
    sum: float = 0
    product: float = 1
    count: int = 0
    min: float = math.inf
    max: float = -math.inf
    first: float | None = None
    last: float | None = None
    values: list[Any] = field(default_factory=list)

    def add(self, value: Any) -> None:
        """Fold one record's value into the accumulators."""
        if _is_number(value):
            if self.count == 0:
                self.first = value
            self.sum += value
            self.product *= value
            self.count += 1
            # NaN sticks once seen, matching IEEE min/max
            if value != value or value < self.min:
                self.min = value
            if value != value or value > self.max:
                self.max = value
            self.last = value

        self.values.append(value)

    @property
    def average(self) -> float:
        return _divide(self.sum, self.count)

    @property
    def median(self) -> float | None:
        return _median(self.values)

    @property
    def change_percentage(self) -> float:
        """Percent change of the mean of the later values against the first.

        avg_excl_first = (sum - first) / (count - 1)
        change_percentage = (avg_excl_first - first) / first * 100
        """
        if self.first is None:
            return math.nan
        if self.first == 0:
            return 0
        average_without_first = _divide(self.sum - self.first, self.count - 1)
        change = average_without_first - self.first
        return change / self.first * 100

    def metric(self, aggregation_type: Any) -> Any:
        """Return one metric by kind.

        Raises:
            UnsupportedAggregationError: If the kind is not a known metric.
        """
        if aggregation_type == "sum":
            return self.sum
        if aggregation_type == "average":
            return self.average
        if aggregation_type == "median":
            return self.median
        if aggregation_type == "product":
            return self.product
        if aggregation_type == "count":
            return self.count
        if aggregation_type == "min":
            return self.min
        if aggregation_type == "max":
            return self.max
        if aggregation_type == "changePercentage":
            return self.change_percentage
        if aggregation_type == "first":
            return self.first
        if aggregation_type == "last":
            return self.last
        raise UnsupportedAggregationError(aggregation_type)


def compute_field_statistics(
    dataset: Iterable[Record], field_name: str
) -> FieldStatistics:
    """Scan the dataset once and accumulate statistics for a field.

    Args:
        dataset: Records in order. Records without the field contribute
            None to the collected values.
        field_name: Field to accumulate.

    Returns:
        FieldStatistics for the field.
    """
    stats = FieldStatistics(field_name=field_name)
    for record in dataset:
        stats.add(record.get(field_name))
    return stats


def calculate_aggregate(
    dataset: Iterable[Record], field_name: str, aggregation_type: str
) -> Any:
    """Calculate one aggregate of a field over the dataset.

    Rescans the dataset on every call.

    Args:
        dataset: Records in order.
        field_name: Field to aggregate.
        aggregation_type: One of METRIC_KINDS.

    Returns:
        The metric value. first/last are None when the field has no
        numeric value.

    Raises:
        UnsupportedAggregationError: If aggregation_type is unknown.

    Example:
        >>> data = [{"volume": 10}, {"volume": 20}, {"volume": 30}]
        >>> calculate_aggregate(data, "volume", "sum")
        60
    """
    stats = compute_field_statistics(dataset, field_name)
    logger.debug(
        f"Scanned {len(stats.values)} records for '{field_name}' "
        f"({stats.count} numeric)"
    )
    return stats.metric(aggregation_type)

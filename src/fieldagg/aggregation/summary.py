"""Field aggregation report assembly.

Validates options, selects fields and builds the nested
{output_field: {metric_kind: value}} report.
Domain logic is pure - no IO, no state kept between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from fieldagg.core.errors import ConflictError
from fieldagg.core.selection import (
    collect_field_names,
    find_conflicting_fields,
    should_include_field,
)
from fieldagg.core.validation import validate_options
from fieldagg.metrics.calculator import calculate_aggregate
from fieldagg.models.types import AggregationOptions, AggregationResult, Record

logger = logging.getLogger(__name__)


def aggregate_fields_data(
    dataset: Iterable[Record],
    options: AggregationOptions | Mapping[str, Any] | None = None,
) -> AggregationResult:
    """Aggregate record fields according to the options.

    Every field seen on any record is considered once, in first-seen
    order. Fields rejected by includes/excludes are skipped; the rest get
    their requested metrics (``["sum"]`` by default) under their alias.
    When two fields share an output name, the one discovered later wins
    for any metric both request.

    Args:
        dataset: Ordered records (mappings of field name to value).
        options: includes, excludes, aggregationTypes and alias, as a
            mapping or AggregationOptions. None means no options.

    Returns:
        Mapping of output field name to {metric kind: value}.
        An empty dataset yields {}.

    Raises:
        ValidationError: If options fail schema checks.
        ConflictError: If a field is both included and excluded.
        UnsupportedAggregationError: If a requested metric kind is unknown.

    Example:
        >>> aggregate_fields_data(
        ...     [{"volume": 10, "price": 5}, {"volume": 20, "price": 6}],
        ...     {"aggregationTypes": {"price": ["average"]}},
        ... )
        {'volume': {'sum': 30}, 'price': {'average': 5.5}}
    """
    opts = validate_options(options)

    conflicting = find_conflicting_fields(opts)
    if conflicting:
        raise ConflictError(conflicting)

    records = list(dataset)
    result: AggregationResult = {}

    for field_name in collect_field_names(records):
        if not should_include_field(field_name, opts):
            logger.debug(f"Skipping field '{field_name}'")
            continue

        output_name = opts.output_name_for(field_name)
        for aggregation_type in opts.metric_kinds_for(field_name):
            value = calculate_aggregate(records, field_name, aggregation_type)
            result.setdefault(output_name, {})[aggregation_type] = value

    logger.debug(f"Aggregated {len(result)} fields from {len(records)} records")
    return result

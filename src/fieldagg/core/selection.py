"""Field selection from includes/excludes lists.

- includes (non-empty): whitelist, excludes is ignored
- excludes (non-empty): blacklist
- neither: every observed field participates
"""

from __future__ import annotations

from typing import Iterable

from fieldagg.models.types import AggregationOptions, Record


def should_include_field(field_name: str, options: AggregationOptions) -> bool:
    """Return True if the field takes part in aggregation.

    When ``options.includes`` is non-empty only names in that list are
    included. Otherwise names in ``options.excludes`` are skipped.
    """
    if options.includes:
        return field_name in options.includes
    if options.excludes:
        return field_name not in options.excludes
    return True


def find_conflicting_fields(options: AggregationOptions) -> list[str]:
    """Return names listed in both includes and excludes, in includes order."""
    if options.includes is None or options.excludes is None:
        return []
    excluded = set(options.excludes)
    return [name for name in options.includes if name in excluded]


def collect_field_names(records: Iterable[Record]) -> list[str]:
    """Return the union of record keys in first-seen order."""
    seen: dict[str, None] = {}
    for record in records:
        for field_name in record:
            seen.setdefault(field_name, None)
    return list(seen)

"""Pydantic models and shared types for fieldagg.

Option keys mirror the JSON shape callers send (camelCase
``aggregationTypes``); the snake_case attribute name is accepted too.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, get_args

from pydantic import BaseModel, ConfigDict, Field

MetricKind = Literal[
    "sum",
    "average",
    "median",
    "product",
    "count",
    "min",
    "max",
    "changePercentage",
    "first",
    "last",
]

METRIC_KINDS: tuple[str, ...] = get_args(MetricKind)

# Metrics computed for a field with no entry in aggregationTypes
DEFAULT_AGGREGATION_TYPES: tuple[str, ...] = ("sum",)

Record = Mapping[str, Any]

# output field name -> metric kind -> value
AggregationResult = dict[str, dict[str, Any]]


class AggregationOptions(BaseModel):
    """Declarative options for a single aggregation call.

    Strict schema: unknown keys and wrongly typed values are rejected.
    aggregationTypes values must be lists of strings, but the names are
    not checked here; unknown metric kinds fail when they are computed.
    The snake_case ``aggregation_types`` key is accepted as an alternative
    spelling of ``aggregationTypes``.
    """

    model_config = ConfigDict(strict=True, extra="forbid", populate_by_name=True)

    includes: list[str] | None = None
    excludes: list[str] | None = None
    aggregation_types: dict[str, list[str] | None] | None = Field(
        default=None, alias="aggregationTypes"
    )
    alias: dict[str, str] | None = None

    def metric_kinds_for(self, field_name: str) -> list[str]:
        """Return the metric kinds requested for a field, or the default."""
        if self.aggregation_types is not None:
            kinds = self.aggregation_types.get(field_name)
            if kinds is not None:
                return list(kinds)
        return list(DEFAULT_AGGREGATION_TYPES)

    def output_name_for(self, field_name: str) -> str:
        """Return the report key for a field (alias when set, else the name)."""
        if self.alias:
            aliased = self.alias.get(field_name)
            if aliased:
                return aliased
        return field_name

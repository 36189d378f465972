"""Options validation.

Runs before any record is read so a bad options object never
produces partial work.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from fieldagg.core.errors import ValidationError
from fieldagg.models.types import AggregationOptions


def validate_options(
    options: AggregationOptions | Mapping[str, Any] | None,
) -> AggregationOptions:
    """Validate an options object and return it as AggregationOptions.

    Args:
        options: Options as a mapping (JSON-style keys), an already built
            AggregationOptions, or None for no options.

    Returns:
        Validated AggregationOptions.

    Raises:
        ValidationError: If includes/excludes are not lists of strings,
            aggregationTypes/alias are not plain mappings, or an unknown
            key is present.
    """
    if options is None:
        return AggregationOptions()
    if isinstance(options, AggregationOptions):
        return options
    # strict mode only accepts dict at the top level
    if isinstance(options, Mapping):
        options = dict(options)

    try:
        return AggregationOptions.model_validate(options)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Validation error: {e.json(include_url=False)}",
            errors=e.errors(include_url=False),
        ) from e

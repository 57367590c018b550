"""
Variant Resolver — Selection Criteria

The four accepted ways of asking for a variant, as explicit types:

    ById                 6908023078973 or "6908023078973"
    ByIdObject           {"id": 6908198649917}
    ByNamedOptions       [{"name": "Size", "value": "36"}, {"name": "Color", "value": "Black"}]
    ByPositionalOptions  ["38", "Black"]

Callers that already know which shape they hold construct the criterion
directly. criterion_from_value() sniffs a raw value at the boundary, in the
priority order above, and returns None for anything it does not recognize.
A list is named when its first element is a mapping or other object, and
positional when it is a scalar, None or a nested list.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Number
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class NamedOption(BaseModel):
    """A single {name, value} selection."""
    model_config = ConfigDict(frozen=True)

    name: str
    value: Any = None


class ById(BaseModel):
    """Scalar variant identifier. Numeric and numeric-string ids compare equal."""
    model_config = ConfigDict(frozen=True)

    id: int | float | str


class ByIdObject(BaseModel):
    """Object carrying a numeric `id` field, e.g. a variant echoed back by the UI."""
    model_config = ConfigDict(frozen=True)

    id: int | float


class ByNamedOptions(BaseModel):
    """
    Ordered {name, value} selections.

    Entries are NamedOption instances, mappings with `name` and `value`
    keys, or objects with `name` and `value` attributes. They are checked
    when the option array is built, not here, so that malformed entries
    surface as InvalidOptionName.
    """
    model_config = ConfigDict(frozen=True)

    selections: list[Any] = Field(default_factory=list)


class ByPositionalOptions(BaseModel):
    """Bare option values aligned to Product.options. None marks an unset position."""
    model_config = ConfigDict(frozen=True)

    values: list[Any] = Field(default_factory=list)


SelectionCriterion = Union[ById, ByIdObject, ByNamedOptions, ByPositionalOptions]

CRITERION_TYPES = (ById, ByIdObject, ByNamedOptions, ByPositionalOptions)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numeric_id_of(value: Any) -> int | float | None:
    if isinstance(value, Mapping):
        candidate = value.get("id")
    else:
        candidate = getattr(value, "id", None)
    return candidate if _is_number(candidate) else None


def _is_structured(value: Any) -> bool:
    """Mappings and objects count; scalars and nested sequences do not."""
    return value is not None and not isinstance(value, (str, bytes, Number, list, tuple))


def criterion_from_value(value: Any) -> SelectionCriterion | None:
    """
    Classify a raw selection value into one of the four criterion shapes.

    Args:
        value: Whatever the caller handed over (scalar, mapping, object, list).

    Returns:
        The matching criterion, or None when the shape is not recognized.
    """
    if isinstance(value, CRITERION_TYPES):
        return value

    if isinstance(value, str) or _is_number(value):
        return ById(id=value)

    numeric_id = _numeric_id_of(value)
    if numeric_id is not None:
        return ByIdObject(id=numeric_id)

    if isinstance(value, (list, tuple)):
        if value and _is_structured(value[0]):
            return ByNamedOptions(selections=list(value))
        return ByPositionalOptions(values=list(value))

    return None

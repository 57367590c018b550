"""
Variant Resolver — Option Array Builder

Converts named selections into the canonical option array, the list of
values positionally aligned to Product.options:

    Input:  [{"name": "Size", "value": "36"}, {"name": "Color", "value": "Black"}]
    Output: ["36", "Black"]

Names match product options case-insensitively. A name given twice keeps the
last value. Positions that no selection names are left as None holes, and
the array stops at the highest position assigned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from variant_resolver.engine.validation import validate_product
from variant_resolver.errors import InvalidInput, InvalidOptionName, UnknownOptionName
from variant_resolver.models.criteria import NamedOption
from variant_resolver.models.product import Product

logger = structlog.get_logger(__name__)


def _name_and_value(entry: Any) -> tuple[Any, Any]:
    if isinstance(entry, NamedOption):
        return entry.name, entry.value
    if isinstance(entry, Mapping):
        return entry.get("name"), entry.get("value")
    return getattr(entry, "name", None), getattr(entry, "value", None)


def option_array_for(product: Product, named_selections: Any) -> list[Any]:
    """Build the option array against an already validated Product."""
    if not isinstance(named_selections, (list, tuple)):
        logger.warning(
            "named_selections_invalid",
            selections_type=type(named_selections).__name__,
        )
        raise InvalidInput(
            "Named selections must be a list of {name, value} entries, "
            f"got {type(named_selections).__name__}"
        )

    folded_names = [option.name.casefold() for option in product.options]
    option_array: list[Any] = []

    for index, entry in enumerate(named_selections):
        name, value = _name_and_value(entry)
        if not isinstance(name, str):
            logger.warning("option_name_invalid", index=index, name_type=type(name).__name__)
            raise InvalidOptionName(index, name)

        try:
            position = folded_names.index(name.casefold())
        except ValueError:
            logger.warning("option_name_unknown", name=name, options=product.option_names)
            raise UnknownOptionName(name) from None

        if position >= len(option_array):
            option_array.extend([None] * (position + 1 - len(option_array)))
        option_array[position] = value

    return option_array


def build_option_array(
    product: Product | Mapping[str, Any],
    named_selections: Any = None,
) -> list[Any]:
    """
    Create the option array from a list of {name, value} selections.

    Args:
        product: Product model or product payload.
        named_selections: List of NamedOption, {"name": ..., "value": ...}
                          mappings or objects with name/value attributes,
                          in any order.

    Returns:
        Option values aligned to product.options. Empty for an empty list.

    Raises:
        InvalidProduct: If the product record is malformed.
        InvalidInput: If named_selections is missing or not a list/tuple.
        InvalidOptionName: If an entry has no string `name` (this includes
                           bare strings and numbers). Carries the
                           0-based index of the entry.
        UnknownOptionName: If an entry's name matches no product option.
    """
    return option_array_for(validate_product(product), named_selections)

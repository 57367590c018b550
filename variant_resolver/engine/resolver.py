"""
Variant Resolver — Variant Lookup

Maps a selection criterion to the single matching variant of a product.

Lookup paths:
- ById / ByIdObject: first variant whose id equals the target, with numeric
  and numeric-string ids treated as equal (see normalize_variant_id).
- ByNamedOptions: build the option array, then positional lookup.
- ByPositionalOptions: first variant whose option values equal the supplied
  values at every supplied position (exact, type-sensitive). Unset positions
  (None) never match. An empty array only matches a variant of a product
  that defines no options.

Unrecognized criterion shapes resolve to NO_MATCH rather than raising.
Structural problems with the product or named selections do raise.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from variant_resolver.config import settings
from variant_resolver.engine.option_array import option_array_for
from variant_resolver.engine.validation import validate_product
from variant_resolver.models.criteria import (
    ById,
    ByIdObject,
    ByNamedOptions,
    SelectionCriterion,
    criterion_from_value,
)
from variant_resolver.models.product import Product, Variant
from variant_resolver.utils.variant_id import normalize_variant_id

logger = structlog.get_logger(__name__)


class NoMatch:
    """Negative resolution result. Falsy; there is only one instance, NO_MATCH."""

    _instance: NoMatch | None = None

    def __new__(cls) -> NoMatch:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch()


def _same_value(expected: Any, actual: Any) -> bool:
    # str subclasses (StrEnum members, Markup) count as str; 36 never equals "36"
    return isinstance(actual, type(expected)) and expected == actual


def _options_match(variant_options: Sequence[Any], values: Sequence[Any], strict: bool) -> bool:
    if not values:
        return not variant_options
    if strict and len(values) != len(variant_options):
        return False
    if len(values) > len(variant_options):
        return False
    return all(
        value is not None and _same_value(variant_options[index], value)
        for index, value in enumerate(values)
    )


def find_variant_by_id(product: Product, variant_id: Any) -> Variant | None:
    """
    Find the first variant whose id matches, comparing normalized ids.

    Args:
        product: Validated Product.
        variant_id: Number or string id; 42, 42.0 and "42" are equivalent.

    Returns:
        The first matching Variant, or None.
    """
    target = normalize_variant_id(variant_id)
    for variant in product.variants:
        if normalize_variant_id(variant.id) == target:
            return variant
    return None


def find_variant_by_options(
    product: Product,
    values: Sequence[Any],
    strict: bool = False,
) -> Variant | None:
    """
    Find the first variant whose option values match `values` position by position.

    Args:
        product: Validated Product.
        values: Option array aligned to product.options. None marks an unset
                position, which never matches.
        strict: Require len(values) to equal the variant's option count.

    Returns:
        The first matching Variant, or None.
    """
    for variant in product.variants:
        if _options_match(variant.options, values, strict):
            return variant
    return None


def resolve(
    product: Product | Mapping[str, Any],
    criterion: SelectionCriterion | Any,
    *,
    strict: bool | None = None,
) -> Variant | NoMatch:
    """
    Search the product for the variant described by `criterion`.

    Args:
        product: Product model or product payload.
        criterion: A SelectionCriterion, or a raw value in one of the accepted
                   shapes: id (str/number), {"id": <number>}, list of
                   {name, value} entries, or list of option values.
        strict: Require positional arrays to cover every option. Defaults to
                settings.STRICT_OPTION_LENGTH.

    Returns:
        The matching Variant, or NO_MATCH.

    Raises:
        InvalidProduct: If the product record is malformed.
        InvalidOptionName / UnknownOptionName: If named selections are bad.
    """
    parsed = validate_product(product)
    strict = settings.STRICT_OPTION_LENGTH if strict is None else strict

    selection = criterion_from_value(criterion)
    if selection is None:
        logger.debug("criterion_unrecognized", criterion_type=type(criterion).__name__)
        return NO_MATCH

    if isinstance(selection, (ById, ByIdObject)):
        variant = find_variant_by_id(parsed, selection.id)
    elif isinstance(selection, ByNamedOptions):
        values = option_array_for(parsed, selection.selections)
        variant = find_variant_by_options(parsed, values, strict)
    else:
        variant = find_variant_by_options(parsed, selection.values, strict)

    if variant is None:
        logger.debug(
            "variant_not_found",
            criterion=type(selection).__name__,
            variant_count=len(parsed.variants),
        )
        return NO_MATCH

    logger.debug("variant_resolved", criterion=type(selection).__name__, variant_id=variant.id)
    return variant

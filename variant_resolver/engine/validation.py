"""
Variant Resolver — Product Validation

Single entry point that turns a product payload (decoded JSON) into a
Product model. Every public operation runs its product argument through
here first, so structural problems surface as InvalidProduct before any
lookup happens.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from variant_resolver.errors import InvalidProduct
from variant_resolver.models.product import Product
from variant_resolver.utils.variant_id import normalize_variant_id

logger = structlog.get_logger(__name__)


def validate_product(product: Product | Mapping[str, Any]) -> Product:
    """
    Validate a product record.

    Args:
        product: A Product instance, or a mapping with `options` and `variants`.

    Returns:
        The Product model (the same instance when one was passed in).

    Raises:
        InvalidProduct: If the record is not a mapping, is missing `options`
                        or `variants`, or any variant is malformed or has the
                        wrong number of option values.
    """
    if isinstance(product, Product):
        return product

    if not isinstance(product, Mapping):
        logger.warning("product_invalid", reason="not_a_mapping", product_type=type(product).__name__)
        raise InvalidProduct(
            f"Product must be a mapping with 'options' and 'variants', got {type(product).__name__}"
        )

    try:
        parsed = Product.model_validate(product)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        logger.warning("product_invalid", reason="validation_failed", error_count=len(errors))
        raise InvalidProduct(f"Malformed product record: {exc}", errors=errors) from exc

    duplicates = [
        variant_id
        for variant_id, count in Counter(
            normalize_variant_id(variant.id) for variant in parsed.variants
        ).items()
        if count > 1
    ]
    if duplicates:
        # Lookups still succeed: the first variant with the id wins.
        logger.warning("duplicate_variant_id", variant_ids=duplicates)

    return parsed

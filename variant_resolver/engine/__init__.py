from variant_resolver.engine.option_array import build_option_array
from variant_resolver.engine.resolver import (
    NO_MATCH,
    NoMatch,
    find_variant_by_id,
    find_variant_by_options,
    resolve,
)
from variant_resolver.engine.validation import validate_product
from variant_resolver.utils.variant_id import normalize_variant_id

__all__ = [
    "NO_MATCH",
    "NoMatch",
    "build_option_array",
    "find_variant_by_id",
    "find_variant_by_options",
    "normalize_variant_id",
    "resolve",
    "validate_product",
]

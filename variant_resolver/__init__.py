"""Variant Resolver — match a product selection to its purchasable variant."""

from variant_resolver.engine import (
    NO_MATCH,
    NoMatch,
    build_option_array,
    normalize_variant_id,
    resolve,
    validate_product,
)
from variant_resolver.errors import (
    InvalidInput,
    InvalidOptionName,
    InvalidProduct,
    UnknownOptionName,
    VariantResolverError,
)
from variant_resolver.models import (
    ById,
    ByIdObject,
    ByNamedOptions,
    ByPositionalOptions,
    NamedOption,
    OptionDefinition,
    Product,
    SelectionCriterion,
    Variant,
    criterion_from_value,
)

__all__ = [
    "NO_MATCH",
    "ById",
    "ByIdObject",
    "ByNamedOptions",
    "ByPositionalOptions",
    "InvalidInput",
    "InvalidOptionName",
    "InvalidProduct",
    "NamedOption",
    "NoMatch",
    "OptionDefinition",
    "Product",
    "SelectionCriterion",
    "UnknownOptionName",
    "Variant",
    "VariantResolverError",
    "build_option_array",
    "criterion_from_value",
    "normalize_variant_id",
    "resolve",
    "validate_product",
]

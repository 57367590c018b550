from variant_resolver.models.criteria import (
    ById,
    ByIdObject,
    ByNamedOptions,
    ByPositionalOptions,
    NamedOption,
    SelectionCriterion,
    criterion_from_value,
)
from variant_resolver.models.product import OptionDefinition, Product, Variant

__all__ = [
    "ById",
    "ByIdObject",
    "ByNamedOptions",
    "ByPositionalOptions",
    "NamedOption",
    "OptionDefinition",
    "Product",
    "SelectionCriterion",
    "Variant",
    "criterion_from_value",
]

"""
Variant Resolver — Error Taxonomy

All structural and input errors raised by the resolver derive from
VariantResolverError, itself a ValueError. "No matching variant" is not an
error and never raised: see NO_MATCH in variant_resolver.engine.resolver.
"""

from __future__ import annotations

from typing import Any


class VariantResolverError(ValueError):
    """Base class for resolver errors."""


class InvalidProduct(VariantResolverError):
    """Product record is missing a required substructure or is malformed."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class InvalidInput(VariantResolverError):
    """A sequence of named selections was required but not supplied."""


class InvalidOptionName(VariantResolverError):
    """A named selection entry has no string `name`."""

    def __init__(self, index: int, name: Any) -> None:
        super().__init__(
            f"Invalid value type passed for name of option at index {index}: "
            f"{name!r}. Value should be a string."
        )
        self.index = index
        self.name = name


class UnknownOptionName(VariantResolverError):
    """A named selection entry names an option the product does not define."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid option name, {name}")
        self.name = name

"""
Variant Resolver — Product Record Models

Pydantic models for the storefront product record: a base item with an
ordered set of named options and the concrete variants built from them.

    {
        "options": [{"name": "Size"}, {"name": "Color"}],
        "variants": [
            {"id": 6908023078973, "options": ["36", "Black"], ...},
            ...
        ]
    }

Options may also arrive as bare strings (["Size", "Color"]); both shapes
normalize to OptionDefinition. Unknown keys are kept on every model.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class OptionDefinition(BaseModel):
    """A named axis of variation. Position is implied by list index."""
    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., description="Option name (e.g., 'Size'), matched case-insensitively")
    position: int | None = Field(default=None, description="1-based position when supplied")
    values: list[str] = Field(default_factory=list, description="Values offered for this option")


class Variant(BaseModel):
    """One purchasable combination of option values."""
    model_config = ConfigDict(frozen=True, extra="allow")

    id: int | str = Field(..., description="Variant identifier, unique within its product")
    options: list[str] = Field(..., description="Option values aligned to Product.options")


class Product(BaseModel):
    """
    Catalog product with its option definitions and variants.

    Every variant carries exactly one value per product option, in the same
    positional order as `options`.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    options: list[OptionDefinition]
    variants: list[Variant]

    @field_validator("options", mode="before")
    @classmethod
    def wrap_bare_option_names(cls, v: Any) -> Any:
        """Accept ["Size", "Color"] as well as [{"name": "Size"}, ...]."""
        if isinstance(v, (list, tuple)):
            return [{"name": item} if isinstance(item, str) else item for item in v]
        return v

    @model_validator(mode="after")
    def check_variant_option_counts(self) -> Product:
        expected = len(self.options)
        for index, variant in enumerate(self.variants):
            if len(variant.options) != expected:
                raise ValueError(
                    f"Variant {variant.id!r} at index {index} has "
                    f"{len(variant.options)} option values, product defines {expected} options"
                )
        return self

    @property
    def option_names(self) -> list[str]:
        return [option.name for option in self.options]

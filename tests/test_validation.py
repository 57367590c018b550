"""Tests for product record validation and the product models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from variant_resolver.engine.validation import validate_product
from variant_resolver.errors import InvalidProduct
from variant_resolver.models.product import Product


class TestValidateProduct:
    """Payloads become Product models; models pass straight through."""

    def test_product_instance_returned_unchanged(self, product: Product) -> None:
        """A Product model is returned as is."""
        assert validate_product(product) is product

    def test_payload_is_parsed(self, product_json: dict[str, Any]) -> None:
        """A payload parses into options and variants."""
        parsed = validate_product(product_json)

        assert parsed.option_names == ["Size", "Color"]
        assert len(parsed.variants) == 4
        assert parsed.variants[2].id == 6908198649917

    def test_extra_keys_are_kept(self, product_json: dict[str, Any]) -> None:
        """Unknown payload keys survive parsing."""
        parsed = validate_product(product_json)

        assert parsed.handle == "sneakers"
        assert parsed.variants[0].sku == "SNK-36-BLK"
        assert parsed.options[0].values == ["36", "38"]

    def test_bare_option_names(self) -> None:
        """Options given as bare strings are wrapped."""
        parsed = validate_product(
            {"options": ["Size", "Color"], "variants": [{"id": 1, "options": ["36", "Black"]}]}
        )
        assert parsed.option_names == ["Size", "Color"]

    def test_string_ids_kept_as_strings(self) -> None:
        """String ids are not coerced to int."""
        parsed = validate_product({"options": ["Size"], "variants": [{"id": "123", "options": ["S"]}]})
        assert parsed.variants[0].id == "123"


class TestValidateProductErrors:
    """Structural problems raise InvalidProduct."""

    @pytest.mark.parametrize("payload", [None, [], "product", 42])
    def test_non_mapping_raises(self, payload: Any) -> None:
        """Non-mapping payloads raise InvalidProduct."""
        with pytest.raises(InvalidProduct):
            validate_product(payload)

    def test_empty_mapping_raises_with_errors(self) -> None:
        """The pydantic errors ride along and chain the cause."""
        with pytest.raises(InvalidProduct) as exc_info:
            validate_product({})

        assert exc_info.value.errors
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_missing_options_raises(self) -> None:
        """A record without options is rejected."""
        with pytest.raises(InvalidProduct):
            validate_product({"variants": [{"id": 1, "options": ["S"]}]})

    def test_variant_without_id_raises(self) -> None:
        """Every variant needs an id."""
        with pytest.raises(InvalidProduct):
            validate_product({"options": ["Size"], "variants": [{"options": ["S"]}]})

    def test_variant_without_options_raises(self) -> None:
        """Every variant needs option values."""
        with pytest.raises(InvalidProduct):
            validate_product({"options": ["Size"], "variants": [{"id": 1}]})

    def test_option_count_mismatch_raises(self) -> None:
        """Variants must carry one value per option."""
        payload = {
            "options": ["Size", "Color"],
            "variants": [{"id": 1, "options": ["S"]}],
        }
        with pytest.raises(InvalidProduct) as exc_info:
            validate_product(payload)

        assert "1 option values" in str(exc_info.value)

    def test_option_without_name_raises(self) -> None:
        """Option definitions need a name."""
        with pytest.raises(InvalidProduct):
            validate_product({"options": [{"position": 1}], "variants": []})


class TestDuplicateIds:
    """Duplicate ids are tolerated but logged."""

    def test_duplicate_ids_logged(self) -> None:
        """Ids equal after normalization produce one warning."""
        payload = {
            "options": ["Size"],
            "variants": [
                {"id": 5, "options": ["S"]},
                {"id": "5", "options": ["M"]},
            ],
        }
        with capture_logs() as logs:
            parsed = validate_product(payload)

        assert len(parsed.variants) == 2
        warnings = [entry for entry in logs if entry["event"] == "duplicate_variant_id"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["variant_ids"] == ["5"]

    def test_unique_ids_not_logged(self, product_json: dict[str, Any]) -> None:
        """The fixture has no duplicates to report."""
        with capture_logs() as logs:
            validate_product(product_json)

        assert not any(entry["event"] == "duplicate_variant_id" for entry in logs)


class TestProductImmutability:
    """Models are frozen for the lifetime of a resolution."""

    def test_product_is_frozen(self, product: Product) -> None:
        """Product fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            product.variants = []  # type: ignore[misc]

    def test_variant_is_frozen(self, product: Product) -> None:
        """Variant fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            product.variants[0].id = 1  # type: ignore[misc]

"""
Variant Resolver — Shared pytest Fixtures

Provides product records for all test modules:
- Storefront product JSON loaded from fixtures/product.json
- A minimal two-variant product (Size/Color)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from variant_resolver.models.product import Product


# ---------------------------------------------------------------------------
# Fixture Loaders
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def product_json() -> dict[str, Any]:
    """Load the storefront product payload from fixtures/product.json."""
    fixture_path = Path(__file__).parent / "fixtures" / "product.json"
    with open(fixture_path) as f:
        return json.load(f)


@pytest.fixture(scope="session")
def product(product_json: dict[str, Any]) -> Product:
    """Parsed Product model for fixtures/product.json."""
    return Product.model_validate(product_json)


# ---------------------------------------------------------------------------
# Inline Products
# ---------------------------------------------------------------------------


@pytest.fixture
def simple_product() -> dict[str, Any]:
    """Options Size/Color with two variants that differ only in size."""
    return {
        "options": [{"name": "Size"}, {"name": "Color"}],
        "variants": [
            {"id": 1, "options": ["36", "Black"]},
            {"id": 2, "options": ["38", "Black"]},
        ],
    }

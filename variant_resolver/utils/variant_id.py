"""
Variant Resolver — Variant ID Normalization

Variant ids reach the resolver as numbers from product JSON and as strings
from form fields and URLs (?variant=6908023078973). Both sides of every id
comparison go through normalize_variant_id() so the two forms compare equal.
"""

from __future__ import annotations

import math
import re
from typing import Any

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def _normalize_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    return str(int(value)) if value.is_integer() else repr(value)


def normalize_variant_id(value: Any) -> str:
    """
    Canonical string form of a variant id.

    Integers and integral floats render as plain decimal digits. Strings are
    stripped; a string holding a finite number is rendered the same way as
    that number. So 42, 42.0, "42", " 042 ", "42.0" and "4.2e1" all normalize
    to "42", and "7.50" matches 7.5. Integer strings are read with int() so
    long ids keep every digit.
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return _normalize_number(value)

    text = str(value).strip()
    if _INTEGER_LITERAL.fullmatch(text):
        return str(int(text))
    try:
        number = float(text)
    except ValueError:
        return text
    if not math.isfinite(number):
        return text
    return _normalize_number(number)

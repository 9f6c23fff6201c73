"""Normalization helpers.

The remote status document is untyped JSON; every value is stored as text
so feedbacks can compare against the ``"1"`` sentinel without coercion.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

_IDENTIFIER_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")

# Floats at or above this magnitude are written in exponent notation.
_EXPONENT_THRESHOLD = 1e21


def stringify_value(value: Any) -> str:
    """Render a decoded JSON value the way the server wrote it.

    Strings pass through untouched.  Integral floats lose their fraction
    (``1.0`` -> ``"1"``) because JSON does not distinguish them from
    integers.  From 1e21 upwards floats keep exponent notation (``"1e+21"``).
    Everything else is rendered as compact JSON text, so
    ``True`` becomes ``"true"`` and ``None`` becomes ``"null"``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def sanitize_identifier(value: str) -> str:
    """Replace characters that are not allowed in variable identifiers."""
    return _IDENTIFIER_UNSAFE.sub("_", value)


def variable_id(namespace: str, key: str) -> str:
    """Build the store key for status field *key* under *namespace*."""
    return f"{namespace}_{sanitize_identifier(key)}"

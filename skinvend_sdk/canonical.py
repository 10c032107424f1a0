"""Canonical string used as signing input.

The service signs the *values* of a flat parameter set, ordered by key and
concatenated without separators. Values that are not scalars (None, lists,
mappings, arbitrary objects) are left out entirely, so ``{"a": 1, "b": None}``
and ``{"a": 1}`` produce the same string.

Because nothing delimits the values, two different parameter sets can share a
canonical string (``{"a": "1", "b": "23"}`` and ``{"a": "12", "b": "3"}`` both
give ``"123"``). The remote service verifies signatures this way, so the
behaviour has to stay as it is.
"""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from .errors import ConfigurationError

ParamValue = Union[str, int, float, Decimal, bool, None]
RequestParams = Mapping[str, Any]


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bool, int, float, Decimal))


def format_number(value: Union[int, float, Decimal]) -> str:
    """Render a number the way it reads once it has travelled as JSON."""

    if isinstance(value, int):
        return str(value)
    number = float(value)
    if not math.isfinite(number):
        raise ConfigurationError.invalid_value_error(
            "number", str(value), "must be a finite number"
        )
    magnitude = abs(number)
    if number.is_integer() and magnitude < 1e21:
        return str(int(number))
    shortest = repr(number)
    if magnitude >= 1e21 or magnitude < 1e-6:
        mantissa, _, exponent = shortest.partition("e")
        return f"{mantissa}e{exponent[0]}{exponent[1:].lstrip('0')}"
    # Python switches to exponent notation below 1e-4, JSON readers only below 1e-6.
    return format(Decimal(shortest), "f")


def format_scalar(value: ParamValue) -> Optional[str]:
    """Text form of a scalar value, or ``None`` for values that are skipped."""

    if value is None:
        return None
    # bool before int: True is an int too.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return format_number(value)
    if isinstance(value, str):
        return value
    return None


def canonicalize(params: Optional[RequestParams]) -> str:
    if not params:
        return ""

    parts = []
    for key in sorted(params):
        value = params[key]
        if not is_scalar(value):
            continue
        text = format_scalar(value)
        if text is not None:
            parts.append(text)
    return "".join(parts)

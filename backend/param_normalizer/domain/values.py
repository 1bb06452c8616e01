"""
Helpers for raw param values.

Raw params arrive as decoded JSON (or form fields), so values live in the JSON
value space: str, int/float, bool, list, dict and None, plus MISSING for a
value that is absent altogether. Conversions follow the JavaScript rules
clients expect (String(), Number(), JSON.parse()).
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union


class _Missing:
    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

Number = Union[int, float]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INFINITY_RE = re.compile(r"[+-]?Infinity")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


@dataclass(frozen=True)
class JsonParse:
    """Outcome of parse_json: exactly one of value/error is meaningful."""

    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_empty_like(value: Any) -> bool:
    """
    Loose emptiness used by the coercion and required checks.

    Empty: MISSING, None, False, 0, 0.0, NaN, "", [] and {}.
    Non-zero numbers and True are not empty.
    """
    if value is MISSING or value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def is_number(value: Any) -> bool:
    """True for finite int/float values. bool never counts as a number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def to_js_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    # Number::toString: plain decimals down to 1e-6, then "1e-7" style exponents
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -6 <= power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def to_number(value: Any) -> Number:
    """Number() conversion. Unconvertible input yields NaN, never an exception."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return 0
    if isinstance(value, str):
        return _parse_number_text(value)
    return math.nan


def _parse_number_text(text: str) -> Number:
    s = text.strip()
    if not s:
        return 0

    if _INFINITY_RE.fullmatch(s):
        return -math.inf if s.startswith("-") else math.inf

    base = _RADIX_PREFIXES.get(s[:2].lower())
    if base is not None:
        if not s[2:].isascii() or not s[2:].isalnum():
            return math.nan
        try:
            return int(s[2:], base)
        except ValueError:
            return math.nan

    if _INTEGER_RE.fullmatch(s):
        return int(s)
    if _DECIMAL_RE.fullmatch(s):
        return float(s)
    return math.nan


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token '{name}' in JSON")


def parse_json(value: Any) -> JsonParse:
    """
    Strict JSON parse. Non-string input is rendered with to_js_string first,
    the way JSON.parse(String(x)) would see it.
    """
    text = value if isinstance(value, str) else to_js_string(value)
    try:
        return JsonParse(value=json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as exc:
        return JsonParse(error=str(exc))

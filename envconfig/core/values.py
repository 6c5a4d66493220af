"""Typed lookup results and value coercion helpers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import math
import re
from typing import Any, Generic, TypeVar

from .errors import MissingOrMistypedConfiguration

T = TypeVar("T")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DECIMAL_INT_RE = re.compile(r"^[+-]?\d+$")
_HEX_INT_RE = re.compile(r"^[+-]?0[xX][0-9a-fA-F]+$")
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a typed lookup: a value or the error explaining its absence."""

    value: T | None = None
    error: MissingOrMistypedConfiguration | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def or_default(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


def found(value: T) -> Lookup[T]:
    return Lookup(value=value)


def failed(error: MissingOrMistypedConfiguration) -> Lookup[Any]:
    return Lookup(error=error)


def in_int32_range(value: int) -> bool:
    return INT32_MIN <= value <= INT32_MAX


def parse_int_text(text: str, *, allow_hex: bool = False) -> int | None:
    stripped = str(text or "").strip()
    if _DECIMAL_INT_RE.match(stripped):
        parsed = int(stripped, 10)
    elif allow_hex and _HEX_INT_RE.match(stripped):
        parsed = int(stripped, 16)
        # Hex text is a 32-bit pattern: 0xFFFFFFFF reads as -1.
        if INT32_MAX < parsed <= 0xFFFFFFFF:
            parsed -= 2**32
    else:
        return None
    return parsed if in_int32_range(parsed) else None


def parse_decimal_text(text: str) -> Decimal | None:
    stripped = str(text or "").strip()
    if not _DECIMAL_RE.match(stripped):
        return None
    try:
        parsed = Decimal(stripped)
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def parse_percent_text(text: str, *, base: float = 1.0, pbase: float = 1.0) -> float | None:
    """Parse Android fraction text (``25%`` or ``25%p``) into a float."""
    stripped = str(text or "").strip()
    if stripped.endswith("%p"):
        multiplier, number = pbase, stripped[:-2]
    elif stripped.endswith("%"):
        multiplier, number = base, stripped[:-1]
    else:
        return None
    parsed = parse_decimal_text(number)
    if parsed is None:
        return None
    return float(parsed / Decimal(100)) * multiplier


def coerce_finite_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return float(value)
    if isinstance(value, float):
        return None if math.isnan(value) or math.isinf(value) else value
    if isinstance(value, Decimal):
        return float(value) if value.is_finite() else None
    return None


def format_decimal(value: Decimal) -> str:
    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"", "-0"}:
        return "0"
    return text


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "Lookup",
    "coerce_finite_float",
    "failed",
    "format_decimal",
    "found",
    "in_int32_range",
    "parse_decimal_text",
    "parse_int_text",
    "parse_percent_text",
]

"""Field inference from ``.env`` entries."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Iterable, Mapping

from ..core.fields import FieldSpec, Kind, normalize_kind, snake_name
from ..core.sources.env_file import read_env_file
from ..core.values import parse_decimal_text, parse_int_text


def infer_kind(value: str) -> Kind:
    text = str(value or "").strip()
    if not text:
        return "string"
    parsed_int = parse_int_text(text)
    if parsed_int is not None and str(parsed_int) == text:
        return "integer"
    number = text[:-1] if text.endswith("%") else text
    if number != text or "." in number:
        if parse_decimal_text(number) is not None and not number.startswith("+"):
            return "fraction"
    return "string"


def fraction_value(value: str) -> Decimal:
    """Decimal value of fraction text; ``50%`` and ``0.5`` are equal."""
    text = str(value or "").strip()
    if text.endswith("%"):
        parsed = parse_decimal_text(text[:-1])
        if parsed is None:
            raise ValueError(f"Invalid fraction value: {value!r}")
        return parsed / Decimal(100)
    parsed = parse_decimal_text(text)
    if parsed is None:
        raise ValueError(f"Invalid fraction value: {value!r}")
    return parsed


def field_specs_from_env(
    values: Mapping[str, str],
    overrides: Mapping[str, str] | None = None,
) -> list[FieldSpec]:
    resolved_overrides = {str(key): normalize_kind(kind) for key, kind in (overrides or {}).items()}
    unknown = sorted(set(resolved_overrides) - set(values))
    if unknown:
        raise ValueError(f"Type overrides reference unknown keys: {', '.join(unknown)}")

    specs: list[FieldSpec] = []
    seen: dict[str, str] = {}
    for key, value in values.items():
        attribute = snake_name(key)
        if attribute in seen:
            raise ValueError(f"Keys {seen[attribute]!r} and {key!r} map to the same name {attribute!r}")
        seen[attribute] = key
        kind = resolved_overrides.get(key) or infer_kind(value)
        _check_value(key, value, kind)
        specs.append(FieldSpec(env_key=key, kind=kind))
    return specs


def _check_value(key: str, value: str, kind: Kind) -> None:
    if kind == "integer" and parse_int_text(value) is None:
        raise ValueError(f"Value of {key} is not a 32-bit integer: {value!r}")
    if kind == "fraction":
        try:
            fraction_value(value)
        except ValueError:
            raise ValueError(f"Value of {key} is not a decimal number: {value!r}") from None


def seed_overrides(
    values: Mapping[str, str],
    declared: Iterable[FieldSpec],
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Kinds of already declared fields present in ``values``, then ``overrides``."""
    seeded = {spec.env_key: spec.kind for spec in declared if spec.env_key in values}
    seeded.update(overrides or {})
    return seeded


def load_env_schema(
    env_path: str | Path,
    overrides: Mapping[str, str] | None = None,
    declared: Iterable[FieldSpec] = (),
) -> tuple[dict[str, str], list[FieldSpec]]:
    values = read_env_file(env_path)
    return values, field_specs_from_env(values, seed_overrides(values, declared, overrides))


__all__ = ["field_specs_from_env", "fraction_value", "infer_kind", "load_env_schema", "seed_overrides"]

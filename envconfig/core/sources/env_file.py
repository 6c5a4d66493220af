"""Dotenv configuration source, the generator's own input format."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

from dotenv import dotenv_values

from ..errors import MissingOrMistypedConfiguration
from ..fields import FieldSpec, Kind
from ..values import Lookup, found, parse_decimal_text, parse_int_text
from .base import ConfigurationSource

logger = logging.getLogger("envconfig.sources.dotenv")


def read_env_file(path: str | Path) -> dict[str, str]:
    env_path = Path(path)
    if not env_path.is_file():
        raise MissingOrMistypedConfiguration.unavailable(str(env_path), detail="file not found")
    values = dotenv_values(env_path, interpolate=False)
    # Bare keys without "=" parse to None; treat them as empty strings.
    return {str(key): "" if value is None else str(value) for key, value in values.items()}


def parse_fraction_text(text: str) -> float | None:
    stripped = str(text or "").strip()
    divisor = 1
    if stripped.endswith("%"):
        stripped = stripped[:-1]
        divisor = 100
    parsed = parse_decimal_text(stripped)
    if parsed is None:
        return None
    return float(parsed / divisor)


class DotenvSource(ConfigurationSource):
    platform = "dotenv"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        values = read_env_file(self.path)
        logger.debug("Loaded %d key(s) from %s", len(values), self.path)
        self._values = MappingProxyType(values)

    @property
    def description(self) -> str:
        return f"dotenv {self.path}"

    def keys(self) -> list[str]:
        return list(self._values.keys())

    def key_for(self, field: FieldSpec) -> str:
        return field.env_key

    def _raw(self, key: str, kind: Kind) -> Any:
        return self._values[key]

    def _coerce(self, key: str, raw: Any, kind: Kind) -> Lookup[Any]:
        if kind == "string":
            return found(raw)
        if kind == "integer":
            parsed = parse_int_text(raw)
            return found(parsed) if parsed is not None else self._mistyped(key, kind, raw)
        fraction = parse_fraction_text(raw)
        return found(fraction) if fraction is not None else self._mistyped(key, kind, raw)


__all__ = ["DotenvSource", "parse_fraction_text", "read_env_file"]

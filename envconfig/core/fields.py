"""Field definitions shared by accessors, sources and the generator."""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass
from typing import Literal

from slugify import slugify

Kind = Literal["string", "integer", "fraction"]
KINDS: tuple[Kind, ...] = ("string", "integer", "fraction")

_IDENTIFIER_RE = re.compile(r"^[a-z_][a-z0-9_]*$")


def normalize_kind(value: str) -> Kind:
    normalized = str(value or "").strip().lower()
    aliases = {"str": "string", "int": "integer", "float": "fraction", "decimal": "fraction"}
    normalized = aliases.get(normalized, normalized)
    if normalized not in KINDS:
        raise ValueError(f"Unsupported value kind: {value!r}. Expected one of: {', '.join(KINDS)}")
    return normalized  # type: ignore[return-value]


def snake_name(env_key: str) -> str:
    name = slugify(str(env_key or ""), separator="_", lowercase=True)
    if not name or not _IDENTIFIER_RE.match(name) or keyword.iskeyword(name):
        raise ValueError(f"Cannot derive an identifier from key: {env_key!r}")
    return name


def camel_name(snake: str) -> str:
    head, *rest = snake.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest if part)


@dataclass(frozen=True)
class FieldSpec:
    env_key: str
    kind: Kind = "string"

    @property
    def attribute(self) -> str:
        return snake_name(self.env_key)

    @property
    def resource_name(self) -> str:
        return self.attribute

    @property
    def property_name(self) -> str:
        return camel_name(self.attribute)


__all__ = ["FieldSpec", "KINDS", "Kind", "camel_name", "normalize_kind", "snake_name"]

"""Platform resource artifacts: Android ``values`` XML and iOS property list."""

from __future__ import annotations

import plistlib
from typing import Any, Iterable, Mapping
from xml.sax.saxutils import escape, quoteattr

from ..core.fields import FieldSpec
from ..core.values import format_decimal, parse_int_text
from .schema import fraction_value

GENERATED_NOTICE = (
    "This file was generated by a tool. "
    "Changes to this file may cause incorrect behavior and will be lost if the file is regenerated."
)


def escape_string_resource(value: str) -> str:
    """Escape text so Android reads it back verbatim."""
    text = (
        str(value)
        .replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    if text.startswith(("@", "?")):
        text = "\\" + text
    if text != " ".join(text.split()):
        text = f'"{text}"'
    return escape(text)


def fraction_resource_text(value: str) -> str:
    return f"{format_decimal(fraction_value(value) * 100)}%"


def render_android_resources(specs: Iterable[FieldSpec], values: Mapping[str, str]) -> str:
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f"<!-- {GENERATED_NOTICE} -->",
        "<resources>",
    ]
    for spec in specs:
        raw = values[spec.env_key]
        name = quoteattr(spec.resource_name)
        if spec.kind == "integer":
            lines.append(f"    <integer name={name}>{parse_int_text(raw)}</integer>")
        elif spec.kind == "fraction":
            lines.append(f"    <fraction name={name}>{fraction_resource_text(raw)}</fraction>")
        else:
            lines.append(f"    <string name={name} translatable=\"false\">{escape_string_resource(raw)}</string>")
    lines.append("</resources>")
    return "\n".join(lines) + "\n"


def plist_value(spec: FieldSpec, raw: str) -> Any:
    if spec.kind == "integer":
        return parse_int_text(raw)
    if spec.kind == "fraction":
        return float(fraction_value(raw))
    return raw


def render_plist(specs: Iterable[FieldSpec], values: Mapping[str, str]) -> bytes:
    payload = {spec.env_key: plist_value(spec, values[spec.env_key]) for spec in specs}
    return plistlib.dumps(payload, fmt=plistlib.FMT_XML, sort_keys=False)


__all__ = [
    "GENERATED_NOTICE",
    "escape_string_resource",
    "fraction_resource_text",
    "plist_value",
    "render_android_resources",
    "render_plist",
]

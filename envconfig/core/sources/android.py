"""Android resource-table configuration source.

The resource table is built from ``res/values*/*.xml`` files the same way the
platform merges them: the default ``values`` directory first, then each
qualified overlay (``values-<qualifier>``) in the order given, later entries
replacing earlier ones. Lookups go to the table on every access and coerce the
stored text again; resolved values are never cached.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ..errors import MissingOrMistypedConfiguration
from ..fields import FieldSpec, Kind
from ..values import Lookup, failed, found, parse_int_text, parse_percent_text
from .base import ConfigurationSource

logger = logging.getLogger("envconfig.sources.android")

RESOURCE_TYPES: tuple[str, ...] = ("string", "integer", "fraction")
MAX_REFERENCE_DEPTH = 16

_REFERENCE_RE = re.compile(r"^@(?:\+)?(?P<type>[a-z]+)/(?P<name>[A-Za-z0-9_.]+)$")
_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "'": "'",
    '"': '"',
    "\\": "\\",
    "@": "@",
    "?": "?",
}


@dataclass
class ResourceTable:
    entries: dict[tuple[str, str], str] = field(default_factory=dict)
    files: list[Path] = field(default_factory=list)

    def get(self, resource_type: str, name: str) -> str:
        return self.entries[(resource_type, name)]

    def names(self, resource_type: str | None = None) -> list[str]:
        return sorted(
            {name for (kind, name) in self.entries if resource_type is None or kind == resource_type}
        )


def resolve_res_dir(path: str | Path) -> Path:
    candidate = Path(path)
    for option in (candidate, candidate / "res", candidate / "src" / "main" / "res"):
        if (option / "values").is_dir():
            return option
    raise MissingOrMistypedConfiguration.unavailable(
        str(candidate),
        detail="no Android res/values directory found",
    )


def _entry_text(element: ET.Element) -> str:
    return "".join(element.itertext())


def _parse_values_file(path: Path, entries: dict[tuple[str, str], str]) -> bool:
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise MissingOrMistypedConfiguration.unavailable(str(path), detail=f"invalid XML ({exc})") from exc

    if root.tag != "resources":
        logger.debug("Skipping %s: root element is <%s>, not <resources>", path, root.tag)
        return False

    for element in root:
        if element.tag == "item":
            resource_type = str(element.get("type") or "").strip()
        else:
            resource_type = element.tag
        if resource_type not in RESOURCE_TYPES:
            continue
        name = str(element.get("name") or "").strip()
        if not name:
            continue
        entries[(resource_type, name)] = _entry_text(element)
    return True


def load_resource_table(res_dir: str | Path, qualifiers: Iterable[str] = ()) -> ResourceTable:
    resolved = resolve_res_dir(res_dir)
    directories = [resolved / "values"]
    for qualifier in qualifiers:
        normalized = str(qualifier or "").strip()
        if normalized:
            directories.append(resolved / f"values-{normalized}")

    table = ResourceTable()
    for directory in directories:
        if not directory.is_dir():
            logger.debug("Qualifier directory %s does not exist; skipping", directory)
            continue
        for xml_path in sorted(directory.glob("*.xml")):
            if _parse_values_file(xml_path, table.entries):
                table.files.append(xml_path)

    if not table.files:
        raise MissingOrMistypedConfiguration.unavailable(
            str(resolved),
            detail="no resource files under values/",
        )
    logger.debug("Loaded %d resource(s) from %d file(s) under %s", len(table.entries), len(table.files), resolved)
    return table


def decode_string_resource(text: str) -> str:
    """Apply Android string-resource rules to raw XML text.

    Unquoted whitespace runs collapse to one space and are trimmed at both
    ends. Double quotes delimit verbatim regions and are dropped. Backslash
    escapes are decoded.
    """
    chars: list[tuple[str, bool]] = []
    in_quotes = False
    index = 0
    length = len(text)
    while index < length:
        ch = text[index]
        if ch == "\\" and index + 1 < length:
            nxt = text[index + 1]
            if nxt == "u" and re.fullmatch(r"[0-9a-fA-F]{4}", text[index + 2 : index + 6] or ""):
                chars.append((chr(int(text[index + 2 : index + 6], 16)), True))
                index += 6
                continue
            chars.append((_ESCAPES.get(nxt, nxt), True))
            index += 2
            continue
        if ch == '"':
            in_quotes = not in_quotes
            index += 1
            continue
        if ch.isspace() and not in_quotes:
            if not chars or chars[-1] != (" ", False):
                chars.append((" ", False))
            index += 1
            continue
        chars.append((ch, True))
        index += 1

    while chars and chars[0] == (" ", False):
        chars.pop(0)
    while chars and chars[-1] == (" ", False):
        chars.pop()
    return "".join(ch for ch, _ in chars)


class AndroidResourceSource(ConfigurationSource):
    platform = "android"

    def __init__(self, res_dir: str | Path, *, qualifiers: Iterable[str] = ()) -> None:
        self.qualifiers = tuple(qualifiers)
        self.res_dir = resolve_res_dir(res_dir)
        self._table = load_resource_table(self.res_dir, self.qualifiers)

    @property
    def description(self) -> str:
        return f"android resources {self.res_dir}"

    @property
    def table(self) -> ResourceTable:
        return self._table

    def keys(self) -> list[str]:
        return self._table.names()

    def key_for(self, field: FieldSpec) -> str:
        return field.resource_name

    def _raw(self, key: str, kind: Kind) -> Any:
        resource_type, name = kind, key
        seen: set[tuple[str, str]] = set()
        for _ in range(MAX_REFERENCE_DEPTH):
            if (resource_type, name) in seen:
                raise KeyError(key)
            seen.add((resource_type, name))
            text = self._table.get(resource_type, name)
            match = _REFERENCE_RE.match(text.strip())
            if match is None:
                return text
            resource_type, name = match.group("type"), match.group("name")
            logger.debug("Resource %s/%s references @%s/%s", kind, key, resource_type, name)
        raise KeyError(key)

    def _coerce(self, key: str, raw: Any, kind: Kind) -> Lookup[Any]:
        text = str(raw)
        if kind == "string":
            return found(decode_string_resource(text))
        if kind == "integer":
            parsed = parse_int_text(text, allow_hex=True)
            return found(parsed) if parsed is not None else self._mistyped(key, kind, raw)
        fraction = parse_percent_text(text, base=1.0, pbase=1.0)
        return found(fraction) if fraction is not None else self._mistyped(key, kind, raw)

    def lookup_scaled_fraction(self, key: str, *, base: float, pbase: float) -> Lookup[float]:
        """Equivalent of ``Resources.getFraction(id, base, pbase)``."""
        try:
            raw = self._raw(key, "fraction")
        except KeyError:
            return failed(MissingOrMistypedConfiguration.missing(key, expected="fraction", source=self.description))
        value = parse_percent_text(raw, base=base, pbase=pbase)
        return found(value) if value is not None else self._mistyped(key, "fraction", raw)


__all__ = [
    "AndroidResourceSource",
    "RESOURCE_TYPES",
    "ResourceTable",
    "decode_string_resource",
    "load_resource_table",
    "resolve_res_dir",
]

"""Property-list configuration source (iOS ``EnvConfig.plist``)."""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping
from xml.parsers.expat import ExpatError

from ..errors import MissingOrMistypedConfiguration
from ..fields import FieldSpec, Kind
from ..values import Lookup, coerce_finite_float, found, in_int32_range
from .base import ConfigurationSource

logger = logging.getLogger("envconfig.sources.plist")

DEFAULT_PLIST_NAME = "EnvConfig.plist"


def resolve_plist_path(path: str | Path, *, plist_name: str = DEFAULT_PLIST_NAME) -> Path:
    candidate = Path(path)
    if candidate.is_dir():
        candidate = candidate / plist_name
    return candidate


def load_plist_dictionary(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            data = plistlib.load(handle)
    except FileNotFoundError as exc:
        raise MissingOrMistypedConfiguration.unavailable(str(path), detail="file not found") from exc
    except (plistlib.InvalidFileException, ExpatError, ValueError) as exc:
        raise MissingOrMistypedConfiguration.unavailable(str(path), detail=f"invalid property list ({exc})") from exc
    except OSError as exc:
        raise MissingOrMistypedConfiguration.unavailable(str(path), detail=f"cannot read file ({exc})") from exc

    if not isinstance(data, dict):
        raise MissingOrMistypedConfiguration.unavailable(
            str(path),
            detail=f"root object is {type(data).__name__}, expected dict",
        )
    return data


class PlistSource(ConfigurationSource):
    """Dictionary-backed source parsed once at construction.

    Passing ``dictionary`` skips file loading, mirroring the designated
    initializer of the generated iOS accessor.
    """

    platform = "ios"

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        dictionary: Mapping[str, Any] | None = None,
        plist_name: str = DEFAULT_PLIST_NAME,
    ) -> None:
        if dictionary is None:
            if path is None:
                raise MissingOrMistypedConfiguration.unavailable(plist_name, detail="no property list path given")
            self.path: Path | None = resolve_plist_path(path, plist_name=plist_name)
            dictionary = load_plist_dictionary(self.path)
            logger.debug("Loaded %d key(s) from %s", len(dictionary), self.path)
        else:
            self.path = Path(path) if path is not None else None
        self._config = MappingProxyType(dict(dictionary))

    @property
    def description(self) -> str:
        if self.path is None:
            return "plist dictionary"
        return f"plist {self.path}"

    @property
    def config(self) -> Mapping[str, Any]:
        return self._config

    def keys(self) -> list[str]:
        return sorted(self._config.keys())

    def key_for(self, field: FieldSpec) -> str:
        return field.env_key

    def _raw(self, key: str, kind: Kind) -> Any:
        return self._config[key]

    def _coerce(self, key: str, raw: Any, kind: Kind) -> Lookup[Any]:
        if kind == "string":
            return found(raw) if isinstance(raw, str) else self._mistyped(key, kind, raw)
        if kind == "integer":
            if isinstance(raw, int) and not isinstance(raw, bool) and in_int32_range(raw):
                return found(raw)
            return self._mistyped(key, kind, raw)
        value = coerce_finite_float(raw)
        return found(value) if value is not None else self._mistyped(key, kind, raw)


__all__ = ["DEFAULT_PLIST_NAME", "PlistSource", "load_plist_dictionary", "resolve_plist_path"]

"""Common capability shared by every configuration backing store.

A source knows how to fetch a raw stored value by its platform key and how to
coerce that raw value into one of the three supported kinds. The ``lookup_*``
methods never raise for missing or mistyped values; they return a
:class:`~envconfig.core.values.Lookup`. The ``get_*`` methods are the
fail-fast path used by generated accessors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from ..errors import MissingOrMistypedConfiguration
from ..fields import FieldSpec, Kind, normalize_kind
from ..values import Lookup, failed

logger = logging.getLogger("envconfig.sources")


class ConfigurationSource(ABC):
    platform: ClassVar[str]

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable location of the backing store, used in errors."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Keys present in the backing store."""

    @abstractmethod
    def key_for(self, field: FieldSpec) -> str:
        """Platform key under which ``field`` is stored."""

    @abstractmethod
    def _coerce(self, key: str, raw: Any, kind: Kind) -> Lookup[Any]:
        ...

    @abstractmethod
    def _raw(self, key: str, kind: Kind) -> Any:
        """Return the stored value or raise ``KeyError``."""

    def raw(self, key: str, kind: str = "string") -> Any:
        try:
            return self._raw(key, normalize_kind(kind))
        except KeyError:
            raise MissingOrMistypedConfiguration.missing(key, source=self.description) from None

    def lookup(self, key: str, kind: str) -> Lookup[Any]:
        resolved_kind = normalize_kind(kind)
        try:
            raw = self._raw(key, resolved_kind)
        except KeyError:
            logger.debug("Lookup miss for %s (%s) in %s", key, resolved_kind, self.description)
            return failed(
                MissingOrMistypedConfiguration.missing(key, expected=resolved_kind, source=self.description)
            )
        return self._coerce(key, raw, resolved_kind)

    def lookup_string(self, key: str) -> Lookup[str]:
        return self.lookup(key, "string")

    def lookup_int(self, key: str) -> Lookup[int]:
        return self.lookup(key, "integer")

    def lookup_fraction(self, key: str) -> Lookup[float]:
        return self.lookup(key, "fraction")

    def get(self, key: str, kind: str) -> Any:
        return self.lookup(key, kind).unwrap()

    def get_string(self, key: str) -> str:
        return self.lookup_string(key).unwrap()

    def get_int(self, key: str) -> int:
        return self.lookup_int(key).unwrap()

    def get_fraction(self, key: str) -> float:
        return self.lookup_fraction(key).unwrap()

    def lookup_field(self, field: FieldSpec) -> Lookup[Any]:
        return self.lookup(self.key_for(field), field.kind)

    def _mistyped(self, key: str, kind: Kind, raw: Any) -> Lookup[Any]:
        return failed(
            MissingOrMistypedConfiguration.mistyped(
                key,
                expected=kind,
                source=self.description,
                detail=f"stored value {raw!r}",
            )
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


__all__ = ["ConfigurationSource"]

"""Error types raised by configuration sources and accessors."""

from __future__ import annotations

from typing import Literal

Reason = Literal["missing", "mistyped", "unavailable"]


class ConfigurationError(Exception):
    """Base class for envconfig errors."""


class MissingOrMistypedConfiguration(ConfigurationError):
    """A configuration value (or its whole backing store) cannot be produced.

    ``reason`` is ``"missing"`` when the key is absent, ``"mistyped"`` when the
    stored value cannot be coerced to ``expected``, and ``"unavailable"`` when
    the backing store itself could not be loaded.
    """

    def __init__(
        self,
        key: str | None,
        *,
        reason: Reason,
        expected: str | None = None,
        source: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.key = key
        self.reason = reason
        self.expected = expected
        self.source = source
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        where = f" in {self.source}" if self.source else ""
        if self.reason == "unavailable":
            message = f"Configuration store unavailable{where}"
        elif self.reason == "missing":
            message = f"Missing configuration key {self.key!r}{where}"
        else:
            message = f"Configuration key {self.key!r}{where} is not a valid {self.expected}"
        if self.detail:
            message = f"{message}: {self.detail}"
        return message

    @classmethod
    def missing(cls, key: str, *, expected: str | None = None, source: str | None = None) -> "MissingOrMistypedConfiguration":
        return cls(key, reason="missing", expected=expected, source=source)

    @classmethod
    def mistyped(
        cls,
        key: str,
        *,
        expected: str,
        source: str | None = None,
        detail: str | None = None,
    ) -> "MissingOrMistypedConfiguration":
        return cls(key, reason="mistyped", expected=expected, source=source, detail=detail)

    @classmethod
    def unavailable(cls, source: str, *, detail: str | None = None) -> "MissingOrMistypedConfiguration":
        return cls(None, reason="unavailable", source=source, detail=detail)


__all__ = ["ConfigurationError", "MissingOrMistypedConfiguration", "Reason"]

"""Typed, read-only accessors over a configuration source.

``EnvConfig`` mirrors the accessor class the generator emits for the demo
configuration. Every property read goes straight to the source, so a resource
table is consulted afresh on each access and a dictionary-backed source is
indexed in memory. Reads fail fast with
:class:`~envconfig.core.errors.MissingOrMistypedConfiguration`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeVar

from .errors import MissingOrMistypedConfiguration
from .fields import FieldSpec, normalize_kind
from .registry import open_source
from .report import ValidationIssue, ValidationReport
from .sources.base import ConfigurationSource
from .values import Lookup

ConfigT = TypeVar("ConfigT", bound="BaseEnvConfig")

logger = logging.getLogger("envconfig.accessor")


class ConfigField:
    """Descriptor exposing one stored value as a read-only typed attribute."""

    def __init__(self, env_key: str, kind: str = "string") -> None:
        self.spec = FieldSpec(env_key=env_key, kind=normalize_kind(kind))
        self.attribute = self.spec.attribute

    def __set_name__(self, owner: type, name: str) -> None:
        self.attribute = name

    def __get__(self, instance: "BaseEnvConfig | None", owner: type | None = None) -> Any:
        if instance is None:
            return self
        source = instance.source
        key = source.key_for(self.spec)
        logger.debug("Reading %s from %s", key, source.description)
        return source.get(key, self.spec.kind)

    def __set__(self, instance: "BaseEnvConfig", value: Any) -> None:
        raise AttributeError(f"{self.attribute} is read-only")


class ConfigurationSet(Mapping[str, Any]):
    """Immutable, fully resolved configuration values keyed by attribute name."""

    __slots__ = ("_values", "_specs")

    def __init__(self, values: Mapping[str, Any], specs: Mapping[str, FieldSpec]) -> None:
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))
        object.__setattr__(self, "_specs", MappingProxyType(dict(specs)))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ConfigurationSet is immutable")

    def __repr__(self) -> str:
        return f"ConfigurationSet({dict(self._values)!r})"

    def kind_of(self, attribute: str) -> str:
        return self._specs[attribute].kind

    def to_dict(self, *, property_names: bool = False) -> dict[str, Any]:
        if not property_names:
            return dict(self._values)
        return {self._specs[name].property_name: value for name, value in self._values.items()}


class BaseEnvConfig:
    def __init__(self, source: ConfigurationSource) -> None:
        self._source = source

    @property
    def source(self) -> ConfigurationSource:
        return self._source

    @classmethod
    def config_fields(cls) -> dict[str, ConfigField]:
        out: dict[str, ConfigField] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, ConfigField):
                    out[name] = value
        return out

    @classmethod
    def fields(cls) -> list[FieldSpec]:
        return [descriptor.spec for descriptor in cls.config_fields().values()]

    @classmethod
    def from_path(cls: type[ConfigT], path: str | Path, platform: str | None = None, **options: Any) -> ConfigT:
        return cls(open_source(platform, path, **options))

    def lookup(self, attribute: str) -> Lookup[Any]:
        descriptor = self.config_fields().get(attribute)
        if descriptor is None:
            raise AttributeError(f"{type(self).__name__} has no configuration field {attribute!r}")
        return self._source.lookup_field(descriptor.spec)

    def snapshot(self) -> ConfigurationSet:
        descriptors = self.config_fields()
        values = {name: self._source.lookup_field(descriptor.spec).unwrap() for name, descriptor in descriptors.items()}
        return ConfigurationSet(values, {name: descriptor.spec for name, descriptor in descriptors.items()})

    def validate(self) -> ValidationReport:
        issues: list[ValidationIssue] = []
        for name, descriptor in self.config_fields().items():
            result = self._source.lookup_field(descriptor.spec)
            if result.ok:
                continue
            error: MissingOrMistypedConfiguration = result.error  # type: ignore[assignment]
            issues.append(
                ValidationIssue(
                    code=error.reason,
                    message=str(error),
                    field=descriptor.spec.property_name,
                    key=error.key,
                )
            )
        return ValidationReport(valid=not issues, source=self._source.description, issues=issues)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"


class EnvConfig(BaseEnvConfig):
    facebook_app_id = ConfigField("FACEBOOK_APP_ID")
    fb_login_protocol_scheme = ConfigField("FB_LOGIN_PROTOCOL_SCHEME")
    google_login_protocol_scheme = ConfigField("GOOGLE_LOGIN_PROTOCOL_SCHEME")
    google_maps_api_key = ConfigField("GOOGLE_MAPS_API_KEY")
    some_int = ConfigField("SOME_INT", "integer")
    some_decimal_number = ConfigField("SOME_DECIMAL_NUMBER", "fraction")


__all__ = ["BaseEnvConfig", "ConfigField", "ConfigurationSet", "EnvConfig"]

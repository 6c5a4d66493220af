"""Minimal registry mapping platform keys to configuration source factories."""


from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .sources.base import ConfigurationSource

SourceFactory = Callable[..., ConfigurationSource]


@dataclass
class Registry:
    sources: dict[str, SourceFactory] = field(default_factory=dict)

    def register_source(self, key: str, factory: SourceFactory) -> None:
        self.sources[str(key).strip().lower()] = factory

    def get_source_factory(self, key: str) -> SourceFactory:
        normalized = str(key).strip().lower()
        factory = self.sources.get(normalized)
        if factory is None:
            raise KeyError(f"No configuration source registered for platform: {normalized}")
        return factory

    def list_sources(self) -> list[str]:
        return sorted(self.sources.keys())


_registry = Registry()


def register_source(key: str, factory: SourceFactory) -> None:
    _registry.register_source(key, factory)


def get_source_factory(key: str) -> SourceFactory:
    return _registry.get_source_factory(key)


def list_sources() -> list[str]:
    return _registry.list_sources()


def open_source(platform: str | None, path: str | Path, **options: Any) -> ConfigurationSource:
    """Build a source for ``path``, detecting the platform when not given."""
    if platform is None:
        from .detect import detect_backing_store

        detected = detect_backing_store(path)
        if detected.platform is None:
            raise ValueError(f"Cannot detect configuration platform for: {path}")
        platform = detected.platform
    return get_source_factory(platform)(path, **options)


def _register_defaults() -> None:
    from .sources import AndroidResourceSource, DotenvSource, PlistSource

    aliases = {
        "android": AndroidResourceSource,
        "ios": PlistSource,
        "plist": PlistSource,
        "dotenv": DotenvSource,
    }
    for key, factory in aliases.items():
        if key not in _registry.sources:
            _registry.register_source(key, factory)


_register_defaults()


__all__ = [
    "Registry",
    "SourceFactory",
    "get_source_factory",
    "list_sources",
    "open_source",
    "register_source",
]

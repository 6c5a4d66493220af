"""Public package entrypoint for envconfig.

This package exposes typed, read-only access to build-time configuration
values stored in platform resource files (Android resource XML, iOS property
lists, dotenv files), plus the generator that produces those files and a
small CLI frontend.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationSet": ("envconfig.core.accessor", "ConfigurationSet"),
    "EnvConfig": ("envconfig.core.accessor", "EnvConfig"),
    "MissingOrMistypedConfiguration": ("envconfig.core.errors", "MissingOrMistypedConfiguration"),
    "detect_backing_store": ("envconfig.core.detect", "detect_backing_store"),
    "log_startup_values": ("envconfig.sample", "log_startup_values"),
    "open_source": ("envconfig.core.registry", "open_source"),
}

try:
    __version__ = version("envconfig")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ConfigurationSet",
    "EnvConfig",
    "MissingOrMistypedConfiguration",
    "__version__",
    "detect_backing_store",
    "log_startup_values",
    "open_source",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value

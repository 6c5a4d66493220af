"""Core configuration API.

The core layer is side-effect free and safe to import from scripts, tests,
the CLI and generated accessor modules.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AndroidResourceSource": ("envconfig.core.sources.android", "AndroidResourceSource"),
    "BaseEnvConfig": ("envconfig.core.accessor", "BaseEnvConfig"),
    "ConfigField": ("envconfig.core.accessor", "ConfigField"),
    "ConfigurationError": ("envconfig.core.errors", "ConfigurationError"),
    "ConfigurationSet": ("envconfig.core.accessor", "ConfigurationSet"),
    "ConfigurationSource": ("envconfig.core.sources.base", "ConfigurationSource"),
    "DetectResult": ("envconfig.core.detect", "DetectResult"),
    "DotenvSource": ("envconfig.core.sources.env_file", "DotenvSource"),
    "EnvConfig": ("envconfig.core.accessor", "EnvConfig"),
    "FieldSpec": ("envconfig.core.fields", "FieldSpec"),
    "Lookup": ("envconfig.core.values", "Lookup"),
    "MissingOrMistypedConfiguration": ("envconfig.core.errors", "MissingOrMistypedConfiguration"),
    "PlistSource": ("envconfig.core.sources.plist", "PlistSource"),
    "ValidationIssue": ("envconfig.core.report", "ValidationIssue"),
    "ValidationReport": ("envconfig.core.report", "ValidationReport"),
    "detect_backing_store": ("envconfig.core.detect", "detect_backing_store"),
    "get_source_factory": ("envconfig.core.registry", "get_source_factory"),
    "list_sources": ("envconfig.core.registry", "list_sources"),
    "open_source": ("envconfig.core.registry", "open_source"),
    "register_source": ("envconfig.core.registry", "register_source"),
}

__all__ = [
    "AndroidResourceSource",
    "BaseEnvConfig",
    "ConfigField",
    "ConfigurationError",
    "ConfigurationSet",
    "ConfigurationSource",
    "DetectResult",
    "DotenvSource",
    "EnvConfig",
    "FieldSpec",
    "Lookup",
    "MissingOrMistypedConfiguration",
    "PlistSource",
    "ValidationIssue",
    "ValidationReport",
    "detect_backing_store",
    "get_source_factory",
    "list_sources",
    "open_source",
    "register_source",
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

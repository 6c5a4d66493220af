"""Runtime settings for the CLI and sample entry point.

This module owns environment-backed tool settings. It is separate from the
configuration values the library reads: those live in the backing stores and
never come from the process environment.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    debug: bool
    log_level: str
    platform: str | None
    store_path: str | None
    env_file: str
    plist_name: str
    resource_file: str


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


def _env_optional(name: str) -> str | None:
    val = os.getenv(name)
    if val is None:
        return None
    return val.strip() or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    debug = _env_bool("DEBUG", default=False)
    return Settings(
        debug=debug,
        log_level=_env_choice(
            "ENVCONFIG_LOG_LEVEL",
            default="debug" if debug else "info",
            allowed={"debug", "info", "warning", "error"},
        ),
        platform=_env_optional("ENVCONFIG_PLATFORM"),
        store_path=_env_optional("ENVCONFIG_PATH"),
        env_file=os.getenv("ENVCONFIG_ENV_FILE", ".env"),
        plist_name=os.getenv("ENVCONFIG_PLIST_NAME", "EnvConfig.plist"),
        resource_file=os.getenv("ENVCONFIG_RESOURCE_FILE", "env_config.xml"),
    )


__all__ = ["Settings", "get_settings"]

"""Sample application entry point: log a few configuration values at startup."""

from __future__ import annotations

import logging
from pathlib import Path

from .core.accessor import EnvConfig

logger = logging.getLogger("envconfig.sample")

STARTUP_FIELDS = ("facebook_app_id", "fb_login_protocol_scheme", "google_maps_api_key")


def log_startup_values(config: EnvConfig) -> dict[str, str]:
    logged: dict[str, str] = {}
    fields = EnvConfig.config_fields()
    for attribute in STARTUP_FIELDS:
        property_name = fields[attribute].spec.property_name
        value = getattr(config, attribute)
        logger.info("%s %s", property_name, value)
        logged[property_name] = value
    return logged


def on_start(path: str | Path, platform: str | None = None) -> EnvConfig:
    config = EnvConfig.from_path(path, platform=platform)
    log_startup_values(config)
    return config


__all__ = ["STARTUP_FIELDS", "log_startup_values", "on_start"]

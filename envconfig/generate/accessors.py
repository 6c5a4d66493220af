"""Typed accessor sources rendered from Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..core.fields import FieldSpec

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

ACCESSOR_TEMPLATES = {
    "python": "env_config.py.j2",
    "kotlin": "EnvConfig.kt.j2",
    "swift": "EnvConfig.swift.j2",
}

KOTLIN_TYPES = {"string": "String", "integer": "Int", "fraction": "Float"}
SWIFT_TYPES = {"string": "String", "integer": "Int", "fraction": "Double"}

_environment = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)
_environment.filters["pyrepr"] = repr
_environment.filters["kotlin_type"] = lambda kind: KOTLIN_TYPES[kind]
_environment.filters["swift_type"] = lambda kind: SWIFT_TYPES[kind]


def render_accessor(
    specs: Iterable[FieldSpec],
    language: str,
    *,
    class_name: str = "EnvConfig",
    package: str = "com.example.example",
) -> str:
    normalized = str(language or "").strip().lower()
    template_name = ACCESSOR_TEMPLATES.get(normalized)
    if template_name is None:
        raise ValueError(
            f"Unsupported accessor language: {language!r}. Expected one of: {', '.join(sorted(ACCESSOR_TEMPLATES))}"
        )
    if not class_name.isidentifier():
        raise ValueError(f"Invalid accessor class name: {class_name!r}")
    template = _environment.get_template(template_name)
    return template.render(specs=list(specs), class_name=class_name, package=package)


__all__ = ["ACCESSOR_TEMPLATES", "TEMPLATE_DIR", "render_accessor"]

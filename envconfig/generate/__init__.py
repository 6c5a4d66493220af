"""Generate platform configuration artifacts from a ``.env`` file.

The ``.env`` file is the source of truth. From it the generator writes the
Android resource XML, the iOS property list and typed accessor sources, all of
which are read-only build outputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

from ..core.accessor import EnvConfig
from ..core.fields import FieldSpec
from ..core.sources.env_file import read_env_file
from .accessors import ACCESSOR_TEMPLATES, render_accessor
from .resources import render_android_resources, render_plist
from .schema import field_specs_from_env, infer_kind, load_env_schema, seed_overrides

logger = logging.getLogger("envconfig.generate")

DEFAULT_RESOURCE_FILE = "env_config.xml"


@dataclass
class GenerateResult:
    written: list[Path] = field(default_factory=list)
    fields: dict[str, str] = field(default_factory=dict)


def _write(path: Path, data: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(data, encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path


def generate(
    env_path: str | Path,
    *,
    android_res_dir: str | Path | None = None,
    ios_plist: str | Path | None = None,
    accessors: Mapping[str, str | Path] | None = None,
    overrides: Mapping[str, str] | None = None,
    declared: Iterable[FieldSpec] | None = None,
    class_name: str = "EnvConfig",
    kotlin_package: str = "com.example.example",
    resource_file: str = DEFAULT_RESOURCE_FILE,
) -> GenerateResult:
    """Write the requested artifacts and return what was written.

    ``accessors`` maps a language (``python``, ``kotlin``, ``swift``) to an
    output path. ``ios_plist`` may be a directory, in which case the file is
    named after ``class_name``.

    Keys already declared on ``EnvConfig`` (or ``declared``) keep their declared
    kind unless ``overrides`` says otherwise, so ``FACEBOOK_APP_ID=12345`` stays
    a string.
    """
    if declared is None:
        declared = EnvConfig.fields()
    values, specs = load_env_schema(env_path, overrides, declared)
    result = GenerateResult(fields={spec.env_key: spec.kind for spec in specs})

    if android_res_dir is not None:
        target = Path(android_res_dir) / "values" / resource_file
        result.written.append(_write(target, render_android_resources(specs, values)))

    if ios_plist is not None:
        target = Path(ios_plist)
        if target.is_dir() or not target.suffix:
            target = target / f"{class_name}.plist"
        result.written.append(_write(target, render_plist(specs, values)))

    for language, out_path in (accessors or {}).items():
        rendered = render_accessor(specs, language, class_name=class_name, package=kotlin_package)
        result.written.append(_write(Path(out_path), rendered))

    logger.info("Generated %d artifact(s) for %d field(s) from %s", len(result.written), len(specs), env_path)
    return result


__all__ = [
    "ACCESSOR_TEMPLATES",
    "DEFAULT_RESOURCE_FILE",
    "GenerateResult",
    "field_specs_from_env",
    "generate",
    "infer_kind",
    "load_env_schema",
    "read_env_file",
    "render_accessor",
    "render_android_resources",
    "render_plist",
    "seed_overrides",
]

"""Command-line frontend for envconfig."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from envconfig.config import Settings, get_settings
from envconfig.core import EnvConfig, detect_backing_store, open_source
from envconfig.core.fields import KINDS
from envconfig.core.sources import ConfigurationSource
from envconfig.generate import ACCESSOR_TEMPLATES, generate
from envconfig.sample import log_startup_values

load_dotenv(Path.cwd() / ".env")

logger = logging.getLogger("envconfig")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logger.setLevel(logging.DEBUG if settings.debug else level)


def _store_args(args: argparse.Namespace) -> tuple[str, str | None]:
    settings = get_settings()
    path = args.path or settings.store_path
    if not path:
        raise ValueError("A configuration path is required (argument or ENVCONFIG_PATH).")
    return path, args.platform or settings.platform


def _open_store(args: argparse.Namespace) -> ConfigurationSource:
    path, platform = _store_args(args)
    if platform is None:
        platform = detect_backing_store(path).platform
    options: dict[str, Any] = {}
    if platform in {"ios", "plist"}:
        options["plist_name"] = get_settings().plist_name
    return open_source(platform, path, **options)


def _open_config(args: argparse.Namespace) -> EnvConfig:
    return EnvConfig(_open_store(args))


def _cmd_show(args: argparse.Namespace) -> int:
    _json_dump(log_startup_values(_open_config(args)))
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    source = _open_store(args)
    _json_dump({"key": args.key, "type": args.type, "value": source.get(args.key, args.type)})
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    snapshot = _open_config(args).snapshot()
    _json_dump(snapshot.to_dict(property_names=True))
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    report = _open_config(args).validate()
    _json_dump(report.to_dict())
    return 0 if report.valid else 1


def _cmd_detect(args: argparse.Namespace) -> int:
    _json_dump(detect_backing_store(args.input).__dict__)
    return 0


def _parse_overrides(items: list[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for item in items:
        key, sep, kind = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Type override must look like KEY=KIND: {item!r}")
        overrides[key.strip()] = kind.strip()
    return overrides


def _cmd_generate(args: argparse.Namespace) -> int:
    settings = get_settings()
    accessors = {
        language: getattr(args, language)
        for language in ACCESSOR_TEMPLATES
        if getattr(args, language)
    }
    result = generate(
        args.input or settings.env_file,
        android_res_dir=args.android_res,
        ios_plist=args.ios_plist,
        accessors=accessors,
        overrides=_parse_overrides(args.type),
        class_name=args.class_name,
        kotlin_package=args.kotlin_package,
        resource_file=settings.resource_file,
    )
    _json_dump({"written": [str(path) for path in result.written], "fields": result.fields})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envconfig", description="Typed build-time configuration tool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    store = argparse.ArgumentParser(add_help=False)
    store.add_argument("path", nargs="?", default=None, help="Android res dir, .plist file or .env file")
    store.add_argument("--platform", default=None, choices=["android", "ios", "plist", "dotenv"])

    show = subparsers.add_parser("show", parents=[store], help="Log the startup configuration values")
    show.set_defaults(func=_cmd_show)

    get_cmd = subparsers.add_parser("get", parents=[store], help="Read one typed value by platform key")
    get_cmd.add_argument("--key", required=True)
    get_cmd.add_argument("--type", default="string", choices=list(KINDS))
    get_cmd.set_defaults(func=_cmd_get)

    dump = subparsers.add_parser("dump", parents=[store], help="Resolve and print every configuration value")
    dump.set_defaults(func=_cmd_dump)

    validate = subparsers.add_parser("validate", parents=[store], help="Report missing or mistyped values")
    validate.set_defaults(func=_cmd_validate)

    detect = subparsers.add_parser("detect", help="Detect the backing store platform of a path")
    detect.add_argument("input", help="File or directory path")
    detect.set_defaults(func=_cmd_detect)

    generate_cmd = subparsers.add_parser("generate", help="Generate platform artifacts from a .env file")
    generate_cmd.add_argument("input", nargs="?", default=None, help=".env file path")
    generate_cmd.add_argument("--android-res", default=None, help="Android res directory")
    generate_cmd.add_argument("--ios-plist", default=None, help="Property list file or directory")
    generate_cmd.add_argument("--python", default=None, help="Python accessor output path")
    generate_cmd.add_argument("--kotlin", default=None, help="Kotlin accessor output path")
    generate_cmd.add_argument("--swift", default=None, help="Swift accessor output path")
    generate_cmd.add_argument(
        "--type",
        action="append",
        default=[],
        metavar="KEY=KIND",
        help="Override an inferred kind; keys declared on EnvConfig keep their declared kind",
    )
    generate_cmd.add_argument("--class-name", default="EnvConfig")
    generate_cmd.add_argument("--kotlin-package", default="com.example.example")
    generate_cmd.set_defaults(func=_cmd_generate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(get_settings())
    try:
        return int(args.func(args) or 0)
    except Exception as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())

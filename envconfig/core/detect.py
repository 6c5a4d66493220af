"""Backing-store detection from a filesystem path."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DetectResult:
    kind: str
    platform: str | None
    path: str


def _is_android_res(path: Path) -> bool:
    return any((option / "values").is_dir() for option in (path, path / "res", path / "src" / "main" / "res"))


def detect_backing_store(path: str | Path) -> DetectResult:
    candidate = Path(path)
    name = candidate.name.lower()

    if candidate.is_dir():
        if _is_android_res(candidate):
            return DetectResult(kind="directory", platform="android", path=str(candidate))
        if any(candidate.glob("*.plist")):
            return DetectResult(kind="directory", platform="ios", path=str(candidate))
        return DetectResult(kind="directory", platform=None, path=str(candidate))

    if name.endswith(".plist"):
        return DetectResult(kind="file", platform="ios", path=str(candidate))
    if name == ".env" or name.startswith(".env.") or name.endswith(".env"):
        return DetectResult(kind="file", platform="dotenv", path=str(candidate))
    return DetectResult(kind="file", platform=None, path=str(candidate))


__all__ = ["DetectResult", "detect_backing_store"]

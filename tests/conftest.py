import sys
from pathlib import Path

import pytest

# Ensure `import envconfig` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch) -> None:
    from envconfig.config import get_settings

    for name in (
        "DEBUG",
        "ENVCONFIG_LOG_LEVEL",
        "ENVCONFIG_PLATFORM",
        "ENVCONFIG_PATH",
        "ENVCONFIG_ENV_FILE",
        "ENVCONFIG_PLIST_NAME",
        "ENVCONFIG_RESOURCE_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

from envconfig.config import get_settings


def test_settings_defaults() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.log_level == "info"
    assert settings.platform is None
    assert settings.store_path is None
    assert settings.env_file == ".env"
    assert settings.plist_name == "EnvConfig.plist"
    assert settings.resource_file == "env_config.xml"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("ENVCONFIG_PLATFORM", " ios ")
    monkeypatch.setenv("ENVCONFIG_PATH", "")

    settings = get_settings()

    assert settings.debug is True
    assert settings.log_level == "debug"
    assert settings.platform == "ios"
    assert settings.store_path is None


def test_settings_ignore_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("ENVCONFIG_LOG_LEVEL", "chatty")

    assert get_settings().log_level == "info"


def test_settings_are_cached(monkeypatch) -> None:
    first = get_settings()
    monkeypatch.setenv("ENVCONFIG_LOG_LEVEL", "error")

    assert get_settings() is first

import pytest

from envconfig.core.errors import MissingOrMistypedConfiguration
from envconfig.core.sources.plist import PlistSource
from tests.helpers._store_builders import DEMO_PLIST, write_plist


def test_plist_source_reads_typed_values(tmp_path) -> None:
    source = PlistSource(write_plist(tmp_path))

    assert source.get_string("FACEBOOK_APP_ID") == "12345"
    assert source.get_int("SOME_INT") == 42
    assert source.get_fraction("SOME_DECIMAL_NUMBER") == 0.5


def test_plist_source_resolves_directory_to_conventional_file_name(tmp_path) -> None:
    write_plist(tmp_path)

    source = PlistSource(tmp_path)

    assert source.path == tmp_path / "EnvConfig.plist"
    assert source.get_string("GOOGLE_MAPS_API_KEY") == "AIzaSyDemoKey"


def test_plist_source_absent_file_fails_at_construction(tmp_path) -> None:
    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        PlistSource(tmp_path / "EnvConfig.plist")

    assert excinfo.value.reason == "unavailable"
    assert "file not found" in str(excinfo.value)


def test_plist_source_rejects_non_dictionary_root(tmp_path) -> None:
    path = write_plist(tmp_path, ["not", "a", "dict"])

    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        PlistSource(path)

    assert excinfo.value.reason == "unavailable"


def test_plist_source_rejects_garbage_file(tmp_path) -> None:
    path = tmp_path / "EnvConfig.plist"
    path.write_text("definitely not a plist", encoding="utf-8")

    with pytest.raises(MissingOrMistypedConfiguration):
        PlistSource(path)


def test_plist_source_rejects_truncated_xml(tmp_path) -> None:
    path = tmp_path / "EnvConfig.plist"
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n<plist version="1.0"><dict><key>A</key><string>x',
        encoding="utf-8",
    )

    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        PlistSource(path)
    assert excinfo.value.reason == "unavailable"


def test_plist_source_unreadable_path_is_unavailable(tmp_path) -> None:
    (tmp_path / "Nested.plist").mkdir()

    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        PlistSource(tmp_path, plist_name="Nested.plist")
    assert excinfo.value.reason == "unavailable"


def test_plist_source_reports_mistyped_values_without_casting(tmp_path) -> None:
    source = PlistSource(
        dictionary={
            "AS_NUMBER": 12345,
            "AS_BOOL": True,
            "AS_TEXT": "42",
            "HUGE": 2**40,
            "WHOLE": 3,
        }
    )

    assert source.lookup_string("AS_NUMBER").error.reason == "mistyped"
    assert source.lookup_int("AS_BOOL").error.reason == "mistyped"
    assert source.lookup_int("AS_TEXT").error.reason == "mistyped"
    assert source.lookup_int("HUGE").error.reason == "mistyped"
    assert source.lookup_fraction("AS_BOOL").error.reason == "mistyped"
    assert source.get_fraction("WHOLE") == 3.0


def test_plist_source_missing_key_fails(tmp_path) -> None:
    source = PlistSource(dictionary={"FACEBOOK_APP_ID": "12345"})

    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        source.get_string("GOOGLE_MAPS_API_KEY")

    assert excinfo.value.reason == "missing"
    assert excinfo.value.source == "plist dictionary"


def test_plist_source_is_a_snapshot_of_the_file(tmp_path) -> None:
    path = write_plist(tmp_path)
    source = PlistSource(path)

    write_plist(tmp_path, {**DEMO_PLIST, "FACEBOOK_APP_ID": "changed"})

    assert source.get_string("FACEBOOK_APP_ID") == "12345"
    assert source.get_string("FACEBOOK_APP_ID") == source.get_string("FACEBOOK_APP_ID")
    with pytest.raises(TypeError):
        source.config["FACEBOOK_APP_ID"] = "mutated"  # type: ignore[index]

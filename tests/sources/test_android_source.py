import pytest

from envconfig.core.errors import MissingOrMistypedConfiguration
from envconfig.core.sources.android import AndroidResourceSource, decode_string_resource, load_resource_table
from tests.helpers._store_builders import resources_xml, write_resources


def test_android_source_reads_typed_resources(tmp_path) -> None:
    source = AndroidResourceSource(write_resources(tmp_path))

    assert source.get_string("facebook_app_id") == "12345"
    assert source.get_int("some_int") == 42
    assert source.get_fraction("some_decimal_number") == 0.5


def test_android_source_accepts_project_directory_and_res_directory(tmp_path) -> None:
    res_dir = write_resources(tmp_path)

    assert AndroidResourceSource(tmp_path).res_dir == res_dir
    assert AndroidResourceSource(res_dir).res_dir == res_dir


def test_android_source_missing_directory_fails_at_construction(tmp_path) -> None:
    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        AndroidResourceSource(tmp_path / "nowhere")

    assert excinfo.value.reason == "unavailable"


def test_android_source_missing_key_fails_and_lookup_returns_error(tmp_path) -> None:
    source = AndroidResourceSource(write_resources(tmp_path))

    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        source.get_string("not_there")
    assert excinfo.value.reason == "missing"
    assert excinfo.value.key == "not_there"

    result = source.lookup_string("not_there")
    assert not result.ok
    assert result.or_default("fallback") == "fallback"


def test_android_source_keeps_resource_types_apart(tmp_path) -> None:
    source = AndroidResourceSource(write_resources(tmp_path))

    # some_int only exists as an integer resource.
    assert source.lookup_string("some_int").error.reason == "missing"


def test_android_integer_accepts_hex_and_rejects_out_of_range(tmp_path) -> None:
    body = resources_xml(
        '<integer name="hex_value">0x1F</integer>',
        '<integer name="all_bits">0xFFFFFFFF</integer>',
        '<integer name="hex_too_big">0x100000000</integer>',
        '<integer name="too_big">4294967296</integer>',
        '<integer name="not_a_number">forty-two</integer>',
    )
    source = AndroidResourceSource(write_resources(tmp_path, body))

    assert source.get_int("hex_value") == 31
    assert source.get_int("all_bits") == -1
    assert source.lookup_int("hex_too_big").error.reason == "mistyped"
    assert source.lookup_int("too_big").error.reason == "mistyped"
    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        source.get_int("not_a_number")
    assert excinfo.value.reason == "mistyped"
    assert excinfo.value.expected == "integer"


def test_android_fraction_supports_base_and_parent_base(tmp_path) -> None:
    body = resources_xml(
        '<fraction name="quarter">25%</fraction>',
        '<fraction name="parent_quarter">25%p</fraction>',
        '<fraction name="bare">0.25</fraction>',
    )
    source = AndroidResourceSource(write_resources(tmp_path, body))

    assert source.get_fraction("quarter") == 0.25
    assert source.get_fraction("parent_quarter") == 0.25
    assert source.lookup_scaled_fraction("quarter", base=200, pbase=10).unwrap() == 50.0
    assert source.lookup_scaled_fraction("parent_quarter", base=200, pbase=10).unwrap() == 2.5
    assert source.lookup_fraction("bare").error.reason == "mistyped"


def test_android_string_references_are_followed(tmp_path) -> None:
    body = resources_xml(
        '<string name="app_id">@string/real_app_id</string>',
        '<string name="real_app_id">98765</string>',
        '<string name="dangling">@string/gone</string>',
        '<string name="loop_a">@string/loop_b</string>',
        '<string name="loop_b">@string/loop_a</string>',
        '<integer name="alias_int">@integer/base_int</integer>',
        '<integer name="base_int">7</integer>',
    )
    source = AndroidResourceSource(write_resources(tmp_path, body))

    assert source.get_string("app_id") == "98765"
    assert source.get_int("alias_int") == 7
    assert source.lookup_string("dangling").error.reason == "missing"
    assert source.lookup_string("loop_a").error.reason == "missing"


def test_android_item_entries_and_unknown_tags(tmp_path) -> None:
    body = resources_xml(
        '<item type="integer" name="via_item">5</item>',
        '<color name="accent">#ff0000</color>',
    )
    source = AndroidResourceSource(write_resources(tmp_path, body))

    assert source.get_int("via_item") == 5
    assert "accent" not in source.keys()


def test_android_qualified_directories_override_defaults(tmp_path) -> None:
    write_resources(tmp_path)
    write_resources(
        tmp_path,
        resources_xml('<string name="google_maps_api_key">staging-key</string>'),
        qualifier="staging",
    )

    default = AndroidResourceSource(tmp_path)
    staging = AndroidResourceSource(tmp_path, qualifiers=["staging", "missing-qualifier"])

    assert default.get_string("google_maps_api_key") == "AIzaSyDemoKey"
    assert staging.get_string("google_maps_api_key") == "staging-key"
    assert staging.get_string("facebook_app_id") == "12345"


def test_android_reads_the_table_on_every_access(tmp_path) -> None:
    source = AndroidResourceSource(write_resources(tmp_path))

    source.table.entries[("integer", "some_int")] = "43"

    assert source.get_int("some_int") == 43


def test_android_invalid_xml_fails_at_construction(tmp_path) -> None:
    write_resources(tmp_path, "<resources><string name='a'>oops</resources>")

    with pytest.raises(MissingOrMistypedConfiguration) as excinfo:
        load_resource_table(tmp_path)

    assert excinfo.value.reason == "unavailable"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  plain   text  ", "plain text"),
        ('" keep  spaces "', " keep  spaces "),
        ("It\\'s", "It's"),
        ("line\\nbreak", "line\nbreak"),
        ("\\@not_a_reference", "@not_a_reference"),
        ("snow \\u2603", "snow ☃"),
        ('say \\"hi\\"', 'say "hi"'),
    ],
)
def test_decode_string_resource(raw: str, expected: str) -> None:
    assert decode_string_resource(raw) == expected

from decimal import Decimal

import pytest

from envconfig.core.errors import MissingOrMistypedConfiguration
from envconfig.core.fields import FieldSpec, camel_name, normalize_kind, snake_name
from envconfig.core.values import (
    Lookup,
    format_decimal,
    parse_decimal_text,
    parse_int_text,
    parse_percent_text,
)


def test_field_spec_derives_platform_names() -> None:
    spec = FieldSpec(env_key="GOOGLE_MAPS_API_KEY")

    assert spec.attribute == "google_maps_api_key"
    assert spec.resource_name == "google_maps_api_key"
    assert spec.property_name == "googleMapsApiKey"
    assert spec.kind == "string"


def test_snake_name_normalizes_separators() -> None:
    assert snake_name("fb-login--scheme") == "fb_login_scheme"
    assert camel_name("fb_login_scheme") == "fbLoginScheme"


@pytest.mark.parametrize("key", ["", "1ST_KEY", "class", "___"])
def test_snake_name_rejects_non_identifiers(key: str) -> None:
    with pytest.raises(ValueError):
        snake_name(key)


def test_normalize_kind_aliases() -> None:
    assert normalize_kind("Int") == "integer"
    assert normalize_kind("float") == "fraction"
    assert normalize_kind("string") == "string"
    with pytest.raises(ValueError):
        normalize_kind("bool")


def test_lookup_unwrap_and_default() -> None:
    error = MissingOrMistypedConfiguration.missing("SOME_INT", expected="integer")
    good: Lookup[int] = Lookup(value=3)
    bad: Lookup[int] = Lookup(error=error)

    assert good.ok and good.unwrap() == 3 and good.or_default(9) == 3
    assert not bad.ok and bad.or_default(9) == 9
    with pytest.raises(MissingOrMistypedConfiguration):
        bad.unwrap()


def test_parse_int_text_limits() -> None:
    assert parse_int_text("2147483647") == 2147483647
    assert parse_int_text("-2147483648") == -2147483648
    assert parse_int_text("2147483648") is None
    assert parse_int_text("0x10") is None
    assert parse_int_text("0x10", allow_hex=True) == 16
    assert parse_int_text("0x80000000", allow_hex=True) == -2147483648
    assert parse_int_text("0xFFFFFFFF") is None
    assert parse_int_text("1.0") is None


def test_parse_decimal_and_percent_text() -> None:
    assert parse_decimal_text("1.50") == Decimal("1.50")
    assert parse_decimal_text("nan") is None
    assert parse_percent_text("150%") == 1.5
    assert parse_percent_text("10%p", pbase=3) == pytest.approx(0.3)
    assert parse_percent_text("10") is None


def test_format_decimal_strips_trailing_zeros() -> None:
    assert format_decimal(Decimal("50.00")) == "50"
    assert format_decimal(Decimal("12.50")) == "12.5"
    assert format_decimal(Decimal("-0")) == "0"


def test_error_messages_name_key_and_source() -> None:
    error = MissingOrMistypedConfiguration.mistyped("SOME_INT", expected="integer", source="plist x", detail="stored value 'a'")

    assert str(error) == "Configuration key 'SOME_INT' in plist x is not a valid integer: stored value 'a'"
    assert MissingOrMistypedConfiguration.unavailable("x.plist").key is None

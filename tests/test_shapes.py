"""Named shape tests."""

import pytest

from regexforge.engine.compiler import compile_config, select_shape
from regexforge.engine.models import PatternConfig
from regexforge.engine.shapes import (
    CREDIT_CARD_PATTERNS,
    SHAPE_PATTERNS,
    Shape,
    credit_card_pattern,
    shape_pattern,
)


def test_shape_priority_order() -> None:
    assert [shape.value for shape in Shape] == [
        "email",
        "url",
        "phone",
        "ipv4",
        "ipv6",
        "hex_color",
        "date",
        "time",
        "latitude",
        "longitude",
        "credit_card",
    ]
    assert Shape.HEX_COLOR.flag == "is_hex_color"


@pytest.mark.parametrize(
    "flag,text,expected",
    [
        ("is_email", "example@example.com", True),
        ("is_email", "test.name+tag@domain.org", True),
        ("is_email", "invalid-email", False),
        ("is_url", "https://www.example.com", True),
        ("is_url", "ftp://example.com", True),
        ("is_url", "invalid-url", False),
        ("is_phone", "+1234567890", True),
        ("is_phone", "1234567890", True),
        ("is_phone", "0123", False),
        ("is_phone", "invalid-phone", False),
        ("is_ipv4", "192.168.0.1", True),
        ("is_ipv4", "192.168.0", False),
        ("is_hex_color", "#aabbcc", True),
        ("is_hex_color", "#abc", True),
        ("is_hex_color", "#abcd", False),
        ("is_hex_color", "123456", False),
        ("is_date", "2024-08-10", True),
        ("is_date", "2024/08/10", False),
        ("is_time", "14:30:00", True),
        ("is_time", "2:30 PM", False),
        ("is_latitude", "37.7749", True),
        ("is_latitude", "90.0000", True),
        ("is_latitude", "-45", True),
        ("is_latitude", "100.0000", False),
        ("is_longitude", "-122.4194", True),
        ("is_longitude", "180.0", True),
        ("is_longitude", "181.0", False),
        ("is_credit_card", "4111111111111111", True),
        ("is_credit_card", "378282246310005", True),
        ("is_credit_card", "6011111111111117", True),
        ("is_credit_card", "1234", False),
    ],
)
def test_named_shapes(flag: str, text: str, expected: bool) -> None:
    matcher = compile_config(PatternConfig(**{flag: True}))
    assert matcher.matches(text) is expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2001:0db8:85a3:0000:0000:8a2e:0370:7334", True),
        ("2001:db8::1", True),
        ("::1", True),
        ("::", True),
        ("1::", True),
        ("fe80::7:8%eth0", True),
        ("::ffff:192.0.2.128", True),
        ("2001:db8:3:4::192.0.2.33", True),
        ("1:2:3:4:5:6:7:8:9", False),
        ("12345::", False),
        ("gggg::1", False),
        ("1.2.3.4", False),
    ],
)
def test_ipv6(text: str, expected: bool) -> None:
    matcher = compile_config(PatternConfig(is_ipv6=True))
    assert matcher.matches(text) is expected


def test_date_format_tokens() -> None:
    matcher = compile_config(PatternConfig(is_date=True, date_format="YYYY-MM-DD"))
    assert matcher.matches("2024-08-10")
    assert not matcher.matches("10-08-2024")
    assert not matcher.matches("2024-13-01")
    assert matcher.pattern == r"\d{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])"


def test_time_format_tokens() -> None:
    matcher = compile_config(PatternConfig(is_time=True, time_format="HH:mm:ss"))
    assert matcher.matches("14:30:00")
    assert not matcher.matches("24:00:00")
    assert not matcher.matches("2:30 PM")


def test_credit_card_brand_filter() -> None:
    matcher = compile_config(
        PatternConfig(is_credit_card=True, supported_credit_cards=("visa", "mastercard"))
    )
    assert matcher.matches("4111111111111111")
    assert matcher.matches("5500000000000004")
    assert not matcher.matches("340000000000009")


def test_credit_card_pattern_selection() -> None:
    assert credit_card_pattern([]) == "|".join(CREDIT_CARD_PATTERNS.values())
    assert credit_card_pattern(["VISA"]) == ""
    assert credit_card_pattern(["visa "]) == ""
    assert credit_card_pattern(["visa", "visa"]) == CREDIT_CARD_PATTERNS["visa"]
    assert credit_card_pattern(["amex", "bogus", "jcb"]) == (
        CREDIT_CARD_PATTERNS["amex"] + "|" + CREDIT_CARD_PATTERNS["jcb"]
    )
    assert credit_card_pattern(["bogus"]) == ""


def test_shape_precedence() -> None:
    both = compile_config(PatternConfig(is_email=True, is_url=True, is_credit_card=True))
    assert both == compile_config(PatternConfig(is_email=True))
    assert select_shape(PatternConfig(is_latitude=True, is_longitude=True)) is Shape.LATITUDE
    assert select_shape(PatternConfig(is_time=True, is_ipv6=True)) is Shape.IPV6
    assert select_shape(PatternConfig()) is None


def test_shape_ignores_general_constraints() -> None:
    config = PatternConfig(
        is_ipv4=True,
        include_digits=True,
        min_length=50,
        prefix="x",
        allowed_words=("a",),
        custom_pattern="zzz",
    )
    matcher = compile_config(config)
    assert matcher.pattern == SHAPE_PATTERNS[Shape.IPV4]
    assert matcher.shape is Shape.IPV4
    assert matcher.matches("10.0.0.1")


def test_shape_pattern_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        SHAPE_PATTERNS[Shape.EMAIL] = "x"  # type: ignore[index]
    with pytest.raises(TypeError):
        CREDIT_CARD_PATTERNS["visa"] = "x"  # type: ignore[index]
    assert shape_pattern(Shape.DATE, PatternConfig()) == r"^\d{4}-\d{2}-\d{2}$"


def test_formatted_date_and_time_match_inside_text() -> None:
    date = compile_config(PatternConfig(is_date=True, date_format="YYYY-MM-DD"))
    assert date.matches("due 2024-08-10.")
    assert not date.matches("due 10-08-2024.")
    time = compile_config(PatternConfig(is_time=True, time_format="HH:mm"))
    assert time.matches("at 14:30 today")
    assert not time.matches("at 2:30 today")


def test_default_date_and_time_stay_anchored() -> None:
    assert not compile_config(PatternConfig(is_date=True)).matches("due 2024-08-10.")
    assert not compile_config(PatternConfig(is_time=True)).matches("at 14:30:00 today")
    assert compile_config(PatternConfig(is_time=True)).matches("14:30:00")


def test_credit_card_brands_are_case_sensitive() -> None:
    matcher = compile_config(PatternConfig(is_credit_card=True, supported_credit_cards=("VISA", "amex")))
    assert matcher.pattern == CREDIT_CARD_PATTERNS["amex"]
    assert not matcher.matches("4111111111111111")

"""Format token and escaping tests."""

import pytest

from regexforge.engine import tokens
from regexforge.engine.escaping import alternation, escape_literal


def test_translate_date_format() -> None:
    result = tokens.translate_format("YYYY-MM-DD", tokens.DATE_TOKENS)
    assert result == r"\d{4}-(?:0[1-9]|1[0-2])-(?:0[1-9]|[12]\d|3[01])"


def test_translate_time_format() -> None:
    assert tokens.time_fragment("HH:mm") == r"(?:[01]\d|2[0-3]):[0-5]\d"
    assert tokens.time_fragment("mm:ss") == r"[0-5]\d:[0-5]\d"


@pytest.mark.parametrize(
    "fmt,expected",
    [
        (None, tokens.DEFAULT_DATE_FRAGMENT),
        ("YYYY/Q", r"\d{4}/Q"),
        ("yyyy", "yyyy"),
        ("DD", r"(?:0[1-9]|[12]\d|3[01])"),
    ],
)
def test_date_fragment(fmt: str | None, expected: str) -> None:
    assert tokens.date_fragment(fmt) == expected


def test_time_fragment_default() -> None:
    assert tokens.time_fragment(None) == r"\d{2}:\d{2}:\d{2}"


def test_escape_literal_and_alternation() -> None:
    assert escape_literal("a.b") == r"a\.b"
    assert escape_literal("plain") == "plain"
    assert alternation(["a+b", "c"]) == r"a\+b|c"
    assert alternation([]) == ""

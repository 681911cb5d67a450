"""Date/time format token translation.

Formats are plain strings such as ``"YYYY-MM-DD"`` or ``"HH:mm"``. Each known
token is replaced literally (case-sensitive) by the fragment that matches its
values; anything else in the format, separators and unknown tokens alike, is
copied into the pattern unchanged.
"""
from __future__ import annotations

from collections.abc import Sequence

# Replacement order matters: no fragment may contain a later token.
DATE_TOKENS: tuple[tuple[str, str], ...] = (
    ("YYYY", r"\d{4}"),
    ("MM", r"(?:0[1-9]|1[0-2])"),
    ("DD", r"(?:0[1-9]|[12]\d|3[01])"),
)

TIME_TOKENS: tuple[tuple[str, str], ...] = (
    ("HH", r"(?:[01]\d|2[0-3])"),
    ("mm", r"[0-5]\d"),
    ("ss", r"[0-5]\d"),
)

DEFAULT_DATE_FRAGMENT = r"\d{4}-\d{2}-\d{2}"
DEFAULT_TIME_FRAGMENT = r"\d{2}:\d{2}:\d{2}"


def translate_format(fmt: str, tokens: Sequence[tuple[str, str]]) -> str:
    result = fmt
    for token, fragment in tokens:
        result = result.replace(token, fragment)
    return result


def date_fragment(fmt: str | None) -> str:
    if fmt is None:
        return DEFAULT_DATE_FRAGMENT
    return translate_format(fmt, DATE_TOKENS)


def time_fragment(fmt: str | None) -> str:
    if fmt is None:
        return DEFAULT_TIME_FRAGMENT
    return translate_format(fmt, TIME_TOKENS)

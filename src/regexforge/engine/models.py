"""Data models shared across the regexforge engine."""
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shapes import Shape


_SEQUENCE_FIELDS = (
    "must_contain",
    "must_not_contain",
    "allowed_words",
    "disallowed_words",
    "supported_credit_cards",
)


class PatternCompilationError(ValueError):
    """Raised when ``re`` rejects the assembled pattern text."""

    def __init__(self, pattern: str, message: str) -> None:
        super().__init__(f"Error generating regular expression: {message}")
        self.pattern = pattern


@dataclass(frozen=True)
class PatternConfig:
    """Declarative description of the strings a pattern should accept.

    Character classes (unioned into one bracket expression):
        include_digits, include_letters, include_whitespace, include_special,
        include_arabic

    Matcher options (passed to ``re.compile``, never into the pattern text):
        case_insensitive, multi_line, dot_all

    Named shapes (at most one is used; see :class:`regexforge.engine.shapes.Shape`
    for the priority order when several are set):
        is_email, is_url, is_phone, is_ipv4, is_ipv6, is_hex_color, is_date,
        is_time, is_latitude, is_longitude, is_credit_card

    General constraints (ignored when a named shape is active):
        min_length/max_length, exact_repetitions/min_repetitions/max_repetitions,
        prefix/suffix, must_contain/must_not_contain, allowed_words/disallowed_words,
        custom_pattern

    Bounds are not validated here. Inconsistent ones such as
    ``min_length > max_length`` go straight into the pattern text, and ``re``
    decides whether to accept them.
    """
    # Character classes
    include_digits: bool = False
    include_letters: bool = False
    include_whitespace: bool = False
    include_special: bool = False
    include_arabic: bool = False

    # Matcher options
    case_insensitive: bool = False
    multi_line: bool = False
    dot_all: bool = False

    # Override
    custom_pattern: str = ""

    # Named shapes
    is_email: bool = False
    is_url: bool = False
    is_phone: bool = False
    is_ipv4: bool = False
    is_ipv6: bool = False
    is_hex_color: bool = False
    is_date: bool = False
    is_time: bool = False
    is_latitude: bool = False
    is_longitude: bool = False
    is_credit_card: bool = False

    # Length and repetition
    min_length: int | None = None
    max_length: int | None = None
    exact_repetitions: int | None = None
    min_repetitions: int | None = None
    max_repetitions: int | None = None

    # Literals
    prefix: str | None = None
    suffix: str | None = None
    must_contain: Sequence[str] = ()
    must_not_contain: Sequence[str] = ()
    allowed_words: Sequence[str] = ()
    disallowed_words: Sequence[str] = ()

    # Shape parameters
    date_format: str | None = None
    time_format: str | None = None
    supported_credit_cards: Sequence[str] = ()

    def __post_init__(self) -> None:
        for name in _SEQUENCE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                raise TypeError(f"{name} must be a sequence of strings, not a string")
            object.__setattr__(self, name, tuple(value))

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            payload[item.name] = list(value) if isinstance(value, tuple) else value
        return payload


@dataclass(frozen=True)
class CompiledMatcher:
    """Pattern text plus the options it was compiled with."""
    pattern: str
    regex: re.Pattern[str] = field(compare=False, repr=False)
    case_insensitive: bool = False
    multi_line: bool = False
    dot_all: bool = False
    unicode: bool = True
    shape: Shape | None = None

    @property
    def flags(self) -> int:
        return matcher_flags(self.case_insensitive, self.multi_line, self.dot_all)

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def match_all(self, texts: Sequence[str]) -> list[bool]:
        return [self.matches(text) for text in texts]

    def to_dict(self) -> dict[str, object]:
        return {
            "pattern": self.pattern,
            "shape": self.shape.value if self.shape is not None else None,
            "case_insensitive": self.case_insensitive,
            "multi_line": self.multi_line,
            "dot_all": self.dot_all,
            "unicode": self.unicode,
        }


def matcher_flags(case_insensitive: bool, multi_line: bool, dot_all: bool) -> int:
    flags = re.UNICODE
    if case_insensitive:
        flags |= re.IGNORECASE
    if multi_line:
        flags |= re.MULTILINE
    if dot_all:
        flags |= re.DOTALL
    return flags

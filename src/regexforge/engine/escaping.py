"""Literal quoting helpers."""
from __future__ import annotations

import re
from collections.abc import Iterable


def escape_literal(text: str) -> str:
    """Quote ``text`` so it matches itself verbatim."""
    return re.escape(text)


def alternation(words: Iterable[str]) -> str:
    """Escaped ``w1|w2|...`` body, without the surrounding group."""
    return "|".join(escape_literal(word) for word in words)

"""General constraint pipeline.

Each stage takes the pattern built so far plus the configuration and returns
a new pattern. Stages run in :data:`PIPELINE` order and some of them throw
away what came before them:

* the length stage replaces the pattern with ``^.{min,max}$`` whenever a
  length bound is set, so character classes, lookaheads and repetitions are
  lost (length counts raw characters);
* a non-empty ``allowed_words`` list replaces the pattern with the word
  alternation;
* a non-empty ``custom_pattern`` replaces everything.

Callers rely on these replacements, so they are kept as they are.
"""
from __future__ import annotations

import logging
from typing import Callable

from .escaping import alternation, escape_literal
from .models import PatternConfig

logger = logging.getLogger(__name__)

Stage = Callable[[str, PatternConfig], str]

SPECIAL_CHARS = r"""!@#$%^&*()_+\-=\[\]{};:"\\|,.<>?/~"""
ARABIC_RANGES = r"\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF"
MATCH_ANYTHING = ".*"


def character_class(pattern: str, config: PatternConfig) -> str:
    parts: list[str] = []
    if config.include_digits:
        parts.append(r"\d")
    if config.include_letters:
        parts.append("a-zA-Z")
    if config.include_whitespace:
        parts.append(r"\s")
    if config.include_special:
        parts.append(SPECIAL_CHARS)
    if config.include_arabic:
        parts.append(ARABIC_RANGES)
    return f"[{''.join(parts)}]+" if parts else ""


def lookarounds(pattern: str, config: PatternConfig) -> str:
    lookaheads = "".join(f"(?=.*{escape_literal(text)})" for text in config.must_contain)
    lookaheads += "".join(f"(?!.*{escape_literal(text)})" for text in config.must_not_contain)
    return lookaheads + (pattern or MATCH_ANYTHING)


def repetitions(pattern: str, config: PatternConfig) -> str:
    if config.exact_repetitions is not None:
        return f"(?:{pattern}){{{config.exact_repetitions}}}"
    if config.min_repetitions is not None or config.max_repetitions is not None:
        low = config.min_repetitions if config.min_repetitions is not None else 0
        high = config.max_repetitions if config.max_repetitions is not None else ""
        return f"(?:{pattern}){{{low},{high}}}"
    return pattern


def length_bounds(pattern: str, config: PatternConfig) -> str:
    if config.min_length is None and config.max_length is None:
        return pattern
    low = config.min_length if config.min_length is not None else 0
    high = config.max_length if config.max_length is not None else ""
    return f"^.{{{low},{high}}}$"


def prefix_suffix(pattern: str, config: PatternConfig) -> str:
    if config.prefix is not None:
        pattern = escape_literal(config.prefix) + pattern
    if config.suffix is not None:
        pattern = pattern + escape_literal(config.suffix)
    return pattern


def word_constraints(pattern: str, config: PatternConfig) -> str:
    if config.allowed_words:
        pattern = f"(?:{alternation(config.allowed_words)})"
    if config.disallowed_words:
        pattern = f"(?!.*(?:{alternation(config.disallowed_words)})).*{pattern}"
    return pattern


def custom_override(pattern: str, config: PatternConfig) -> str:
    return config.custom_pattern or pattern


PIPELINE: tuple[tuple[str, Stage], ...] = (
    ("character_class", character_class),
    ("lookarounds", lookarounds),
    ("repetitions", repetitions),
    ("length_bounds", length_bounds),
    ("prefix_suffix", prefix_suffix),
    ("word_constraints", word_constraints),
    ("custom_override", custom_override),
)


def trace_pipeline(config: PatternConfig) -> list[tuple[str, str]]:
    """Run every stage and record ``(stage_name, output)`` after each one."""
    trace: list[tuple[str, str]] = []
    pattern = ""
    for name, stage in PIPELINE:
        pattern = stage(pattern, config)
        logger.debug("stage %s -> %r", name, pattern)
        trace.append((name, pattern))
    return trace


def run_pipeline(config: PatternConfig) -> str:
    """Unanchored output of the general pipeline."""
    return trace_pipeline(config)[-1][1]

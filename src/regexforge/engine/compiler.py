"""Compile a :class:`PatternConfig` into a :class:`CompiledMatcher`."""
from __future__ import annotations

import logging
import re

from .models import CompiledMatcher, PatternCompilationError, PatternConfig, matcher_flags
from .shapes import Shape, shape_pattern
from .stages import run_pipeline

logger = logging.getLogger(__name__)


def select_shape(config: PatternConfig) -> Shape | None:
    """Highest-priority named shape requested by ``config``, or ``None``."""
    for shape in Shape:
        if getattr(config, shape.flag):
            return shape
    return None


def build_pattern(config: PatternConfig) -> tuple[Shape | None, str]:
    """Return the selected shape and the pattern text, without compiling."""
    shape = select_shape(config)
    if shape is not None:
        logger.debug("using named shape %s", shape.value)
        return shape, shape_pattern(shape, config)
    return None, "^" + run_pipeline(config) + "$"


def compile_config(config: PatternConfig) -> CompiledMatcher:
    """Build and compile the pattern described by ``config``.

    Raises:
        PatternCompilationError: ``re`` rejected the pattern text, typically
            because of an invalid ``custom_pattern`` or date/time format.
    """
    shape, pattern = build_pattern(config)
    flags = matcher_flags(config.case_insensitive, config.multi_line, config.dot_all)
    try:
        regex = re.compile(pattern, flags)
    except re.error as exc:
        raise PatternCompilationError(pattern, str(exc)) from exc
    logger.debug("compiled pattern %r (flags=%d)", pattern, flags)
    return CompiledMatcher(
        pattern=pattern,
        regex=regex,
        case_insensitive=config.case_insensitive,
        multi_line=config.multi_line,
        dot_all=config.dot_all,
        shape=shape,
    )

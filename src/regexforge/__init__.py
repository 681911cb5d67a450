"""regexforge declarative regular expression builder."""

from collections.abc import Sequence

from .engine.compiler import compile_config
from .engine.models import CompiledMatcher, PatternCompilationError, PatternConfig
from .engine.shapes import Shape

__version__ = "1.0.0"


def build_regex(**fields: object) -> CompiledMatcher:
    """Compile a :class:`PatternConfig` built from keyword arguments.

    >>> build_regex(min_length=3, max_length=5).matches("abcd")
    True
    """
    return compile_config(PatternConfig(**fields))  # type: ignore[arg-type]


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`regexforge.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "CompiledMatcher",
    "PatternCompilationError",
    "PatternConfig",
    "Shape",
    "build_regex",
    "compile_config",
    "main",
]

"""Command line interface for the regexforge pattern builder."""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence

from . import __version__, io
from .engine.compiler import compile_config
from .engine.explain import explain_dict, explain_text
from .engine.models import PatternConfig
from .engine.shapes import CREDIT_CARD_PATTERNS, SHAPE_PATTERNS, Shape

logger = logging.getLogger(__name__)

# CLI flag -> PatternConfig field for on/off switches.
_SWITCHES = {
    "digits": "include_digits",
    "letters": "include_letters",
    "whitespace": "include_whitespace",
    "special": "include_special",
    "arabic": "include_arabic",
    "ignore_case": "case_insensitive",
    "multiline": "multi_line",
    "dotall": "dot_all",
}

# CLI dest -> PatternConfig field for valued options, copied when given.
_VALUES = {
    "custom": "custom_pattern",
    "min_length": "min_length",
    "max_length": "max_length",
    "exact_repetitions": "exact_repetitions",
    "min_repetitions": "min_repetitions",
    "max_repetitions": "max_repetitions",
    "prefix": "prefix",
    "suffix": "suffix",
    "must_contain": "must_contain",
    "must_not_contain": "must_not_contain",
    "allowed_words": "allowed_words",
    "disallowed_words": "disallowed_words",
    "date_format": "date_format",
    "time_format": "time_format",
    "cards": "supported_credit_cards",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="regexforge", description="Declarative regex builder")
    parser.add_argument("-V", "--version", action="version", version=f"regexforge {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="log pipeline stages")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_config_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--config", help="JSON configuration file ('-' for stdin)")
        for flag in _SWITCHES:
            cmd.add_argument(f"--{flag.replace('_', '-')}", dest=flag, action="store_true", default=False)
        cmd.add_argument("--custom", help="override pattern")
        cmd.add_argument(
            "--shape",
            action="append",
            choices=[shape.value for shape in Shape],
            help="named shape (repeatable; the highest-priority one wins)",
        )
        cmd.add_argument("--min-length", type=int)
        cmd.add_argument("--max-length", type=int)
        cmd.add_argument("--exact-repetitions", type=int)
        cmd.add_argument("--min-repetitions", type=int)
        cmd.add_argument("--max-repetitions", type=int)
        cmd.add_argument("--prefix")
        cmd.add_argument("--suffix")
        cmd.add_argument("--must-contain", action="append")
        cmd.add_argument("--must-not-contain", action="append")
        cmd.add_argument("--allowed-words", nargs="+")
        cmd.add_argument("--disallowed-words", nargs="+")
        cmd.add_argument("--date-format")
        cmd.add_argument("--time-format")
        cmd.add_argument("--cards", nargs="+", help="credit card brands to accept")

    build = sub.add_parser("build", help="print the compiled pattern")
    add_config_options(build)
    build.add_argument("--format", choices=["text", "json"], default="text")
    build.add_argument("--out", default="-")

    test = sub.add_parser("test", help="check sample strings against the pattern")
    add_config_options(test)
    test.add_argument("-s", "--sample", dest="samples", action="append", default=[], help="sample text (repeatable)")
    test.add_argument("--samples", dest="samples_file", help="file with one sample per line")
    test.add_argument("--expect", choices=["match", "reject"])

    explain = sub.add_parser("explain", help="show how the pattern was assembled")
    add_config_options(explain)
    explain.add_argument("--format", choices=["text", "json"], default="text")

    shapes = sub.add_parser("shapes", help="list named shapes in priority order")
    shapes.add_argument("--format", choices=["text", "json"], default="text")
    return parser


def _build_config(args: argparse.Namespace) -> PatternConfig:
    """Load ``--config`` (if any) and overlay the flags given on the command line."""
    config = io.load_config(args.config) if args.config else PatternConfig()
    changes: dict[str, object] = {}
    for dest, name in _SWITCHES.items():
        if getattr(args, dest):
            changes[name] = True
    for dest, name in _VALUES.items():
        value = getattr(args, dest)
        if value is not None:
            changes[name] = value
    for shape_name in args.shape or []:
        changes[Shape(shape_name).flag] = True
    return dataclasses.replace(config, **changes)  # type: ignore[arg-type]


def _command_build(args: argparse.Namespace) -> int:
    matcher = compile_config(_build_config(args))
    if args.format == "json":
        io.write_json(matcher.to_dict(), args.out)
    else:
        io.write_text(matcher.pattern + "\n", args.out)
    return 0


def _command_test(args: argparse.Namespace) -> int:
    matcher = compile_config(_build_config(args))
    samples = list(args.samples)
    if args.samples_file:
        samples.extend(io.read_samples(args.samples_file))
    failures = 0
    lines: list[str] = []
    for sample in samples:
        matched = matcher.matches(sample)
        lines.append(f"{'MATCH' if matched else 'NO MATCH'}\t{sample}")
        if args.expect is not None and matched != (args.expect == "match"):
            failures += 1
    if args.expect is not None:
        lines.append(f"{len(samples) - failures} of {len(samples)} as expected")
    io.write_text("\n".join(lines) + "\n", "-")
    return 1 if failures else 0


def _command_explain(args: argparse.Namespace) -> int:
    config = _build_config(args)
    # Compile first so an invalid pattern is reported as an error.
    compile_config(config)
    if args.format == "json":
        io.write_json(explain_dict(config), "-")
    else:
        io.write_text(explain_text(config) + "\n", "-")
    return 0


def _command_shapes(args: argparse.Namespace) -> int:
    fixed = {shape.value: SHAPE_PATTERNS.get(shape) for shape in Shape}
    if args.format == "json":
        io.write_json({"shapes": fixed, "credit_cards": dict(CREDIT_CARD_PATTERNS)}, "-")
        return 0
    lines = []
    for priority, shape in enumerate(Shape, start=1):
        pattern = fixed[shape.value]
        lines.append(f"{priority:>2}. {shape.value}" + (f"\t{pattern}" if pattern else ""))
    lines.append("credit card brands: " + ", ".join(CREDIT_CARD_PATTERNS))
    io.write_text("\n".join(lines) + "\n", "-")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    commands = {
        "build": _command_build,
        "test": _command_test,
        "explain": _command_explain,
        "shapes": _command_shapes,
    }
    command = commands.get(args.command)
    if command is None:
        parser.error(f"unknown command {args.command}")
        return 1
    try:
        return command(args)
    except (ValueError, TypeError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

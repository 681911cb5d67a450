"""Explanation helpers for regexforge configurations."""
from __future__ import annotations

from .compiler import build_pattern
from .models import PatternConfig
from .stages import trace_pipeline


def explain_dict(config: PatternConfig) -> dict[str, object]:
    shape, pattern = build_pattern(config)
    stages: list[dict[str, str]] = []
    if shape is None:
        stages = [{"stage": name, "output": output} for name, output in trace_pipeline(config)]
    return {
        "branch": "shape" if shape is not None else "pipeline",
        "shape": shape.value if shape is not None else None,
        "pattern": pattern,
        "options": {
            "case_insensitive": config.case_insensitive,
            "multi_line": config.multi_line,
            "dot_all": config.dot_all,
            "unicode": True,
        },
        "stages": stages,
    }


def explain_text(config: PatternConfig) -> str:
    shape, pattern = build_pattern(config)
    lines = [f"BRANCH: shape {shape.value}" if shape is not None else "BRANCH: pipeline"]
    lines.append(f"PATTERN: {pattern}")
    enabled = [
        name
        for name, value in (
            ("case_insensitive", config.case_insensitive),
            ("multi_line", config.multi_line),
            ("dot_all", config.dot_all),
            ("unicode", True),
        )
        if value
    ]
    lines.append(f"OPTIONS: {', '.join(enabled)}")
    if shape is None:
        for name, output in trace_pipeline(config):
            lines.append(f"  {name:<18} {output or '(empty)'}")
    return "\n".join(lines)

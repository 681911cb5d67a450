#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of regexforge

Builds a few patterns from declarative configurations and checks sample
strings against them.
"""
import sys
sys.path.insert(0, "../src")

from regexforge import PatternConfig, build_regex, compile_config
from regexforge.engine.explain import explain_text


def show(title: str, config: PatternConfig, samples: list[str]) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)
    matcher = compile_config(config)
    print(f"  Pattern: {matcher.pattern}")
    for sample in samples:
        mark = "✓" if matcher.matches(sample) else "✗"
        print(f"  {mark} {sample}")


# ============================================================================
# EXAMPLE 1: Named shapes
# ============================================================================
show("EXAMPLE 1: Email shape", PatternConfig(is_email=True), ["example@example.com", "invalid-email"])
show(
    "EXAMPLE 2: Credit cards, Visa and Mastercard only",
    PatternConfig(is_credit_card=True, supported_credit_cards=("visa", "mastercard")),
    ["4111111111111111", "5500000000000004", "340000000000009"],
)
show(
    "EXAMPLE 3: Date with a format",
    PatternConfig(is_date=True, date_format="YYYY-MM-DD"),
    ["2024-08-10", "10-08-2024"],
)

# ============================================================================
# EXAMPLE 4: General constraints
# ============================================================================
show(
    "EXAMPLE 4: Must contain 'abc', must not contain 'xyz'",
    PatternConfig(must_contain=("abc",), must_not_contain=("xyz",)),
    ["abcdef", "abxyz", "xyzabc"],
)

# Keyword form, one call
matcher = build_regex(include_digits=True, prefix="ID-")
print(f"\nbuild_regex(include_digits=True, prefix='ID-') -> {matcher.pattern}")
print(f"  ID-123 matches: {matcher.matches('ID-123')}")

# ============================================================================
# EXAMPLE 5: How the pipeline assembled a pattern
# ============================================================================
print("\n" + explain_text(PatternConfig(include_letters=True, min_length=3, max_length=8, suffix="!")))

"""Input/output helpers for the regexforge CLI."""
import json
import sys
from collections.abc import Mapping
from dataclasses import fields

from .engine.models import PatternConfig

_FIELD_NAMES = frozenset(item.name for item in fields(PatternConfig))

# Key spellings used by configurations written for the reference builder.
CAMEL_CASE_KEYS: dict[str, str] = {
    "supportNumbers": "include_digits",
    "supportLetters": "include_letters",
    "supportWhitespace": "include_whitespace",
    "supportSpecialChars": "include_special",
    "supportArabic": "include_arabic",
    "caseInsensitive": "case_insensitive",
    "multiLine": "multi_line",
    "dotAll": "dot_all",
    "customPattern": "custom_pattern",
    "isEmail": "is_email",
    "isUrl": "is_url",
    "isPhoneNumber": "is_phone",
    "isIPv4": "is_ipv4",
    "isIPv6": "is_ipv6",
    "isHexColor": "is_hex_color",
    "isDate": "is_date",
    "isTime": "is_time",
    "isLatitude": "is_latitude",
    "isLongitude": "is_longitude",
    "isCreditCard": "is_credit_card",
    "minLength": "min_length",
    "maxLength": "max_length",
    "exactRepetitions": "exact_repetitions",
    "minRepetitions": "min_repetitions",
    "maxRepetitions": "max_repetitions",
    "mustContain": "must_contain",
    "mustNotContain": "must_not_contain",
    "allowedWords": "allowed_words",
    "disallowedWords": "disallowed_words",
    "dateFormat": "date_format",
    "timeFormat": "time_format",
    "supportedCreditCards": "supported_credit_cards",
}


def config_from_dict(payload: Mapping[str, object]) -> PatternConfig:
    """Build a config from snake_case or reference camelCase keys."""
    kwargs: dict[str, object] = {}
    for key, value in payload.items():
        name = CAMEL_CASE_KEYS.get(key, key)
        if name not in _FIELD_NAMES:
            raise ValueError(f"unknown configuration key: {key}")
        kwargs[name] = value
    return PatternConfig(**kwargs)  # type: ignore[arg-type]


def load_config(path: str) -> PatternConfig:
    if path == "-":
        payload = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as handle:
            payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError("configuration file must contain a JSON object")
    return config_from_dict(payload)


def read_samples(path: str) -> list[str]:
    """Read sample strings, one per non-blank line; line endings are dropped."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle if line.strip()]


def write_text(text: str, path: str) -> None:
    """Write ``text`` to ``path`` (``-`` for stdout), ending with a newline."""
    if not text.endswith("\n"):
        text += "\n"
    if path == "-":
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def write_json(obj: object, path: str) -> None:
    write_text(json.dumps(obj, indent=2, sort_keys=True), path)

"""Named shape presets.

A named shape replaces the whole general pipeline with a fixed, anchored
pattern. :class:`Shape` lists the shapes in priority order: when a
configuration requests several of them, the first one declared wins.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from types import MappingProxyType

from .models import PatternConfig
from .tokens import DEFAULT_DATE_FRAGMENT, DEFAULT_TIME_FRAGMENT, date_fragment, time_fragment

logger = logging.getLogger(__name__)


class Shape(str, enum.Enum):
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    HEX_COLOR = "hex_color"
    DATE = "date"
    TIME = "time"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    CREDIT_CARD = "credit_card"

    @property
    def flag(self) -> str:
        """Name of the :class:`PatternConfig` field that selects this shape."""
        return f"is_{self.value}"


_HEX_GROUP = r"[0-9a-fA-F]{1,4}"
_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[0-1]?[0-9][0-9]?)"
_IPV4_EMBEDDED = rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}"

_IPV6_ALTERNATIVES = (
    rf"(?:{_HEX_GROUP}:){{7}}{_HEX_GROUP}",  # 1:2:3:4:5:6:7:8
    rf"(?:{_HEX_GROUP}:){{1,7}}:",  # 1::  1:2:3:4:5:6:7::
    rf"(?:{_HEX_GROUP}:){{1,6}}:{_HEX_GROUP}",  # 1::8
    rf"(?:{_HEX_GROUP}:){{1,5}}(?::{_HEX_GROUP}){{1,2}}",
    rf"(?:{_HEX_GROUP}:){{1,4}}(?::{_HEX_GROUP}){{1,3}}",
    rf"(?:{_HEX_GROUP}:){{1,3}}(?::{_HEX_GROUP}){{1,4}}",
    rf"(?:{_HEX_GROUP}:){{1,2}}(?::{_HEX_GROUP}){{1,5}}",
    rf"{_HEX_GROUP}(?::{_HEX_GROUP}){{1,6}}",  # 1::3:4:5:6:7:8
    rf":(?:(?::{_HEX_GROUP}){{1,7}}|:)",  # ::2:3:4:5:6:7:8  ::
    r"fe80:(?::[0-9a-fA-F]{0,4}){0,4}%[0-9a-zA-Z]+",  # link-local with zone index
    rf"::(?:ffff(?::0{{1,4}})?:)?{_IPV4_EMBEDDED}",  # ::ffff:255.255.255.255
    rf"(?:{_HEX_GROUP}:){{1,4}}:{_IPV4_EMBEDDED}",  # 2001:db8:3:4::192.0.2.33
)

SHAPE_PATTERNS: MappingProxyType[Shape, str] = MappingProxyType(
    {
        Shape.EMAIL: r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$",
        Shape.URL: r"^(https?|ftp)://[^\s/$.?#].[^\s]*$",
        Shape.PHONE: r"^\+?[1-9]\d{1,14}$",
        Shape.IPV4: r"^(\d{1,3}\.){3}\d{1,3}$",
        Shape.IPV6: "^(?:" + "|".join(_IPV6_ALTERNATIVES) + ")$",
        Shape.HEX_COLOR: r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$",
        Shape.LATITUDE: r"^[-+]?([1-8]?\d(\.\d+)?|90(\.0+)?)$",
        Shape.LONGITUDE: r"^[-+]?((1[0-7]\d|[1-9]\d?)\.\d+|180(\.0+)?)$",
    }
)

CREDIT_CARD_PATTERNS: MappingProxyType[str, str] = MappingProxyType(
    {
        "visa": r"^4[0-9]{12}(?:[0-9]{3})?$",
        "mastercard": r"^5[1-5][0-9]{14}$",
        "amex": r"^3[47][0-9]{13}$",
        "discover": r"^6(?:011|5[0-9]{2})[0-9]{12}$",
        "jcb": r"^(?:2131|1800|35\d{3})\d{11}$",
        "dinersclub": r"^3(?:0[0-5]|[68][0-9])\d{11}$",
        "enroute": r"^2(014|149)\d{11}$",
        "unionpay": r"^62[0-9]{14,17}$",
    }
)


def credit_card_pattern(brands: Sequence[str]) -> str:
    """Alternate the patterns of ``brands`` (all brands when empty).

    Brand identifiers must match the table keys exactly; unknown ones are
    skipped. A filter with no known brand yields an empty pattern.
    """
    if not brands:
        return "|".join(CREDIT_CARD_PATTERNS.values())
    selected: list[str] = []
    for brand in brands:
        pattern = CREDIT_CARD_PATTERNS.get(brand)
        if pattern is None:
            logger.debug("Skipping unknown credit card brand %r", brand)
            continue
        if pattern not in selected:
            selected.append(pattern)
    return "|".join(selected)


def shape_pattern(shape: Shape, config: PatternConfig) -> str:
    """Pattern text for ``shape``.

    Only the default date and time patterns are anchored; a translated
    format is used as-is and can match inside longer text.
    """
    if shape is Shape.DATE:
        if config.date_format is None:
            return f"^{DEFAULT_DATE_FRAGMENT}$"
        return date_fragment(config.date_format)
    if shape is Shape.TIME:
        if config.time_format is None:
            return f"^{DEFAULT_TIME_FRAGMENT}$"
        return time_fragment(config.time_format)
    if shape is Shape.CREDIT_CARD:
        return credit_card_pattern(config.supported_credit_cards)
    return SHAPE_PATTERNS[shape]

"""Amounts of ether and helpers for reading loosely typed JSON fields."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

INVALID_TIMESTAMP = -1
INVALID_TIMESTAMP_STRING = "-1"
INVALID_PRICE = -1.0
INVALID_PRICE_STRING = "-1"

WEI_PER_ETH = 1_000_000_000_000_000_000.0
WEI_PER_SZABO = 1_000_000_000_000.0

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL_FLOATS = {"inf": math.inf, "+inf": math.inf, "-inf": -math.inf, "nan": math.nan}


def field_string(data: Any, key: str, default: str = "") -> str:
    """Return ``data[key]`` if it is a string, otherwise ``default``.

    A ``data`` that is not a mapping is treated as an empty object.
    """
    if not isinstance(data, Mapping):
        return default
    value = data.get(key)
    return value if isinstance(value, str) else default


def to_int(text: str) -> int:
    """Parse a base-10 integer; anything unparsable yields 0."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return 0
    return int(stripped)


def to_float(text: str) -> float:
    """Parse a decimal number; anything unparsable yields 0.0."""
    stripped = text.strip()
    special = _SPECIAL_FLOATS.get(stripped.lower())
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(stripped):
        return 0.0
    return float(stripped)


@dataclass(frozen=True)
class Ether:
    """A specific amount of ETH, held as a string of wei."""

    wei_string: str = ""

    def is_valid(self) -> bool:
        """True when the wei string is not empty."""
        return bool(self.wei_string)

    def wei(self) -> float:
        """The amount in wei."""
        return to_float(self.wei_string)

    def eth(self) -> float:
        """The amount in ETH."""
        return to_float(self.wei_string) / WEI_PER_ETH

    def szabo(self) -> float:
        """The amount in szabo."""
        return to_float(self.wei_string) / WEI_PER_SZABO

    @classmethod
    def from_ether_number_string(cls, eth_amount: str) -> Ether:
        """Build an Ether from a string holding an ETH amount.

        The decimal point is dropped from the string; an empty result gives
        an invalid Ether.
        """
        digits = eth_amount.replace(".", "")
        if not digits:
            return cls()
        return cls(digits)

    @classmethod
    def from_ether_number(cls, eth_amount: float) -> Ether:
        """Build an Ether from a number of ETH, formatted with six significant digits."""
        return cls.from_ether_number_string(f"{eth_amount:g}")


EtherBalance = Ether
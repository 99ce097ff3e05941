"""Daily statistics: network transaction fees and uncle block count with rewards."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

from ethscan_types.ether import (
    INVALID_TIMESTAMP,
    INVALID_TIMESTAMP_STRING,
    Ether,
    field_string,
    to_float,
    to_int,
)

INVALID_BLOCK_COUNT = -1

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _to_int64(text: str) -> int:
    value = to_int(text)
    return value if _INT64_MIN <= value <= _INT64_MAX else 0


def _timestamp(data: Any) -> int:
    return _to_int64(field_string(data, "unixTimeStamp", INVALID_TIMESTAMP_STRING))


def _utc_date(seconds: int) -> date:
    return datetime.fromtimestamp(seconds, tz=timezone.utc).date()


def _json_int32(data: Any, key: str, default: int) -> int:
    """An integral JSON number in 32-bit range, otherwise ``default``."""
    value = data.get(key) if isinstance(data, dict) else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    number = float(value)
    if not number.is_integer():
        return default
    result = int(number)
    return result if _INT32_MIN <= result <= _INT32_MAX else default


@dataclass(frozen=True)
class DailyTransactionFees:
    """Fees paid to miners on one day, in ETH."""

    utc_date: str = ""
    unix_timestamp: int = INVALID_TIMESTAMP
    transaction_fee_double: float = -1.0

    @classmethod
    def from_json(cls, data: Any) -> DailyTransactionFees:
        """Build from a reply object."""
        return cls(
            utc_date=field_string(data, "UTCDate"),
            unix_timestamp=_timestamp(data),
            transaction_fee_double=to_float(field_string(data, "transactionFee_Eth", "-1")),
        )

    def is_valid(self) -> bool:
        """True when a timestamp is present."""
        return self.unix_timestamp != INVALID_TIMESTAMP

    def time_stamp(self) -> date:
        """The day of the timestamp, in UTC."""
        return _utc_date(self.unix_timestamp)

    def transaction_fee_eth(self) -> Ether:
        """The fee as an Ether amount."""
        return Ether.from_ether_number(self.transaction_fee_double)

    def __str__(self) -> str:
        return (
            f"DailyTransactionFees(utcDate={self.utc_date}; "
            f"transactionFeeDouble={self.transaction_fee_double:g} ETH)"
        )


@dataclass(frozen=True)
class DailyUncleCountRewards:
    """Number of uncle blocks and their rewards on one day."""

    utc_date: str = ""
    unix_timestamp: int = INVALID_TIMESTAMP
    uncle_block_count: int = INVALID_BLOCK_COUNT
    uncle_block_rewards: Ether = field(default_factory=Ether)

    @classmethod
    def from_json(cls, data: Any) -> DailyUncleCountRewards:
        """Build from a reply object."""
        return cls(
            utc_date=field_string(data, "UTCDate"),
            unix_timestamp=_timestamp(data),
            uncle_block_count=_json_int32(data, "uncleBlockCount", INVALID_BLOCK_COUNT),
            uncle_block_rewards=Ether.from_ether_number_string(
                field_string(data, "uncleBlockRewards_Eth")
            ),
        )

    def is_valid(self) -> bool:
        """True when an uncle block count is present."""
        return self.uncle_block_count != INVALID_BLOCK_COUNT

    def time_stamp(self) -> date:
        """The day of the timestamp, in UTC."""
        return _utc_date(self.unix_timestamp)

    def __str__(self) -> str:
        return (
            f"DailyUncleCountRewards(utcDate={self.utc_date}; "
            f"uncleBlockRewards.eth()={self.uncle_block_rewards.eth():g} ETH; "
            f"uncleBlockCount={self.uncle_block_count})"
        )
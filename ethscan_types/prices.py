"""Ether supply and price records returned by the stats endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any

from ethscan_types.ether import (
    INVALID_PRICE,
    INVALID_PRICE_STRING,
    INVALID_TIMESTAMP,
    INVALID_TIMESTAMP_STRING,
    Ether,
    field_string,
    to_float,
    to_int,
)


def _utc_datetime(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


@dataclass(frozen=True)
class Ether2Supply:
    """Total supply of ether including staking, burnt fees and withdrawals."""

    eth_supply: Ether = field(default_factory=Ether)
    eth2_staking: Ether = field(default_factory=Ether)
    burnt_fees: Ether = field(default_factory=Ether)
    withdrawn_total: Ether = field(default_factory=Ether)

    @classmethod
    def from_json(cls, data: Any) -> Ether2Supply:
        """Build from a reply object."""
        return cls(
            eth_supply=Ether(field_string(data, "EthSupply")),
            eth2_staking=Ether(field_string(data, "Eth2Staking")),
            burnt_fees=Ether(field_string(data, "BurntFees")),
            withdrawn_total=Ether(field_string(data, "WithdrawnTotal")),
        )

    def is_valid(self) -> bool:
        """True when the ETH supply holds an amount."""
        return self.eth_supply.is_valid()


@dataclass(frozen=True)
class EtherPrice:
    """Last price of ether in BTC and USD."""

    eth_btc: float = INVALID_PRICE
    eth_btc_timestamp: int = INVALID_TIMESTAMP
    eth_usd: float = INVALID_PRICE
    eth_usd_timestamp: int = INVALID_TIMESTAMP

    @classmethod
    def from_json(cls, data: Any) -> EtherPrice:
        """Build from a reply object."""
        return cls(
            eth_btc=to_float(field_string(data, "ethbtc", INVALID_PRICE_STRING)),
            eth_btc_timestamp=to_int(field_string(data, "ethbtc_timestamp", INVALID_TIMESTAMP_STRING)),
            eth_usd=to_float(field_string(data, "ethusd", INVALID_PRICE_STRING)),
            eth_usd_timestamp=to_int(field_string(data, "ethusd_timestamp", INVALID_TIMESTAMP_STRING)),
        )

    def is_valid(self) -> bool:
        """True when both prices are present."""
        return self.eth_btc != INVALID_PRICE and self.eth_usd != INVALID_PRICE

    def eth_btc_time(self) -> datetime:
        """Time of the BTC price, in UTC."""
        return _utc_datetime(self.eth_btc_timestamp)

    def eth_usd_time(self) -> datetime:
        """Time of the USD price, in UTC."""
        return _utc_datetime(self.eth_usd_timestamp)


@dataclass(frozen=True)
class EtherHistoricalPrice:
    """Price of ether on one day."""

    utc_date: str = ""
    unix_timestamp: int = INVALID_TIMESTAMP
    value: float = INVALID_PRICE

    @classmethod
    def from_json(cls, data: Any) -> EtherHistoricalPrice:
        """Build from a reply object."""
        return cls(
            utc_date=field_string(data, "UTCDate"),
            unix_timestamp=to_int(field_string(data, "unixTimeStamp", INVALID_TIMESTAMP_STRING)),
            value=to_float(field_string(data, "value", INVALID_PRICE_STRING)),
        )

    def is_valid(self) -> bool:
        """True when a timestamp is present."""
        return self.unix_timestamp != INVALID_TIMESTAMP

    def time_stamp(self) -> date:
        """The day of the timestamp, in UTC."""
        return _utc_datetime(self.unix_timestamp).date()
"""Node statistics: total node count and chain size per client."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from ethscan_types.ether import field_string, to_int

INVALID_BLOCK_NUMBER = -1
INVALID_BLOCK_NUMBER_STRING = "-1"
INVALID_NODE_COUNT = 0

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1
_UINT64_MAX = 2**64 - 1


def _bounded(text: str, low: int, high: int) -> int:
    value = to_int(text)
    return value if low <= value <= high else 0


def _iso_date(text: str) -> date | None:
    try:
        return date.fromisoformat(text.strip())
    except ValueError:
        return None


class ClientType(Enum):
    """Ethereum client that reported a chain size."""

    GETH = "Geth"
    PARITY = "Parity"


class Syncmode(Enum):
    """Synchronisation mode of the reporting node."""

    DEFAULT = "Default"
    ARCHIVE = "Archive"


@dataclass(frozen=True)
class NodesCount:
    """Total number of discoverable nodes on a given day."""

    total_node_count: int = INVALID_NODE_COUNT
    utc_date: date | None = None

    @classmethod
    def from_json(cls, data: Any) -> NodesCount:
        """Build from a reply object."""
        return cls(
            total_node_count=_bounded(field_string(data, "TotalNodeCount"), 0, _UINT32_MAX),
            utc_date=_iso_date(field_string(data, "UTCDate")),
        )

    def is_valid(self) -> bool:
        """True when the node count is not zero."""
        return self.total_node_count != INVALID_NODE_COUNT

    def __str__(self) -> str:
        day = self.utc_date.isoformat() if self.utc_date else ""
        return f"NodesCount(utcDate={day}; totalNodeCount={self.total_node_count})"


@dataclass(frozen=True)
class ChainSize:
    """Size of the chain at a block, for one client and sync mode."""

    block_number: int = INVALID_BLOCK_NUMBER
    chain_time_stamp: date | None = None
    chain_size: int = 0
    client_type: ClientType = ClientType.GETH
    sync_mode: Syncmode = Syncmode.DEFAULT

    @classmethod
    def from_json(cls, data: Any) -> ChainSize:
        """Build from a reply object."""
        client = field_string(data, "clientType").casefold()
        mode = field_string(data, "syncMode").casefold()
        return cls(
            block_number=_bounded(
                field_string(data, "blockNumber", INVALID_BLOCK_NUMBER_STRING),
                _INT32_MIN,
                _INT32_MAX,
            ),
            chain_time_stamp=_iso_date(field_string(data, "chainTimeStamp")),
            chain_size=_bounded(field_string(data, "chainSize"), 0, _UINT64_MAX),
            client_type=ClientType.GETH if client == "geth" else ClientType.PARITY,
            sync_mode=Syncmode.DEFAULT if mode == "default" else Syncmode.ARCHIVE,
        )

    def is_valid(self) -> bool:
        """True when a block number is present."""
        return self.block_number != INVALID_BLOCK_NUMBER

    def __str__(self) -> str:
        stamp = self.chain_time_stamp.isoformat() if self.chain_time_stamp else ""
        return (
            f"ChainSize(blockNumber={self.block_number}; chainTimeStamp={stamp}; "
            f"chainSize={self.chain_size})"
        )
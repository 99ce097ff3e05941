"""Uncle block records contained in block and uncle reward replies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ethscan_types.ether import Ether, field_string, to_int

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _to_int32(text: str) -> int:
    value = to_int(text)
    return value if _INT32_MIN <= value <= _INT32_MAX else 0


@dataclass(frozen=True)
class Uncle:
    """One uncle block: its miner, position and reward."""

    miner: str = ""
    uncle_position: int = 0
    block_reward: Ether = field(default_factory=Ether)

    @classmethod
    def from_json(cls, data: Any) -> Uncle:
        """Build from a reply object."""
        return cls(
            miner=field_string(data, "miner"),
            uncle_position=_to_int32(field_string(data, "unclePosition")),
            block_reward=Ether(field_string(data, "blockreward")),
        )

    def is_valid(self) -> bool:
        """True when the miner field is empty."""
        return not self.miner

    def __str__(self) -> str:
        return (
            f"Uncle(miner={self.miner}; unclePosition={self.uncle_position}; "
            f"blockReward.eth()={self.block_reward.eth():g} ETH)"
        )
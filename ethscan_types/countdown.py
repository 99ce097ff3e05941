"""Estimated countdown to a given block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ethscan_types.ether import field_string, to_float, to_int

INVALID_BLOCK_NUMBER = -1
INVALID_BLOCK_NUMBER_STRING = "-1"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _block(data: Any, key: str) -> int:
    value = to_int(field_string(data, key, INVALID_BLOCK_NUMBER_STRING))
    return value if _INT32_MIN <= value <= _INT32_MAX else 0


@dataclass(frozen=True)
class EstimatedBlockCountdown:
    """Current block, target block, blocks remaining and estimated seconds left."""

    current_block: int = INVALID_BLOCK_NUMBER
    countdown_block: int = INVALID_BLOCK_NUMBER
    remaining_block: int = INVALID_BLOCK_NUMBER
    estimate_time_in_sec: float = 0.0

    @classmethod
    def from_json(cls, data: Any) -> EstimatedBlockCountdown:
        """Build from a reply object."""
        return cls(
            current_block=_block(data, "CurrentBlock"),
            countdown_block=_block(data, "CountdownBlock"),
            remaining_block=_block(data, "RemainingBlock"),
            estimate_time_in_sec=to_float(field_string(data, "EstimateTimeInSec")),
        )

    def is_valid(self) -> bool:
        """True when a current block number is present."""
        return self.current_block != INVALID_BLOCK_NUMBER

    def __str__(self) -> str:
        return (
            f"EstimatedBlockCountdown(currentBlock={self.current_block}; "
            f"countdownBlock={self.countdown_block}; remainingBlock={self.remaining_block}; "
            f"estimateTimeInSec={self.estimate_time_in_sec:g})"
        )
"""Gas oracle reply: suggested gas prices and recent block usage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ethscan_types.ether import field_string, to_float, to_int

INVALID_BLOCK_NUMBER = -1
INVALID_BLOCK_NUMBER_STRING = "-1"

_INT16_MIN = -(2**15)
_INT16_MAX = 2**15 - 1
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _bounded(text: str, low: int, high: int) -> int:
    value = to_int(text)
    return value if low <= value <= high else 0


@dataclass(frozen=True)
class GasOracle:
    """Safe, proposed and fast gas prices with the suggested base fee."""

    last_block: int = INVALID_BLOCK_NUMBER
    safe_gas_price: int = 0
    proposed_gas_price: int = 0
    fast_gas_price: int = 0
    suggested_base_fee: float = 0.0
    gas_used_ratio_string: str = ""

    @classmethod
    def from_json(cls, data: Any) -> GasOracle:
        """Build from a reply object."""
        return cls(
            last_block=_bounded(
                field_string(data, "LastBlock", INVALID_BLOCK_NUMBER_STRING),
                _INT32_MIN,
                _INT32_MAX,
            ),
            safe_gas_price=_bounded(field_string(data, "SafeGasPrice"), _INT16_MIN, _INT16_MAX),
            proposed_gas_price=_bounded(
                field_string(data, "ProposeGasPrice"), _INT16_MIN, _INT16_MAX
            ),
            fast_gas_price=_bounded(field_string(data, "FastGasPrice"), _INT16_MIN, _INT16_MAX),
            suggested_base_fee=to_float(field_string(data, "suggestBaseFee")),
            gas_used_ratio_string=field_string(data, "gasUsedRatio"),
        )

    def is_valid(self) -> bool:
        """True when a last block number is present."""
        return self.last_block != INVALID_BLOCK_NUMBER

    def gas_used_ratio(self) -> list[float]:
        """The comma separated gas used ratios as numbers."""
        return [to_float(part) for part in self.gas_used_ratio_string.split(",")]

    def __str__(self) -> str:
        return (
            f"GasOracle(lastBlock={self.last_block}; safeGasPrice={self.safe_gas_price}; "
            f"proposedGasPrice={self.proposed_gas_price}; fastGasPrice={self.fast_gas_price}; "
            f"suggestedBaseFee={self.suggested_base_fee:g})"
        )
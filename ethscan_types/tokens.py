"""ERC-20 and ERC-721 token holder, holding and inventory records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ethscan_types.ether import field_string


@dataclass(frozen=True)
class ERC20TokenHolder:
    """One holder of an ERC-20 token and the quantity it holds."""

    token_holder_address: str = ""
    token_holder_quantity_string: str = ""

    @classmethod
    def from_json(cls, data: Any) -> ERC20TokenHolder:
        """Build from a reply object."""
        return cls(
            token_holder_address=field_string(data, "TokenHolderAddress"),
            token_holder_quantity_string=field_string(data, "TokenHolderQuantity"),
        )

    def is_valid(self) -> bool:
        """True when the holder address is not empty."""
        return bool(self.token_holder_address)

    def __str__(self) -> str:
        return (
            f"ERC20TokenHolder(tokenHolderAddress={self.token_holder_address}; "
            f"tokenHolderQuantityString={self.token_holder_quantity_string})"
        )


@dataclass(frozen=True)
class ERC20TokenHolding:
    """One ERC-20 token held by an address."""

    token_address: str = ""
    token_name: str = ""
    token_symbol: str = ""
    token_quantity_string: str = ""
    token_divisor_string: str = ""

    @classmethod
    def from_json(cls, data: Any) -> ERC20TokenHolding:
        """Build from a reply object."""
        return cls(
            token_address=field_string(data, "TokenAddress"),
            token_name=field_string(data, "TokenName"),
            token_symbol=field_string(data, "TokenSymbol"),
            token_quantity_string=field_string(data, "TokenQuantity"),
            token_divisor_string=field_string(data, "TokenDivisor"),
        )

    def is_valid(self) -> bool:
        """True when the token address is not empty."""
        return bool(self.token_address)

    def __str__(self) -> str:
        return (
            f"ERC20TokenHolding(tokenAddress={self.token_address}; "
            f"tokenSymbol={self.token_symbol}; "
            f"tokenQuantityString={self.token_quantity_string})"
        )


@dataclass(frozen=True)
class ERC721TokenHolding:
    """One ERC-721 collection held by an address."""

    token_address: str = ""
    token_name: str = ""
    token_symbol: str = ""
    token_quantity_string: str = ""

    @classmethod
    def from_json(cls, data: Any) -> ERC721TokenHolding:
        """Build from a reply object."""
        return cls(
            token_address=field_string(data, "TokenAddress"),
            token_name=field_string(data, "TokenName"),
            token_symbol=field_string(data, "TokenSymbol"),
            token_quantity_string=field_string(data, "TokenQuantity"),
        )

    def is_valid(self) -> bool:
        """True when the token address is not empty."""
        return bool(self.token_address)


@dataclass(frozen=True)
class ERC721TokenInventory:
    """One ERC-721 token id held by an address within a contract."""

    token_address: str = ""
    token_id: str = ""

    @classmethod
    def from_json(cls, data: Any) -> ERC721TokenInventory:
        """Build from a reply object."""
        return cls(
            token_address=field_string(data, "TokenAddress"),
            token_id=field_string(data, "TokenId"),
        )

    def is_valid(self) -> bool:
        """True when the token address is not empty."""
        return bool(self.token_address)

    def __str__(self) -> str:
        return (
            f"ERC721TokenInventory(tokenAddress={self.token_address}; "
            f"tokenId={self.token_id})"
        )
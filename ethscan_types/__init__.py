"""Value objects for Etherscan-style API JSON replies: ether amounts, prices, daily stats, gas, nodes and tokens."""

__version__ = "0.0.4"

__all__ = [
    "countdown",
    "daily_rewards",
    "ether",
    "gas_oracle",
    "nodes",
    "prices",
    "tokens",
    "uncle",
]
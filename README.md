# ethscan-types

Plain Python value objects for the JSON replies of an Etherscan-style
blockchain explorer API. Each record type is a frozen dataclass built from
one decoded JSON object with `from_json`, and reports through `is_valid()`
whether the fields it depends on were present.

Fields that are missing or have the wrong JSON type fall back to defaults
instead of raising: empty strings, `0`, or `-1` for block numbers,
timestamps and prices.

## Installation

```
pip install ethscan-types
```

## Example

```python
import json

from ethscan_types.ether import Ether
from ethscan_types.prices import EtherPrice
from ethscan_types.tokens import ERC20TokenHolder

reply = json.loads(text)
price = EtherPrice.from_json(reply["result"])
if price.is_valid():
    print(price.eth_usd, price.eth_usd_time())

balance = Ether("1500000000000000000")
print(balance.eth())  # 1.5

holders = [ERC20TokenHolder.from_json(item) for item in holders_reply["result"]]
```

Lists of records are ordinary Python lists built as above.

## Modules

- `ethscan_types.ether`: `Ether` (also available as `EtherBalance`), an
  amount held as a wei string, with `wei()`, `eth()` and `szabo()`.
  `Ether.from_ether_number_string` drops the decimal point from its
  argument; `Ether.from_ether_number` formats a float with six significant
  digits first. The module also has the field helpers `field_string`,
  `to_int` and `to_float`, which return a default or zero instead of
  raising.
- `ethscan_types.prices`: `Ether2Supply`, `EtherPrice` (with
  `eth_btc_time()` and `eth_usd_time()` as UTC datetimes) and
  `EtherHistoricalPrice` (with `time_stamp()` as a UTC date).
- `ethscan_types.uncle`: `Uncle`. Its `is_valid()` returns true when the
  `miner` field is empty.
- `ethscan_types.daily_rewards`: `DailyTransactionFees` and
  `DailyUncleCountRewards`.
- `ethscan_types.countdown`: `EstimatedBlockCountdown`.
- `ethscan_types.gas_oracle`: `GasOracle`, with `gas_used_ratio()` splitting
  the comma separated ratios into floats.
- `ethscan_types.nodes`: `NodesCount`, `ChainSize`, and the `ClientType` and
  `Syncmode` enums.
- `ethscan_types.tokens`: `ERC20TokenHolder`, `ERC20TokenHolding`,
  `ERC721TokenHolding`, `ERC721TokenInventory`.

## What this package does not do

- It does no networking: fetch the reply however you like, decode it with
  `json.loads`, and pass the objects in its `result` field to the matching
  type.
- It has no types for normal or internal transaction records, nor for the
  daily new address count, daily total gas used or daily transaction count
  replies. Read those replies as plain dictionaries.

## Running the tests

```
pip install -e ".[test]"
pytest
```
from datetime import date

from ethscan_types.daily_rewards import (
    INVALID_BLOCK_COUNT,
    DailyTransactionFees,
    DailyUncleCountRewards,
)
from ethscan_types.ether import Ether


def test_fees_default_is_invalid():
    fees = DailyTransactionFees()
    assert not fees.is_valid()
    assert fees.transaction_fee_double == -1.0


def test_fees_from_json_reads_fields():
    fees = DailyTransactionFees.from_json(
        {"UTCDate": "2019-02-01", "unixTimeStamp": "1548979200", "transactionFee_Eth": "358.558440870590"}
    )
    assert fees.is_valid()
    assert fees.utc_date == "2019-02-01"
    assert fees.unix_timestamp == 1548979200
    assert fees.transaction_fee_double == float("358.558440870590")


def test_fees_missing_fee_defaults_to_minus_one():
    fees = DailyTransactionFees.from_json({"unixTimeStamp": "0"})
    assert fees.transaction_fee_double == -1.0
    assert fees.time_stamp() == date(1970, 1, 1)


def test_fees_missing_timestamp_is_invalid():
    fees = DailyTransactionFees.from_json({"UTCDate": "2019-02-01"})
    assert fees.unix_timestamp == -1
    assert not fees.is_valid()


def test_fees_eth_matches_ether_from_number():
    fees = DailyTransactionFees.from_json({"unixTimeStamp": "1", "transactionFee_Eth": "0.25"})
    assert fees.transaction_fee_eth() == Ether.from_ether_number(0.25)


def test_fees_non_object_is_invalid():
    fees = DailyTransactionFees.from_json("nonsense")
    assert not fees.is_valid()
    assert fees.transaction_fee_double == -1.0


def test_fees_str_contains_date():
    fees = DailyTransactionFees(utc_date="2019-02-01", unix_timestamp=1, transaction_fee_double=1.5)
    assert str(fees) == "DailyTransactionFees(utcDate=2019-02-01; transactionFeeDouble=1.5 ETH)"


def test_uncle_rewards_default_is_invalid():
    rewards = DailyUncleCountRewards()
    assert not rewards.is_valid()
    assert rewards.uncle_block_count == INVALID_BLOCK_COUNT
    assert not rewards.uncle_block_rewards.is_valid()


def test_uncle_rewards_from_json_reads_fields():
    rewards = DailyUncleCountRewards.from_json(
        {
            "UTCDate": "2019-02-01",
            "unixTimeStamp": "1548979200",
            "uncleBlockCount": 987,
            "uncleBlockRewards_Eth": "2265.1875",
        }
    )
    assert rewards.is_valid()
    assert rewards.utc_date == "2019-02-01"
    assert rewards.unix_timestamp == 1548979200
    assert rewards.uncle_block_count == 987
    assert rewards.uncle_block_rewards == Ether.from_ether_number_string("2265.1875")


def test_uncle_rewards_count_as_string_is_ignored():
    rewards = DailyUncleCountRewards.from_json({"uncleBlockCount": "987"})
    assert rewards.uncle_block_count == INVALID_BLOCK_COUNT
    assert not rewards.is_valid()


def test_uncle_rewards_fractional_count_is_ignored():
    rewards = DailyUncleCountRewards.from_json({"uncleBlockCount": 3.5})
    assert rewards.uncle_block_count == INVALID_BLOCK_COUNT


def test_uncle_rewards_missing_reward_gives_invalid_ether():
    rewards = DailyUncleCountRewards.from_json({"uncleBlockCount": 4})
    assert rewards.is_valid()
    assert rewards.uncle_block_rewards == Ether()


def test_uncle_rewards_time_stamp_round_trip():
    rewards = DailyUncleCountRewards.from_json({"unixTimeStamp": "0", "uncleBlockCount": 1})
    assert rewards.time_stamp() == date(1970, 1, 1)
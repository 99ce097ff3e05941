from datetime import timezone

from ethscan_types.ether import INVALID_PRICE, INVALID_TIMESTAMP, Ether
from ethscan_types.prices import Ether2Supply, EtherHistoricalPrice, EtherPrice


SUPPLY_REPLY = {
    "EthSupply": "122373866217800000000000000",
    "Eth2Staking": "1157529105115885000000000",
    "BurntFees": "3102505506455601519229842",
    "WithdrawnTotal": "1170200333006131000000000",
}

PRICE_REPLY = {
    "ethbtc": "0.06116",
    "ethbtc_timestamp": "1624961308",
    "ethusd": "2149.18",
    "ethusd_timestamp": "1624961302",
}

HISTORICAL_REPLY = {"UTCDate": "2019-02-01", "unixTimeStamp": "1548979200", "value": "107.03"}


def test_ether2supply_from_json():
    supply = Ether2Supply.from_json(SUPPLY_REPLY)
    assert supply.is_valid() is True
    assert supply.eth_supply == Ether("122373866217800000000000000")
    assert supply.eth2_staking.wei_string == "1157529105115885000000000"
    assert supply.burnt_fees.wei_string == "3102505506455601519229842"
    assert supply.withdrawn_total.wei_string == "1170200333006131000000000"


def test_ether2supply_default_and_missing_are_invalid():
    assert Ether2Supply().is_valid() is False
    assert Ether2Supply.from_json({}).is_valid() is False
    assert Ether2Supply.from_json({"EthSupply": 5}).is_valid() is False


def test_ether_price_from_json():
    price = EtherPrice.from_json(PRICE_REPLY)
    assert price.is_valid() is True
    assert price.eth_btc == 0.06116
    assert price.eth_usd == 2149.18
    assert price.eth_btc_timestamp == 1624961308
    assert price.eth_usd_timestamp == 1624961302


def test_ether_price_times_match_timestamps():
    price = EtherPrice.from_json(PRICE_REPLY)
    assert price.eth_btc_time().timestamp() == 1624961308
    assert price.eth_usd_time().timestamp() == 1624961302
    assert price.eth_usd_time().tzinfo == timezone.utc


def test_ether_price_missing_fields_are_invalid():
    price = EtherPrice.from_json({})
    assert price.is_valid() is False
    assert price.eth_btc == INVALID_PRICE
    assert price.eth_usd_timestamp == INVALID_TIMESTAMP


def test_ether_price_needs_both_prices():
    partial = dict(PRICE_REPLY)
    del partial["ethusd"]
    assert EtherPrice.from_json(partial).is_valid() is False
    assert EtherPrice().is_valid() is False


def test_historical_price_from_json():
    price = EtherHistoricalPrice.from_json(HISTORICAL_REPLY)
    assert price.is_valid() is True
    assert price.utc_date == "2019-02-01"
    assert price.unix_timestamp == 1548979200
    assert price.value == 107.03


def test_historical_price_date_matches_utc_date():
    price = EtherHistoricalPrice.from_json(HISTORICAL_REPLY)
    assert price.time_stamp().isoformat() == price.utc_date


def test_historical_price_missing_is_invalid():
    price = EtherHistoricalPrice.from_json({"UTCDate": "2019-02-01"})
    assert price.is_valid() is False
    assert price.value == INVALID_PRICE
    assert EtherHistoricalPrice().is_valid() is False


def test_from_json_non_object_gives_invalid_records():
    assert EtherPrice.from_json("not an object").is_valid() is False
    assert EtherHistoricalPrice.from_json(None).is_valid() is False
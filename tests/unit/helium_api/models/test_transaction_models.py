"""Tests for helium_api transaction models."""

import pytest

from helium_api.errors import ResponseFormatError
from helium_api.models.currency import CurrencyType
from helium_api.models.transaction import (
    TRANSACTION_TYPES,
    AssertLocationV2,
    ConsensusGroupV1,
    Payment,
    PaymentV1,
    PaymentV2,
    PocReceiptsV1,
    Reward,
    RewardsV2,
    StakeValidatorV1,
    UnknownTransaction,
    from_json_object,
)
from tests.helpers.helium_records import payment_record


def test_payment_v1():
    txn = from_json_object(payment_record("fake-hash-1", 10000))

    assert isinstance(txn, PaymentV1)
    assert txn.type == "payment_v1"
    assert txn.hash == "fake-hash-1"
    assert txn.height == 12345
    assert txn.payer == "my-address"
    assert txn.payee == "some-other-address"
    assert txn.nonce == 54
    assert txn.amount_balance.integer == 10000
    assert txn.amount_balance.currency_type == CurrencyType.default()


def test_payment_v1_missing_required_field():
    record = payment_record("fake-hash-1", 10000)
    del record["payee"]

    with pytest.raises(ResponseFormatError) as exc_info:
        from_json_object(record)

    assert "payee" in str(exc_info.value)


def test_payment_v2_parses_payments():
    txn = from_json_object(
        {
            "type": "payment_v2",
            "hash": "h",
            "height": 1,
            "time": 2,
            "payer": "payer",
            "fee": 35000,
            "nonce": 3,
            "payments": [
                {"payee": "a", "amount": 5},
                {"payee": "b", "amount": 7, "memo": "AAAAAAAAAAA="},
            ],
        }
    )

    assert isinstance(txn, PaymentV2)
    assert txn.payments == (Payment("a", 5, None), Payment("b", 7, "AAAAAAAAAAA="))
    assert txn.total_amount.integer == 12


def test_payment_v2_payments_must_be_list():
    with pytest.raises(ResponseFormatError):
        from_json_object({"type": "payment_v2", "hash": "h", "payer": "p", "payments": "nope"})


def test_rewards_v2():
    txn = from_json_object(
        {
            "type": "rewards_v2",
            "hash": "h",
            "start_epoch": 10,
            "end_epoch": 40,
            "rewards": [
                {"type": "poc_witnesses", "amount": 100, "gateway": "g", "account": "a"},
                {"type": "securities", "amount": 50, "account": "a"},
            ],
        }
    )

    assert isinstance(txn, RewardsV2)
    assert txn.type == "rewards_v2"
    assert txn.height is None
    assert txn.rewards[1] == Reward(type="securities", amount=50, account="a", gateway=None)
    assert txn.total_amount.integer == 150


def test_assert_location_v2_inherits_v1_fields():
    txn = from_json_object(
        {
            "type": "assert_location_v2",
            "hash": "h",
            "gateway": "g",
            "owner": "o",
            "location": "8c29a",
            "gain": 12,
            "elevation": 3,
        }
    )

    assert isinstance(txn, AssertLocationV2)
    assert txn.gain == 12
    assert txn.payer is None


def test_stake_validator_balance():
    txn = from_json_object({"type": "stake_validator_v1", "hash": "h", "address": "v", "owner": "o", "stake": 1000000000000})

    assert isinstance(txn, StakeValidatorV1)
    assert txn.stake_balance.float_balance == pytest.approx(10000.0)


def test_poc_receipts_without_path():
    txn = from_json_object({"type": "poc_receipts_v1", "hash": "h", "challenger": "c"})

    assert isinstance(txn, PocReceiptsV1)
    assert txn.path == ()


def test_consensus_group_members():
    txn = from_json_object({"type": "consensus_group_v1", "hash": "h", "members": ["a", "b"], "delay": 0})

    assert isinstance(txn, ConsensusGroupV1)
    assert txn.members == ("a", "b")


def test_unknown_type_keeps_raw_record():
    record = {"type": "oui_v1", "hash": "h", "height": 5, "oui": 2}

    txn = from_json_object(record)

    assert isinstance(txn, UnknownTransaction)
    assert txn.type == "oui_v1"
    assert txn.raw == record


def test_missing_type():
    with pytest.raises(ResponseFormatError):
        from_json_object({"hash": "h"})


def test_record_must_be_object():
    with pytest.raises(ResponseFormatError):
        from_json_object(["payment_v1"])


def test_registry_keys_match_model_tags():
    for tag, model in TRANSACTION_TYPES.items():
        assert model.TYPE == tag

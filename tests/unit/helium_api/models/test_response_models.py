"""Tests for helium_api context, counts, currency and pending transaction models."""

from dataclasses import FrozenInstanceError, fields

import pytest

from helium_api.errors import ResponseFormatError
from helium_api.models.context import Account, Block
from helium_api.models.counts import Counts
from helium_api.models.currency import Balance, CurrencyType
from helium_api.models.pending import PendingTransaction, PendingTransactionStatus


class TestBlock:
    def test_from_height(self):
        assert Block.from_reference(12345) == Block(height=12345, hash=None)

    def test_from_hash(self):
        assert Block.from_reference("fake-hash") == Block(height=None, hash="fake-hash")

    @pytest.mark.parametrize("reference", [True, 1.5, None])
    def test_rejects_other_references(self, reference):
        with pytest.raises(TypeError):
            Block.from_reference(reference)

    def test_contexts_are_immutable(self):
        account = Account("my-address")
        with pytest.raises(FrozenInstanceError):
            account.address = "other"  # type: ignore[misc]


class TestCounts:
    def test_has_every_ledger_transaction_kind(self):
        assert len(fields(Counts)) == 31

    def test_from_json_object(self):
        counts = Counts.from_json_object({"payment_v1": 3, "rewards_v2": 4, "vars_v1": 1})

        assert counts.payment_v1 == 3
        assert counts.rewards_v2 == 4
        assert counts.add_gateway_v1 == 0
        assert counts.total() == 8

    def test_ignores_unknown_keys(self):
        assert Counts.from_json_object({"brand_new_v9": 5}).total() == 0

    def test_rejects_non_integer(self):
        with pytest.raises(ResponseFormatError):
            Counts.from_json_object({"payment_v1": "3"})

    def test_rejects_non_object(self):
        with pytest.raises(ResponseFormatError):
            Counts.from_json_object([1, 2])


class TestCurrency:
    def test_currency_types(self):
        assert CurrencyType.default().ticker == "HNT"
        assert CurrencyType.data_credit() == CurrencyType("DC", 1)
        assert CurrencyType.security().ticker == "STO"

    def test_balance(self):
        balance = Balance(150000000, CurrencyType.default())

        assert balance.float_balance == pytest.approx(1.5)
        assert str(balance) == "1.5 HNT"

    def test_data_credit_balance(self):
        assert Balance(25, CurrencyType.data_credit()).float_balance == 25


class TestPendingTransaction:
    def test_minimal(self):
        pending = PendingTransaction.from_json_object({"hash": "txn hash"})

        assert pending.hash == "txn hash"
        assert pending.status is None

    def test_full(self):
        pending = PendingTransaction.from_json_object(
            {
                "hash": "txn hash",
                "status": "failed",
                "type": "payment_v2",
                "failed_reason": "invalid",
                "created_at": "2021-01-01T00:00:00Z",
                "updated_at": "2021-01-01T00:01:00Z",
                "txn": {"payer": "a"},
            }
        )

        assert pending.status is PendingTransactionStatus.FAILED
        assert pending.failed_reason == "invalid"
        assert pending.txn == {"payer": "a"}

    def test_unknown_status_kept_raw(self):
        pending = PendingTransaction.from_json_object({"hash": "h", "status": "exploded"})

        assert pending.status is None
        assert pending.raw_status == "exploded"

    def test_known_status_keeps_raw_text(self):
        pending = PendingTransaction.from_json_object({"hash": "h", "status": "PENDING"})

        assert pending.status is PendingTransactionStatus.PENDING
        assert pending.raw_status == "PENDING"

    def test_missing_hash(self):
        with pytest.raises(ResponseFormatError):
            PendingTransaction.from_json_object({"status": "pending"})

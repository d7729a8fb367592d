"""Typed models for Helium API payloads."""

from .context import Account, Block, Context, Hotspot, Validator
from .counts import Counts
from .currency import Balance, CurrencyType
from .pending import PendingTransaction, PendingTransactionStatus
from .transaction import (
    AnyTransaction,
    PaymentV1,
    PaymentV2,
    RewardsV1,
    RewardsV2,
    TransactionBase,
    UnknownTransaction,
    from_json_object,
)

__all__ = [
    "Account",
    "AnyTransaction",
    "Balance",
    "Block",
    "Context",
    "Counts",
    "CurrencyType",
    "Hotspot",
    "PaymentV1",
    "PaymentV2",
    "PendingTransaction",
    "PendingTransactionStatus",
    "RewardsV1",
    "RewardsV2",
    "TransactionBase",
    "UnknownTransaction",
    "Validator",
    "from_json_object",
]

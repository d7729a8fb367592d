"""
Ledger transaction models.

Each transaction kind is a frozen dataclass keyed by the wire ``type`` tag.
``from_json_object`` looks the tag up in ``TRANSACTION_TYPES`` and decodes
the record into the matching class. Tags without a registered class decode
to ``UnknownTransaction`` so new ledger transaction kinds never break a
listing.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, Union

from ..errors import ResponseFormatError
from ..validation import validate_required_fields
from .currency import Balance, CurrencyType


@dataclass(frozen=True)
class Payment:
    """Single payee entry of a ``payment_v2`` transaction."""

    payee: str
    amount: int
    memo: Optional[str]


@dataclass(frozen=True)
class Reward:
    """Single entry of a rewards transaction."""

    type: str
    amount: int
    account: Optional[str]
    gateway: Optional[str]


@dataclass(frozen=True)
class TransactionBase:
    """Fields shared by every transaction kind."""

    TYPE: ClassVar[str] = ""
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset()

    hash: str
    height: Optional[int]
    time: Optional[int]

    @property
    def type(self) -> str:
        return self.TYPE

    @classmethod
    def from_json_object(cls, record: Mapping[str, Any]) -> "TransactionBase":
        payload = validate_required_fields(record, cls.REQUIRED_FIELDS | {"hash"}, label=f"{cls.TYPE} transaction")
        values = {field.name: payload.get(field.name) for field in fields(cls)}
        return cls(**cls._convert(values))

    @classmethod
    def _convert(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for kinds carrying nested records."""
        return values


@dataclass(frozen=True)
class PaymentV1(TransactionBase):
    TYPE: ClassVar[str] = "payment_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"payer", "payee", "amount"})

    payer: str
    payee: str
    amount: int
    fee: Optional[int]
    nonce: Optional[int]

    @property
    def amount_balance(self) -> Balance:
        return Balance(self.amount, CurrencyType.default())


@dataclass(frozen=True)
class PaymentV2(TransactionBase):
    TYPE: ClassVar[str] = "payment_v2"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"payer", "payments"})

    payer: str
    payments: Tuple[Payment, ...]
    fee: Optional[int]
    nonce: Optional[int]

    @classmethod
    def _convert(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        values["payments"] = tuple(_parse_payment(entry) for entry in _as_list(values["payments"], "payments"))
        return values

    @property
    def total_amount(self) -> Balance:
        return Balance(sum(payment.amount for payment in self.payments), CurrencyType.default())


@dataclass(frozen=True)
class RewardsV1(TransactionBase):
    TYPE: ClassVar[str] = "rewards_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"rewards"})

    start_epoch: Optional[int]
    end_epoch: Optional[int]
    rewards: Tuple[Reward, ...]

    @classmethod
    def _convert(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        values["rewards"] = tuple(_parse_reward(entry) for entry in _as_list(values["rewards"], "rewards"))
        return values

    @property
    def total_amount(self) -> Balance:
        return Balance(sum(reward.amount for reward in self.rewards), CurrencyType.default())


@dataclass(frozen=True)
class RewardsV2(RewardsV1):
    TYPE: ClassVar[str] = "rewards_v2"


@dataclass(frozen=True)
class AddGatewayV1(TransactionBase):
    TYPE: ClassVar[str] = "add_gateway_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"gateway", "owner"})

    gateway: str
    owner: str
    payer: Optional[str]
    fee: Optional[int]
    staking_fee: Optional[int]


@dataclass(frozen=True)
class AssertLocationV1(TransactionBase):
    TYPE: ClassVar[str] = "assert_location_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"gateway", "owner", "location"})

    gateway: str
    owner: str
    location: str
    payer: Optional[str]
    nonce: Optional[int]
    fee: Optional[int]
    staking_fee: Optional[int]


@dataclass(frozen=True)
class AssertLocationV2(AssertLocationV1):
    TYPE: ClassVar[str] = "assert_location_v2"

    gain: Optional[int]
    elevation: Optional[int]


@dataclass(frozen=True)
class TransferHotspotV1(TransactionBase):
    TYPE: ClassVar[str] = "transfer_hotspot_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"gateway", "seller", "buyer"})

    gateway: str
    seller: str
    buyer: str
    amount_to_seller: Optional[int]
    buyer_nonce: Optional[int]
    fee: Optional[int]


@dataclass(frozen=True)
class StakeValidatorV1(TransactionBase):
    TYPE: ClassVar[str] = "stake_validator_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"address", "owner", "stake"})

    address: str
    owner: str
    stake: int
    fee: Optional[int]

    @property
    def stake_balance(self) -> Balance:
        return Balance(self.stake, CurrencyType.default())


@dataclass(frozen=True)
class UnstakeValidatorV1(TransactionBase):
    TYPE: ClassVar[str] = "unstake_validator_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"address", "owner", "stake_amount"})

    address: str
    owner: str
    stake_amount: int
    stake_release_height: Optional[int]
    fee: Optional[int]


@dataclass(frozen=True)
class TransferValidatorStakeV1(TransactionBase):
    TYPE: ClassVar[str] = "transfer_validator_stake_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"old_address", "new_address", "stake_amount"})

    old_address: str
    new_address: str
    stake_amount: int
    old_owner: Optional[str]
    new_owner: Optional[str]
    payment_amount: Optional[int]
    fee: Optional[int]


@dataclass(frozen=True)
class TokenBurnV1(TransactionBase):
    TYPE: ClassVar[str] = "token_burn_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"payer", "payee", "amount"})

    payer: str
    payee: str
    amount: int
    memo: Optional[str]
    nonce: Optional[int]
    fee: Optional[int]

    @property
    def amount_balance(self) -> Balance:
        return Balance(self.amount, CurrencyType.default())


@dataclass(frozen=True)
class ValidatorHeartbeatV1(TransactionBase):
    TYPE: ClassVar[str] = "validator_heartbeat_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"address"})

    address: str
    version: Optional[int]
    signature: Optional[str]


@dataclass(frozen=True)
class StateChannelCloseV1(TransactionBase):
    TYPE: ClassVar[str] = "state_channel_close_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"closer"})

    closer: str
    state_channel: Optional[Dict[str, Any]]


@dataclass(frozen=True)
class PocReceiptsV1(TransactionBase):
    TYPE: ClassVar[str] = "poc_receipts_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"challenger"})

    challenger: str
    secret: Optional[str]
    onion_key_hash: Optional[str]
    path: Tuple[Dict[str, Any], ...]
    fee: Optional[int]

    @classmethod
    def _convert(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        raw_path = values["path"]
        values["path"] = tuple(_as_list(raw_path, "path")) if raw_path is not None else ()
        return values


@dataclass(frozen=True)
class ConsensusGroupV1(TransactionBase):
    TYPE: ClassVar[str] = "consensus_group_v1"
    REQUIRED_FIELDS: ClassVar[frozenset[str]] = frozenset({"members"})

    members: Tuple[str, ...]
    proof: Optional[str]
    delay: Optional[int]

    @classmethod
    def _convert(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        values["members"] = tuple(_as_list(values["members"], "members"))
        return values


@dataclass(frozen=True)
class UnknownTransaction(TransactionBase):
    """Transaction kind without a dedicated model; keeps the raw record."""

    type_tag: str
    raw: Dict[str, Any]

    @property
    def type(self) -> str:
        return self.type_tag

    @classmethod
    def from_json_object(cls, record: Mapping[str, Any]) -> "UnknownTransaction":
        payload = validate_required_fields(record, {"hash", "type"}, label="transaction")
        return cls(
            hash=payload["hash"],
            height=payload.get("height"),
            time=payload.get("time"),
            type_tag=payload["type"],
            raw=dict(payload),
        )


AnyTransaction = Union[
    PaymentV1,
    PaymentV2,
    RewardsV1,
    RewardsV2,
    AddGatewayV1,
    AssertLocationV1,
    AssertLocationV2,
    TransferHotspotV1,
    StakeValidatorV1,
    UnstakeValidatorV1,
    TransferValidatorStakeV1,
    TokenBurnV1,
    ValidatorHeartbeatV1,
    StateChannelCloseV1,
    PocReceiptsV1,
    ConsensusGroupV1,
    UnknownTransaction,
]

TRANSACTION_TYPES: Dict[str, Type[TransactionBase]] = {
    model.TYPE: model
    for model in (
        PaymentV1,
        PaymentV2,
        RewardsV1,
        RewardsV2,
        AddGatewayV1,
        AssertLocationV1,
        AssertLocationV2,
        TransferHotspotV1,
        StakeValidatorV1,
        UnstakeValidatorV1,
        TransferValidatorStakeV1,
        TokenBurnV1,
        ValidatorHeartbeatV1,
        StateChannelCloseV1,
        PocReceiptsV1,
        ConsensusGroupV1,
    )
}


def from_json_object(record: Mapping[str, Any]) -> AnyTransaction:
    """Decode a raw transaction record into its typed model."""
    payload = validate_required_fields(record, {"type"}, label="transaction")
    model = TRANSACTION_TYPES.get(payload["type"], UnknownTransaction)
    return model.from_json_object(payload)  # type: ignore[return-value]


def _as_list(value: Any, field: str) -> list[Any]:
    if not isinstance(value, list):
        raise ResponseFormatError(f"Transaction field {field!r} must be a list", value)
    return value


def _parse_payment(entry: Any) -> Payment:
    payload = validate_required_fields(entry, {"payee", "amount"}, label="payment entry")
    return Payment(payee=payload["payee"], amount=payload["amount"], memo=payload.get("memo"))


def _parse_reward(entry: Any) -> Reward:
    payload = validate_required_fields(entry, {"type", "amount"}, label="reward entry")
    return Reward(
        type=payload["type"],
        amount=payload["amount"],
        account=payload.get("account"),
        gateway=payload.get("gateway"),
    )


__all__ = [
    "AddGatewayV1",
    "AnyTransaction",
    "AssertLocationV1",
    "AssertLocationV2",
    "ConsensusGroupV1",
    "Payment",
    "PaymentV1",
    "PaymentV2",
    "PocReceiptsV1",
    "Reward",
    "RewardsV1",
    "RewardsV2",
    "StakeValidatorV1",
    "StateChannelCloseV1",
    "TRANSACTION_TYPES",
    "TokenBurnV1",
    "TransactionBase",
    "TransferHotspotV1",
    "TransferValidatorStakeV1",
    "UnknownTransaction",
    "UnstakeValidatorV1",
    "ValidatorHeartbeatV1",
    "from_json_object",
]

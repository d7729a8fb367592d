"""Per transaction type activity counts."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..errors import ResponseFormatError


@dataclass(frozen=True)
class Counts:
    """Number of transactions of each kind an actor took part in."""

    vars_v1: int
    validator_heartbeat_v1: int
    unstake_validator_v1: int
    transfer_validator_stake_v1: int
    transfer_hotspot_v1: int
    token_burn_v1: int
    token_burn_exchange_rate_v1: int
    state_channel_open_v1: int
    state_channel_close_v1: int
    stake_validator_v1: int
    security_exchange_v1: int
    security_coinbase_v1: int
    routing_v1: int
    rewards_v2: int
    rewards_v1: int
    redeem_htlc_v1: int
    price_oracle_v1: int
    poc_request_v1: int
    poc_receipts_v1: int
    payment_v2: int
    payment_v1: int
    oui_v1: int
    gen_gateway_v1: int
    dc_coinbase_v1: int
    create_htlc_v1: int
    consensus_group_v1: int
    consensus_group_failure_v1: int
    coinbase_v1: int
    assert_location_v2: int
    assert_location_v1: int
    add_gateway_v1: int

    @classmethod
    def from_json_object(cls, payload: Any) -> "Counts":
        """Build counts from the API payload; kinds the server omits count as zero."""
        if not isinstance(payload, Mapping):
            raise ResponseFormatError("Activity counts payload must be a JSON object", payload)
        values = {}
        for field in fields(cls):
            raw = payload.get(field.name, 0)
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise ResponseFormatError(f"Activity count {field.name!r} must be an integer", payload)
            values[field.name] = raw
        return cls(**values)

    def total(self) -> int:
        return sum(getattr(self, field.name) for field in fields(self))


__all__ = ["Counts"]

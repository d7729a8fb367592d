"""Pending (submitted, not yet mined) transactions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..validation import validate_required_fields


class PendingTransactionStatus(Enum):
    """Lifecycle state reported by the pending transactions endpoint"""

    RECEIVED = "received"
    PENDING = "pending"
    FAILED = "failed"
    CLEARED = "cleared"


def _parse_status(raw: Any) -> Optional[PendingTransactionStatus]:
    """Map a server status onto the enum; statuses this client does not know yet map to None."""
    if raw is None:
        return None
    try:
        return PendingTransactionStatus(str(raw).lower())
    except ValueError:
        return None


@dataclass(frozen=True)
class PendingTransaction:
    """Handle returned after submitting a signed transaction.

    ``raw_status`` keeps the server's status string even when ``status`` is None
    because the value is not one of the known states.
    """

    hash: str
    status: Optional[PendingTransactionStatus]
    raw_status: Optional[str]
    type: Optional[str]
    failed_reason: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]
    txn: Optional[Dict[str, Any]]

    @classmethod
    def from_json_object(cls, record: Mapping[str, Any]) -> "PendingTransaction":
        payload = validate_required_fields(record, {"hash"}, label="pending transaction")
        raw_status = payload.get("status")
        return cls(
            hash=payload["hash"],
            status=_parse_status(raw_status),
            raw_status=None if raw_status is None else str(raw_status),
            type=payload.get("type"),
            failed_reason=payload.get("failed_reason"),
            created_at=payload.get("created_at"),
            updated_at=payload.get("updated_at"),
            txn=payload.get("txn"),
        )


__all__ = ["PendingTransaction", "PendingTransactionStatus"]

"""Helium API client library.

Import HeliumClient and HeliumConfig from here for API access.

Internal modules:
- session_manager: HTTP session lifecycle
- transport: Request execution, status mapping and retries
- transactions: Transaction listing, counts, lookup and submission
- pagination: Cursor-based paginator
- models: Context, transaction and response models
"""

from .client import HeliumClient, HeliumConfig
from .errors import (
    HeliumClientError,
    InvalidBlockReferenceError,
    NotFoundError,
    ResponseFormatError,
    TransportError,
    UnsupportedContextError,
)
from .models import Account, Block, Context, Counts, Hotspot, PendingTransaction, Validator
from .pagination import ListContinuation, ListParams, Paginator
from .transactions import ScopedTransactions, TransactionLister

__all__ = [
    "Account",
    "Block",
    "Context",
    "Counts",
    "HeliumClient",
    "HeliumClientError",
    "HeliumConfig",
    "Hotspot",
    "InvalidBlockReferenceError",
    "ListContinuation",
    "ListParams",
    "NotFoundError",
    "Paginator",
    "PendingTransaction",
    "ResponseFormatError",
    "ScopedTransactions",
    "TransactionLister",
    "TransportError",
    "UnsupportedContextError",
    "Validator",
]

"""Transaction operations: scoped listing, activity counts, lookup and submission."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple

from .errors import InvalidBlockReferenceError, ResponseFormatError, UnsupportedContextError
from .models.context import Account, Block, Context, Hotspot, Validator
from .models.counts import Counts
from .models.pending import PendingTransaction
from .models.transaction import AnyTransaction, from_json_object
from .pagination import ListContinuation, ListParams, Paginator

if TYPE_CHECKING:
    from .transport import HttpTransport


def block_transactions_path(block: Block) -> str:
    """Path listing a block's transactions; the height wins when both height and hash are set."""
    if block.height is not None:
        return f"/blocks/{block.height}/transactions"
    if block.hash:
        return f"/blocks/hash/{block.hash}/transactions"
    raise InvalidBlockReferenceError()


def build_list_request(context: Optional[Context], params: ListParams) -> Tuple[str, Dict[str, Optional[str]]]:
    """Resolve the path and query parameters for listing transactions under ``context``."""
    match context:
        case Block():
            return block_transactions_path(context), {"cursor": params.cursor}
        case Account(address=address):
            path = f"/accounts/{address}/activity"
        case Hotspot(address=address):
            path = f"/hotspots/{address}/activity"
        case Validator(address=address):
            path = f"/validators/{address}/activity"
        case _:
            raise UnsupportedContextError(context, "list")
    return path, {"cursor": params.cursor, "filter_types": params.query_filter_types()}


class TransactionLister:
    """Lists, counts, fetches and submits ledger transactions."""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    async def list(self, context: Optional[Context], params: Optional[ListParams] = None) -> Paginator[AnyTransaction]:
        """Fetch the first page of transactions under ``context``."""
        list_params = params if params is not None else ListParams()
        path, query = build_list_request(context, list_params)
        response = await self._transport.get(path, query)
        if not isinstance(response.data, list):
            raise ResponseFormatError(f"Transaction list for {path} must be a list", response.data)
        transactions = [from_json_object(record) for record in response.data]
        continuation = None
        if response.cursor:
            assert context is not None
            continuation = ListContinuation(context=context, filter_types=list_params.filter_types, cursor=response.cursor)
        return Paginator(transactions, continuation, self)

    async def load(self, continuation: ListContinuation) -> Paginator[AnyTransaction]:
        """Fetch the page a continuation points at."""
        return await self.list(continuation.context, continuation.to_params())

    async def counts(self, context: Optional[Context]) -> Counts:
        """Fetch per-type activity counts; only validators expose them."""
        match context:
            case Validator(address=address):
                path = f"/validators/{address}/activity/counts"
            case _:
                raise UnsupportedContextError(context, "count")
        response = await self._transport.get(path)
        return Counts.from_json_object(response.data)

    async def get(self, txn_hash: str) -> AnyTransaction:
        """Fetch a single transaction by hash."""
        response = await self._transport.get(f"/transactions/{txn_hash}")
        return from_json_object(response.data)

    async def submit(self, txn: str) -> PendingTransaction:
        """Submit a base64 encoded signed transaction."""
        response = await self._transport.post("/pending_transactions", {"txn": txn})
        return PendingTransaction.from_json_object(response.data)


class ScopedTransactions:
    """Transaction operations bound to one context."""

    def __init__(self, lister: TransactionLister, context: Context) -> None:
        self._lister = lister
        self._context = context

    @property
    def context(self) -> Context:
        return self._context

    async def list(
        self,
        *,
        cursor: Optional[str] = None,
        filter_types: Optional[Iterable[str]] = None,
    ) -> Paginator[AnyTransaction]:
        params = ListParams(cursor=cursor, filter_types=filter_types)
        return await self._lister.list(self._context, params)

    async def counts(self) -> Counts:
        return await self._lister.counts(self._context)


__all__ = ["ScopedTransactions", "TransactionLister", "block_transactions_path", "build_list_request"]

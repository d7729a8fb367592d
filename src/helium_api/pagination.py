"""
Cursor-based pagination for list endpoints.

A ``Paginator`` wraps one fetched page. Moving forward goes through the
``ListContinuation`` it carries: plain data recording the context and
filters of the original call plus the server's opaque cursor. The cursor is
never parsed or built locally; it is only echoed back to the server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    AsyncIterator,
    Generic,
    Iterable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
)

if TYPE_CHECKING:
    from .models.context import Context

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


def _normalize_filter_types(filter_types: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    if filter_types is None:
        return None
    if isinstance(filter_types, str):
        raise TypeError("filter_types must be a sequence of type tags, not a single string")
    return tuple(tag.strip() for tag in filter_types if tag and tag.strip())


@dataclass(frozen=True)
class ListParams:
    """Cursor and type filter for a single list call; ``filter_types`` is stored as a tuple without blank tags."""

    cursor: Optional[str] = None
    filter_types: Optional[Iterable[str]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "filter_types", _normalize_filter_types(self.filter_types))

    def query_filter_types(self) -> Optional[str]:
        """Comma-joined filter for the query string, or None when there is nothing to filter."""
        if not self.filter_types:
            return None
        return ",".join(self.filter_types)


@dataclass(frozen=True)
class ListContinuation:
    """Everything needed to fetch the page after the current one."""

    context: Context
    filter_types: Optional[Iterable[str]]
    cursor: str

    def to_params(self) -> ListParams:
        return ListParams(cursor=self.cursor, filter_types=self.filter_types)


class PageLoader(Protocol[T_co]):
    """Fetches the page a continuation points at."""

    async def load(self, continuation: ListContinuation) -> "Paginator[T_co]":
        ...


class Paginator(Generic[T]):
    """Forward-only view over a cursor-paged result set."""

    def __init__(
        self,
        items: Sequence[T],
        continuation: Optional[ListContinuation] = None,
        loader: Optional[PageLoader[T]] = None,
    ) -> None:
        if continuation is not None and loader is None:
            raise ValueError("A paginator with a continuation needs a loader")
        self._items: Tuple[T, ...] = tuple(items)
        self._continuation = continuation
        self._loader = loader

    @classmethod
    def terminal(cls) -> "Paginator[T]":
        """Empty paginator with nothing left to fetch."""
        return cls(())

    @property
    def items(self) -> Tuple[T, ...]:
        return self._items

    @property
    def cursor(self) -> Optional[str]:
        if self._continuation is None:
            return None
        return self._continuation.cursor

    @property
    def continuation(self) -> Optional[ListContinuation]:
        return self._continuation

    @property
    def has_more(self) -> bool:
        return self._continuation is not None

    async def next_page(self) -> "Paginator[T]":
        """Fetch the following page; terminal paginators return an empty one without I/O."""
        if self._continuation is None or self._loader is None:
            return Paginator.terminal()
        return await self._loader.load(self._continuation)

    async def take(self, count: int) -> List[T]:
        """Collect up to ``count`` items starting at this page, fetching later pages sequentially."""
        collected: List[T] = []
        if count <= 0:
            return collected
        page: Paginator[T] = self
        while True:
            collected.extend(page.items[: count - len(collected)])
            if len(collected) >= count or not page.has_more:
                return collected
            page = await page.next_page()

    async def __aiter__(self) -> AsyncIterator[T]:
        page: Paginator[T] = self
        while True:
            for item in page.items:
                yield item
            if not page.has_more:
                return
            page = await page.next_page()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Paginator(items={len(self._items)}, cursor={self.cursor!r})"


__all__ = ["ListContinuation", "ListParams", "PageLoader", "Paginator"]

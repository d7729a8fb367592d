"""Parent resources that transaction listings can be scoped to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Block:
    """Block identified by height, hash, or both.

    When both are set the height is used to build request paths.
    """

    height: Optional[int] = None
    hash: Optional[str] = None

    @classmethod
    def from_reference(cls, reference: int | str) -> "Block":
        """Build a block from a height (int) or a hash (str)."""
        if isinstance(reference, bool):
            raise TypeError("Block reference must be an int height or a str hash")
        if isinstance(reference, int):
            return cls(height=reference)
        if isinstance(reference, str):
            return cls(hash=reference)
        raise TypeError("Block reference must be an int height or a str hash")


@dataclass(frozen=True)
class Account:
    """Ledger account."""

    address: str


@dataclass(frozen=True)
class Hotspot:
    """Hotspot (gateway) on the ledger."""

    address: str


@dataclass(frozen=True)
class Validator:
    """Consensus validator."""

    address: str


Context = Union[Block, Account, Hotspot, Validator]

__all__ = ["Account", "Block", "Context", "Hotspot", "Validator"]

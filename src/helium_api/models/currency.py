"""Currency denominations and integer balances."""

from __future__ import annotations

from dataclasses import dataclass

HNT_TICKER = "HNT"
DC_TICKER = "DC"
SECURITY_TICKER = "STO"

BONES_PER_TOKEN_COEFFICIENT = 0.00000001


@dataclass(frozen=True)
class CurrencyType:
    """Ticker plus the coefficient converting integer units to whole tokens."""

    ticker: str
    coefficient: float

    @classmethod
    def default(cls) -> "CurrencyType":
        return cls(HNT_TICKER, BONES_PER_TOKEN_COEFFICIENT)

    @classmethod
    def data_credit(cls) -> "CurrencyType":
        return cls(DC_TICKER, 1)

    @classmethod
    def security(cls) -> "CurrencyType":
        return cls(SECURITY_TICKER, BONES_PER_TOKEN_COEFFICIENT)


@dataclass(frozen=True)
class Balance:
    """Integer amount in the smallest unit of ``currency_type``."""

    integer: int
    currency_type: CurrencyType

    @property
    def float_balance(self) -> float:
        return self.integer * self.currency_type.coefficient

    def __str__(self) -> str:
        return f"{self.float_balance:g} {self.currency_type.ticker}"


__all__ = ["Balance", "CurrencyType"]

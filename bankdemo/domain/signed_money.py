from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from bankdemo.domain.money import Currency, _quantize_money, exact_sum, format_amount


@dataclass(frozen=True)
class SignedMoney:
    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.currency, Currency):
            raise ValueError("Invalid currency")

        if not isinstance(self.amount, Decimal):
            raise TypeError("SignedMoney.amount must be a Decimal")

        q = _quantize_money(self.amount)
        object.__setattr__(self, "amount", q)

    def __add__(self, other: "SignedMoney") -> "SignedMoney":
        if not isinstance(other, SignedMoney):
            return NotImplemented
        if self.currency != other.currency:
            raise ValueError("Cannot add SignedMoney with different currency")
        return SignedMoney(amount=exact_sum(self.amount, other.amount), currency=self.currency)

    def __sub__(self, other: "SignedMoney") -> "SignedMoney":
        if not isinstance(other, SignedMoney):
            return NotImplemented
        if self.currency != other.currency:
            raise ValueError("Cannot subtract SignedMoney with different currency")
        return SignedMoney(amount=exact_sum(self.amount, other.amount.copy_negate()), currency=self.currency)

    def __str__(self) -> str:
        return format_amount(self.amount, self.currency)

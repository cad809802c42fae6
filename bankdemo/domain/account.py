from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol

from bankdemo.domain.errors import (
    InsufficientFundsError,
    InvalidOperationError,
    NegativeAmountError,
)
from bankdemo.domain.listener import Listener
from bankdemo.domain.money import Currency, format_amount, parse_amount
from bankdemo.domain.signed_money import SignedMoney


logger = logging.getLogger(__name__)

Amount = Decimal | int | float | str

CLOSED_MESSAGE = "Account has been closed."


class BankAccount(Protocol):
    """Opérations communes au compte et à ses wrappers."""

    def deposit(self, amount: Amount) -> None: ...
    def withdraw(self, amount: Amount) -> None: ...
    def get_balance(self) -> SignedMoney: ...
    def add_listener(self, listener: Listener) -> None: ...
    def close_account(self) -> None: ...


class Account:
    """
    Compte en mémoire (sujet observé).
    - balance modifiée uniquement par deposit / withdraw
    - une fois fermé, le compte refuse toute mutation (pas de réouverture)
    - les listeners sont notifiés après une mutation réussie, dans l'ordre d'ajout
    """

    def __init__(
        self,
        account_number: str,
        initial_balance: Amount,
        *,
        currency: Currency = Currency.USD,
    ) -> None:
        if not isinstance(account_number, str):
            raise TypeError("account_number must be a str")
        if not isinstance(currency, Currency):
            raise ValueError("Invalid currency")

        self._account_number = account_number
        self._currency = currency
        # solde initial non validé (négatif accepté)
        self._balance = SignedMoney(amount=parse_amount(initial_balance), currency=currency)
        self._is_active = True
        self._listeners: list[Listener] = []

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    def add_listener(self, listener: Listener) -> None:
        # pas de dédoublonnage
        self._listeners.append(listener)

    def _notify(self, message: str) -> None:
        for listener in list(self._listeners):
            listener.update(message)

    def _ensure_active(self) -> None:
        if not self._is_active:
            logger.info("account %s: rejected operation on closed account", self._account_number)
            raise InvalidOperationError()

    def deposit(self, amount: Amount) -> None:
        self._ensure_active()
        value = parse_amount(amount)
        if value < 0:
            logger.info("account %s: rejected negative deposit %s", self._account_number, value)
            raise NegativeAmountError()

        self._balance = self._balance + SignedMoney(amount=value, currency=self._currency)
        logger.debug("account %s: deposit %s -> balance %s", self._account_number, value, self._balance.amount)
        self._notify(f"Deposited: {format_amount(value, self._currency)}")

    def withdraw(self, amount: Amount) -> None:
        self._ensure_active()
        value = parse_amount(amount)
        if value > self._balance.amount:
            logger.info(
                "account %s: insufficient funds for %s (balance %s)",
                self._account_number,
                value,
                self._balance.amount,
            )
            raise InsufficientFundsError()

        self._balance = self._balance - SignedMoney(amount=value, currency=self._currency)
        logger.debug("account %s: withdraw %s -> balance %s", self._account_number, value, self._balance.amount)
        self._notify(f"Withdrew: {format_amount(value, self._currency)}")

    def get_balance(self) -> SignedMoney:
        return self._balance

    def close_account(self) -> None:
        # idempotent : un second appel re-notifie simplement
        self._is_active = False
        logger.debug("account %s: closed", self._account_number)
        self._notify(CLOSED_MESSAGE)

    def __repr__(self) -> str:
        state = "active" if self._is_active else "closed"
        return f"Account({self._account_number!r}, {self._balance}, {state})"

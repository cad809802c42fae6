from __future__ import annotations

import logging
from decimal import Decimal

from bankdemo.domain.account import Amount, BankAccount
from bankdemo.domain.errors import LimitExceededError
from bankdemo.domain.listener import Listener
from bankdemo.domain.money import Currency, Money, parse_amount
from bankdemo.domain.signed_money import SignedMoney


logger = logging.getLogger(__name__)

WITHDRAWAL_LIMIT = Money(amount=Decimal("500.00"), currency=Currency.USD)


class SecureAccount:
    """
    Wrapper par composition : plafonne chaque retrait, délègue tout le reste.
    Pas de solde propre, on lit toujours celui du compte enveloppé.
    """

    def __init__(self, account: BankAccount, *, limit: Money = WITHDRAWAL_LIMIT) -> None:
        if not isinstance(limit, Money):
            raise ValueError("limit must be a Money")
        self._account = account
        self._limit = limit

    @property
    def wrapped(self) -> BankAccount:
        return self._account

    @property
    def limit(self) -> Money:
        return self._limit

    def deposit(self, amount: Amount) -> None:
        self._account.deposit(amount)

    def withdraw(self, amount: Amount) -> None:
        value = parse_amount(amount)
        # plafond vérifié avant délégation ; 500.00 passe, 500.01 non
        if value > self._limit.amount:
            logger.info("withdrawal of %s rejected: above limit %s", value, self._limit.amount)
            if self._limit == WITHDRAWAL_LIMIT:
                raise LimitExceededError()
            raise LimitExceededError(f"Cannot withdraw more than {self._limit} in one transaction.")
        self._account.withdraw(value)

    def get_balance(self) -> SignedMoney:
        return self._account.get_balance()

    def add_listener(self, listener: Listener) -> None:
        self._account.add_listener(listener)

    def close_account(self) -> None:
        self._account.close_account()

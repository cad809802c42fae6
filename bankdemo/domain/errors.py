from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NEGATIVE_AMOUNT = "NegativeAmount"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INVALID_OPERATION = "InvalidOperation"
    LIMIT_EXCEEDED = "LimitExceeded"


class AccountError(Exception):
    """
    Base des refus métier sur un compte.
    Chaque sous-classe porte son `kind` : le driver n'a besoin que de ça.
    """
    kind: ErrorKind
    default_message: str = "Account operation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class NegativeAmountError(AccountError):
    kind = ErrorKind.NEGATIVE_AMOUNT
    default_message = "Cannot deposit a negative amount."


class InsufficientFundsError(AccountError):
    kind = ErrorKind.INSUFFICIENT_FUNDS
    default_message = "Insufficient funds."


class InvalidOperationError(AccountError):
    kind = ErrorKind.INVALID_OPERATION
    default_message = "Account is closed."


class LimitExceededError(AccountError):
    kind = ErrorKind.LIMIT_EXCEEDED
    default_message = "Cannot withdraw more than $500 in one transaction."

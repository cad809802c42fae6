from __future__ import annotations

import logging
from typing import Mapping, Protocol, TextIO

from bankdemo.domain.account import Account
from bankdemo.domain.errors import AccountError
from bankdemo.domain.listener import Listener, TransactionLogger
from bankdemo.domain.secure_account import SecureAccount
from bankdemo.schemas.session import SessionInputs, SessionOutcome, validate_amount_text
from bankdemo.settings import Settings


logger = logging.getLogger(__name__)

PROMPTS = {
    "initial_balance": "Enter initial balance: ",
    "deposit_amount": "Enter amount to deposit: ",
    "withdraw_amount": "Enter amount to withdraw: ",
}


class AmountSource(Protocol):
    def read(self, field: str, prompt: str) -> str:
        """Raise EOFError when no value is left."""
        ...


class PresetAmounts:
    """Montants fournis d'avance (arguments, tests)."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)

    def read(self, field: str, prompt: str) -> str:
        if field not in self._values:
            raise EOFError(f"No input for {field}")
        return self._values[field]


def _next_amount(source: AmountSource, field: str) -> str:
    return validate_amount_text(field, source.read(field, PROMPTS[field]))


def run_session(
    source: AmountSource | SessionInputs,
    *,
    settings: Settings,
    out: TextIO,
    listener: Listener | None = None,
) -> SessionOutcome:
    """
    Scénario complet : création du compte, un dépôt puis un retrait via le SecureAccount.
    Chaque montant est lu au moment où il sert ; après la première erreur plus rien n'est lu.
    Ne lève jamais, le résultat porte le kind.
    """
    if isinstance(source, SessionInputs):
        source = PresetAmounts(source.model_dump())

    try:
        account = Account(
            settings.account_number,
            _next_amount(source, "initial_balance"),
            currency=settings.currency,
        )
        print(f"Bank Account Created: #{account.account_number}", file=out)

        account.add_listener(listener if listener is not None else TransactionLogger(stream=out))

        secure = SecureAccount(account, limit=settings.withdrawal_limit)
        secure.deposit(_next_amount(source, "deposit_amount"))
        secure.withdraw(_next_amount(source, "withdraw_amount"))

        balance = secure.get_balance()
        print(f"Final Balance: {balance}", file=out)
        return SessionOutcome(ok=True, final_balance=str(balance))

    except AccountError as e:
        logger.info("session stopped: %s (%s)", e.kind.value, e)
        return SessionOutcome(ok=False, error_kind=e.kind, message=str(e))
    except (EOFError, ValueError) as e:
        logger.info("session stopped on input: %s", e)
        return SessionOutcome(ok=False, message=str(e))
    except Exception as e:
        logger.exception("Unexpected failure during session: %s", e)
        return SessionOutcome(ok=False, message=str(e))

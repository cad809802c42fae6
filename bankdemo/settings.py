from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal

from bankdemo.domain.money import Currency, Money, parse_amount


DEFAULT_ACCOUNT_NUMBER = "123456"
DEFAULT_WITHDRAWAL_LIMIT = Decimal("500")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    account_number: str
    currency: Currency
    withdrawal_limit: Money
    log_level: str


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value and value.strip():
        return value.strip()
    return None


def get_settings() -> Settings:
    account_number = _env("BANKDEMO_ACCOUNT_NUMBER") or DEFAULT_ACCOUNT_NUMBER

    raw_currency = _env("BANKDEMO_CURRENCY")
    try:
        currency = Currency(raw_currency.upper()) if raw_currency else Currency.USD
    except ValueError as exc:
        raise ValueError(f"Unsupported currency: {raw_currency!r}") from exc

    raw_limit = _env("BANKDEMO_WITHDRAWAL_LIMIT")
    limit = parse_amount(raw_limit) if raw_limit else DEFAULT_WITHDRAWAL_LIMIT
    # Money refuse les négatifs (ValueError)
    withdrawal_limit = Money(amount=limit, currency=currency)

    log_level = (_env("BANKDEMO_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    return Settings(
        account_number=account_number,
        currency=currency,
        withdrawal_limit=withdrawal_limit,
        log_level=log_level,
    )

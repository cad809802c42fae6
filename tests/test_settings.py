from decimal import Decimal

import pytest

from bankdemo.domain.money import Currency
from bankdemo.settings import get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "BANKDEMO_ACCOUNT_NUMBER",
        "BANKDEMO_CURRENCY",
        "BANKDEMO_WITHDRAWAL_LIMIT",
        "BANKDEMO_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = get_settings()

    assert s.account_number == "123456"
    assert s.currency == Currency.USD
    assert s.withdrawal_limit.amount == Decimal("500.00")
    assert s.log_level == "WARNING"


def test_blank_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("BANKDEMO_ACCOUNT_NUMBER", "   ")
    monkeypatch.setenv("BANKDEMO_WITHDRAWAL_LIMIT", "")

    s = get_settings()

    assert s.account_number == "123456"
    assert s.withdrawal_limit.amount == Decimal("500.00")


def test_overrides(monkeypatch):
    monkeypatch.setenv("BANKDEMO_ACCOUNT_NUMBER", "ABC")
    monkeypatch.setenv("BANKDEMO_CURRENCY", "eur")
    monkeypatch.setenv("BANKDEMO_WITHDRAWAL_LIMIT", "250,50")
    monkeypatch.setenv("BANKDEMO_LOG_LEVEL", "debug")

    s = get_settings()

    assert s.account_number == "ABC"
    assert s.currency == Currency.EUR
    assert s.withdrawal_limit.amount == Decimal("250.50")
    assert s.withdrawal_limit.currency == Currency.EUR
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name,value",
    [
        ("BANKDEMO_CURRENCY", "GBP"),
        ("BANKDEMO_WITHDRAWAL_LIMIT", "-1"),
        ("BANKDEMO_WITHDRAWAL_LIMIT", "lots"),
        ("BANKDEMO_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        get_settings()

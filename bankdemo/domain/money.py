from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"

_QUANT = Decimal("0.01")
# au-delà, on refuse le montant plutôt que d'élargir la précision sans fin
_MAX_INTEGER_DIGITS = 1000

_SYMBOLS = {
    Currency.USD: "$",
    Currency.EUR: "€",
}


def _parse_decimal(value: str) -> Decimal:
    """
    Parse robuste depuis string.
    Autorise "12.34", "-12.34", "12", et optionnellement "12,34".
    """
    if not isinstance(value, str):
        raise TypeError("Amount must be provided as a string")

    raw = value.strip()
    if raw == "":
        raise ValueError("Amount cannot be empty")

    # tolérance minimale pour les virgules françaises
    raw = raw.replace(",", ".")

    try:
        dec = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid decimal amount: {value!r}") from exc

    return _check_decimal(dec, value)


def _check_decimal(dec: Decimal, original: object) -> Decimal:
    if not dec.is_finite():
        raise ValueError(f"Invalid decimal amount: {original!r}")
    if dec.adjusted() >= _MAX_INTEGER_DIGITS:
        raise ValueError(f"Amount too large: {original!r}")
    return dec


def _precision_for(*amounts: Decimal) -> int:
    # chiffres entiers + 2 décimales + 1 retenue, jamais sous la précision par défaut
    return max([28] + [a.adjusted() + 4 for a in amounts])


def _quantize_money(amount: Decimal) -> Decimal:
    # Arrondi comptable classique
    with localcontext() as ctx:
        ctx.prec = _precision_for(amount)
        try:
            return amount.quantize(_QUANT, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal amount: {amount!r}") from exc


def exact_sum(a: Decimal, b: Decimal) -> Decimal:
    """Somme sans arrondi de contexte, quelle que soit la taille des montants."""
    with localcontext() as ctx:
        ctx.prec = _precision_for(a, b) + 1
        return a + b


def parse_amount(value: Decimal | int | float | str) -> Decimal:
    """
    Normalise un montant saisi (str, int, float, Decimal) en Decimal exact.
    Pas d'arrondi ici : les contrôles (signe, plafond, solde) portent sur la valeur saisie,
    l'arrondi au centime se fait au stockage (Money / SignedMoney).
    Le signe est conservé : c'est à l'appelant de décider si un négatif est une erreur.
    """
    if isinstance(value, bool):
        raise TypeError("Amount cannot be a bool")
    if isinstance(value, Decimal):
        return _check_decimal(value, value)
    if isinstance(value, int):
        return _check_decimal(Decimal(value), value)
    if isinstance(value, float):
        # str() évite la représentation binaire (0.1 -> 0.1000000000000000055...)
        return _parse_decimal(str(value))
    return _parse_decimal(value)


def format_amount(amount: Decimal, currency: Currency = Currency.USD) -> str:
    """
    "$200.0", "$12.5", "$12.34" : zéros de fin retirés, au moins une décimale.
    """
    text = format(_quantize_money(amount), "f")
    whole, _, frac = text.partition(".")
    frac = frac.rstrip("0") or "0"
    return f"{_SYMBOLS[currency]}{whole}.{frac}"


@dataclass(frozen=True)
class Money:
    """
    Money = quantité d'argent non négative.
    Ex: plafond de retrait par transaction.
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.currency, Currency):
            raise ValueError("Invalid currency")

        if not isinstance(self.amount, Decimal):
            raise TypeError("Money.amount must be a Decimal")

        # signe contrôlé avant arrondi : -0.004 reste négatif
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

        q = _quantize_money(self.amount)
        object.__setattr__(self, "amount", q)

    def __str__(self) -> str:
        return format_amount(self.amount, self.currency)

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, TypeAdapter, ValidationError

from bankdemo.domain.errors import ErrorKind


_AMOUNT_PATTERN = r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)$"

AmountText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, pattern=_AMOUNT_PATTERN),
]

_amount_text = TypeAdapter(AmountText)


def validate_amount_text(field: str, raw: str) -> str:
    """Une saisie à la fois (lecture au fil des invites) ; ValueError si ce n'est pas un nombre."""
    try:
        return _amount_text.validate_python(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid number for {field}: {raw.strip()!r}") from exc


class SessionInputs(BaseModel):
    initial_balance: AmountText = Field(
        ...,
        examples=["1000", "1000.00"],
        description="Opening balance as typed by the user",
    )
    deposit_amount: AmountText = Field(
        ...,
        examples=["200"],
        description="Amount deposited through the secure account",
    )
    withdraw_amount: AmountText = Field(
        ...,
        examples=["300"],
        description="Amount withdrawn through the secure account",
    )


class SessionOutcome(BaseModel):
    ok: bool
    final_balance: str | None = None
    # None + ok=False : échec non prévu (hors taxonomie)
    error_kind: ErrorKind | None = None
    message: str | None = None

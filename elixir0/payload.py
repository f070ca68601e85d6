"""Typed JSON payloads for Elixir0 records.

:class:`TransactionPayload` mirrors :class:`~elixir0.models.Elixir0Transaction`
for JSON Lines input/output. Dates travel as ISO ``YYYY-MM-DD`` strings and
amounts as decimal strings so no precision is lost through floats.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from .models import Elixir0Transaction, TransactionStatus


class TransactionPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    payment_code: int | None = None
    payment_date: date | None = None
    amount: Decimal | None = None
    ordering_party_sort_code: str | None = None
    ordering_party_account_number: str | None = None
    beneficiary_account_number: str | None = None
    ordering_party_name: str | None = None
    ordering_party_address: str | None = None
    beneficiary_name: str | None = None
    beneficiary_address: str | None = None
    beneficiary_sort_code: str | None = None
    payment_details: str | None = None
    transaction_code: str | None = None
    client_bank_information: str | None = None
    status: TransactionStatus | None = None
    payers_nip: str | None = None
    identifier_type: str | None = None
    payers_identification: str | None = None
    payment_type: str | None = None
    payment_period: date | None = None
    period_form_number: str | None = None
    additional_case_id: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def _reject_float_amount(cls, v: object) -> object:
        # Floats would smuggle binary rounding into a fixed-point amount.
        if isinstance(v, float):
            raise ValueError("amount must be a decimal string or integer, not a float")
        return v

    @field_validator("amount")
    @classmethod
    def _finite_amount(cls, v: Decimal | None) -> Decimal | None:
        if v is not None and not v.is_finite():
            raise ValueError("amount must be finite")
        return v

    @field_serializer("amount", when_used="json")
    def _amount_as_text(self, v: Decimal | None) -> str | None:
        return None if v is None else format(v, "f")

    def to_transaction(self) -> Elixir0Transaction:
        return Elixir0Transaction(**self.model_dump())

    @classmethod
    def from_transaction(cls, tx: Elixir0Transaction) -> TransactionPayload:
        return cls(**asdict(tx))


__all__ = ["TransactionPayload"]

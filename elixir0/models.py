"""Data models for ``elixir0``.

This module defines the Elixir0 domestic transaction record as a frozen
``dataclass`` with explicit field order and types. Elixir0 is the Polish
interbank format for credit transfers as well as social security and tax
payments; a single record type carries the fields of both sub-kinds and
callers populate only the relevant subset.

Field groups
------------
- Local fields, all of which are projected onto the encoded line (see
  :mod:`elixir0.layout` for the exact order).
- Tax/social-security fields (``payers_nip`` through ``additional_case_id``).
  Their values live inside ``payment_details`` on the wire; they exist on the
  record for structured access only and are never emitted directly.
- ``status`` is bookkeeping for the loading pipeline and never emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import StrEnum

PAYMENT_CODE_LOCAL = 110
"""Payment code of a standard local credit transfer."""

TRANSACTION_CODE_CT = "51"
"""Transaction code of a credit transfer."""


class TransactionStatus(StrEnum):
    NEW = "NEW"
    PROCESSED = "PROCESSED"
    FAILED = "FAILED"


@dataclass(frozen=True, slots=True)
class Elixir0Transaction:
    """A single Elixir0 transaction.

    Every field is optional. The record performs no validation of its own:
    account-number checksums, payment-code legality and required-field rules
    for a given sub-kind belong to upstream collaborators.

    ``amount`` is a :class:`~decimal.Decimal` and ``payment_date`` a plain
    :class:`~datetime.date` (no time component).
    """

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

    # Social security and tax payments only; extracted from payment_details.
    payers_nip: str | None = None
    identifier_type: str | None = None
    payers_identification: str | None = None
    payment_type: str | None = None
    payment_period: date | None = None
    period_form_number: str | None = None
    additional_case_id: str | None = None


__all__ = [
    "PAYMENT_CODE_LOCAL",
    "TRANSACTION_CODE_CT",
    "Elixir0Transaction",
    "TransactionStatus",
]

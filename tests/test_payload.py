from __future__ import annotations

import json
from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from elixir0 import TransactionStatus, decode
from elixir0.payload import TransactionPayload
from tests.helpers.records import REFERENCE_LINE, REFERENCE_RECORD, TAX_RECORD


def test_json_payload_to_transaction():
    raw = json.dumps(
        {
            "payment_code": 110,
            "payment_date": "2024-03-05",
            "amount": "150.00",
            "ordering_party_sort_code": "10201026",
            "ordering_party_account_number": "61109010140000071219812874",
            "beneficiary_account_number": "",
            "ordering_party_name": "JOHN SMITH",
            "ordering_party_address": "WARSAW",
            "beneficiary_sort_code": "10201026",
            "payment_details": "INVOICE 123",
            "transaction_code": "51",
            "client_bank_information": "",
        }
    )
    tx = TransactionPayload.model_validate_json(raw).to_transaction()
    assert tx == REFERENCE_RECORD


def test_transaction_roundtrips_through_json():
    payload = TransactionPayload.from_transaction(TAX_RECORD)
    restored = TransactionPayload.model_validate_json(payload.model_dump_json()).to_transaction()
    assert restored == TAX_RECORD


def test_json_keeps_amount_scale_and_iso_dates():
    data = json.loads(
        TransactionPayload.from_transaction(decode(REFERENCE_LINE)).model_dump_json(
            exclude_none=True
        )
    )
    assert data["amount"] == "150.00"
    assert data["payment_date"] == "2024-03-05"
    assert data["status"] == "NEW"
    assert "beneficiary_account_number" not in data


def test_status_is_parsed_as_enum():
    payload = TransactionPayload.model_validate({"status": "PROCESSED"})
    assert payload.to_transaction().status is TransactionStatus.PROCESSED


@pytest.mark.parametrize(
    "data",
    [
        {"amount": 150.0},
        {"amount": "NaN"},
        {"amount": "abc"},
        {"payment_date": "2024-13-01"},
        {"unknown_field": "x"},
        {"status": "DONE"},
    ],
)
def test_invalid_payloads_rejected(data):
    with pytest.raises(ValidationError):
        TransactionPayload.model_validate(data)


def test_integer_amount_accepted():
    tx = TransactionPayload.model_validate({"amount": 42, "payment_date": date(2024, 1, 2)})
    assert tx.to_transaction().amount == Decimal(42)

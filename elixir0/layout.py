"""Declarative Elixir0 line layout.

Each position of an encoded line is described by a :class:`FieldSpec`. The
descriptor says where the value comes from (record attributes or a constant
literal) and whether it is a text field. Text fields are always wrapped in
quotes, so quoting is decided by :attr:`FieldSpec.kind` and never by matching
field names while formatting.

Line layout (16 tokens, exact order)::

    payment_code | payment_date | amount | ordering_party_sort_code | 0 |
    "ordering_party_account_number" | "beneficiary_account_number" |
    "ordering_party_name|ordering_party_address" |
    "beneficiary_name|beneficiary_address" | 0 | beneficiary_sort_code |
    "payment_details" | <reserved> | <reserved> | "transaction_code" |
    "client_bank_information"

The two composite name/address fields join their halves with the line
delimiter itself. Inside the quotes that pipe is data, not a field boundary,
but a name that contains the delimiter cannot be told apart from the
separator. The format has no escaping, so the ambiguity is kept as-is for
wire compatibility.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class FieldKind(Enum):
    PLAIN = "plain"
    TEXT = "text"
    LITERAL = "literal"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One position of the encoded line.

    ``attrs`` names the :class:`~elixir0.models.Elixir0Transaction`
    attributes feeding this position: one for a simple field, two (name and
    address) for a composite. Literal positions have no attributes and emit
    ``literal`` verbatim. ``value_type`` is the Python type a decoder produces
    for the position.
    """

    name: str
    kind: FieldKind
    attrs: tuple[str, ...] = ()
    literal: str | None = None
    value_type: type = str

    @property
    def quoted(self) -> bool:
        return self.kind is FieldKind.TEXT

    @property
    def composite(self) -> bool:
        return len(self.attrs) > 1


def _plain(name: str, value_type: type = str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.PLAIN, attrs=(name,), value_type=value_type)


def _text(name: str, *attrs: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.TEXT, attrs=attrs or (name,))


def _literal(name: str, value: str) -> FieldSpec:
    return FieldSpec(name=name, kind=FieldKind.LITERAL, literal=value)


ELIXIR0_LAYOUT: tuple[FieldSpec, ...] = (
    _plain("payment_code", int),
    _plain("payment_date", date),
    _plain("amount", Decimal),
    _plain("ordering_party_sort_code"),
    # Hardcoded as '0' in the format definition.
    _literal("ordering_party_zero", "0"),
    _text("ordering_party_account_number"),
    _text("beneficiary_account_number"),
    _text("ordering_party_name_and_address", "ordering_party_name", "ordering_party_address"),
    _text("beneficiary_name_and_address", "beneficiary_name", "beneficiary_address"),
    _literal("beneficiary_zero", "0"),
    _plain("beneficiary_sort_code"),
    _text("payment_details"),
    # Reserved; always empty in this format variant.
    _literal("reserved_1", ""),
    _literal("reserved_2", ""),
    _text("transaction_code"),
    _text("client_bank_information"),
)

TEXT_FIELDS: tuple[str, ...] = tuple(f.name for f in ELIXIR0_LAYOUT if f.quoted)
"""Names of the positions declared as text fields by the format."""


__all__ = ["ELIXIR0_LAYOUT", "FieldKind", "FieldSpec", "TEXT_FIELDS"]

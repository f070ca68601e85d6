from elixir0 import ELIXIR0_LAYOUT, TEXT_FIELDS, Elixir0Transaction, FieldKind


def test_layout_has_sixteen_positions():
    assert len(ELIXIR0_LAYOUT) == 16
    assert len({f.name for f in ELIXIR0_LAYOUT}) == 16


def test_text_fields_declared_by_the_format():
    assert TEXT_FIELDS == (
        "ordering_party_account_number",
        "beneficiary_account_number",
        "ordering_party_name_and_address",
        "beneficiary_name_and_address",
        "payment_details",
        "transaction_code",
        "client_bank_information",
    )


def test_literal_positions():
    literals = [(i, f.literal) for i, f in enumerate(ELIXIR0_LAYOUT) if f.kind is FieldKind.LITERAL]
    assert literals == [(4, "0"), (9, "0"), (12, ""), (13, "")]


def test_every_attribute_exists_on_the_record():
    fields = set(Elixir0Transaction.__dataclass_fields__)
    for spec in ELIXIR0_LAYOUT:
        assert set(spec.attrs) <= fields
    composites = [f.name for f in ELIXIR0_LAYOUT if f.composite]
    assert composites == ["ordering_party_name_and_address", "beneficiary_name_and_address"]

"""
Tests pour l'entite Customer.

Verifie la fabrique validante create() et la reconstruction sans validation.
"""

from datetime import datetime

import pytest

from osservice.core.entities import Customer
from osservice.core.errors import ValidationError


class TestCustomerCreate:
    """Tests pour Customer.create()."""

    def test_create_minimal(self):
        """Un nom seul suffit, les champs optionnels restent None."""
        customer = Customer.create(name="Jo")

        assert customer.name == "Jo"
        assert customer.phone is None
        assert customer.email is None
        assert customer.document is None
        assert customer.id
        assert customer.created_at is not None

    def test_create_trims_fields(self):
        customer = Customer.create(
            name="  Maria Silva  ",
            phone=" 11999990000 ",
            email=" maria@example.com ",
            document=" 123 ",
        )

        assert customer.name == "Maria Silva"
        assert customer.phone == "11999990000"
        assert customer.email == "maria@example.com"
        assert customer.document == "123"

    def test_blank_optional_fields_become_none(self):
        customer = Customer.create(name="Maria", phone="   ", email="", document=" ")

        assert customer.phone is None
        assert customer.email is None
        assert customer.document is None

    def test_ids_are_unique(self):
        first = Customer.create(name="Maria")
        second = Customer.create(name="Maria")
        assert first.id != second.id

    @pytest.mark.parametrize("name", [None, "", "   ", "A", " A "])
    def test_invalid_name(self, name):
        with pytest.raises(ValidationError) as exc_info:
            Customer.create(name=name)
        assert exc_info.value.field == "name"

    def test_name_boundaries(self):
        assert Customer.create(name="a" * 150).name == "a" * 150
        with pytest.raises(ValidationError):
            Customer.create(name="a" * 151)

    def test_phone_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            Customer.create(name="Maria", phone="1" * 31)
        assert exc_info.value.field == "phone"

    def test_document_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            Customer.create(name="Maria", document="1" * 31)
        assert exc_info.value.field == "document"

    @pytest.mark.parametrize(
        "email",
        ["maria", "maria@", "@example.com", "maria@example", "ma ria@example.com"],
    )
    def test_invalid_email_format(self, email):
        with pytest.raises(ValidationError) as exc_info:
            Customer.create(name="Maria", email=email)
        assert exc_info.value.field == "email"

    def test_email_too_long(self):
        email = "a" * 110 + "@example.com"
        with pytest.raises(ValidationError) as exc_info:
            Customer.create(name="Maria", email=email)
        assert exc_info.value.field == "email"


class TestCustomerReconstitute:
    """Tests pour Customer.reconstitute()."""

    def test_reconstitute_keeps_values(self):
        """Aucune validation : un nom d'un caractere est conserve."""
        created_at = datetime(2024, 1, 15, 10, 30)
        customer = Customer.reconstitute(
            id="abc",
            name="X",
            phone=None,
            email=None,
            document="999",
            created_at=created_at,
        )

        assert customer.id == "abc"
        assert customer.name == "X"
        assert customer.document == "999"
        assert customer.created_at == created_at

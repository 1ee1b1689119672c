"""Unit tests for the Supplier entity."""

import pytest

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.identifiers import SupplierId
from procurement.domain.model.supplier import Supplier
from procurement.domain.model.value_objects import Money


class TestSupplierCreation:

    def test_register_generates_id(self):
        supplier = Supplier.register("Acme Corp", "orders@acme.example")
        assert isinstance(supplier.id, SupplierId)
        assert supplier.name == "Acme Corp"
        assert supplier.contact_email == "orders@acme.example"
        assert supplier.last_order_total_price is None

    def test_email_optional(self):
        assert Supplier.register("Acme").contact_email is None

    @pytest.mark.parametrize("name", ["A", "x" * 101, "", None])
    def test_name_length_enforced(self, name):
        with pytest.raises(ValidationError, match="between 2 and 100"):
            Supplier.register(name)

    @pytest.mark.parametrize("name", ["AB", "x" * 100])
    def test_name_length_bounds_accepted(self, name):
        assert Supplier.register(name).name == name

    @pytest.mark.parametrize("email", ["acme", "a@b", "a b@c.d", "@acme.example"])
    def test_invalid_email_rejected(self, email):
        with pytest.raises(ValidationError, match="valid email"):
            Supplier.register("Acme", email)

    def test_id_must_be_supplier_id(self):
        with pytest.raises(ValidationError, match="SupplierId"):
            Supplier(id="123", name="Acme")

    def test_last_total_must_be_money(self):
        with pytest.raises(ValidationError, match="Money"):
            Supplier(id=SupplierId.generate(), name="Acme", last_order_total_price=10)


class TestRecordOrderTotal:

    def test_records_latest_total(self):
        supplier = Supplier.register("Acme")
        supplier.record_order_total(Money.of("25.00"))
        supplier.record_order_total(Money.of("12.50", "EUR"))
        assert supplier.last_order_total_price == Money.of("12.50", "EUR")

    def test_rejects_non_money(self):
        supplier = Supplier.register("Acme")
        with pytest.raises(ValidationError, match="Money"):
            supplier.record_order_total("25.00")
        assert supplier.last_order_total_price is None

"""Integration tests for the query use cases and supplier registration."""

import pytest

from procurement.application.list_orders import ListOrdersHandler
from procurement.application.register_supplier import RegisterSupplierHandler
from procurement.application.show_order import ShowOrderHandler
from procurement.domain.exceptions import EntityNotFoundError, ValidationError
from procurement.domain.model.identifiers import ProductId, SupplierId
from procurement.domain.model.purchase_order import PurchaseOrder
from tests.fakes import FakePurchaseOrderRepository, FakeSupplierRepository


def _orders_repo() -> tuple[FakePurchaseOrderRepository, PurchaseOrder, PurchaseOrder]:
    repo = FakePurchaseOrderRepository()
    draft = PurchaseOrder.create(SupplierId.generate(), "USD")
    draft.add_item(ProductId.generate(), 4, 2.5)
    submitted = PurchaseOrder.create(SupplierId.generate(), "EUR")
    submitted.submit()
    repo.save(draft)
    repo.save(submitted)
    return repo, draft, submitted


class TestShowOrder:

    def test_show_returns_dto(self):
        repo, draft, _ = _orders_repo()
        dto = ShowOrderHandler(repo).handle(draft.id)
        assert dto.id == draft.id
        assert dto.status == "Draft"
        assert dto.items[0].quantity == 4
        assert dto.total == "10.00 USD"

    def test_show_unknown_rejected(self):
        repo, _, _ = _orders_repo()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowOrderHandler(repo).handle("missing")


class TestListOrders:

    def test_list_all(self):
        repo, _, _ = _orders_repo()
        assert len(ListOrdersHandler(repo).handle()) == 2

    @pytest.mark.parametrize("status", ["Submitted", "submitted", " SUBMITTED "])
    def test_filter_by_status(self, status):
        repo, _, submitted = _orders_repo()
        result = ListOrdersHandler(repo).handle(status=status)
        assert [dto.id for dto in result] == [submitted.id]

    def test_unknown_status_rejected(self):
        repo, _, _ = _orders_repo()
        with pytest.raises(ValidationError, match="Invalid purchase order state"):
            ListOrdersHandler(repo).handle(status="pending")


class TestRegisterSupplier:

    def test_register(self):
        repo = FakeSupplierRepository()
        dto = RegisterSupplierHandler(repo).handle("  Acme Corp ", "po@acme.example")
        assert dto.name == "Acme Corp"
        assert dto.contact_email == "po@acme.example"
        assert dto.last_order_total is None
        assert repo.get_by_id(SupplierId(dto.id)) is not None

    def test_duplicate_name_rejected(self):
        repo = FakeSupplierRepository()
        handler = RegisterSupplierHandler(repo)
        handler.handle("Acme Corp")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("acme corp")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            RegisterSupplierHandler(FakeSupplierRepository()).handle("   ")

    def test_invalid_email_rejected(self):
        repo = FakeSupplierRepository()
        with pytest.raises(ValidationError, match="valid email"):
            RegisterSupplierHandler(repo).handle("Acme", "not-an-email")
        assert repo.list_all() == []

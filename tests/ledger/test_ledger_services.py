from __future__ import annotations

from datetime import date

import pytest

from src.bizdesk.bizdesk.core.constants import INVOICES_KEY
from src.bizdesk.bizdesk.core.enums import InvoiceStatus
from src.bizdesk.bizdesk.core.exceptions import NotFound, ValidationError
from src.bizdesk.bizdesk.ledger.service import ExpenseService, PurchaseService, SalesService
from src.bizdesk.bizdesk.ledger.store_ledger_repository import (
    StoreExpenseRepository,
    StoreInvoiceRepository,
    StoreSupplierRepository,
)


@pytest.fixture
def sales(store):
    return SalesService(StoreInvoiceRepository(store))


@pytest.fixture
def purchases(store):
    return PurchaseService(StoreSupplierRepository(store))


@pytest.fixture
def expenses(store):
    return ExpenseService(StoreExpenseRepository(store))


def test_create_invoice_numbers_sequentially_newest_first(sales, store, fixed_today):
    first = sales.create_invoice(customer_name="Nile Co", amount=100, today=fixed_today)
    second = sales.create_invoice(customer_name="Delta", amount=40, item_count=3, today=fixed_today)

    assert first.number == "INV-2026-001"
    assert second.number == "INV-2026-002"
    assert first.status == InvoiceStatus.PENDING
    assert [i.id for i in sales.list_invoices()] == [second.id, first.id]
    assert store.load(INVOICES_KEY)[0]["customerName"] == "Delta"
    assert store.load(INVOICES_KEY)[0]["items"] == 3


def test_invoice_number_uses_current_year(sales):
    inv = sales.create_invoice(customer_name="X", amount=1, today=date(2027, 1, 2))
    assert inv.number == "INV-2027-001"
    assert inv.date == "2027-01-02"


@pytest.mark.parametrize("customer, amount", [("", 10), ("X", -1), ("X", None)])
def test_create_invoice_validation(sales, customer, amount):
    with pytest.raises(ValidationError):
        sales.create_invoice(customer_name=customer, amount=amount)
    assert sales.list_invoices() == ()


def test_toggle_invoice_status_flips_between_paid_and_pending(sales):
    inv = sales.create_invoice(customer_name="X", amount=10)

    assert sales.toggle_invoice_status(inv.id).status == InvoiceStatus.PAID
    assert sales.toggle_invoice_status(inv.id).status == InvoiceStatus.PENDING
    assert sales.list_invoices()[0].status == InvoiceStatus.PENDING


def test_toggle_overdue_marks_paid(sales, store):
    inv = sales.create_invoice(customer_name="X", amount=10)
    docs = store.load(INVOICES_KEY)
    docs[0]["status"] = "OVERDUE"
    store.save(INVOICES_KEY, docs)

    assert sales.toggle_invoice_status(inv.id).status == InvoiceStatus.PAID


def test_toggle_unknown_invoice(sales):
    with pytest.raises(NotFound):
        sales.toggle_invoice_status("nope")


def test_supplier_payment_reduces_balance_and_may_go_negative(purchases):
    sup = purchases.add_supplier(name="Acme", contact="0100", balance=100)

    assert purchases.record_payment(sup.id, 60).balance == 40
    assert purchases.record_payment(sup.id, 50).balance == -10
    assert purchases.list_suppliers()[0].balance == -10


@pytest.mark.parametrize("amount", [0, -5])
def test_supplier_payment_must_be_positive(purchases, amount):
    sup = purchases.add_supplier(name="Acme", balance=100)
    with pytest.raises(ValidationError):
        purchases.record_payment(sup.id, amount)
    assert purchases.list_suppliers()[0].balance == 100


def test_payment_to_unknown_supplier(purchases):
    with pytest.raises(NotFound):
        purchases.record_payment("ghost", 10)


def test_add_expense_defaults_and_order(expenses, fixed_today):
    first = expenses.add_expense(amount=25, today=fixed_today)
    second = expenses.add_expense(amount=5, category="Rent", approved_by="Mona", today=fixed_today)

    assert first.category == "Misc"
    assert first.approved_by == "Unknown"
    assert first.date == "2026-03-15"
    assert second.approved_by == "Mona"
    assert [e.id for e in expenses.list_expenses()] == [second.id, first.id]


def test_add_expense_rejects_non_positive_amount(expenses):
    with pytest.raises(ValidationError):
        expenses.add_expense(amount=0)

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_iso
from ..common.ids import new_id, sequence_label
from ..common.validators import require_non_empty, require_non_negative, require_positive
from ..core.constants import DEFAULT_APPROVER, DEFAULT_EXPENSE_CATEGORY
from ..core.enums import InvoiceStatus
from ..core.exceptions import NotFound
from .model import Expense, Invoice, Supplier
from .repository import ExpenseRepository, InvoiceRepository, SupplierRepository

logger = logging.getLogger("bizdesk.ledger")


class SalesService:
    """Use case: record sales invoices and settle them."""

    def __init__(self, invoices: InvoiceRepository):
        self._invoices = invoices

    def list_invoices(self) -> tuple[Invoice, ...]:
        return tuple(self._invoices.load_all())

    def create_invoice(
        self,
        *,
        customer_name: str,
        amount: float,
        item_count: int = 1,
        today: Optional[date] = None,
    ) -> Invoice:
        customer_name = require_non_empty(customer_name, "Customer")
        amount = require_non_negative(amount, "Amount")
        today = today or date.today()

        invoices = tuple(self._invoices.load_all())
        invoice = Invoice(
            id=new_id(),
            number=sequence_label(f"INV-{today.year}", len(invoices) + 1),
            customer_name=customer_name,
            date=today_iso(today),
            amount=amount,
            status=InvoiceStatus.PENDING,
            item_count=int(item_count),
        )
        # Newest first.
        self._invoices.save_all((invoice, *invoices))
        logger.info("Created invoice %s amount=%s", invoice.number, invoice.amount)
        return invoice

    def toggle_invoice_status(self, invoice_id: str) -> Invoice:
        """PAID -> PENDING, anything else -> PAID."""
        invoices = tuple(self._invoices.load_all())
        target = next((inv for inv in invoices if inv.id == invoice_id), None)
        if target is None:
            raise NotFound(f"Invoice {invoice_id} does not exist")

        status = InvoiceStatus.PENDING if target.status == InvoiceStatus.PAID else InvoiceStatus.PAID
        updated = replace(target, status=status)
        self._invoices.save_all(tuple(updated if inv.id == invoice_id else inv for inv in invoices))
        logger.info("Invoice %s is now %s", updated.number, status.value)
        return updated


class PurchaseService:
    """Use case: supplier accounts and payments."""

    def __init__(self, suppliers: SupplierRepository):
        self._suppliers = suppliers

    def list_suppliers(self) -> tuple[Supplier, ...]:
        return tuple(self._suppliers.load_all())

    def add_supplier(self, *, name: str, contact: str = "", balance: float = 0) -> Supplier:
        supplier = Supplier(
            id=new_id(),
            name=require_non_empty(name, "Supplier name"),
            contact=(contact or "").strip(),
            balance=float(balance or 0),
        )
        self._suppliers.save_all((*self._suppliers.load_all(), supplier))
        logger.info("Added supplier %s", supplier.name)
        return supplier

    def record_payment(self, supplier_id: str, amount: float) -> Supplier:
        """Reduce the balance owed. Overpayment leaves a negative balance."""
        amount = require_positive(amount, "Payment amount")
        suppliers = tuple(self._suppliers.load_all())
        target = next((s for s in suppliers if s.id == supplier_id), None)
        if target is None:
            raise NotFound(f"Supplier {supplier_id} does not exist")

        updated = replace(target, balance=target.balance - amount)
        self._suppliers.save_all(tuple(updated if s.id == supplier_id else s for s in suppliers))
        logger.info("Payment of %s recorded for supplier %s", amount, target.name)
        return updated


class ExpenseService:
    def __init__(self, expenses: ExpenseRepository):
        self._expenses = expenses

    def list_expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses.load_all())

    def add_expense(
        self,
        *,
        amount: float,
        category: Optional[str] = None,
        description: str = "",
        approved_by: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Expense:
        expense = Expense(
            id=new_id(),
            category=(category or "").strip() or DEFAULT_EXPENSE_CATEGORY,
            description=(description or "").strip(),
            amount=require_positive(amount, "Amount"),
            date=today_iso(today),
            approved_by=(approved_by or "").strip() or DEFAULT_APPROVER,
        )
        self._expenses.save_all((expense, *self._expenses.load_all()))
        logger.info("Recorded expense %s in %s", expense.amount, expense.category)
        return expense

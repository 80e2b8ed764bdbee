from __future__ import annotations

from ..core.constants import EXPENSES_KEY, INVOICES_KEY, SUPPLIERS_KEY
from ..core.enums import InvoiceStatus
from ..storage.collection import StoredCollection
from ..storage.port import KeyValueStore
from .model import Expense, Invoice, Supplier


def invoice_to_doc(inv: Invoice) -> dict:
    return {
        "id": inv.id,
        "number": inv.number,
        "customerName": inv.customer_name,
        "date": inv.date,
        "amount": inv.amount,
        "status": inv.status.value,
        "items": inv.item_count,
    }


def invoice_from_doc(doc: dict) -> Invoice:
    return Invoice(
        id=str(doc["id"]),
        number=doc.get("number", ""),
        customer_name=doc.get("customerName", ""),
        date=doc.get("date", ""),
        amount=doc.get("amount", 0),
        status=InvoiceStatus(doc.get("status", InvoiceStatus.PENDING.value)),
        item_count=int(doc.get("items", 0)),
    )


def expense_to_doc(exp: Expense) -> dict:
    return {
        "id": exp.id,
        "category": exp.category,
        "description": exp.description,
        "amount": exp.amount,
        "date": exp.date,
        "approvedBy": exp.approved_by,
    }


def expense_from_doc(doc: dict) -> Expense:
    return Expense(
        id=str(doc["id"]),
        category=doc.get("category", ""),
        description=doc.get("description", ""),
        amount=doc.get("amount", 0),
        date=doc.get("date", ""),
        approved_by=doc.get("approvedBy", ""),
    )


def supplier_to_doc(sup: Supplier) -> dict:
    return {"id": sup.id, "name": sup.name, "contact": sup.contact, "balance": sup.balance}


def supplier_from_doc(doc: dict) -> Supplier:
    return Supplier(
        id=str(doc["id"]),
        name=doc["name"],
        contact=doc.get("contact", ""),
        balance=doc.get("balance", 0),
    )


class StoreInvoiceRepository(StoredCollection[Invoice]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, INVOICES_KEY, to_doc=invoice_to_doc, from_doc=invoice_from_doc)


class StoreExpenseRepository(StoredCollection[Expense]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, EXPENSES_KEY, to_doc=expense_to_doc, from_doc=expense_from_doc)


class StoreSupplierRepository(StoredCollection[Supplier]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, SUPPLIERS_KEY, to_doc=supplier_to_doc, from_doc=supplier_from_doc)

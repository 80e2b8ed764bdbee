from __future__ import annotations

from typing import Protocol, Sequence

from .model import Expense, Invoice, Supplier


class InvoiceRepository(Protocol):
    def load_all(self) -> Sequence[Invoice]:
        raise NotImplementedError

    def save_all(self, invoices: Sequence[Invoice]) -> None:
        raise NotImplementedError


class ExpenseRepository(Protocol):
    def load_all(self) -> Sequence[Expense]:
        raise NotImplementedError

    def save_all(self, expenses: Sequence[Expense]) -> None:
        raise NotImplementedError


class SupplierRepository(Protocol):
    def load_all(self) -> Sequence[Supplier]:
        raise NotImplementedError

    def save_all(self, suppliers: Sequence[Supplier]) -> None:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import InvoiceStatus


@dataclass(frozen=True)
class Invoice:
    """Domain entity: sales invoice."""

    id: str
    number: str
    customer_name: str
    date: str
    amount: float
    status: InvoiceStatus
    item_count: int


@dataclass(frozen=True)
class Expense:
    """Domain entity: expense entry (append-only)."""

    id: str
    category: str
    description: str
    amount: float
    date: str
    approved_by: str


@dataclass(frozen=True)
class Supplier:
    """Domain entity: supplier account. Balance is signed and never clamped."""

    id: str
    name: str
    contact: str
    balance: float


@dataclass(frozen=True)
class FinancialMetrics:
    total_sales: float
    total_expenses: float
    net_profit: float
    unique_customer_count: int


@dataclass(frozen=True)
class MonthlyFlow:
    month: int
    income: float
    expense: float


@dataclass(frozen=True)
class ReceivablesPayables:
    total_receivables: float
    total_payables: float


@dataclass(frozen=True)
class CashPosition:
    total_income: float
    total_expenses: float
    cash_on_hand: float

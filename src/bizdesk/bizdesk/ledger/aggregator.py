"""Ledger aggregations.

Pure functions of their inputs: nothing here reads storage or keeps derived
state between calls.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..common.datetime_utils import try_parse_date
from ..core.constants import MONTHS_PER_YEAR
from ..core.enums import InvoiceStatus
from .model import (
    CashPosition,
    Expense,
    FinancialMetrics,
    Invoice,
    MonthlyFlow,
    ReceivablesPayables,
    Supplier,
)


def compute_metrics(invoices: Iterable[Invoice], expenses: Iterable[Expense]) -> FinancialMetrics:
    invoices = tuple(invoices)
    total_sales = sum(inv.amount for inv in invoices)
    total_expenses = sum(exp.amount for exp in expenses)
    return FinancialMetrics(
        total_sales=total_sales,
        total_expenses=total_expenses,
        net_profit=total_sales - total_expenses,
        unique_customer_count=len({inv.customer_name for inv in invoices}),
    )


def compute_monthly_flows(invoices: Iterable[Invoice], expenses: Iterable[Expense]) -> tuple[MonthlyFlow, ...]:
    """Twelve calendar-month buckets, January first.

    Years are not separated. Records with an unparseable date are skipped.
    """
    income = [0.0] * MONTHS_PER_YEAR
    expense = [0.0] * MONTHS_PER_YEAR

    for inv in invoices:
        d = try_parse_date(inv.date)
        if d is not None:
            income[d.month - 1] += inv.amount
    for exp in expenses:
        d = try_parse_date(exp.date)
        if d is not None:
            expense[d.month - 1] += exp.amount

    return tuple(
        MonthlyFlow(month=i + 1, income=income[i], expense=expense[i]) for i in range(MONTHS_PER_YEAR)
    )


def compute_receivables_payables(
    invoices: Iterable[Invoice], suppliers: Iterable[Supplier]
) -> ReceivablesPayables:
    return ReceivablesPayables(
        total_receivables=sum(inv.amount for inv in invoices if inv.status == InvoiceStatus.PENDING),
        total_payables=sum(sup.balance for sup in suppliers),
    )


def compute_cash_position(invoices: Iterable[Invoice], expenses: Iterable[Expense]) -> CashPosition:
    """Simplified cash flow: collected (PAID) income minus all expenses."""
    total_income = sum(inv.amount for inv in invoices if inv.status == InvoiceStatus.PAID)
    total_expenses = sum(exp.amount for exp in expenses)
    return CashPosition(
        total_income=total_income,
        total_expenses=total_expenses,
        cash_on_hand=total_income - total_expenses,
    )


def count_attention_invoices(invoices: Sequence[Invoice]) -> int:
    return sum(1 for inv in invoices if inv.status in (InvoiceStatus.PENDING, InvoiceStatus.OVERDUE))

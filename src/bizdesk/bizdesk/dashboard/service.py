from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ..core.enums import Capability, Role
from ..inventory.model import InventoryItem
from ..inventory.repository import InventoryRepository
from ..inventory.stock_alert import low_stock_items
from ..ledger import aggregator
from ..ledger.model import CashPosition, FinancialMetrics, MonthlyFlow, ReceivablesPayables
from ..ledger.repository import ExpenseRepository, InvoiceRepository, SupplierRepository
from ..permissions.repository import PermissionRepository
from ..reports.printing import render_report
from ..settings.repository import SettingsRepository


@dataclass(frozen=True)
class DashboardSummary:
    metrics: FinancialMetrics
    monthly_flows: tuple[MonthlyFlow, ...]
    attention_invoice_count: int
    low_stock: tuple[InventoryItem, ...]


class DashboardService:
    """Read-only views over the current snapshots. Nothing derived is stored."""

    def __init__(
        self,
        invoices: InvoiceRepository,
        expenses: ExpenseRepository,
        suppliers: SupplierRepository,
        inventory: InventoryRepository,
        settings: SettingsRepository,
        permissions: PermissionRepository,
    ):
        self._invoices = invoices
        self._expenses = expenses
        self._suppliers = suppliers
        self._inventory = inventory
        self._settings = settings
        self._permissions = permissions

    def summary(self) -> DashboardSummary:
        invoices = tuple(self._invoices.load_all())
        expenses = tuple(self._expenses.load_all())
        return DashboardSummary(
            metrics=aggregator.compute_metrics(invoices, expenses),
            monthly_flows=aggregator.compute_monthly_flows(invoices, expenses),
            attention_invoice_count=aggregator.count_attention_invoices(invoices),
            low_stock=low_stock_items(self._inventory.load_all(), self._settings.load().stock_alert),
        )

    def receivables_payables(self) -> ReceivablesPayables:
        return aggregator.compute_receivables_payables(self._invoices.load_all(), self._suppliers.load_all())

    def cash_position(self) -> CashPosition:
        return aggregator.compute_cash_position(self._invoices.load_all(), self._expenses.load_all())

    def render_report(self, title: str, *, actor_role: Role, rows: Iterable[Mapping[str, Any]] = ()) -> str:
        self._permissions.load_gate().require_capability(actor_role, Capability.VIEW_REPORTS)
        return render_report(title, self._settings.load(), rows)

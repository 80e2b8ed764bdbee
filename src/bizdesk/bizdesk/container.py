from __future__ import annotations

from dataclasses import dataclass

from .dashboard.service import DashboardService
from .inventory.service import InventoryService
from .inventory.store_inventory_repository import StoreInventoryRepository
from .ledger.service import ExpenseService, PurchaseService, SalesService
from .ledger.store_ledger_repository import (
    StoreExpenseRepository,
    StoreInvoiceRepository,
    StoreSupplierRepository,
)
from .payroll.engine import PayrollEngine
from .payroll.model import PayrollPolicy
from .payroll.service import PayrollService
from .payroll.store_employee_repository import StoreEmployeeRepository
from .permissions.store_permission_repository import StorePermissionRepository
from .settings.service import SettingsService
from .settings.store_settings_repository import StoreSettingsRepository
from .storage.port import KeyValueStore
from .users.store_user_directory import StoredUserDirectory


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    invoices_repo: StoreInvoiceRepository
    expenses_repo: StoreExpenseRepository
    suppliers_repo: StoreSupplierRepository
    inventory_repo: StoreInventoryRepository
    employees_repo: StoreEmployeeRepository
    settings_repo: StoreSettingsRepository
    permissions_repo: StorePermissionRepository
    user_directory: StoredUserDirectory

    sales_service: SalesService
    purchase_service: PurchaseService
    expense_service: ExpenseService
    inventory_service: InventoryService
    payroll_service: PayrollService
    settings_service: SettingsService
    dashboard_service: DashboardService


def build_container(*, store: KeyValueStore, payroll_policy: PayrollPolicy | None = None) -> Container:
    invoices_repo = StoreInvoiceRepository(store)
    expenses_repo = StoreExpenseRepository(store)
    suppliers_repo = StoreSupplierRepository(store)
    inventory_repo = StoreInventoryRepository(store)
    employees_repo = StoreEmployeeRepository(store)
    settings_repo = StoreSettingsRepository(store)
    permissions_repo = StorePermissionRepository(store)
    user_directory = StoredUserDirectory(store)

    # Payroll only consults the fixed tier and the staff-manager set, which
    # do not depend on the stored matrix.
    payroll_engine = PayrollEngine(permissions_repo.load_gate(), user_directory, policy=payroll_policy)

    return Container(
        store=store,
        invoices_repo=invoices_repo,
        expenses_repo=expenses_repo,
        suppliers_repo=suppliers_repo,
        inventory_repo=inventory_repo,
        employees_repo=employees_repo,
        settings_repo=settings_repo,
        permissions_repo=permissions_repo,
        user_directory=user_directory,
        sales_service=SalesService(invoices_repo),
        purchase_service=PurchaseService(suppliers_repo),
        expense_service=ExpenseService(expenses_repo),
        inventory_service=InventoryService(inventory_repo, permissions_repo),
        payroll_service=PayrollService(employees_repo, payroll_engine),
        settings_service=SettingsService(settings_repo, permissions_repo),
        dashboard_service=DashboardService(
            invoices_repo, expenses_repo, suppliers_repo, inventory_repo, settings_repo, permissions_repo
        ),
    )

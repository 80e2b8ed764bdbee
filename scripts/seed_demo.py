from __future__ import annotations

import os
import sys
from dataclasses import replace
from pathlib import Path

from werkzeug.security import generate_password_hash

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.bizdesk.bizdesk.core.constants import PRIMARY_OWNER_USER_ID
from src.bizdesk.bizdesk.core.enums import DeductionType, Role
from src.bizdesk.bizdesk.main import create_container
from src.bizdesk.bizdesk.users.model import Credentials


def main() -> None:
    app = create_container()

    # Owner login behind the reserved "admin-emp" record; a fresh store has no password on it.
    owner = app.user_directory.get_by_id(PRIMARY_OWNER_USER_ID)
    if owner is not None and not owner.password_hash:
        app.user_directory.update_user(
            replace(owner, password_hash=generate_password_hash(os.getenv("SEED_OWNER_PASSWORD", "admin123")))
        )

    if len(app.payroll_service.list_employees()) > 1:
        print("Store already has employees, skipping demo data")
        return

    sara = app.payroll_service.add_employee(
        name="Sara Ahmed", position="Cashier", base_salary=4500, actor_role=Role.OWNER
    )
    omar = app.payroll_service.add_employee(
        name="Omar Hassan", position="Store keeper", base_salary=3600, actor_role=Role.OWNER
    )
    app.payroll_service.apply_deduction(omar.id, DeductionType.HALF_DAY, "Late arrival")
    app.payroll_service.apply_advance(sara.id, 500)
    app.payroll_service.link_user_account(
        sara.id, Credentials(username="sara", role=Role.SALES, password="sara123"), actor_role=Role.OWNER
    )

    paid = app.sales_service.create_invoice(customer_name="Nile Trading", amount=1200, item_count=4)
    app.sales_service.toggle_invoice_status(paid.id)
    app.sales_service.create_invoice(customer_name="Delta Market", amount=650, item_count=2)

    app.expense_service.add_expense(amount=300, category="Utilities", description="Electricity", approved_by="Admin")

    supplier = app.purchase_service.add_supplier(name="Cairo Paper Co", contact="0100 000 0000", balance=2000)
    app.purchase_service.record_payment(supplier.id, 750)

    app.inventory_service.add_item(name="A4 Paper", quantity=4, unit="box", unit_price=120, reorder_level=10)
    app.inventory_service.add_item(name="Ink cartridge", quantity=25, unit_price=80, reorder_level=5)

    print(f"OK: Seeded demo company ({len(app.payroll_service.list_employees())} employees)")


if __name__ == "__main__":
    main()

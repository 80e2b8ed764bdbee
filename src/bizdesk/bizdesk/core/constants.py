"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAYS_PER_MONTH = 30

PRIMARY_OWNER_EMPLOYEE_ID = "admin-emp"
PRIMARY_OWNER_USER_ID = "super-admin-01"

DEFAULT_EMPLOYEE_POSITION = "Employee"
DEFAULT_ADVANCE_REASON = "Salary advance"
DEFAULT_EXPENSE_CATEGORY = "Misc"
DEFAULT_APPROVER = "Unknown"
DEFAULT_ITEM_UNIT = "pcs"
DEFAULT_ITEM_CATEGORY = "General"

MONTHS_PER_YEAR = 12

# Persistence keys, one per aggregate.
INVOICES_KEY = "invoices_data_v3"
EXPENSES_KEY = "expenses_data_v3"
SUPPLIERS_KEY = "suppliers_data_v3"
INVENTORY_KEY = "inventory_data_v3"
EMPLOYEES_KEY = "employees_data_v3"
USERS_KEY = "users_data_v3"
SETTINGS_KEY = "company_settings_v3"
PERMISSIONS_KEY = "role_permissions_v3"

"""bizdesk package.

Back-office core for a small business dashboard, organized by feature
modules (ledger, inventory, payroll, permissions, ...) with pure engines
and thin service/repository layers around them.
"""

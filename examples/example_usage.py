"""Example: use the service layer directly, without any UI.

Run ``scripts/seed_demo.py`` first to have something to look at.
"""

from src.bizdesk.bizdesk.main import create_container


def main():
    app = create_container()
    summary = app.dashboard_service.summary()
    metrics = summary.metrics

    print(f"Sales: {metrics.total_sales}  Expenses: {metrics.total_expenses}  Net: {metrics.net_profit}")
    print(f"Invoices needing attention: {summary.attention_invoice_count}")
    for item in summary.low_stock:
        print(f"Low stock: {item.sku} {item.name} ({item.quantity} {item.unit})")


if __name__ == "__main__":
    main()

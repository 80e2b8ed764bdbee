from __future__ import annotations

import pytest

from src.bizdesk.bizdesk.core.enums import DeductionType, EmployeeStatus, InvoiceStatus
from src.bizdesk.bizdesk.ledger.model import Invoice
from src.bizdesk.bizdesk.payroll.model import Deduction, Employee
from src.bizdesk.bizdesk.reports.csv_export import (
    BOM,
    deduction_statement_csv,
    flatten,
    read_csv,
    to_csv,
    to_csv_bytes,
)


def _employee(*deductions: Deduction) -> Employee:
    return Employee(
        id="e1",
        name="Sara",
        position="Cashier",
        base_salary=3000,
        net_salary=3000 - sum(d.amount for d in deductions),
        status=EmployeeStatus.ACTIVE,
        join_date="2026-01-01",
        deductions=deductions,
    )


def test_to_csv_header_from_first_record_and_quoted_values():
    text = to_csv([{"name": "Sara", "note": 'said "hi", left'}, {"name": "Omar", "note": ""}])

    assert text.startswith(BOM)
    lines = text[len(BOM):].splitlines()
    assert lines[0] == "name,note"
    assert lines[1] == '"Sara","said ""hi"", left"'
    assert lines[2] == '"Omar",""'


def test_to_csv_empty_input_is_empty():
    assert to_csv([]) == ""
    assert to_csv_bytes([]) == b""


def test_to_csv_bytes_carries_utf8_bom():
    data = to_csv_bytes([{"name": "Café"}])
    assert data.startswith(b"\xef\xbb\xbf")
    assert "Café" in data.decode("utf-8-sig")


def test_flatten_dataclass_uses_enum_values_and_skips_collections():
    inv = Invoice(
        id="i1",
        number="INV-2026-001",
        customer_name="Nile",
        date="2026-01-01",
        amount=12.5,
        status=InvoiceStatus.PAID,
        item_count=2,
    )
    assert flatten(inv)["status"] == "PAID"
    assert "deductions" not in flatten(_employee())


def test_flatten_rejects_unsupported_records():
    with pytest.raises(TypeError):
        flatten(42)


def test_deduction_statement_round_trip():
    employee = _employee(
        Deduction(id="d1", date="2026-03-01", amount=100, type=DeductionType.FULL_DAY, reason="absent, no notice"),
        Deduction(id="d2", date="2026-03-05", amount=250.5, type=DeductionType.ADVANCE, reason="Salary advance"),
    )

    rows = read_csv(deduction_statement_csv(employee))

    assert list(rows[0].keys()) == ["date", "type", "amount", "reason"]
    assert [(r["date"], float(r["amount"]), r["reason"]) for r in rows] == [
        ("2026-03-01", 100.0, "absent, no notice"),
        ("2026-03-05", 250.5, "Salary advance"),
    ]
    assert rows[1]["type"] == "ADVANCE"


def test_deduction_statement_without_deductions_is_header_only():
    text = deduction_statement_csv(_employee())
    assert text == BOM + "date,type,amount,reason\n"
    assert read_csv(text) == []

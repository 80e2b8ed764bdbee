"""CSV export port.

Header row from the first record's field names, every value double-quoted,
UTF-8 byte-order mark in front so spreadsheet tools pick the right encoding.
"""

from __future__ import annotations

import csv
import io
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

from ..payroll.model import Employee

BOM = "\ufeff"

DEDUCTION_COLUMNS = ("date", "type", "amount", "reason")


def _cell(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if value is None:
        return ""
    return value


def flatten(record: Any) -> dict:
    """Dataclass or mapping -> flat dict of exportable values."""
    if is_dataclass(record) and not isinstance(record, type):
        data = asdict(record)
    elif isinstance(record, Mapping):
        data = dict(record)
    else:
        raise TypeError(f"Cannot export {type(record).__name__}")
    return {k: _cell(v) for k, v in data.items() if not isinstance(v, (list, tuple, dict))}


def _write(records: Sequence[Mapping[str, Any]]) -> str:
    if not records:
        return ""
    fieldnames = list(records[0].keys())
    out = io.StringIO()
    csv.writer(out, lineterminator="\n").writerow(fieldnames)
    writer = csv.DictWriter(
        out,
        fieldnames=fieldnames,
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
        extrasaction="ignore",
        restval="",
    )
    for row in records:
        writer.writerow({k: _cell(v) for k, v in row.items()})
    return out.getvalue()


def to_csv(records: Iterable[Any]) -> str:
    """Records -> CSV text (BOM-prefixed). Empty input gives an empty string."""
    body = _write([flatten(r) for r in records])
    return BOM + body if body else ""


def to_csv_bytes(records: Iterable[Any]) -> bytes:
    body = _write([flatten(r) for r in records])
    return body.encode("utf-8-sig") if body else b""


def deduction_statement_csv(employee: Employee) -> str:
    rows = [
        {"date": d.date, "type": d.type.value, "amount": d.amount, "reason": d.reason}
        for d in employee.deductions
    ]
    if not rows:
        return BOM + ",".join(DEDUCTION_COLUMNS) + "\n"
    return to_csv(rows)


def read_csv(text: str) -> list[dict[str, str]]:
    """Parse exported CSV text back into rows of strings."""
    if text.startswith(BOM):
        text = text[len(BOM):]
    return list(csv.DictReader(io.StringIO(text)))

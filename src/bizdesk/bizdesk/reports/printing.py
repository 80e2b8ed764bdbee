from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..ledger.model import Invoice
from ..settings.model import CompanySettings

_env = Environment(
    loader=FileSystemLoader(str(Path(__file__).resolve().parent / "templates")),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_invoice(invoice: Invoice, settings: Optional[CompanySettings] = None) -> str:
    """Printable HTML page for one invoice."""
    settings = settings or CompanySettings()
    return _env.get_template("invoice.html").render(invoice=invoice, company=settings)


def render_report(
    title: str,
    settings: Optional[CompanySettings] = None,
    rows: Iterable[Mapping[str, Any]] = (),
) -> str:
    """Printable HTML page for a titled report; without rows it is a preview."""
    rows = [dict(r) for r in rows]
    columns = list(rows[0].keys()) if rows else []
    return _env.get_template("report.html").render(
        title=title,
        company=settings or CompanySettings(),
        columns=columns,
        rows=rows,
    )

from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_date(value: object) -> Optional[date]:
    """Lenient parse used by aggregations: None when the value is not a date.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings and full
    ISO timestamps.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return parse_iso_date(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def today_iso(today: Optional[date] = None) -> str:
    return (today or date.today()).isoformat()

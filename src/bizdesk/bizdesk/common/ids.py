from __future__ import annotations

import uuid


def new_id() -> str:
    return uuid.uuid4().hex


def sequence_label(prefix: str, position: int) -> str:
    """``sequence_label("SKU", 7) == "SKU-007"``."""
    return f"{prefix}-{position:03d}"

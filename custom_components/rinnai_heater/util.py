"""Utility helpers for safe type coercion."""

from __future__ import annotations

from typing import Any


def to_float(val: Any) -> float | None:
    """Coerce a value to float, returning None on failure."""
    try:
        return float(val)
    except Exception:
        return None


def round_to(val: float, places: int = 2) -> float:
    """Round to a fixed number of decimal places."""
    return round(float(val), places)

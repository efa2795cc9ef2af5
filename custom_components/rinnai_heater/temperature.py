"""Conversion between requested Celsius values and the heater's temperature index."""

from __future__ import annotations

from collections.abc import Sequence

from .const import DEVICE_INDEX_OFFSET, DEVICE_STATE_TEMPERATURES, SUPPORTED_TEMPERATURES


def map_requested_to_supported(
    requested: float,
    supported: Sequence[int] = SUPPORTED_TEMPERATURES,
) -> int | None:
    """Return the supported temperature the heater should be driven to.

    Exact matches are returned as is. Anything else resolves to the first
    supported value whose successor is strictly greater than the request, so a
    value between two steps lands on the lower one. Requests outside the table
    clamp to its ends. Returns None only for an empty table (or NaN).
    """
    if requested in supported:
        return int(requested)

    for index, value in enumerate(supported[:-1]):
        if supported[index + 1] > requested:
            return value

    if not supported:
        return None
    if requested < supported[0]:
        return supported[0]
    if requested > supported[-1]:
        return supported[-1]
    return None


def map_device_index_to_celsius(
    raw_index: int,
    table: Sequence[int | None] = DEVICE_STATE_TEMPERATURES,
) -> int | None:
    """Return the Celsius value for a raw device index, None when unknown."""
    index = raw_index - DEVICE_INDEX_OFFSET
    if 0 <= index < len(table):
        return table[index]
    return None

"""Tests for the temperature scale mapping."""

from __future__ import annotations

import math

import pytest

from custom_components.rinnai_heater.const import SUPPORTED_TEMPERATURES
from custom_components.rinnai_heater.temperature import map_device_index_to_celsius, map_requested_to_supported


@pytest.mark.parametrize("value", SUPPORTED_TEMPERATURES)
def test_supported_values_are_returned_unchanged(value):
    """Every supported value maps to itself."""
    assert map_requested_to_supported(value) == value


@pytest.mark.parametrize("value", [-10, 0, 20, 34, 34.9])
def test_values_below_range_clamp_to_lowest(value):
    """Requests under 35 resolve to 35."""
    assert map_requested_to_supported(value) == 35


@pytest.mark.parametrize("value", [45.1, 46, 50, 60, 1000])
def test_values_above_range_clamp_to_highest(value):
    """Requests over 45 resolve to 45."""
    assert map_requested_to_supported(value) == 45


def test_float_equal_to_supported_value():
    """40.0 is treated as the supported value 40."""
    assert map_requested_to_supported(40.0) == 40


def test_value_between_steps_rounds_down():
    """A request between two supported steps resolves to the lower step, never the nearest."""
    assert map_requested_to_supported(40.9) == 40
    assert map_requested_to_supported(44.5) == 44


def test_gap_in_table_resolves_to_lower_step():
    """With a gapped table a value inside the gap still lands on the lower neighbour."""
    gapped = (35, 40, 45)
    assert map_requested_to_supported(38, gapped) == 35
    assert map_requested_to_supported(44, gapped) == 40
    assert map_requested_to_supported(46, gapped) == 45


def test_empty_table_yields_none():
    """No table, no mapping."""
    assert map_requested_to_supported(40, ()) is None


def test_nan_yields_none():
    """NaN compares false with every step."""
    assert map_requested_to_supported(math.nan) is None


def test_device_index_offset():
    """Raw index 3 is 35 C and 13 is 45 C."""
    assert map_device_index_to_celsius(3) == 35
    assert map_device_index_to_celsius(8) == 40
    assert map_device_index_to_celsius(13) == 45


@pytest.mark.parametrize("raw", [-1, 0, 2, 14, 99])
def test_device_index_outside_table_is_unknown(raw):
    """Indexes outside 3..13 are unknown, not 0 C and not wrapped around."""
    assert map_device_index_to_celsius(raw) is None

"""Tests for the polling coordinator."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from aiohttp import ClientConnectionError
from homeassistant.helpers.update_coordinator import UpdateFailed

from custom_components.rinnai_heater.coordinator import RinnaiHeaterDataUpdateCoordinator


@pytest.fixture
def coordinator(mock_hass, api):
    """Coordinator with the base class setup skipped."""
    with patch(
        "homeassistant.helpers.update_coordinator.DataUpdateCoordinator.__init__",
        return_value=None,
    ):
        yield RinnaiHeaterDataUpdateCoordinator(mock_hass, api=api, update_interval=3, params_interval=60)


@pytest.mark.asyncio
async def test_update_forces_state_refresh(coordinator, heater):
    """Each poll bypasses the cache."""
    await coordinator._async_update_data()  # pylint: disable=protected-access
    heater.index = 10
    data = await coordinator._async_update_data()  # pylint: disable=protected-access
    assert data.state.target_temperature == 42
    assert heater.count("tela_") == 2
    assert coordinator.problem_flag is False


@pytest.mark.asyncio
async def test_diagnostics_fetched_once_per_interval(coordinator, heater):
    """bus and consumo are refreshed on the first poll, then reused."""
    first = await coordinator._async_update_data()  # pylint: disable=protected-access
    second = await coordinator._async_update_data()  # pylint: disable=protected-access
    assert first.params is not None
    assert first.consumption is not None
    assert second.params is first.params
    assert heater.count("bus") == 1
    assert heater.count("consumo") == 1


@pytest.mark.asyncio
async def test_diagnostics_failure_is_not_fatal(coordinator, heater):
    """A failing bus endpoint leaves params empty but the poll succeeds."""
    heater.fail("bus", ClientConnectionError("reset"))
    data = await coordinator._async_update_data()  # pylint: disable=protected-access
    assert data.params is None
    assert data.consumption is not None
    assert data.state.target_temperature == 40


@pytest.mark.asyncio
async def test_state_failure_raises_update_failed(coordinator, heater):
    """A failed state read sets the problem flag and raises UpdateFailed."""
    heater.fail("tela_", 503)
    with pytest.raises(UpdateFailed):
        await coordinator._async_update_data()  # pylint: disable=protected-access
    assert coordinator.problem_flag is True

    await coordinator._async_update_data()  # pylint: disable=protected-access
    assert coordinator.problem_flag is False

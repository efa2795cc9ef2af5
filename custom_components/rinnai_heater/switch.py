"""Switch platform for rinnai_heater (power)."""
from __future__ import annotations

from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry

from .const import DOMAIN, ICON_POWER
from .coordinator import RinnaiHeaterDataUpdateCoordinator
from .entity import RinnaiHeaterEntity


async def async_setup_entry(hass, entry: ConfigEntry, async_add_entities):
    """Add the power switch."""
    coordinator: RinnaiHeaterDataUpdateCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([RinnaiHeaterPowerSwitch(coordinator, entry)], True)


class RinnaiHeaterPowerSwitch(RinnaiHeaterEntity, SwitchEntity):
    """Turns the heater on and off through the toggle command."""

    _attr_icon = ICON_POWER
    _attr_name = "Power"

    def __init__(self, coordinator: RinnaiHeaterDataUpdateCoordinator, entry: ConfigEntry) -> None:
        """Initialize."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}-power"

    @property
    def is_on(self) -> bool | None:
        """Return True when the heater is powered on."""
        state = self.heater_state
        return state.is_powered_on if state else None

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Power on."""
        self.coordinator.async_set_state(await self.coordinator.api.async_set_power_state(True))

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Power off."""
        self.coordinator.async_set_state(await self.coordinator.api.async_set_power_state(False))

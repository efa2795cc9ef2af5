"""Water heater platform for rinnai_heater."""
from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.components.water_heater import STATE_GAS, STATE_OFF, WaterHeaterEntity, WaterHeaterEntityFeature
from homeassistant.const import ATTR_TEMPERATURE, PRECISION_WHOLE, UnitOfTemperature

from .const import DOMAIN, ICON_WATERHEATER, LOGGER, SUPPORTED_TEMPERATURES
from .coordinator import RinnaiHeaterDataUpdateCoordinator
from .entity import RinnaiHeaterEntity


async def async_setup_entry(hass, entry, async_add_devices):
    """Add water heater for passed config_entry in HA."""
    coordinator: RinnaiHeaterDataUpdateCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_devices([RinnaiHeaterWaterHeater(coordinator, entry)], True)


class RinnaiHeaterWaterHeater(RinnaiHeaterEntity, WaterHeaterEntity):
    """rinnai_heater Water Heater class."""

    _attr_icon = ICON_WATERHEATER
    _attr_name = None
    _attr_operation_list = [STATE_GAS, STATE_OFF]
    _attr_precision = PRECISION_WHOLE
    _attr_target_temperature_step = 1
    _attr_temperature_unit = UnitOfTemperature.CELSIUS
    _attr_min_temp = SUPPORTED_TEMPERATURES[0]
    _attr_max_temp = SUPPORTED_TEMPERATURES[-1]
    _attr_supported_features = (
        WaterHeaterEntityFeature.TARGET_TEMPERATURE
        | WaterHeaterEntityFeature.OPERATION_MODE
        | WaterHeaterEntityFeature.ON_OFF
    )

    def __init__(self, coordinator: RinnaiHeaterDataUpdateCoordinator, entry: ConfigEntry) -> None:
        """Initialize the water heater."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}-water-heater"

    @property
    def current_operation(self) -> str | None:
        """Return gas while powered on."""
        state = self.heater_state
        if state is None:
            return None
        return STATE_GAS if state.is_powered_on else STATE_OFF

    @property
    def target_temperature(self) -> float | None:
        """Return the target temperature reported by the heater."""
        state = self.heater_state
        return state.target_temperature if state else None

    @property
    def current_temperature(self) -> float | None:
        """Return the outlet temperature, falling back to the target."""
        params = self.heater_params
        if params is not None and params.outlet_temperature is not None:
            return params.outlet_temperature
        return self.target_temperature

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return heating flag."""
        state = self.heater_state
        return {"is_heating": state.is_heating if state else None}

    async def async_set_temperature(self, **kwargs: Any) -> None:
        """Set the target temperature of the water heater."""
        temp = kwargs.get(ATTR_TEMPERATURE)
        if temp is None:
            return
        LOGGER.debug("%s - Set temperature %s from %s", DOMAIN, temp, self.entity_id)
        state = await self.coordinator.api.async_set_target_temperature(temp)
        self.coordinator.async_set_state(state)

    async def async_set_operation_mode(self, operation_mode: str) -> None:
        """Gas turns the heater on, off turns it off."""
        await self._async_set_power(operation_mode != STATE_OFF)

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Turn the heater on."""
        await self._async_set_power(True)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the heater off."""
        await self._async_set_power(False)

    async def _async_set_power(self, turn_on: bool) -> None:
        state = await self.coordinator.api.async_set_power_state(turn_on)
        self.coordinator.async_set_state(state)

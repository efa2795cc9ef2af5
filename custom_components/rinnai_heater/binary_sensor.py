"""Binary Sensor platform for rinnai_heater."""
from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.components.binary_sensor import BinarySensorDeviceClass, BinarySensorEntity
from homeassistant.helpers.entity import EntityCategory

from .const import DOMAIN
from .coordinator import RinnaiHeaterDataUpdateCoordinator
from .entity import RinnaiHeaterEntity


async def async_setup_entry(hass, entry, async_add_devices):
    """Add binary sensors for passed config_entry in HA."""
    coordinator: RinnaiHeaterDataUpdateCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_devices(
        [
            RinnaiHeaterHeatingBinarySensor(coordinator, entry),
            RinnaiHeaterProblemBinarySensor(coordinator, entry),
        ],
        True,
    )


class RinnaiHeaterHeatingBinarySensor(RinnaiHeaterEntity, BinarySensorEntity):
    """On while the burner is heating water."""

    _attr_device_class = BinarySensorDeviceClass.HEAT
    _attr_name = "Heating"

    def __init__(self, coordinator: RinnaiHeaterDataUpdateCoordinator, entry: ConfigEntry) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}-heating"

    @property
    def is_on(self) -> bool | None:
        """Return True while heating."""
        state = self.heater_state
        return state.is_heating if state else None


class RinnaiHeaterProblemBinarySensor(RinnaiHeaterEntity, BinarySensorEntity):
    """rinnai_heater connectivity problem sensor."""

    _attr_device_class = BinarySensorDeviceClass.PROBLEM
    _attr_entity_category = EntityCategory.DIAGNOSTIC
    _attr_name = "Connectivity Problem"

    def __init__(self, coordinator: RinnaiHeaterDataUpdateCoordinator, entry: ConfigEntry) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry)
        self._attr_unique_id = f"{entry.entry_id}-connectivity-problem"

    @property
    def is_on(self) -> bool:
        """Return True when the last poll failed."""
        return bool(self.coordinator.problem_flag)

    @property
    def available(self) -> bool:
        """Connectivity problem sensor should always be available."""
        return True

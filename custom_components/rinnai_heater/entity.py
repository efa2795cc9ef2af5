"""Base entity for rinnai_heater."""
from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN, MANUFACTURER, MODEL, NAME
from .coordinator import RinnaiHeaterDataUpdateCoordinator
from .manifest import manifest_version
from .models import ConsumptionSample, DeviceState, ExtendedDeviceParams


class RinnaiHeaterEntity(CoordinatorEntity[RinnaiHeaterDataUpdateCoordinator]):
    """Common device info and data accessors."""

    _attr_has_entity_name = True

    def __init__(self, coordinator: RinnaiHeaterDataUpdateCoordinator, entry: ConfigEntry) -> None:
        """Initialize."""
        super().__init__(coordinator)
        self.entry = entry

    @property
    def device_info(self) -> DeviceInfo:
        """Return device information."""
        return DeviceInfo(
            identifiers={(DOMAIN, self.entry.entry_id)},
            name=self.entry.title or NAME,
            manufacturer=MANUFACTURER,
            model=MODEL,
            sw_version=manifest_version(),
            serial_number=self.coordinator.identifier,
        )

    @property
    def heater_state(self) -> DeviceState | None:
        """Return the last polled state."""
        data = self.coordinator.data
        return data.state if data else None

    @property
    def heater_params(self) -> ExtendedDeviceParams | None:
        """Return the last diagnostics snapshot."""
        data = self.coordinator.data
        return data.params if data else None

    @property
    def heater_consumption(self) -> ConsumptionSample | None:
        """Return the last consumption snapshot."""
        data = self.coordinator.data
        return data.consumption if data else None

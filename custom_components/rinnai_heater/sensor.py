"""Sensor platform for rinnai_heater."""
from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.components.sensor import SensorDeviceClass, SensorEntity, SensorStateClass
from homeassistant.const import UnitOfPower, UnitOfTemperature, UnitOfTime, UnitOfVolume
from homeassistant.helpers.entity import EntityCategory

from .const import DOMAIN, ICON_FLOW, ICON_GAS, ICON_POWER, ICON_TEMP, ICON_TIMER, ICON_WATER
from .coordinator import RinnaiHeaterDataUpdateCoordinator
from .entity import RinnaiHeaterEntity

CELSIUS = UnitOfTemperature.CELSIUS
CUBIC_METERS = UnitOfVolume.CUBIC_METERS
LITERS_PER_MINUTE = f"{UnitOfVolume.LITERS}/{UnitOfTime.MINUTES}"

# Diagnostics snapshot (bus)
PARAMS_SENSOR_MAP = [
    # ("description",          "attr",                "unit",                 "icon",      "device_class",                "state_class",                    "entity_category"), # pylint: disable=line-too-long
    ("Inlet Temperature", "inlet_temperature", CELSIUS, ICON_TEMP, SensorDeviceClass.TEMPERATURE, SensorStateClass.MEASUREMENT, None),  # pylint: disable=line-too-long
    ("Outlet Temperature", "outlet_temperature", CELSIUS, ICON_TEMP, SensorDeviceClass.TEMPERATURE, SensorStateClass.MEASUREMENT, None),  # pylint: disable=line-too-long
    ("Power", "power_kw", UnitOfPower.KILO_WATT, ICON_POWER, SensorDeviceClass.POWER, SensorStateClass.MEASUREMENT, None),  # pylint: disable=line-too-long
    ("Flow", "water_flow", LITERS_PER_MINUTE, ICON_FLOW, None, SensorStateClass.MEASUREMENT, None),  # pylint: disable=line-too-long
    ("Working Time", "working_time", UnitOfTime.SECONDS, ICON_TIMER, SensorDeviceClass.DURATION, None, EntityCategory.DIAGNOSTIC),  # pylint: disable=line-too-long
]

# Consumption counters (consumo)
CONSUMPTION_SENSOR_MAP = [
    ("Water Consumption", "water", CUBIC_METERS, ICON_WATER, SensorDeviceClass.WATER, SensorStateClass.TOTAL_INCREASING, None),  # pylint: disable=line-too-long
    ("Gas Consumption", "gas", CUBIC_METERS, ICON_GAS, SensorDeviceClass.GAS, SensorStateClass.TOTAL_INCREASING, None),  # pylint: disable=line-too-long
    ("Consumption Working Time", "working_time", UnitOfTime.SECONDS, ICON_TIMER, SensorDeviceClass.DURATION, None, EntityCategory.DIAGNOSTIC),  # pylint: disable=line-too-long
]


async def async_setup_entry(hass, entry, async_add_devices):
    """Add sensors for passed config_entry in HA."""
    coordinator: RinnaiHeaterDataUpdateCoordinator = hass.data[DOMAIN][entry.entry_id]

    sensors = [
        RinnaiHeaterParamsSensor(coordinator, entry, description, attr, unit, icon, device_class, state_class, entity_category)
        for description, attr, unit, icon, device_class, state_class, entity_category in PARAMS_SENSOR_MAP  # pylint: disable=line-too-long
    ]
    sensors.extend(
        RinnaiHeaterConsumptionSensor(coordinator, entry, description, attr, unit, icon, device_class, state_class, entity_category)
        for description, attr, unit, icon, device_class, state_class, entity_category in CONSUMPTION_SENSOR_MAP  # pylint: disable=line-too-long
    )
    async_add_devices(sensors, True)


class RinnaiHeaterSensor(RinnaiHeaterEntity, SensorEntity):
    """rinnai_heater Sensor class."""

    def __init__(
        self,
        coordinator: RinnaiHeaterDataUpdateCoordinator,
        entry: ConfigEntry,
        description: str,
        attr: str,
        unit: str | None,
        icon: str,
        device_class: SensorDeviceClass | None,
        state_class: SensorStateClass | None,
        entity_category: EntityCategory | None,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry)
        self.attr = attr
        self._attr_name = description
        self._attr_native_unit_of_measurement = unit
        self._attr_icon = icon
        self._attr_device_class = device_class
        self._attr_state_class = state_class
        self._attr_entity_category = entity_category
        self._attr_unique_id = f"{entry.entry_id}-{description}"

    def _snapshot(self):
        raise NotImplementedError

    @property
    def native_value(self):
        """Return the value of the snapshot attribute."""
        snapshot = self._snapshot()
        return getattr(snapshot, self.attr) if snapshot is not None else None


class RinnaiHeaterParamsSensor(RinnaiHeaterSensor):
    """Sensor backed by the bus snapshot."""

    def _snapshot(self):
        return self.heater_params


class RinnaiHeaterConsumptionSensor(RinnaiHeaterSensor):
    """Sensor backed by the consumo snapshot."""

    def _snapshot(self):
        return self.heater_consumption

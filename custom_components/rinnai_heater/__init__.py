"""
Custom integration to integrate Rinnai digital water heaters with Home Assistant.

The heater exposes a small HTTP interface with comma-separated telemetry and
single-step temperature commands.
"""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import device_registry as dr, entity_registry as er

from .api import RinnaiHeaterApi
from .const import (
    CONF_PARAMS_INTERVAL,
    CONF_SCAN_INTERVAL,
    DEFAULT_PARAMS_INTERVAL,
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
    LOGGER,
    PLATFORMS,
    SERVICE_REFRESH,
)
from .coordinator import RinnaiHeaterDataUpdateCoordinator
from .exceptions import RinnaiHeaterError


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up this integration using UI."""
    LOGGER.debug("Setting up entry for device: %s", entry.title)

    hass.data.setdefault(DOMAIN, {})

    api = RinnaiHeaterApi(hass=hass, host=entry.data[CONF_HOST])
    coordinator = RinnaiHeaterDataUpdateCoordinator(
        hass,
        api=api,
        update_interval=entry.options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL),
        config_entry=entry,
        params_interval=entry.options.get(CONF_PARAMS_INTERVAL, DEFAULT_PARAMS_INTERVAL),
    )
    try:
        coordinator.identifier = (await api.async_identify()).strip() or None
    except RinnaiHeaterError as err:
        LOGGER.debug("%s - Identify failed on setup: %s", DOMAIN, err)

    await coordinator.async_config_entry_first_refresh()

    hass.data[DOMAIN][entry.entry_id] = coordinator

    # Register services once
    if not hass.data[DOMAIN].get("services_registered"):
        _register_services(hass)
        hass.data[DOMAIN]["services_registered"] = True

    coordinator.platforms.extend(PLATFORMS)
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    entry.async_on_unload(entry.add_update_listener(async_reload_entry))

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Handle removal of an entry."""
    coordinator: RinnaiHeaterDataUpdateCoordinator | None = hass.data[DOMAIN].get(entry.entry_id)
    platforms = coordinator.platforms if coordinator else PLATFORMS

    unloaded = await hass.config_entries.async_unload_platforms(entry, platforms)
    if unloaded:
        hass.data[DOMAIN].pop(entry.entry_id, None)
    return unloaded


async def async_reload_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload config entry."""
    await hass.config_entries.async_reload(entry.entry_id)


def _resolve_entry_from_target(hass: HomeAssistant, device_id: str | None, entity_id: str | None) -> ConfigEntry:
    """Resolve config entry from device_id or entity_id."""
    if device_id:
        dev_reg = dr.async_get(hass)
        device = dev_reg.async_get(device_id)
        if not device:
            raise HomeAssistantError("Device not found")
        if not device.config_entries:
            raise HomeAssistantError("Device has no config entry")
        entry_id = next(iter(device.config_entries))
        entry = hass.config_entries.async_get_entry(entry_id)
        if not entry or entry.domain != DOMAIN:
            raise HomeAssistantError(f"Device does not belong to {DOMAIN}")
        return entry

    if entity_id:
        ent_reg = er.async_get(hass)
        ent = ent_reg.async_get(entity_id)
        if not ent:
            raise HomeAssistantError("Entity not found")
        entry = hass.config_entries.async_get_entry(ent.config_entry_id)
        if not entry or entry.domain != DOMAIN:
            raise HomeAssistantError(f"Entity does not belong to {DOMAIN}")
        return entry

    raise HomeAssistantError("Must provide device_id or entity_id")


def _register_services(hass: HomeAssistant) -> None:
    """Register the forced refresh service."""

    async def async_refresh(call: ServiceCall) -> None:
        """Bypass the cache and read the heater state now."""
        entry = _resolve_entry_from_target(hass, call.data.get("device_id"), call.data.get("entity_id"))
        coordinator: RinnaiHeaterDataUpdateCoordinator | None = hass.data[DOMAIN].get(entry.entry_id)
        if coordinator is None:
            raise HomeAssistantError(f"{DOMAIN} - Entry {entry.entry_id} is not loaded")
        state = await coordinator.api.async_get_state(force_refresh=True)
        coordinator.async_set_state(state)

    hass.services.async_register(DOMAIN, SERVICE_REFRESH, async_refresh)

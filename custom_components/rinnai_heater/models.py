"""Data models for Rinnai Heater telemetry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceState:
    """Snapshot decoded from a tela_ line."""

    target_temperature: int | None
    is_heating: bool
    is_powered_on: bool


@dataclass(frozen=True)
class ExtendedDeviceParams:
    """Diagnostics snapshot decoded from the bus endpoint."""

    target_temperature: int | None
    inlet_temperature: float
    outlet_temperature: float
    power_kw: float
    is_powered_on: bool
    water_flow: float
    working_time: int


@dataclass(frozen=True)
class ConsumptionSample:
    """Counters decoded from the consumo endpoint."""

    water: float
    gas: float
    working_time: int


@dataclass
class RinnaiHeaterData:
    """Everything the coordinator hands to entities."""

    state: DeviceState
    params: ExtendedDeviceParams | None = None
    consumption: ConsumptionSample | None = None

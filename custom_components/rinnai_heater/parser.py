"""Decoders for the heater's positional comma-separated telemetry."""

from __future__ import annotations

from .const import GAS_DIVISOR, HEATING_FLAG, KCAL_TO_KW, POWERED_OFF_CODE, WATER_DIVISOR
from .exceptions import ParseError
from .models import ConsumptionSample, DeviceState, ExtendedDeviceParams
from .temperature import map_device_index_to_celsius
from .util import round_to, to_float

STATE_MIN_FIELDS = 8
PARAMS_MIN_FIELDS = 19
CONSUMPTION_MIN_FIELDS = 3


def _split(line: str, min_fields: int, source: str) -> list[str]:
    """Split a telemetry line, refusing lines shorter than min_fields."""
    if not isinstance(line, str):
        raise ParseError(f"{source} - expected text, got {type(line).__name__}")
    fields = [field.strip() for field in line.strip().split(",")]
    if len(fields) < min_fields:
        raise ParseError(f"{source} - expected at least {min_fields} fields, got {len(fields)}: {line!r}")
    return fields


def _int_field(fields: list[str], index: int, source: str) -> int:
    try:
        return int(fields[index])
    except ValueError as err:
        raise ParseError(f"{source} - field {index} is not an integer: {fields[index]!r}") from err


def _number_field(fields: list[str], index: int, source: str) -> float:
    value = to_float(fields[index])
    if value is None:
        raise ParseError(f"{source} - field {index} is not a number: {fields[index]!r}")
    return value


def is_powered_on(power_code: str) -> bool:
    """Only the literal code "11" means the heater is off."""
    return power_code != POWERED_OFF_CODE


def parse_state(line: str) -> DeviceState:
    """Decode a tela_ line (also returned by inc, dec and lig)."""
    fields = _split(line, STATE_MIN_FIELDS, "tela_")
    raw_index = _int_field(fields, 7, "tela_")
    return DeviceState(
        target_temperature=map_device_index_to_celsius(raw_index),
        is_heating=fields[2] == HEATING_FLAG,
        is_powered_on=is_powered_on(fields[0]),
    )


def parse_device_params(line: str) -> ExtendedDeviceParams:
    """Decode a bus line.

    Temperatures, power and flow are reported in hundredths. Power arrives in
    kcal and is converted to kW.
    """
    fields = _split(line, PARAMS_MIN_FIELDS, "bus")
    power_kcal = _number_field(fields, 9, "bus") / 100
    return ExtendedDeviceParams(
        target_temperature=map_device_index_to_celsius(_int_field(fields, 18, "bus")),
        inlet_temperature=_number_field(fields, 10, "bus") / 100,
        outlet_temperature=_number_field(fields, 11, "bus") / 100,
        power_kw=round_to(power_kcal * KCAL_TO_KW),
        is_powered_on=is_powered_on(fields[0]),
        water_flow=round_to(_number_field(fields, 12, "bus") / 100),
        working_time=_int_field(fields, 4, "bus"),
    )


def parse_consumption(line: str) -> ConsumptionSample:
    """Decode a consumo line: "mm:ss",water,gas."""
    fields = _split(line, CONSUMPTION_MIN_FIELDS, "consumo")
    minutes, sep, seconds = fields[0].partition(":")
    if not sep:
        raise ParseError(f"consumo - field 0 is not mm:ss: {fields[0]!r}")
    try:
        working_time = int(minutes) * 60 + int(seconds)
    except ValueError as err:
        raise ParseError(f"consumo - field 0 is not mm:ss: {fields[0]!r}") from err
    return ConsumptionSample(
        water=round_to(_number_field(fields, 1, "consumo") / WATER_DIVISOR),
        gas=round_to(_number_field(fields, 2, "consumo") / GAS_DIVISOR),
        working_time=working_time,
    )

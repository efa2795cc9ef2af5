"""Constants for Rinnai Heater."""
from logging import Logger, getLogger

from homeassistant.const import Platform

LOGGER: Logger = getLogger(__package__)

# Component Data
NAME = "Rinnai Water Heater"
DOMAIN = "rinnai_heater"
MANUFACTURER = "Rinnai"
MODEL = "Digital gas heater"
VERSION = "1.0.0"  # Note: Use manifest_version() from manifest.py for runtime version
PLATFORMS: list[Platform] = [
    Platform.SENSOR,
    Platform.BINARY_SENSOR,
    Platform.WATER_HEATER,
    Platform.SWITCH,
]

# SCAN INTERVAL
CONF_SCAN_INTERVAL = "scan_interval"
DEFAULT_SCAN_INTERVAL = 3  # seconds
CONF_PARAMS_INTERVAL = "params_interval"
DEFAULT_PARAMS_INTERVAL = 60  # seconds, bus + consumo diagnostics

# Device endpoints
ENDPOINT_STATE = "tela_"
ENDPOINT_PARAMS = "bus"
ENDPOINT_CONSUMPTION = "consumo"
ENDPOINT_INCREASE = "inc"
ENDPOINT_DECREASE = "dec"
ENDPOINT_POWER = "lig"
ENDPOINT_IDENTIFY = "connect"

# Temperatures (Celsius). Both tables share the same index; raw device value = index + offset.
SUPPORTED_TEMPERATURES: tuple[int, ...] = (35, 36, 37, 38, 39, 40, 41, 42, 43, 44, 45)
DEVICE_STATE_TEMPERATURES: tuple[int | None, ...] = (35, 36, 37, 38, 39, 40, 41, 42, 43, 44, 45)
DEVICE_INDEX_OFFSET = 3

# Telemetry layout
POWERED_OFF_CODE = "11"
HEATING_FLAG = "1"
KCAL_TO_KW = 0.014330754
WATER_DIVISOR = 1000
GAS_DIVISOR = 9400

# Convergence
STEP_DELAY = 0.1  # seconds between successful steps
MAX_STEP_RETRIES = 5

# Services
SERVICE_REFRESH = "refresh"

# Icon Dictionary
ICON_FLOW = "mdi:water-pump"
ICON_GAS = "mdi:fire"
ICON_POWER = "mdi:flash"
ICON_TEMP = "mdi:thermometer"
ICON_TIMER = "mdi:timer"
ICON_WATER = "mdi:water"
ICON_WATERHEATER = "mdi:water-boiler"

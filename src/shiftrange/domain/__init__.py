"""Domain models, errors and timezone catalogue for shift resolution."""

from shiftrange.domain.errors import (
    ConfigError,
    InvalidHourError,
    InvalidMinuteError,
    InvalidShiftError,
    InvalidTimeFormatError,
    InvalidTimeValueError,
    InvalidTimezoneError,
    ShiftErrorKind,
    ShiftRangeError,
)
from shiftrange.domain.models import (
    DisplayMode,
    PanelOptions,
    ResolvedInterval,
    ShiftDefinition,
    ShiftIcon,
)
from shiftrange.domain.timezones import (
    BUSINESS_TIMEZONES,
    DEFAULT_TIMEZONE,
    timezone_label,
)

__all__ = [
    # Models
    "DisplayMode",
    "PanelOptions",
    "ResolvedInterval",
    "ShiftDefinition",
    "ShiftIcon",
    # Errors
    "ConfigError",
    "InvalidHourError",
    "InvalidMinuteError",
    "InvalidShiftError",
    "InvalidTimeFormatError",
    "InvalidTimeValueError",
    "InvalidTimezoneError",
    "ShiftErrorKind",
    "ShiftRangeError",
    # Timezones
    "BUSINESS_TIMEZONES",
    "DEFAULT_TIMEZONE",
    "timezone_label",
]

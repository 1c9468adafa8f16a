"""Error taxonomy for shift interval resolution.

Every failure raised by the resolver belongs to a small closed set of
kinds. Callers should branch on ``error.kind`` (or the exception class),
never on the message text, which is meant for people.
"""

from enum import Enum


class ShiftErrorKind(Enum):
    """Kinds of shift resolution errors."""

    INVALID_SHIFT = "invalid_shift"
    INVALID_TIMEZONE = "invalid_timezone"
    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_TIME_VALUE = "invalid_time_value"
    INVALID_HOUR = "invalid_hour"
    INVALID_MINUTE = "invalid_minute"
    CONFIG = "config"


class ShiftRangeError(ValueError):
    """Base class for all shiftrange errors.

    Attributes:
        kind: The tagged error kind.
        message: Human-readable detail.
    """

    kind: ShiftErrorKind = ShiftErrorKind.INVALID_SHIFT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidShiftError(ShiftRangeError):
    """Shift is missing, or has an empty start or end time."""

    kind = ShiftErrorKind.INVALID_SHIFT


class InvalidTimezoneError(ShiftRangeError):
    """Timezone is empty, unknown, or cannot anchor the selected date."""

    kind = ShiftErrorKind.INVALID_TIMEZONE


class InvalidTimeFormatError(ShiftRangeError):
    """Time of day does not split into exactly two ``:`` parts."""

    kind = ShiftErrorKind.INVALID_TIME_FORMAT


class InvalidTimeValueError(ShiftRangeError):
    """Hour or minute is not an integer."""

    kind = ShiftErrorKind.INVALID_TIME_VALUE


class InvalidHourError(ShiftRangeError):
    """Hour outside 0-23."""

    kind = ShiftErrorKind.INVALID_HOUR


class InvalidMinuteError(ShiftRangeError):
    """Minute outside 0-59."""

    kind = ShiftErrorKind.INVALID_MINUTE


class ConfigError(ShiftRangeError):
    """Panel options file is missing or malformed."""

    kind = ShiftErrorKind.CONFIG

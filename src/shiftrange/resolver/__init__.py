"""Resolution of shifts into absolute UTC time ranges."""

from shiftrange.resolver.time_logic import (
    Clock,
    ShiftIntervalResolver,
    is_shift_active,
    parse_time_of_day,
    resolve_shift_interval,
    system_clock,
    to_epoch_ms,
)

__all__ = [
    "Clock",
    "ShiftIntervalResolver",
    "is_shift_active",
    "parse_time_of_day",
    "resolve_shift_interval",
    "system_clock",
    "to_epoch_ms",
]

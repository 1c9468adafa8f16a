"""Resolve named work shifts into timezone-correct UTC time ranges."""

from shiftrange.domain.errors import ShiftRangeError
from shiftrange.domain.models import PanelOptions, ResolvedInterval, ShiftDefinition
from shiftrange.resolver.time_logic import (
    ShiftIntervalResolver,
    is_shift_active,
    resolve_shift_interval,
)

__version__ = "0.1.0"

__all__ = [
    "PanelOptions",
    "ResolvedInterval",
    "ShiftDefinition",
    "ShiftIntervalResolver",
    "ShiftRangeError",
    "is_shift_active",
    "resolve_shift_interval",
]

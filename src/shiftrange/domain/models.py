"""Domain models for shift range resolution.

This module contains the data structures shared by the resolver, the
validator and the output generators: shift definitions, resolved
intervals, and the panel options that group shifts with a business
timezone.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone as dt_timezone
from enum import Enum
from typing import Any, Optional
from zoneinfo import ZoneInfo

from shiftrange.domain.errors import ConfigError, InvalidShiftError
from shiftrange.domain.timezones import DEFAULT_TIMEZONE


class DisplayMode(Enum):
    """How the shift picker presents its shifts."""

    BUTTONS = "buttons"
    DROPDOWN = "dropdown"


class ShiftIcon(Enum):
    """Icon hint derived from a shift's name."""

    SUN = "sun"
    CLOUD = "cloud"
    MOON = "moon"
    CALENDAR = "calendar-alt"
    CLOCK = "clock-nine"

    @classmethod
    def for_name(cls, shift_name: str) -> "ShiftIcon":
        """Pick the best icon for a shift based on its name.

        Checks run in order, so "Day Night" is a SUN shift.
        """
        name = shift_name.lower()
        if "morning" in name or "day" in name:
            return cls.SUN
        if "evening" in name or "afternoon" in name:
            return cls.CLOUD
        if "night" in name:
            return cls.MOON
        if "weekend" in name:
            return cls.CALENDAR
        return cls.CLOCK


@dataclass(frozen=True)
class ShiftDefinition:
    """A named, recurring daily work period.

    Times are not validated here; the resolver rejects bad values when
    the shift is used, so a half-edited configuration can still be held.

    Attributes:
        name: Display name (e.g., "Night Shift").
        start: Start time in "HH:mm" format (24-hour).
        end: End time in "HH:mm" format (24-hour).
        date_offset: Days added to the selected date before the times
            are attached (e.g., -1 for an overnight shift referenced by
            the day it ends).
    """

    name: str
    start: str
    end: str
    date_offset: int = 0

    @property
    def label(self) -> str:
        """Label shown in the dropdown, e.g. "Night (22:00 - 06:00)"."""
        return f"{self.name} ({self.start} - {self.end})"

    @property
    def icon(self) -> ShiftIcon:
        return ShiftIcon.for_name(self.name)

    @classmethod
    def new(cls) -> "ShiftDefinition":
        """Default shift added by the options editor."""
        return cls(name="New Shift", start="08:00", end="16:00", date_offset=0)

    @classmethod
    def from_dict(cls, data: Mapping) -> "ShiftDefinition":
        """Build a shift from its mapping form.

        Accepts both ``dateOffset`` and ``date_offset``. Missing start or
        end become empty strings and fail later, at resolution time.

        Raises:
            InvalidShiftError: If the date offset is not an integer.
        """
        raw_offset = data.get("dateOffset", data.get("date_offset", 0))
        if raw_offset is None or raw_offset == "":
            raw_offset = 0
        if isinstance(raw_offset, float) and not raw_offset.is_integer():
            raise InvalidShiftError(
                f"Invalid shift configuration: dateOffset must be a whole number of days, "
                f"got {raw_offset!r}"
            )
        try:
            date_offset = int(raw_offset)
        except (TypeError, ValueError):
            raise InvalidShiftError(
                f"Invalid shift configuration: dateOffset must be a whole number of days, "
                f"got {raw_offset!r}"
            )

        return cls(
            name=str(data.get("name") or ""),
            start=str(data.get("start") or ""),
            end=str(data.get("end") or ""),
            date_offset=date_offset,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start": self.start,
            "end": self.end,
            "dateOffset": self.date_offset,
        }


@dataclass(frozen=True)
class ResolvedInterval:
    """Absolute start and end of one shift occurrence.

    Attributes:
        from_ms: Start instant, UTC epoch milliseconds (inclusive).
        to_ms: End instant, UTC epoch milliseconds.
    """

    from_ms: int
    to_ms: int

    @property
    def duration_ms(self) -> int:
        return self.to_ms - self.from_ms

    @property
    def duration_minutes(self) -> int:
        return self.duration_ms // 60_000

    def contains(self, instant_ms: int) -> bool:
        """Check if an instant falls inside the interval, both ends included."""
        return self.from_ms <= instant_ms <= self.to_ms

    def as_dict(self) -> dict[str, int]:
        """Time range in the shape dashboards expect: ``{"from", "to"}``."""
        return {"from": self.from_ms, "to": self.to_ms}

    def utc_bounds(self) -> tuple[datetime, datetime]:
        return (
            datetime.fromtimestamp(self.from_ms / 1000, tz=dt_timezone.utc),
            datetime.fromtimestamp(self.to_ms / 1000, tz=dt_timezone.utc),
        )

    def local_bounds(self, timezone: str) -> tuple[datetime, datetime]:
        """Return both bounds as aware datetimes in the given zone."""
        tz = ZoneInfo(timezone)
        start, end = self.utc_bounds()
        return start.astimezone(tz), end.astimezone(tz)


@dataclass
class PanelOptions:
    """Options of a shift picker panel.

    Attributes:
        shifts: Configured shifts, in display order.
        display_mode: Buttons or dropdown.
        show_date_picker: Whether the date picker is shown.
        selected_date: Date to resolve shifts on (YYYY-MM-DD). None means today.
        timezone: IANA business timezone all shift times are authored in.
    """

    shifts: list[ShiftDefinition] = field(default_factory=list)
    display_mode: DisplayMode = DisplayMode.BUTTONS
    show_date_picker: bool = True
    selected_date: Optional[str] = None
    timezone: str = DEFAULT_TIMEZONE

    def find_shift(self, name: str) -> Optional[ShiftDefinition]:
        """Find the first shift with the given name (case-insensitive)."""
        wanted = name.strip().lower()
        for shift in self.shifts:
            if shift.name.strip().lower() == wanted:
                return shift
        return None

    @classmethod
    def from_dict(cls, data: Mapping) -> "PanelOptions":
        """Build options from their JSON form (camelCase or snake_case keys).

        Raises:
            ConfigError: If the structure does not match the options layout.
        """
        raw_shifts = data.get("shifts") or []
        if not isinstance(raw_shifts, list):
            raise ConfigError("Invalid options: 'shifts' must be a list")

        shifts = []
        for index, raw in enumerate(raw_shifts):
            if not isinstance(raw, Mapping):
                raise ConfigError(f"Invalid options: shift #{index + 1} must be an object")
            shifts.append(ShiftDefinition.from_dict(raw))

        raw_mode = data.get("displayMode", data.get("display_mode", DisplayMode.BUTTONS.value))
        try:
            display_mode = DisplayMode(raw_mode)
        except ValueError:
            choices = ", ".join(m.value for m in DisplayMode)
            raise ConfigError(
                f"Invalid options: displayMode must be one of {choices}, got {raw_mode!r}"
            )

        show_date_picker = data.get("showDatePicker", data.get("show_date_picker", True))
        selected_date = data.get("selectedDate", data.get("selected_date"))

        return cls(
            shifts=shifts,
            display_mode=display_mode,
            show_date_picker=bool(show_date_picker),
            selected_date=selected_date or None,
            timezone=data.get("timezone") or DEFAULT_TIMEZONE,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "shifts": [s.to_dict() for s in self.shifts],
            "displayMode": self.display_mode.value,
            "showDatePicker": self.show_date_picker,
            "timezone": self.timezone,
        }
        if self.selected_date:
            data["selectedDate"] = self.selected_date
        return data

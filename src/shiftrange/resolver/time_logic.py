"""Shift interval resolution.

Turns a shift definition, a business timezone and a calendar date into
the absolute UTC range that shift covers. Shift times are always read in
the business timezone, never in the timezone of the machine running the
code, and results are UTC epoch milliseconds ready to be used as a
dashboard time range.

Date offset: ``date_offset`` moves the anchor date before the times are
attached. ``date_offset=-1`` makes the shift start one day before the
selected date, which lets an overnight shift be referenced by the day it
ends.

Overnight shifts: when the start falls after the end on the anchor date,
the end moves to the next calendar day. Day arithmetic is done on civil
dates, so a DST change that night still lands on the right wall-clock
end time (the real duration may then be one hour shorter or longer).

Wall-clock times that fall in a DST gap or overlap follow the zone
database ``fold=0`` rule: a time in a gap uses the offset in force before
the transition, a time in an overlap resolves to its first occurrence.
"""

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime, timedelta, timezone as dt_timezone
from typing import Callable, Iterable, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from shiftrange.domain.errors import (
    InvalidHourError,
    InvalidMinuteError,
    InvalidShiftError,
    InvalidTimeFormatError,
    InvalidTimeValueError,
    InvalidTimezoneError,
    ShiftRangeError,
)
from shiftrange.domain.models import ResolvedInterval, ShiftDefinition

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
SelectedDate = Union[str, date, None]

_EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


def system_clock() -> datetime:
    """Current instant from the system clock, in UTC."""
    return datetime.now(dt_timezone.utc)


def to_epoch_ms(moment: datetime) -> int:
    """Convert an aware datetime to UTC epoch milliseconds.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt_timezone.utc)
    return (moment - _EPOCH) // _ONE_MS


def parse_time_of_day(value: str, label: str = "time") -> tuple[int, int]:
    """Parse a strict "HH:mm" time of day.

    Args:
        value: Time string, e.g. "06:30".
        label: Name used in error messages.

    Returns:
        Tuple of (hour, minute).

    Raises:
        InvalidTimeFormatError: Not exactly two ":"-separated parts.
        InvalidTimeValueError: A part is not an integer.
        InvalidHourError: Hour outside 0-23.
        InvalidMinuteError: Minute outside 0-59.
    """
    return _parse_times((label, value))[0]


def _parse_times(*labelled: tuple[str, str]) -> list[tuple[int, int]]:
    # Every value passes a stage before any value enters the next one, so
    # "25:00" / "08:60" reports the hour problem first.
    described = ", ".join(f'{label}="{value}"' for label, value in labelled)

    split = [value.split(":") for _, value in labelled]
    if any(len(parts) != 2 for parts in split):
        raise InvalidTimeFormatError(
            f"Invalid time format: {described}. Expected HH:mm format."
        )

    # int() alone would also take "0_8" and non-ASCII digits.
    if not all(_INTEGER.fullmatch(part) for parts in split for part in parts):
        raise InvalidTimeValueError(
            f"Invalid time values: {described}. Hours and minutes must be numbers."
        )
    parsed = [(int(hour), int(minute)) for hour, minute in split]

    if any(not 0 <= hour <= 23 for hour, _ in parsed):
        raise InvalidHourError("Invalid hour values: hours must be between 0 and 23")

    if any(not 0 <= minute <= 59 for _, minute in parsed):
        raise InvalidMinuteError("Invalid minute values: minutes must be between 0 and 59")

    return parsed


def _coerce_shift(shift) -> ShiftDefinition:
    if isinstance(shift, Mapping):
        shift = ShiftDefinition.from_dict(shift)

    start = getattr(shift, "start", None)
    end = getattr(shift, "end", None)
    if not start or not end or not isinstance(start, str) or not isinstance(end, str):
        raise InvalidShiftError(
            "Invalid shift configuration: shift object must have start and end times"
        )
    return shift


def _check_timezone_name(tz_name) -> None:
    if not tz_name or not isinstance(tz_name, str):
        raise InvalidTimezoneError("Invalid timezone: timezone must be a non-empty string")


def _invalid_anchor(tz_name: str, selected_date: SelectedDate) -> InvalidTimezoneError:
    return InvalidTimezoneError(f'Invalid timezone or date: "{tz_name}" / "{selected_date}"')


def _load_zone(tz_name: str, selected_date: SelectedDate) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise _invalid_anchor(tz_name, selected_date) from exc


def _anchor_day(
    selected_date: SelectedDate,
    zone: ZoneInfo,
    tz_name: str,
    now: datetime,
) -> date:
    """Civil date the shift is attached to, before any date offset."""
    if not selected_date:
        return now.astimezone(zone).date()

    if isinstance(selected_date, datetime):
        if selected_date.tzinfo is None:
            return selected_date.date()
        return selected_date.astimezone(zone).date()

    if isinstance(selected_date, date):
        return selected_date

    if not isinstance(selected_date, str):
        raise _invalid_anchor(tz_name, selected_date)

    text = selected_date.strip()
    try:
        if "T" in text:
            moment = datetime.fromisoformat(text)
            if moment.tzinfo is not None:
                return moment.astimezone(zone).date()
            return moment.date()
        return date.fromisoformat(text)
    except ValueError as exc:
        raise _invalid_anchor(tz_name, selected_date) from exc


def _wall_clock(day: date, hour: int, minute: int, zone: ZoneInfo) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, tzinfo=zone)


class ShiftIntervalResolver:
    """Resolves shifts into absolute UTC intervals.

    The resolver holds no state between calls besides its configuration.

    Example:
        >>> resolver = ShiftIntervalResolver()
        >>> night = ShiftDefinition(name="Night", start="22:00", end="06:00")
        >>> interval = resolver.resolve(night, "Europe/Warsaw", "2025-01-15")
        >>> interval.as_dict()
        {'from': 1736974800000, 'to': 1737003600000}

    Args:
        clock: Zero-argument callable returning the current instant.
            Defaults to the system clock.
        wrap_equal_times: If True, a shift whose start equals its end spans
            a full day. By default such a shift resolves to a zero-length
            interval, since only a start strictly after the end wraps.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        wrap_equal_times: bool = False,
    ):
        self.clock = clock or system_clock
        self.wrap_equal_times = wrap_equal_times

    def now(self) -> datetime:
        moment = self.clock()
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=dt_timezone.utc)
        return moment

    def resolve(
        self,
        shift: ShiftDefinition,
        timezone: str,
        selected_date: SelectedDate = None,
        now: Optional[datetime] = None,
    ) -> ResolvedInterval:
        """Compute the absolute interval of a shift on a date.

        Args:
            shift: Shift to resolve.
            timezone: IANA business timezone the shift times are in.
            selected_date: Date (YYYY-MM-DD or ``date``). Defaults to today
                in ``timezone``.
            now: Instant to use instead of reading the clock.

        Returns:
            ResolvedInterval with UTC epoch millisecond bounds.

        Raises:
            ShiftRangeError: One of its subclasses, for any invalid input.
        """
        return self._resolve_at(shift, timezone, selected_date, now or self.now())

    def is_active(
        self,
        shift: ShiftDefinition,
        timezone: str,
        selected_date: SelectedDate = None,
    ) -> bool:
        """Check if a shift is running right now.

        A shift on a selected date other than today (in ``timezone``) is
        never active, even when its wall-clock hours match the current time.
        """
        now = self.now()
        interval = self._resolve_at(shift, timezone, selected_date, now)
        return self._is_active_at(interval, timezone, selected_date, now)

    def resolve_all(
        self,
        shifts: Iterable[ShiftDefinition],
        timezone: str,
        selected_date: SelectedDate = None,
        now: Optional[datetime] = None,
    ) -> list[tuple[ShiftDefinition, Union[ResolvedInterval, ShiftRangeError]]]:
        """Resolve several shifts against one reading of the clock.

        Pass ``now`` to share that reading with other calls.

        Returns:
            List of (shift, result) pairs in input order, where result is
            either the interval or the error that shift raised.
        """
        now = now or self.now()
        results = []
        for shift in shifts:
            try:
                results.append((shift, self._resolve_at(shift, timezone, selected_date, now)))
            except ShiftRangeError as exc:
                logger.debug("Shift %r could not be resolved: %s", getattr(shift, "name", shift), exc)
                results.append((shift, exc))
        return results

    def active_shifts(
        self,
        shifts: Iterable[ShiftDefinition],
        timezone: str,
        selected_date: SelectedDate = None,
        now: Optional[datetime] = None,
    ) -> list[ShiftDefinition]:
        """Return the shifts active right now; unresolvable shifts are skipped."""
        now = now or self.now()
        active = []
        for shift in shifts:
            try:
                interval = self._resolve_at(shift, timezone, selected_date, now)
            except ShiftRangeError:
                continue
            if self._is_active_at(interval, timezone, selected_date, now):
                active.append(shift)
        return active

    def _is_active_at(
        self,
        interval: ResolvedInterval,
        timezone: str,
        selected_date: SelectedDate,
        now: datetime,
    ) -> bool:
        if selected_date:
            zone = _load_zone(timezone, selected_date)
            selected_day = _anchor_day(selected_date, zone, timezone, now)
            if selected_day != now.astimezone(zone).date():
                return False
        return interval.contains(to_epoch_ms(now))

    def _resolve_at(
        self,
        shift: ShiftDefinition,
        timezone: str,
        selected_date: SelectedDate,
        now: datetime,
    ) -> ResolvedInterval:
        shift = _coerce_shift(shift)
        _check_timezone_name(timezone)

        zone = _load_zone(timezone, selected_date)
        day = _anchor_day(selected_date, zone, timezone, now)

        if shift.date_offset:
            try:
                day = day + timedelta(days=shift.date_offset)
            except OverflowError as exc:
                raise _invalid_anchor(timezone, selected_date) from exc

        (start_hour, start_minute), (end_hour, end_minute) = _parse_times(
            ("start", shift.start), ("end", shift.end)
        )

        start = _wall_clock(day, start_hour, start_minute, zone)
        end = _wall_clock(day, end_hour, end_minute, zone)
        from_ms = to_epoch_ms(start)
        to_ms = to_epoch_ms(end)

        try:
            if from_ms > to_ms or (self.wrap_equal_times and from_ms == to_ms):
                end = _wall_clock(day + timedelta(days=1), end_hour, end_minute, zone)
                to_ms = to_epoch_ms(end)
            # Both bounds must also exist as UTC datetimes.
            start.astimezone(dt_timezone.utc)
            end.astimezone(dt_timezone.utc)
        except OverflowError as exc:
            raise _invalid_anchor(timezone, selected_date) from exc

        logger.debug(
            "Resolved shift %r in %s: %s -> %s",
            shift.name,
            timezone,
            start.isoformat(),
            end.isoformat(),
        )
        return ResolvedInterval(from_ms=from_ms, to_ms=to_ms)


_default_resolver = ShiftIntervalResolver()


def _resolver_for(clock: Optional[Clock]) -> ShiftIntervalResolver:
    if clock is None:
        return _default_resolver
    return ShiftIntervalResolver(clock=clock)


def resolve_shift_interval(
    shift: ShiftDefinition,
    timezone: str,
    selected_date: SelectedDate = None,
    clock: Optional[Clock] = None,
) -> ResolvedInterval:
    """Compute the absolute ``{from, to}`` range of a shift.

    See ``ShiftIntervalResolver.resolve``.
    """
    return _resolver_for(clock).resolve(shift, timezone, selected_date)


def is_shift_active(
    shift: ShiftDefinition,
    timezone: str,
    selected_date: SelectedDate = None,
    clock: Optional[Clock] = None,
) -> bool:
    """Check whether a shift is currently active.

    See ``ShiftIntervalResolver.is_active``.
    """
    return _resolver_for(clock).is_active(shift, timezone, selected_date)

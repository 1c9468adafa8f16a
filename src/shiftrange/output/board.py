"""Shift board: every configured shift resolved for one date.

Both the text and the PDF generators render the same rows, so the
resolution happens here once.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from shiftrange.domain.errors import ShiftRangeError
from shiftrange.domain.models import PanelOptions, ResolvedInterval, ShiftDefinition, ShiftIcon
from shiftrange.resolver.time_logic import ShiftIntervalResolver


@dataclass
class BoardRow:
    """One shift on the board.

    Exactly one of ``interval`` and ``error`` is set.
    """

    shift: ShiftDefinition
    interval: Optional[ResolvedInterval] = None
    error: Optional[ShiftRangeError] = None
    local_start: Optional[datetime] = None
    local_end: Optional[datetime] = None
    is_active: bool = False

    @property
    def icon(self) -> ShiftIcon:
        return self.shift.icon

    @property
    def is_resolved(self) -> bool:
        return self.interval is not None


@dataclass
class ShiftBoard:
    """All rows of a board, with the context they were resolved in."""

    timezone: str
    selected_date: Optional[str]
    rows: list[BoardRow]

    @property
    def active_rows(self) -> list[BoardRow]:
        return [row for row in self.rows if row.is_active]

    @property
    def failed_rows(self) -> list[BoardRow]:
        return [row for row in self.rows if not row.is_resolved]


def build_board(
    options: PanelOptions,
    resolver: Optional[ShiftIntervalResolver] = None,
    selected_date: Optional[str] = None,
) -> ShiftBoard:
    """Resolve every shift of the options for one date.

    Args:
        options: Panel options holding shifts and business timezone.
        resolver: Resolver to use (default: system clock).
        selected_date: Date override; falls back to ``options.selected_date``,
            then to today.

    Raises:
        InvalidTimezoneError: If the business timezone is not usable. Errors
            of single shifts end up in their row instead.
    """
    resolver = resolver or ShiftIntervalResolver()
    date_value = selected_date or options.selected_date
    # Intervals and active flags share this instant.
    now = resolver.now()

    # Surfaces a bad timezone or date once, instead of in every row.
    resolver.resolve(ShiftDefinition.new(), options.timezone, date_value, now=now)

    active = {
        id(s) for s in resolver.active_shifts(options.shifts, options.timezone, date_value, now=now)
    }

    rows = []
    for shift, outcome in resolver.resolve_all(options.shifts, options.timezone, date_value, now=now):
        if isinstance(outcome, ShiftRangeError):
            rows.append(BoardRow(shift=shift, error=outcome))
            continue
        local_start, local_end = outcome.local_bounds(options.timezone)
        rows.append(
            BoardRow(
                shift=shift,
                interval=outcome,
                local_start=local_start,
                local_end=local_end,
                is_active=id(shift) in active,
            )
        )

    return ShiftBoard(timezone=options.timezone, selected_date=date_value, rows=rows)

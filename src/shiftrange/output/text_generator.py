"""Plain-text output of a shift board.

Shows, for every configured shift:
- Local start and end in the business timezone
- The same bounds in UTC and as epoch milliseconds
- Which shifts are active right now
"""

from pathlib import Path
from typing import Optional, Union

from shiftrange.domain.models import PanelOptions
from shiftrange.domain.timezones import timezone_label
from shiftrange.output.board import BoardRow, ShiftBoard, build_board
from shiftrange.resolver.time_logic import ShiftIntervalResolver

ICON_MARKERS = {
    "sun": "[D]",
    "cloud": "[E]",
    "moon": "[N]",
    "calendar-alt": "[W]",
    "clock-nine": "[ ]",
}


class TextGenerator:
    """Generates a text shift board.

    Example:
        >>> generator = TextGenerator()
        >>> print(generator.generate_to_string(options, "2025-01-15"))
    """

    def __init__(self, resolver: Optional[ShiftIntervalResolver] = None):
        self.resolver = resolver or ShiftIntervalResolver()

    def generate(
        self,
        options: PanelOptions,
        output_path: Union[str, Path],
        selected_date: Optional[str] = None,
    ) -> str:
        """Generate the board and save it to a file.

        Returns:
            The generated text content.
        """
        content = self.generate_to_string(options, selected_date)
        Path(output_path).write_text(content, encoding="utf-8")
        return content

    def generate_to_string(
        self,
        options: PanelOptions,
        selected_date: Optional[str] = None,
    ) -> str:
        board = build_board(options, self.resolver, selected_date)
        return self._render(board)

    def _render(self, board: ShiftBoard) -> str:
        lines = []

        lines.append("=" * 96)
        lines.append(f"SHIFT BOARD - {board.selected_date or 'today'}")
        lines.append(f"Timezone: {timezone_label(board.timezone)}")
        lines.append("=" * 96)

        if not board.rows:
            lines.append("")
            lines.append("Please configure shifts in the panel editor.")
            lines.append("")
            return "\n".join(lines)

        lines.append(
            f"{'':3} {'Shift':<28} {'Local from':<17} {'Local to':<17} "
            f"{'From (ms)':>14} {'To (ms)':>14} {'':>6}"
        )
        lines.append("-" * 96)

        for row in board.rows:
            lines.append(self._render_row(row))

        lines.append("-" * 96)
        lines.append(
            f"Shifts: {len(board.rows)}  Active: {len(board.active_rows)}  "
            f"Failed: {len(board.failed_rows)}"
        )
        lines.append("")
        return "\n".join(lines)

    def _render_row(self, row: BoardRow) -> str:
        marker = ICON_MARKERS.get(row.icon.value, "[ ]")
        label = row.shift.label[:28]
        if not row.is_resolved:
            return f"{marker} {label:<28} ERROR: {row.error}"

        local_from = row.local_start.strftime("%Y-%m-%d %H:%M")
        local_to = row.local_end.strftime("%Y-%m-%d %H:%M")
        status = "ACTIVE" if row.is_active else ""
        return (
            f"{marker} {label:<28} {local_from:<17} {local_to:<17} "
            f"{row.interval.from_ms:>14} {row.interval.to_ms:>14} {status:>6}"
        )

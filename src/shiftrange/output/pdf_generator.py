"""PDF generation for shift boards.

This module creates a printable page per board showing:
- Every configured shift with its local and UTC bounds
- A shared timeline so overnight and offset shifts line up
- Active shifts highlighted
"""

from datetime import datetime, timedelta
from io import BytesIO
from pathlib import Path
from typing import Optional, Union
from zoneinfo import ZoneInfo

from shiftrange.domain.models import PanelOptions, ShiftIcon
from shiftrange.domain.timezones import timezone_label
from shiftrange.output.board import BoardRow, ShiftBoard, build_board
from shiftrange.resolver.time_logic import ShiftIntervalResolver, to_epoch_ms

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    ShiftIcon.SUN: (1.0, 0.8, 0.3),  # Amber
    ShiftIcon.CLOUD: (0.5, 0.6, 0.8),  # Slate blue
    ShiftIcon.MOON: (0.3, 0.3, 0.6),  # Indigo
    ShiftIcon.CALENDAR: (0.4, 0.7, 0.4),  # Green
    ShiftIcon.CLOCK: (0.6, 0.6, 0.6),  # Gray
    "active": (0.85, 0.95, 0.85),  # Light green row
    "error": (0.95, 0.8, 0.8),  # Light red row
    "timeline": (0.95, 0.95, 0.95),  # Light gray
}


class PDFGenerator:
    """Generates printable shift board PDFs.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(options, "shifts.pdf", selected_date="2025-01-15")
    """

    def __init__(
        self,
        resolver: Optional[ShiftIntervalResolver] = None,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.resolver = resolver or ShiftIntervalResolver()
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        options: PanelOptions,
        output_path: Union[str, Path],
        selected_date: Optional[str] = None,
    ) -> None:
        """Generate the shift board PDF and save to file.

        Args:
            options: Panel options with shifts and business timezone.
            output_path: Path to save the PDF.
            selected_date: Date to resolve the shifts on (default: options, then today).
        """
        try:
            from reportlab.lib.pagesizes import landscape, letter
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        board = build_board(options, self.resolver, selected_date)
        c = canvas.Canvas(str(output_path), pagesize=landscape(letter))
        self._draw_board_pages(c, board)
        c.save()

    def generate_to_buffer(
        self,
        options: PanelOptions,
        selected_date: Optional[str] = None,
    ) -> BytesIO:
        """Generate the PDF and return it as a bytes buffer."""
        try:
            from reportlab.lib.pagesizes import landscape, letter
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        board = build_board(options, self.resolver, selected_date)
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=landscape(letter))
        self._draw_board_pages(c, board)
        c.save()
        buffer.seek(0)
        return buffer

    def _draw_board_pages(self, c, board: ShiftBoard) -> None:
        row_height = 28
        header_height = 60
        footer_height = 30
        usable_height = self.page_height - 2 * self.margin - header_height - footer_height
        rows_per_page = max(1, int(usable_height / row_height))

        timeline_left = self.margin + 330  # Space for label and times
        timeline_right = self.page_width - self.margin - 10
        window = self._timeline_window(board)

        rows = board.rows or []
        total_pages = max(1, (len(rows) + rows_per_page - 1) // rows_per_page)

        for page_index in range(total_pages):
            page_rows = rows[page_index * rows_per_page : (page_index + 1) * rows_per_page]

            self._draw_header(c, board)
            y = self.page_height - self.margin - header_height

            if window is not None:
                self._draw_time_axis(c, board, window, timeline_left, timeline_right, y)

            if not rows:
                c.setFont("Helvetica", 11)
                c.drawString(self.margin, y - 30, "Please configure shifts in the panel editor.")

            for row in page_rows:
                y -= row_height
                self._draw_row(c, row, window, timeline_left, timeline_right, y, row_height - 4)

            c.setFont("Helvetica", 9)
            c.drawCentredString(
                self.page_width / 2,
                self.margin - 10,
                f"Page {page_index + 1} of {total_pages}",
            )
            c.showPage()

    def _draw_header(self, c, board: ShiftBoard) -> None:
        c.setFont("Helvetica-Bold", 16)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 20,
            f"Shift Board - {board.selected_date or 'today'}",
        )

        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 35,
            f"Timezone: {timezone_label(board.timezone)}   "
            f"Shifts: {len(board.rows)}   Active: {len(board.active_rows)}",
        )

    def _timeline_window(self, board: ShiftBoard) -> Optional[tuple[int, int]]:
        """Epoch ms range covering every resolved shift, padded to whole hours."""
        resolved = [row.interval for row in board.rows if row.interval is not None]
        if not resolved:
            return None
        start = min(i.from_ms for i in resolved)
        end = max(i.to_ms for i in resolved)
        hour_ms = 3_600_000
        start = (start // hour_ms) * hour_ms
        end = -(-end // hour_ms) * hour_ms
        if end <= start:
            end = start + hour_ms
        return start, end

    def _draw_time_axis(
        self,
        c,
        board: ShiftBoard,
        window: tuple[int, int],
        left: float,
        right: float,
        y: float,
    ) -> None:
        """Draw hour ticks labelled in the business timezone."""
        start_ms, end_ms = window
        span_hours = (end_ms - start_ms) // 3_600_000
        step = 1 if span_hours <= 12 else 2 if span_hours <= 24 else 4

        zone = ZoneInfo(board.timezone)
        moment = datetime.fromtimestamp(start_ms / 1000, tz=ZoneInfo("UTC"))

        c.setFont("Helvetica", 7)
        c.setStrokeColorRGB(0.7, 0.7, 0.7)
        for hour in range(0, span_hours + 1, step):
            tick = moment + timedelta(hours=hour)
            x = self._x_for(to_epoch_ms(tick), window, left, right)
            c.line(x, y, x, y - 5)
            c.drawCentredString(x, y + 4, tick.astimezone(zone).strftime("%H:%M"))

    def _draw_row(
        self,
        c,
        row: BoardRow,
        window: Optional[tuple[int, int]],
        left: float,
        right: float,
        y: float,
        height: float,
    ) -> None:
        if row.is_active or not row.is_resolved:
            c.setFillColorRGB(*COLORS["active" if row.is_active else "error"])
            c.rect(self.margin, y, self.page_width - 2 * self.margin, height, fill=1, stroke=0)

        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 9)
        c.drawString(self.margin + 4, y + height / 2 + 1, row.shift.label[:40])

        c.setFont("Helvetica", 7)
        if not row.is_resolved:
            c.drawString(self.margin + 4, y + height / 2 - 9, str(row.error)[:70])
            return

        times = (
            f"{row.local_start.strftime('%Y-%m-%d %H:%M')} -> "
            f"{row.local_end.strftime('%Y-%m-%d %H:%M')}"
        )
        if row.is_active:
            times += "  (active)"
        c.drawString(self.margin + 4, y + height / 2 - 9, times)

        if window is None:
            return

        c.setFillColorRGB(*COLORS["timeline"])
        c.rect(left, y, right - left, height, fill=1, stroke=0)

        bar_left = self._x_for(row.interval.from_ms, window, left, right)
        bar_right = self._x_for(row.interval.to_ms, window, left, right)
        c.setFillColorRGB(*COLORS.get(row.icon, (0.5, 0.5, 0.5)))
        c.rect(bar_left, y, max(bar_right - bar_left, 1), height, fill=1, stroke=0)

        c.setStrokeColorRGB(0.3, 0.3, 0.3)
        c.setLineWidth(0.5)
        c.rect(bar_left, y, max(bar_right - bar_left, 1), height, fill=0, stroke=1)

    @staticmethod
    def _x_for(instant_ms: int, window: tuple[int, int], left: float, right: float) -> float:
        start_ms, end_ms = window
        return left + (instant_ms - start_ms) / (end_ms - start_ms) * (right - left)

"""Tests for shift board output (text and PDF)."""

from datetime import datetime, timedelta, timezone

import pytest

from shiftrange.domain.errors import InvalidTimezoneError
from shiftrange.domain.models import PanelOptions, ShiftDefinition
from shiftrange.output.board import build_board
from shiftrange.output.pdf_generator import PDFGenerator
from shiftrange.output.text_generator import TextGenerator
from shiftrange.resolver.time_logic import ShiftIntervalResolver


@pytest.fixture
def resolver(clock_at):
    """Resolver fixed at 06:30 in Warsaw on 2025-01-15."""
    return ShiftIntervalResolver(clock=clock_at("2025-01-15T05:30:00+00:00"))


class TestBuildBoard:
    """Tests for build_board."""

    def test_rows_follow_shift_order(self, resolver, plant_options):
        board = build_board(plant_options, resolver, "2025-01-15")

        assert [row.shift.name for row in board.rows] == ["Morning", "Afternoon", "Night"]
        assert all(row.is_resolved for row in board.rows)

    def test_local_bounds(self, resolver, plant_options):
        board = build_board(plant_options, resolver, "2025-01-15")
        night = board.rows[2]

        assert night.local_start.strftime("%Y-%m-%d %H:%M") == "2025-01-14 22:00"
        assert night.local_end.strftime("%Y-%m-%d %H:%M") == "2025-01-15 06:00"

    def test_active_row(self, resolver, plant_options):
        board = build_board(plant_options, resolver, "2025-01-15")

        assert [row.shift.name for row in board.active_rows] == ["Morning"]

    def test_no_active_rows_on_other_date(self, resolver, plant_options):
        board = build_board(plant_options, resolver, "2025-01-14")

        assert board.active_rows == []

    def test_falls_back_to_options_date(self, resolver, plant_options):
        plant_options.selected_date = "2025-02-01"

        board = build_board(plant_options, resolver)

        assert board.selected_date == "2025-02-01"
        assert board.rows[0].local_start.strftime("%Y-%m-%d") == "2025-02-01"

    def test_broken_shift_keeps_its_row(self, resolver):
        options = PanelOptions(
            shifts=[
                ShiftDefinition(name="Day", start="08:00", end="16:00"),
                ShiftDefinition(name="Broken", start="25:00", end="16:00"),
            ],
            timezone="UTC",
        )

        board = build_board(options, resolver, "2025-01-15")

        assert [row.shift.name for row in board.failed_rows] == ["Broken"]
        assert board.rows[1].interval is None

    def test_reads_clock_once(self, plant_options):
        # Steps two seconds per reading, starting 23:59:59 in Warsaw
        readings = []

        def stepping_clock():
            readings.append(None)
            return datetime(2025, 1, 15, 22, 59, 59, tzinfo=timezone.utc) + timedelta(
                seconds=2 * (len(readings) - 1)
            )

        plant_options.shifts.append(ShiftDefinition(name="Late", start="22:00", end="00:00"))

        board = build_board(plant_options, ShiftIntervalResolver(clock=stepping_clock))

        late = board.rows[-1]
        assert len(readings) == 1
        assert late.local_start.strftime("%Y-%m-%d %H:%M") == "2025-01-15 22:00"
        assert late.is_active

    def test_bad_timezone_raises(self, resolver, plant_options):
        plant_options.timezone = "Nowhere/Land"

        with pytest.raises(InvalidTimezoneError):
            build_board(plant_options, resolver, "2025-01-15")


class TestTextGenerator:
    """Tests for TextGenerator."""

    def test_content(self, resolver, plant_options):
        content = TextGenerator(resolver).generate_to_string(plant_options, "2025-01-15")

        assert "SHIFT BOARD - 2025-01-15" in content
        assert "Europe/Warsaw (Poland, CET/CEST)" in content
        assert "Night (22:00 - 06:00)" in content
        assert "2025-01-14 22:00" in content
        assert "Shifts: 3  Active: 1  Failed: 0" in content

    def test_active_marker(self, resolver, plant_options):
        content = TextGenerator(resolver).generate_to_string(plant_options, "2025-01-15")
        morning_line = next(line for line in content.splitlines() if "Morning" in line)

        assert morning_line.rstrip().endswith("ACTIVE")
        assert morning_line.startswith("[D]")

    def test_error_row(self, resolver):
        options = PanelOptions(
            shifts=[ShiftDefinition(name="Broken", start="08:60", end="16:00")],
            timezone="UTC",
        )

        content = TextGenerator(resolver).generate_to_string(options, "2025-01-15")

        assert "ERROR: Invalid minute values" in content

    def test_empty_options(self, resolver):
        content = TextGenerator(resolver).generate_to_string(PanelOptions(), "2025-01-15")

        assert "Please configure shifts" in content

    def test_generate_writes_file(self, resolver, plant_options, tmp_path):
        path = tmp_path / "board.txt"

        content = TextGenerator(resolver).generate(plant_options, path, "2025-01-15")

        assert path.read_text(encoding="utf-8") == content


class TestPDFGenerator:
    """Tests for PDFGenerator."""

    @pytest.fixture(autouse=True)
    def _require_reportlab(self):
        pytest.importorskip("reportlab")

    def test_generate_to_buffer(self, resolver, plant_options):
        buffer = PDFGenerator(resolver=resolver).generate_to_buffer(plant_options, "2025-01-15")

        assert buffer.read(5) == b"%PDF-"

    def test_generate_file(self, resolver, plant_options, tmp_path):
        path = tmp_path / "board.pdf"

        PDFGenerator(resolver=resolver).generate(plant_options, path, "2025-01-15")

        assert path.read_bytes().startswith(b"%PDF-")

    def test_many_shifts_and_failures(self, resolver):
        shifts = [
            ShiftDefinition(name=f"Shift {i}", start=f"{i % 24:02d}:00", end=f"{(i + 8) % 24:02d}:00")
            for i in range(40)
        ]
        shifts.append(ShiftDefinition(name="Broken", start="nope", end="16:00"))
        options = PanelOptions(shifts=shifts, timezone="America/New_York")

        buffer = PDFGenerator(resolver=resolver).generate_to_buffer(options, "2025-03-08")

        assert buffer.getbuffer().nbytes > 0

    def test_empty_options(self, resolver):
        buffer = PDFGenerator(resolver=resolver).generate_to_buffer(PanelOptions(), "2025-01-15")

        assert buffer.read(5) == b"%PDF-"

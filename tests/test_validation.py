"""Tests for options validation."""

import pytest

from shiftrange.domain.models import PanelOptions, ShiftDefinition
from shiftrange.resolver.time_logic import ShiftIntervalResolver
from shiftrange.validation.validator import (
    OptionsValidator,
    ValidationError,
    ValidationErrorType,
)


class TestOptionsValidator:
    """Tests for OptionsValidator."""

    @pytest.fixture
    def validator(self, clock_at):
        """Create a validator with a fixed clock."""
        resolver = ShiftIntervalResolver(clock=clock_at("2025-01-15T10:00:00+00:00"))
        return OptionsValidator(resolver=resolver)

    def test_valid_options(self, validator, plant_options):
        result = validator.validate(plant_options)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_no_shifts_is_a_warning(self, validator):
        result = validator.validate(PanelOptions(shifts=[]))

        assert result.is_valid
        assert any("configure shifts" in w for w in result.warnings)

    def test_every_broken_shift_is_reported(self, validator):
        options = PanelOptions(
            shifts=[
                ShiftDefinition(name="Good", start="08:00", end="16:00"),
                ShiftDefinition(name="Late", start="25:00", end="06:00"),
                ShiftDefinition(name="Sloppy", start="08:60", end="16:00"),
                ShiftDefinition(name="Blank", start="", end="16:00"),
                ShiftDefinition(name="Typo", start="0800", end="16:00"),
            ],
            timezone="UTC",
        )

        result = validator.validate(options)

        assert not result.is_valid
        assert [(e.shift_index, e.error_type) for e in result.errors] == [
            (1, ValidationErrorType.INVALID_HOUR),
            (2, ValidationErrorType.INVALID_MINUTE),
            (3, ValidationErrorType.INVALID_SHIFT),
            (4, ValidationErrorType.INVALID_TIME_FORMAT),
        ]
        assert result.errors[0].shift_name == "Late"

    def test_bad_timezone_reported_once(self, validator, plant_options):
        plant_options.timezone = "Not/AZone"

        result = validator.validate(plant_options)

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].error_type is ValidationErrorType.INVALID_TIMEZONE
        assert result.errors[0].shift_index is None

    def test_bad_selected_date(self, validator, plant_options):
        plant_options.selected_date = "2025-13-01"

        result = validator.validate(plant_options)

        assert [e.error_type for e in result.errors] == [ValidationErrorType.INVALID_TIMEZONE]

    def test_equal_start_and_end_warns(self, validator):
        options = PanelOptions(
            shifts=[ShiftDefinition(name="Round the clock", start="06:00", end="06:00")],
            timezone="UTC",
        )

        result = validator.validate(options)

        assert result.is_valid
        assert any("empty time range" in w for w in result.warnings)

    def test_equal_start_and_end_no_warning_when_wrapping(self, clock_at):
        resolver = ShiftIntervalResolver(
            clock=clock_at("2025-01-15T10:00:00+00:00"), wrap_equal_times=True
        )
        options = PanelOptions(
            shifts=[ShiftDefinition(name="Round the clock", start="06:00", end="06:00")],
            timezone="UTC",
        )

        result = OptionsValidator(resolver=resolver).validate(options)

        assert result.warnings == []

    def test_duplicate_and_missing_names_warn(self, validator):
        options = PanelOptions(
            shifts=[
                ShiftDefinition(name="Day", start="08:00", end="16:00"),
                ShiftDefinition(name="day", start="09:00", end="17:00"),
                ShiftDefinition(name="", start="22:00", end="06:00"),
            ],
            timezone="UTC",
        )

        result = validator.validate(options)

        assert result.is_valid
        assert any("'day' is used 2 times" in w for w in result.warnings)
        assert any("Shift #3 has no name" in w for w in result.warnings)


class TestValidationError:
    """Tests for ValidationError formatting."""

    def test_str_with_shift(self):
        error = ValidationError(
            error_type=ValidationErrorType.INVALID_HOUR,
            message="Invalid hour values: hours must be between 0 and 23",
            shift_index=1,
            shift_name="Late",
        )
        assert str(error) == (
            "[invalid_hour] Shift #2 (Late): Invalid hour values: hours must be between 0 and 23"
        )

    def test_str_without_shift(self):
        error = ValidationError(
            error_type=ValidationErrorType.INVALID_TIMEZONE,
            message="Invalid timezone",
        )
        assert str(error) == "[invalid_timezone] Invalid timezone"

    def test_str_with_unnamed_shift(self):
        error = ValidationError(
            error_type=ValidationErrorType.INVALID_SHIFT,
            message="Missing times",
            shift_index=0,
        )
        assert str(error) == "[invalid_shift] Shift #1: Missing times"

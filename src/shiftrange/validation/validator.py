"""Validation of shift picker options.

The resolver raises on the first problem it meets, which is right when a
single shift is clicked. When a whole configuration is loaded it is more
useful to see every broken shift at once, so this module collects the
resolver's errors into a report instead.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from shiftrange.domain.errors import ShiftErrorKind, ShiftRangeError
from shiftrange.domain.models import PanelOptions, ShiftDefinition
from shiftrange.resolver.time_logic import ShiftIntervalResolver


class ValidationErrorType(Enum):
    """Types of validation errors."""

    INVALID_SHIFT = "invalid_shift"
    INVALID_TIMEZONE = "invalid_timezone"
    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_TIME_VALUE = "invalid_time_value"
    INVALID_HOUR = "invalid_hour"
    INVALID_MINUTE = "invalid_minute"

    @classmethod
    def from_kind(cls, kind: ShiftErrorKind) -> "ValidationErrorType":
        return cls(kind.value)


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    message: str
    shift_index: Optional[int] = None
    shift_name: Optional[str] = None

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.shift_index is not None:
            parts.append(f"Shift #{self.shift_index + 1}")
            if self.shift_name:
                parts.append(f"({self.shift_name}):")
            else:
                parts[-1] += ":"
        parts.append(self.message)
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating panel options."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)


class OptionsValidator:
    """Validates panel options against the resolver's rules.

    Example:
        >>> validator = OptionsValidator()
        >>> result = validator.validate(options)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def __init__(self, resolver: Optional[ShiftIntervalResolver] = None):
        self.resolver = resolver or ShiftIntervalResolver()

    def validate(self, options: PanelOptions) -> ValidationResult:
        """Validate timezone, selected date and every configured shift.

        Args:
            options: Panel options to check.

        Returns:
            ValidationResult with is_valid flag and any errors.
        """
        result = ValidationResult(is_valid=True)

        if not options.shifts:
            result.add_warning("No shifts configured. Please configure shifts in the panel editor.")

        # A known-good shift isolates timezone and date problems, which would
        # otherwise be reported once per shift.
        try:
            self.resolver.resolve(ShiftDefinition.new(), options.timezone, options.selected_date)
        except ShiftRangeError as exc:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.from_kind(exc.kind),
                    message=exc.message,
                )
            )
            return result

        outcomes = self.resolver.resolve_all(
            options.shifts, options.timezone, options.selected_date
        )
        for index, (shift, outcome) in enumerate(outcomes):
            if isinstance(outcome, ShiftRangeError):
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.from_kind(outcome.kind),
                        message=outcome.message,
                        shift_index=index,
                        shift_name=shift.name or None,
                    )
                )
            elif outcome.duration_ms == 0:
                result.add_warning(
                    f"Shift '{shift.name}' starts and ends at {shift.start}; "
                    "it resolves to an empty time range"
                )

        self._check_names(options, result)
        return result

    def _check_names(self, options: PanelOptions, result: ValidationResult) -> None:
        """Warn about unnamed and duplicated shift names."""
        for index, shift in enumerate(options.shifts):
            if not shift.name.strip():
                result.add_warning(f"Shift #{index + 1} has no name")

        counts = Counter(s.name.strip().lower() for s in options.shifts if s.name.strip())
        for shift_name, count in sorted(counts.items()):
            if count > 1:
                result.add_warning(
                    f"Shift name '{shift_name}' is used {count} times; "
                    "lookups by name return the first one"
                )

"""Validation module for checking shift picker options."""

from shiftrange.validation.validator import (
    OptionsValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)

__all__ = [
    "OptionsValidator",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
]

"""Error taxonomy for transaction validation."""

from __future__ import annotations

from typing import Iterable


class TradebookError(Exception):
    """Base class for application errors."""


class ValidationError(TradebookError):
    """A single field-scoped validation failure."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class RequiredFieldError(ValidationError):
    """Text was empty or whitespace where a value is mandatory."""


class RangeError(ValidationError):
    """A numeric value fell outside its allowed bounds."""


class FormatError(ValidationError):
    """Input could not be read as the expected type (number, date)."""


class AggregateValidationError(TradebookError):
    """Whole-form failure wrapping one or more field errors, keyed by path."""

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors: list[ValidationError] = list(errors)
        super().__init__(f"{len(self.errors)} validation error(s)")

    @property
    def messages(self) -> dict[str, list[str]]:
        """Map each failing field path to its messages, in discovery order."""

        result: dict[str, list[str]] = {}
        for error in self.errors:
            result.setdefault(error.path, []).append(error.message)
        return result

    def errors_for(self, path: str) -> list[ValidationError]:
        return [error for error in self.errors if error.path == path]


class FieldPathError(TradebookError, LookupError):
    """A draft field path does not name an editable value."""

"""Declarative field rules: a predicate, a message and the error it raises."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from ..exceptions import FormatError, RangeError, RequiredFieldError, ValidationError


@dataclass(frozen=True)
class Rule:
    """One check applied to a single field value."""

    check: Callable[[Any], bool]
    message: str
    error: type[ValidationError]

    def apply(self, path: str, value: Any) -> ValidationError | None:
        if self.check(value):
            return None
        return self.error(path, self.message)


FieldRules = dict[str, tuple[Rule, ...]]


def required(message: str) -> Rule:
    return Rule(lambda value: bool(str(value or "").strip()), message, RequiredFieldError)


def at_least(minimum: Decimal, message: str) -> Rule:
    return Rule(lambda value: value >= minimum, message, RangeError)


def at_most(maximum: Decimal, message: str) -> Rule:
    return Rule(lambda value: value <= maximum, message, RangeError)


def _is_iso_date(value: Any) -> bool:
    text = str(value or "").strip()
    # Blank dates are reported by the required rule only
    if not text:
        return True
    try:
        datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def iso_date(message: str) -> Rule:
    return Rule(_is_iso_date, message, FormatError)


def run_rules(path: str, value: Any, rules: tuple[Rule, ...]) -> list[ValidationError]:
    """Apply every rule to a value, collecting all failures."""

    failures = []
    for rule in rules:
        error = rule.apply(path, value)
        if error is not None:
            failures.append(error)
    return failures

"""Whole-form validation schema composed per transaction kind."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..constants import TransactionKind
from ..exceptions import AggregateValidationError, RangeError, ValidationError
from ..models.item import item_rules_for, to_item, validate_item
from ..models.rules import FieldRules, iso_date, required, run_rules
from ..models.transaction import Transaction, TransactionDraft

HEADER_RULES: FieldRules = {
    "vendor": (required("This field is required"),),
    "date": (required("Date is required"), iso_date("Enter a valid date (YYYY-MM-DD)")),
    "reference": (),
}

MIN_ITEMS = 1
MIN_ITEMS_MESSAGE = "At least one item is required"


def item_path(index: int, field: str | None = None) -> str:
    """Path of an item (or one of its fields) inside the items sequence."""

    base = f"items[{index}]"
    return f"{base}.{field}" if field else base


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a draft: a transaction or an aggregate error."""

    transaction: Transaction | None = None
    error: AggregateValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def messages(self) -> dict[str, list[str]]:
        return self.error.messages if self.error is not None else {}

    def unwrap(self) -> Transaction:
        if self.error is not None:
            raise self.error
        if self.transaction is None:
            raise ValueError("Validation result carries neither a transaction nor an error")
        return self.transaction


@dataclass(frozen=True)
class TransactionSchema:
    """Header rules plus an items rule using one kind's item variant."""

    kind: TransactionKind
    header_rules: FieldRules
    item_rules: FieldRules
    min_items: int = MIN_ITEMS

    def validate(self, draft: TransactionDraft) -> ValidationResult:
        """Validate every field of ``draft`` without mutating it."""

        errors: list[ValidationError] = []
        for field, rules in self.header_rules.items():
            errors.extend(run_rules(field, getattr(draft, field), rules))

        if len(draft.items) < self.min_items:
            errors.append(RangeError("items", MIN_ITEMS_MESSAGE))
        for index, item in enumerate(draft.items):
            errors.extend(validate_item(item, self.item_rules, prefix=item_path(index)))

        if errors:
            return ValidationResult(error=AggregateValidationError(errors))

        reference = draft.reference.strip()
        transaction = Transaction(
            kind=self.kind,
            vendor=draft.vendor.strip(),
            date=datetime.strptime(draft.date.strip(), "%Y-%m-%d").date(),
            reference=reference or None,
            items=tuple(to_item(item) for item in draft.items),
        )
        return ValidationResult(transaction=transaction)


def build_schema(kind: TransactionKind | str) -> TransactionSchema:
    """Compose the schema for ``kind`` (purchase or sales)."""

    kind = TransactionKind(kind)
    return TransactionSchema(
        kind=kind,
        header_rules=HEADER_RULES,
        item_rules=item_rules_for(kind),
    )

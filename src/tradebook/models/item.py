"""Line item model and its per-field validation rules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from ..constants import (
    BLANK_ITEM,
    DEFAULT_ITEM,
    MIN_QUANTITY,
    MIN_UNIT_PRICE,
    SALES_MAX_QUANTITY,
    TransactionKind,
)
from ..exceptions import FormatError, ValidationError
from .rules import FieldRules, at_least, at_most, required, run_rules

ITEM_FIELDS = ("name", "quantity", "unit_price")
NUMERIC_FIELDS = frozenset({"quantity", "unit_price"})

NUMBER_FORMAT_MESSAGE = "Enter a valid number"


def parse_number(value: Any) -> Decimal | None:
    """Return ``value`` as a finite Decimal, or None when blank or not numeric."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        parsed = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except (InvalidOperation, ValueError):
            return None
    if not parsed.is_finite():
        return None
    return parsed


@dataclass(frozen=True)
class Item:
    """A validated line item."""

    name: str
    quantity: Decimal
    unit_price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price


@dataclass(slots=True)
class ItemDraft:
    """Line item as currently entered; numbers are None when unreadable."""

    name: str = ""
    quantity: Decimal | None = None
    unit_price: Decimal | None = None

    @classmethod
    def default(cls) -> ItemDraft:
        """The row a freshly mounted form starts with."""

        return cls(**DEFAULT_ITEM)

    @classmethod
    def blank(cls) -> ItemDraft:
        """The row appended by "Add Item"."""

        return cls(**BLANK_ITEM)

    def set(self, field: str, value: Any) -> None:
        if field not in ITEM_FIELDS:
            raise KeyError(field)
        if field in NUMERIC_FIELDS:
            setattr(self, field, parse_number(value))
        else:
            setattr(self, field, "" if value is None else str(value))

    @property
    def line_total(self) -> Decimal:
        # Unreadable numbers count as zero so the summary stays displayable
        return (self.quantity or Decimal("0")) * (self.unit_price or Decimal("0"))


BASE_ITEM_RULES: FieldRules = {
    "name": (required("Item name is required"),),
    "quantity": (at_least(MIN_QUANTITY, "Quantity must be at least 1"),),
    "unit_price": (at_least(MIN_UNIT_PRICE, "Unit price must be at least 1"),),
}

SALES_ITEM_RULES: FieldRules = {
    **BASE_ITEM_RULES,
    "quantity": BASE_ITEM_RULES["quantity"]
    + (at_most(SALES_MAX_QUANTITY, "Quantity cannot be more than 100"),),
}


def item_rules_for(kind: TransactionKind) -> FieldRules:
    """Select the item rule variant for a transaction kind."""

    if TransactionKind(kind) is TransactionKind.SALES:
        return SALES_ITEM_RULES
    return BASE_ITEM_RULES


def validate_item(draft: ItemDraft, rules: FieldRules, prefix: str = "") -> list[ValidationError]:
    """Validate each field of ``draft`` independently.

    Errors are scoped to ``<prefix>.<field>`` (or the bare field name when no
    prefix is given). Numeric fields that could not be parsed report a single
    FormatError and skip their range rules.
    """

    errors: list[ValidationError] = []
    for field in ITEM_FIELDS:
        path = f"{prefix}.{field}" if prefix else field
        value = getattr(draft, field)
        if field in NUMERIC_FIELDS and value is None:
            errors.append(FormatError(path, NUMBER_FORMAT_MESSAGE))
            continue
        errors.extend(run_rules(path, value, rules.get(field, ())))
    return errors


def to_item(draft: ItemDraft) -> Item:
    """Freeze a draft that already passed validation."""

    if draft.quantity is None or draft.unit_price is None:
        raise ValueError("Cannot freeze an item draft with unreadable numbers")
    return Item(name=draft.name.strip(), quantity=draft.quantity, unit_price=draft.unit_price)

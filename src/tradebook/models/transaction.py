"""Transaction draft, validated transaction and submission payload."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, localcontext
from typing import Any, Iterable

from ..constants import TransactionKind
from .item import Item, ItemDraft

HEADER_FIELDS = ("vendor", "date", "reference")

_CENTS = Decimal("0.01")


def grand_total(items: Iterable[ItemDraft | Item]) -> Decimal:
    """Sum of line totals; an empty sequence totals zero."""

    return sum((item.line_total for item in items), Decimal("0"))


def format_money(value: Decimal) -> str:
    """Two-decimal display used by the form and the payload."""

    with localcontext() as ctx:
        # Room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return format(value.quantize(_CENTS), "f")


@dataclass(slots=True)
class TransactionDraft:
    """The in-progress, possibly invalid transaction held by a form."""

    vendor: str = ""
    date: str = ""
    reference: str = ""
    items: list[ItemDraft] = field(default_factory=list)

    @property
    def grand_total(self) -> Decimal:
        return grand_total(self.items)


@dataclass(frozen=True)
class Transaction:
    """A transaction that passed its kind's schema."""

    kind: TransactionKind
    vendor: str
    date: date
    reference: str | None
    items: tuple[Item, ...]

    @property
    def grand_total(self) -> Decimal:
        return grand_total(self.items)


@dataclass(frozen=True)
class SubmissionPayload:
    """What a successful submit hands to the result sink."""

    title: str
    kind: TransactionKind
    vendor: str
    date: date
    reference: str | None
    items: tuple[Item, ...]
    grand_total: Decimal

    @classmethod
    def from_transaction(cls, title: str, transaction: Transaction) -> SubmissionPayload:
        return cls(
            title=title,
            kind=transaction.kind,
            vendor=transaction.vendor,
            date=transaction.date,
            reference=transaction.reference,
            items=transaction.items,
            grand_total=transaction.grand_total,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the external key names; blank references are omitted."""

        data: dict[str, Any] = {
            "title": self.title,
            "kind": self.kind.value,
            "vendor": self.vendor,
            "date": self.date.isoformat(),
        }
        if self.reference:
            data["reference"] = self.reference
        data["items"] = [
            {
                "name": item.name,
                "quantity": format(item.quantity, "f"),
                "unitPrice": format_money(item.unit_price),
                "lineTotal": format_money(item.line_total),
            }
            for item in self.items
        ]
        data["grandTotal"] = format_money(self.grand_total)
        return data

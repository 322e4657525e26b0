"""Shared constants: transaction kinds, item defaults and page definitions."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TransactionKind(str, Enum):
    """Discriminator selecting which item rules apply to a form."""

    PURCHASE = "purchase"
    SALES = "sales"

    @property
    def party_label(self) -> str:
        return "Vendor" if self is TransactionKind.PURCHASE else "Customer"


MIN_QUANTITY = Decimal("1")
MIN_UNIT_PRICE = Decimal("1")
SALES_MAX_QUANTITY = Decimal("100")

DEFAULT_ITEM = {"name": "Item 1", "quantity": Decimal("2"), "unit_price": Decimal("50")}
BLANK_ITEM = {"name": "", "quantity": Decimal("1"), "unit_price": Decimal("0")}

SUCCESS_MESSAGE = "Form submitted successfully"
FAILURE_MESSAGE = "Form has validation errors"


@dataclass(frozen=True)
class FormDisplay:
    """Display configuration fixed when a form page mounts."""

    title: str
    background_color: str
    title_color: str


@dataclass(frozen=True)
class PageDefinition:
    """A routed form page: which kind it records and how it looks."""

    kind: TransactionKind
    display: FormDisplay
    endpoint: str


SALES_PAGE = PageDefinition(
    kind=TransactionKind.SALES,
    display=FormDisplay(
        title="Sales Transaction",
        background_color="#f0fdfa",
        title_color="#55c1ee",
    ),
    endpoint="sales.sales_form",
)

PURCHASE_PAGE = PageDefinition(
    kind=TransactionKind.PURCHASE,
    display=FormDisplay(
        title="Purchase Transaction",
        background_color="#FFA78A",
        title_color="#FF855C",
    ),
    endpoint="purchase.purchase_form",
)

NAV_PAGES: tuple[tuple[str, PageDefinition], ...] = (
    ("Sales", SALES_PAGE),
    ("Purchase", PURCHASE_PAGE),
)

"""Pytest configuration and shared fixtures for Tradebook tests.

Provides an isolated Flask app (logs under a temporary directory, payloads
captured in memory) and factories for form engines that record their
notifications instead of flashing them.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from tradebook import create_app
from tradebook.blueprints.transactions.forms import TransactionFormEngine
from tradebook.constants import PURCHASE_PAGE, SALES_PAGE, TransactionKind
from tradebook.extensions import set_result_sink
from tradebook.models.item import ItemDraft
from tradebook.models.transaction import TransactionDraft
from tradebook.services.notifications import MemoryNotifier, MemoryResultSink


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep log files and config lookups inside the test's tmp directory."""

    monkeypatch.setenv("TRADEBOOK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TRADEBOOK_DEV_MODE", "true")
    monkeypatch.delenv("TRADEBOOK_SECRET_KEY", raising=False)
    monkeypatch.delenv("TRADEBOOK_LOG_LEVEL", raising=False)


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture()
def result_sink() -> MemoryResultSink:
    return MemoryResultSink()


@pytest.fixture()
def app(result_sink):
    app = create_app("testing")
    set_result_sink(app, result_sink)
    return app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


# =============================================================================
# Engine Factories
# =============================================================================


@pytest.fixture()
def notifier() -> MemoryNotifier:
    return MemoryNotifier()


@pytest.fixture()
def engine_factory(result_sink, notifier):
    """Return a function building a form engine for a kind.

    Example:
        engine = engine_factory("sales")
    """

    def _create_engine(kind: TransactionKind | str = TransactionKind.PURCHASE) -> TransactionFormEngine:
        page = SALES_PAGE if TransactionKind(kind) is TransactionKind.SALES else PURCHASE_PAGE
        return TransactionFormEngine(
            page.kind, page.display, result_sink=result_sink, notifier=notifier
        )

    return _create_engine


def make_item(name: str = "Widget", quantity="2", unit_price="50") -> ItemDraft:
    """Build an item draft from raw values the way a posted form would."""

    item = ItemDraft()
    item.set("name", name)
    item.set("quantity", quantity)
    item.set("unit_price", unit_price)
    return item


def make_draft(*items: ItemDraft, vendor: str = "Acme", date: str = "2024-01-01", reference: str = "") -> TransactionDraft:
    """Build a header-valid draft; defaults to a single valid item."""

    if not items:
        items = (make_item(),)
    return TransactionDraft(vendor=vendor, date=date, reference=reference, items=list(items))


def form_data(*items: dict, **header) -> dict[str, str]:
    """Flatten header values and item dicts into posted form fields."""

    data = {"vendor": "Acme", "date": "2024-01-01", "reference": ""}
    data.update(header)
    for index, item in enumerate(items):
        for field, value in item.items():
            data[f"items[{index}].{field}"] = str(value)
    return data


def assert_decimal_equal(actual: Decimal, expected) -> None:
    assert actual == Decimal(str(expected)), f"{actual} != {expected}"

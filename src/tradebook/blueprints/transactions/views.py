"""Request handling shared by the sales and purchase pages."""

from __future__ import annotations

from flask import render_template, request

from ...constants import NAV_PAGES, PageDefinition
from ...extensions import get_result_sink
from ...models.transaction import format_money
from ...services.notifications import FlashNotifier
from .forms import TransactionFormEngine

ADD_ITEM = "add_item"
REMOVE_ITEM_PREFIX = "remove_item:"
SUBMIT = "submit"


def _apply_action(engine: TransactionFormEngine, action: str) -> int:
    """Run the posted action against the engine; return the HTTP status."""

    if action == ADD_ITEM:
        engine.add_item()
        return 200
    if action.startswith(REMOVE_ITEM_PREFIX):
        raw_index = action[len(REMOVE_ITEM_PREFIX):]
        try:
            index = int(raw_index)
        except ValueError:
            return 400
        engine.remove_item(index)
        return 200

    payload = engine.submit()
    return 200 if payload is not None else 400


def transaction_page(page: PageDefinition):
    """Render a transaction form page, handling add/remove/submit posts."""

    notifier = FlashNotifier()
    sink = get_result_sink()
    status = 200
    if request.method == "POST":
        engine = TransactionFormEngine.from_mapping(
            page.kind,
            page.display,
            request.form,
            result_sink=sink,
            notifier=notifier,
        )
        status = _apply_action(engine, request.form.get("action") or SUBMIT)
    else:
        engine = TransactionFormEngine(
            page.kind, page.display, result_sink=sink, notifier=notifier
        )

    return (
        render_template(
            "transactions/form.html",
            form=engine,
            page=page,
            nav_pages=NAV_PAGES,
            format_money=format_money,
        ),
        status,
    )

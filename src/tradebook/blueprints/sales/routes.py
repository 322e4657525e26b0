"""Sales transaction page."""

from __future__ import annotations

from ...constants import SALES_PAGE
from ..transactions import transaction_page
from . import bp


@bp.route("/sales", methods=("GET", "POST"))
def sales_form():
    return transaction_page(SALES_PAGE)

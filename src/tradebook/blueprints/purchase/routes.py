"""Purchase transaction page."""

from __future__ import annotations

from ...constants import PURCHASE_PAGE
from ..transactions import transaction_page
from . import bp


@bp.route("/purchase", methods=("GET", "POST"))
def purchase_form():
    return transaction_page(PURCHASE_PAGE)

"""Home routes."""

from __future__ import annotations

from flask import redirect, url_for

from ...constants import SALES_PAGE
from . import bp


@bp.get("/")
def landing_page():
    """Send visitors to the sales form."""

    return redirect(url_for(SALES_PAGE.endpoint))

"""Purchase blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("purchase", __name__)

from . import routes  # noqa: E402,F401 - ensure routes register

__all__ = ["bp"]

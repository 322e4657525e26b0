"""Shared transaction form engine and page handling."""

from __future__ import annotations

from .forms import TransactionFormEngine
from .views import transaction_page

__all__ = ["TransactionFormEngine", "transaction_page"]

"""Domain models for transactions and their line items."""

from .item import Item, ItemDraft
from .transaction import SubmissionPayload, Transaction, TransactionDraft

__all__ = [
    "Item",
    "ItemDraft",
    "SubmissionPayload",
    "Transaction",
    "TransactionDraft",
]

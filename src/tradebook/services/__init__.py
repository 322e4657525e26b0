"""Validation schema and submission services."""

from .notifications import (
    FlashNotifier,
    LoggingResultSink,
    MemoryNotifier,
    MemoryResultSink,
    Notifier,
    ResultSink,
)
from .schema import TransactionSchema, ValidationResult, build_schema

__all__ = [
    "FlashNotifier",
    "LoggingResultSink",
    "MemoryNotifier",
    "MemoryResultSink",
    "Notifier",
    "ResultSink",
    "TransactionSchema",
    "ValidationResult",
    "build_schema",
]

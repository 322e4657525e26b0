"""Result sinks and user notification surfaces for submitted forms."""

from __future__ import annotations

from typing import Protocol

from flask import flash

from ..logging_config import get_logger
from ..models.transaction import SubmissionPayload

logger = get_logger(__name__)


class ResultSink(Protocol):
    """Receives validated submission payloads."""

    def deliver(self, payload: SubmissionPayload) -> None: ...


class Notifier(Protocol):
    """Receives the coarse success/failure signal shown to the user."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingResultSink:
    """Log each submission; nothing is persisted."""

    def deliver(self, payload: SubmissionPayload) -> None:
        logger.info(
            "Transaction submitted",
            extra={"payload": payload.to_dict()},
        )


class MemoryResultSink:
    """Keep delivered payloads in memory, newest last."""

    def __init__(self) -> None:
        self.payloads: list[SubmissionPayload] = []

    def deliver(self, payload: SubmissionPayload) -> None:
        self.payloads.append(payload)


class FlashNotifier:
    """Surface notifications through Flask's flashed messages."""

    def success(self, message: str) -> None:
        flash(message, "success")

    def error(self, message: str) -> None:
        flash(message, "danger")


class MemoryNotifier:
    """Record ``(category, message)`` pairs; used outside a request."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("danger", message))

"""Extension wiring for Tradebook: the submission result sink."""

from __future__ import annotations

from flask import Flask, current_app

from .services.notifications import LoggingResultSink, ResultSink

EXTENSION_KEY = "tradebook"


def init_app(app: Flask, result_sink: ResultSink | None = None) -> None:
    """Install the result sink used by every form page of ``app``."""

    app.extensions[EXTENSION_KEY] = {"result_sink": result_sink or LoggingResultSink()}


def set_result_sink(app: Flask, result_sink: ResultSink) -> None:
    """Swap the sink, e.g. for tests or a future backend."""

    app.extensions[EXTENSION_KEY]["result_sink"] = result_sink


def get_result_sink() -> ResultSink:
    """Return the sink registered on the current app."""

    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - create_app always wires it
        raise RuntimeError("Tradebook extensions not initialized")
    return state["result_sink"]

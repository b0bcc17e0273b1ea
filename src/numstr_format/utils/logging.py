"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", json_output: bool = True):
    """Configure structlog, writing to stderr.

    Formatted numbers are the program output, so log lines never go to
    stdout. ``json_output=False`` switches to the human-readable console
    renderer used by the command-line script.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def bind_format_context(**values) -> None:
    """Attach locale/variant details to every log line emitted in this context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_format_context() -> None:
    structlog.contextvars.clear_contextvars()

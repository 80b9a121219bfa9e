"""
profile_binding.observability.logging

Structured logging configuration for the processor and API.

Responsibilities:
- Configure `structlog` for JSON logs.
- Provide a small wrapper for obtaining bound loggers.
- Scope log lines to the deployment currently being processed.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str, cache: bool = True) -> None:
    """
    Structured JSON logs on stdout.

    `cache=False` keeps loggers reconfigurable, which `structlog.testing.capture_logs`
    relies on.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _add_service_name(service_name),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache,
    )


def _add_service_name(service_name: str):
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


@contextmanager
def deployment_scope(deployment: str) -> Iterator[None]:
    """
    Bind the deployment name onto every log line emitted inside the block.

    Previously bound values are restored on exit, so nested scopes (an API request
    that deploys a tree) keep their outer fields.
    """

    tokens = structlog.contextvars.bind_contextvars(deployment=deployment)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


# --- Module Notes -----------------------------------------------------------
# HTTP request metadata is bound via contextvars in `observability.middleware`.

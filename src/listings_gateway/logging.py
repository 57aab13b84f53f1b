"""
Centralized logging configuration using structlog

Request-scoped fields (request ID, GraphQL operation name) live in structlog's
context variables, so every log line emitted while serving a request carries
them without passing a bound logger around.
"""

import logging
import secrets
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars


def _resolve_level(debug: bool, level: str | None) -> int:
    if level is None:
        return logging.DEBUG if debug else logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Render colored console output instead of JSON lines.
        level: Log level name; defaults to DEBUG when debugging, else INFO.
    """
    logging.basicConfig(
        level=_resolve_level(debug, level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Return a random 16-character hex request ID."""
    return secrets.token_hex(8)


def bind_request_context(
    request_id: str | None = None, graphql_operation: str | None = None
) -> str:
    """Bind request-scoped log fields, generating a request ID when none is given.

    Returns:
        The request ID now bound to the context
    """
    clear_contextvars()
    request_id = request_id or generate_request_id()
    fields = {"request_id": request_id}
    if graphql_operation:
        fields["graphql_operation"] = graphql_operation
    bind_contextvars(**fields)
    return request_id


def clear_request_context() -> None:
    clear_contextvars()


def get_request_id() -> str | None:
    return get_contextvars().get("request_id")

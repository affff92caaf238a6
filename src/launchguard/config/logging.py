"""Logging configuration using structlog.

Events are snake_case with key/value context. Wallet and mint addresses
go through short_address() before they reach a log line.
"""

import logging
import sys

import structlog

from launchguard.config.settings import Settings, get_settings

# httpx logs every RPC request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")

ADDRESS_PREFIX_LENGTH = 8


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the engine and the API.

    Args:
        settings: Source of log level and debug flag (cached settings when omitted)
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.debug:
        renderer: list[structlog.types.Processor] = [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(),
        ]
    else:
        renderer = [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))


def short_address(address: str) -> str:
    """Truncate a wallet or mint address for log output."""
    if len(address) <= ADDRESS_PREFIX_LENGTH:
        return address
    return address[:ADDRESS_PREFIX_LENGTH] + "..."

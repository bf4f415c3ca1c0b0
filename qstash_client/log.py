"""structlog setup.

Library loggers wrap stdlib loggers under the ``qstash`` namespace, so nothing
is printed until the application configures logging, either through
:func:`configure_logging` or its own stdlib setup.
"""

import logging

import structlog

from .config import Settings, get_settings

LOGGER_NAMESPACE = "qstash"

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def get_logger(name: str):
    """Get a structlog logger backed by the stdlib logger ``qstash.<name>``."""
    return structlog.wrap_logger(logging.getLogger(f"{LOGGER_NAMESPACE}.{name}"))


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog on top of the stdlib logging module."""
    settings = settings or get_settings()

    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
            if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

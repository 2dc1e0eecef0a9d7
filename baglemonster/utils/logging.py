# baglemonster/utils/logging.py

import logging
import sys

import structlog

from baglemonster.utils.settings import LOG_JSON, LOG_LEVEL

logging.basicConfig(format="%(message)s", stream=sys.stdout, level=LOG_LEVEL)

# Suppress noisy library loggers
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer() if LOG_JSON else structlog.dev.ConsoleRenderer(),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def get_logger(name: str):
    return structlog.get_logger(name)

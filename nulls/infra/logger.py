import logging
from typing import Optional

import structlog

from nulls.config.runtime import runtime_config


def setup_logging(log_level: Optional[str] = None) -> None:
    if log_level is None:
        log_level = runtime_config.LOG_LEVEL
    log_level = log_level.upper()

    numeric_level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    return structlog.get_logger(name)

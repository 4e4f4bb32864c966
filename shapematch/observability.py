import logging
import sys

import structlog

from .settings import settings

# Silent unless the host application configures logging.
logging.getLogger("shapematch").addHandler(logging.NullHandler())


def init_logging() -> None:
    """Configure structlog on top of stdlib logging for applications using the library."""
    level = logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    logging.basicConfig(stream=sys.stderr, level=level)


def get_logger(name: str):
    """Return a structlog logger that always writes through stdlib ``logging``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

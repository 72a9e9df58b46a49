"""
Structured logging setup shared by all demos.

Demo output goes to stdout through rich; log events go to stderr through
structlog so the two never interleave on the same stream.
"""

import logging
import sys

import structlog

from core.config import LoggingConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure stdlib logging and structlog from the logging config."""
    global _handler
    config = config or LoggingConfig()

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(config.level)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if config.format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


# Sensible JSON defaults until an entry point applies the loaded config
configure_logging()

logger = structlog.get_logger("demos")

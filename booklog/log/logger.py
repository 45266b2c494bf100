"""
Application Logging

Structured logging via structlog on top of the standard library.

DESIGN DECISION: Log records go to a file in the data directory, never to
the console. The console belongs to the interactive menu; a JSON line in the
middle of a prompt would be noise to the user.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import structlog


_HANDLER_NAME = "booklog-file"


def configure_logging(
    log_file: Optional[Union[str, Path]] = None,
    level: str = "INFO",
) -> None:
    """
    Configure structlog and the root stdlib logger.

    Args:
        log_file: Where to append JSON log lines. If None, records are
                  dropped (a NullHandler is installed).
        level: Standard library level name
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()

    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.NullHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None):
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)

"""
Logging setup for applications and test runs that want readable kernelsim logs.

Library modules only call structlog.get_logger(__name__); nothing is configured on import.
"""
import logging
from typing import Optional, Union

import structlog

from kernelsim.config import get_config


def setup_logging(level: Optional[Union[int, str]] = None, json_logs: bool = False):
    """
    Route structlog through the stdlib logging module and render to stderr.

    With no explicit level, KERNELSIM_LOG_LEVEL (or INFO) is used.
    """
    if level is None:
        level = get_config().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    renderer = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer))
    root = logging.getLogger("kernelsim")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False

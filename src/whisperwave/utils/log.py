"""Logging setup for whisperwave (loguru)."""

import sys

from loguru import logger

from .. import config

_handler_id = None


def configure_logging(level: str = None, sink=sys.stderr) -> int:
    """
    Enable whisperwave log output.

    The package is silent until this is called. Calling it again replaces
    the sink added by the previous call; sinks added elsewhere, including
    loguru's default stderr sink, are left alone.

    Args:
        level: Minimum level (default from WHISPERWAVE_LOG_LEVEL)
        sink: Any loguru sink

    Returns:
        Handler id of the added sink
    """
    global _handler_id

    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            # Already removed by the application
            pass

    logger.enable("whisperwave")
    _handler_id = logger.add(
        sink,
        level=(level or config.LOG_LEVEL).upper(),
        filter="whisperwave",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
    return _handler_id

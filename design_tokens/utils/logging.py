"""
Design Tokens Structured Logging
Structured logging helpers on top of loguru.

The package never touches loguru sinks on its own; applications that want
package output on stderr call configure_logging() once.
"""
import sys
from typing import Any, Dict, Optional

from loguru import logger

from design_tokens.config import config

_handler_id: Optional[int] = None


def configure_logging(level: Optional[str] = None, sink: Any = sys.stderr) -> int:
    """
    Add a structured loguru sink for package output.

    Calling again replaces the sink added by the previous call; sinks added
    by the host application are left alone.

    Args:
        level: Minimum level (defaults to config.LOG_LEVEL)
        sink: Any loguru sink, stderr by default

    Returns:
        loguru handler id of the new sink
    """
    global _handler_id
    if _handler_id is not None:
        logger.remove(_handler_id)

    _handler_id = logger.add(
        sink,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}",
        level=level or config.LOG_LEVEL,
        filter="design_tokens",
        serialize=False  # Set to True for JSON output
    )
    return _handler_id


class StructuredLogger:
    """Structured logger for palette generation."""

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        if extra:
            logger.bind(**extra).debug(message)
        else:
            logger.debug(message)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger

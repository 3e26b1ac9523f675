"""Logging setup for linkhelper (loguru)."""

__all__ = ["configure_logging", "reset_logging"]

import sys
from typing import Optional

from loguru import logger

_handler_id: Optional[int] = None


def configure_logging(level: str = "INFO", sink=None, exclusive: bool = False) -> int:
    """
    Enable linkhelper log output.

    The package disables its own loguru messages on import; call this from
    an application or the CLI to see them. Calling it again replaces the
    sink added by the previous call and leaves other sinks alone.

    Args:
        level: Minimum level to emit (e.g. "DEBUG")
        sink: Any loguru sink, stderr by default
        exclusive: Remove every other sink first, for programs that own
                   the whole process (the CLI)

    Returns:
        The loguru handler id of the new sink
    """
    global _handler_id
    if exclusive:
        logger.remove()
    else:
        reset_logging()
    _handler_id = logger.add(sink if sink is not None else sys.stderr, level=level)
    logger.enable("linkhelper")
    return _handler_id


def reset_logging() -> None:
    """Remove the sink added by configure_logging and silence the package again."""
    global _handler_id
    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            # already removed by someone calling logger.remove()
            pass
        _handler_id = None
    logger.disable("linkhelper")

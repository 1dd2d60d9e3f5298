"""
Logging of raised errors: the message, then one line per stack frame.
"""

import logging
import traceback
from typing import Any, List


def stack_frames(error: Any) -> List[str]:
    """
    Return the stack frame descriptions of an error, in captured order.

    Objects exposing stack_frames are used as-is. Exceptions are read from
    their traceback, one "file:line:in function" entry per frame.
    """
    frames = getattr(error, 'stack_frames', None)
    if frames is not None:
        return [str(frame) for frame in frames]

    tb = getattr(error, '__traceback__', None)
    if tb is None:
        return []
    return [f"{frame.filename}:{frame.lineno}:in {frame.name}" for frame in traceback.extract_tb(tb)]


def error_message(error: Any) -> str:
    message = getattr(error, 'message', None)
    if message is None:
        message = str(error)
    return str(message)


def log_error(logger: logging.Logger, error: Any) -> None:
    """
    Log an error message followed by its stack frames, all at ERROR.

    Example:
        try:
            run()
        except Exception as e:
            log_error(registry.logger_for_self(self), e)
    """
    logger.error(f"Error: {error_message(error)}")
    for frame in stack_frames(error):
        logger.error(frame)

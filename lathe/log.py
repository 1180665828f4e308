"""
lathe.log - Logging module with proper Python exception handling.

Usage:
    from lathe import log

    log.info("Hello")
    log.warn("Something wrong")

    try:
        do_something()
    except Exception as e:
        log.error(e, "Failed to do something")  # includes traceback
        raise
"""

import logging
import traceback

_logger = logging.getLogger("lathe")
_logger.addHandler(logging.NullHandler())

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def debug(msg_or_exc, context: str = ""):
    """Log debug message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.debug, msg_or_exc, context)
    else:
        _logger.debug(str(msg_or_exc))


def info(msg_or_exc, context: str = ""):
    """Log info message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.info, msg_or_exc, context)
    else:
        _logger.info(str(msg_or_exc))


def warn(msg_or_exc, context: str = ""):
    """Log warning message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.warning, msg_or_exc, context)
    else:
        _logger.warning(str(msg_or_exc))


def warning(msg_or_exc, context: str = ""):
    """Alias for warn()."""
    warn(msg_or_exc, context)


def error(msg_or_exc, context: str = ""):
    """Log error message or exception with context."""
    if isinstance(msg_or_exc, BaseException):
        _log_exception(_logger.error, msg_or_exc, context)
    else:
        _logger.error(str(msg_or_exc))


def exception(msg: str = ""):
    """Log error with current exception traceback."""
    _logger.exception(msg)


def _log_exception(log_func, exc: BaseException, context: str):
    """Format and log exception with traceback."""
    exc_type = type(exc).__name__
    exc_msg = str(exc)

    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    if context:
        full_msg = f"{context}: {exc_type}: {exc_msg}\n{tb}"
    else:
        full_msg = f"{exc_type}: {exc_msg}\n{tb}"

    log_func(full_msg)


def set_level(level):
    """Set minimal level. Accepts a logging constant or a name ("debug", "warn", ...)."""
    if isinstance(level, str):
        level = _LEVELS[level.lower()]
    _logger.setLevel(level)


class _CallbackHandler(logging.Handler):
    def __init__(self, callback):
        super().__init__()
        self.callback = callback

    def emit(self, record):
        self.callback(record.levelname.lower(), self.format(record))


_callback_handler = None


def set_callback(callback):
    """
    Route every record to ``callback(level_name, message)``.

    Passing None removes the previously installed callback.
    """
    global _callback_handler
    if _callback_handler is not None:
        _logger.removeHandler(_callback_handler)
        _callback_handler = None
    if callback is not None:
        _callback_handler = _CallbackHandler(callback)
        _logger.addHandler(_callback_handler)

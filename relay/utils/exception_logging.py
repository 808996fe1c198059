"""
Helpers for logging and rendering exceptions raised while relaying requests,
including exception groups raised from task groups.
"""

import logging


def _safe_str(obj) -> str:
    """
    Convert an object to string without letting a broken __str__ escape.

    Args:
        obj: The object to convert to string

    Returns:
        A string representation of the object, falling back to safe alternatives
    """
    try:
        return str(obj)
    except Exception:
        try:
            return repr(obj)
        except Exception:
            return f"<{type(obj).__name__} object (string conversion failed)>"


def _safe_get_exceptions(exception_group) -> list:
    """Return the sub-exceptions of an exception group, or an empty list."""
    try:
        return list(exception_group.exceptions)
    except Exception:
        return []


def _describe(exception) -> str:
    # httpx transport errors frequently carry an empty message
    text = _safe_str(exception)
    return text or type(exception).__name__


def log_exception_with_details(
    logger: logging.Logger,
    prefix: str,
    exception: Exception,
    level: int = logging.ERROR,
) -> None:
    """
    Log an exception, and each sub-exception when it is an exception group.
    Never raises, even for broken exception objects.

    Args:
        logger: The logger instance to use
        prefix: Prefix for the log message (e.g., "[Proxy]", "[Format]")
        exception: The exception to log
        level: The logging level to use (default: ERROR)
    """
    try:
        safe_prefix = _safe_str(prefix) if prefix is not None else ""
        if exception is None:
            logger.log(level, f"{safe_prefix} Exception: None")
            return

        sub_exceptions = []
        if hasattr(exception, "exceptions"):
            sub_exceptions = _safe_get_exceptions(exception)

        if not sub_exceptions:
            logger.log(
                level,
                f"{safe_prefix} Exception: {_describe(exception)}",
                exc_info=exception,
            )
            return

        logger.log(
            level,
            f"{safe_prefix} Exception with {len(sub_exceptions)} sub-exceptions: "
            f"{_describe(exception)}",
        )
        for i, sub_exc in enumerate(sub_exceptions):
            logger.log(
                level,
                f"{safe_prefix} Sub-exception {i + 1}: "
                f"{type(sub_exc).__name__}: {_describe(sub_exc)}",
                exc_info=sub_exc,
            )
    except Exception:
        try:
            logger.log(logging.ERROR, "Exception logging failed")
        except Exception:
            pass


def format_exception_message(exception: Exception) -> str:
    """
    Render an exception for a response body, flattening exception groups.
    Never raises.

    Args:
        exception: The exception to format

    Returns:
        A non-empty string describing the exception
    """
    try:
        if exception is None:
            return "None"

        sub_exceptions = []
        if hasattr(exception, "exceptions"):
            sub_exceptions = _safe_get_exceptions(exception)

        if not sub_exceptions:
            return _describe(exception)

        sub_exception_strs = [
            f"{type(sub_exc).__name__}: {_describe(sub_exc)}"
            for sub_exc in sub_exceptions
        ]
        return f"{_describe(exception)} (Sub-exceptions: {'; '.join(sub_exception_strs)})"
    except Exception:
        return "<exception (all formatting failed)>"

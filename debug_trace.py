"""
debug_trace.py

Logging set-up and category-tagged trace messages.

Call setup_logging() once at start-up; trace() then writes DEBUG records to
the ``curve_editor.trace`` logger, so they only show up with ``--debug``.
"""

import logging
import sys
from functools import wraps

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Set to True to trace paint events (very verbose)
TRACE_PAINT = False

_trace_log = logging.getLogger("curve_editor.trace")


def setup_logging(debug: bool = False, log_file: str = None) -> None:
    """Configure the root logger.

    Args:
        debug: Log at DEBUG instead of INFO.
        log_file: Optional file to write to in addition to stderr.
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def trace(msg: str, category: str = "INFO"):
    """Emit a trace message tagged with *category*."""
    if category == "PAINT" and not TRACE_PAINT:
        return
    _trace_log.debug("[%s] %s", category, msg)


def trace_call(category: str = "CALL"):
    """Decorator to trace function calls."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            func_name = func.__qualname__
            trace(f">>> {func_name}", category)
            try:
                result = func(*args, **kwargs)
                trace(f"<<< {func_name}", category)
                return result
            except Exception as e:
                trace(f"!!! {func_name} raised {type(e).__name__}: {e}", "ERROR")
                raise
        return wrapper
    return decorator


def install_excepthook() -> None:
    """Log uncaught exceptions before handing them to the default hook."""
    previous = sys.excepthook

    def hook(exc_type, exc_value, exc_tb):
        if not issubclass(exc_type, KeyboardInterrupt):
            logging.getLogger("curve_editor").critical(
                "Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
        previous(exc_type, exc_value, exc_tb)

    sys.excepthook = hook

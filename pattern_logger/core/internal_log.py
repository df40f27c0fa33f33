"""
Internal diagnostics channel

Recoverable configuration problems (an unknown conversion word, a malformed
modifier, an unknown config key) are reported here instead of being raised,
so that a bad layout never interrupts the host application.
"""

import sys
import threading
from typing import Callable, Optional

WarningHandler = Callable[[str], None]

PREFIX = "pattern_logger"

_lock = threading.Lock()
_handler: Optional[WarningHandler] = None


def _print_warning(message: str) -> None:
    print(f"{PREFIX}: {message}", file=sys.stderr)


def set_warning_handler(handler: Optional[WarningHandler]) -> Optional[WarningHandler]:
    """
    Install a handler for internal warnings.

    Args:
        handler: Callable receiving the warning text. None restores the
                 default handler, which prints to stderr.

    Returns:
        The previously installed handler (None if it was the default)

    Example:
        collected = []
        set_warning_handler(collected.append)
    """
    global _handler
    if handler is not None and not callable(handler):
        raise TypeError("handler must be callable")

    with _lock:
        previous = _handler
        _handler = handler
    return previous


def get_warning_handler() -> WarningHandler:
    """Return the handler currently receiving internal warnings."""
    return _handler or _print_warning


def warn(message: str, handler: Optional[WarningHandler] = None) -> None:
    """
    Report a recoverable problem.

    Args:
        message: Warning text
        handler: Overrides the installed handler for this call only
    """
    target = handler or get_warning_handler()
    try:
        target(message)
    except Exception as e:
        # A broken handler must not turn a warning into a failure
        _print_warning(f"{message} (warning handler error: {e})")

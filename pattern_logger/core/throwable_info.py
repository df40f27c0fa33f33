"""Exception information attached to a log entry"""

import traceback
from typing import List, Optional


class ThrowableInformation:
    """
    Wraps an exception logged together with a message.

    The traceback is rendered on first use and cached, so an entry that is
    formatted by several writers only pays for it once.
    """

    def __init__(self, exception: BaseException):
        if not isinstance(exception, BaseException):
            raise TypeError("exception must be a BaseException instance")
        self._exception = exception
        self._lines: Optional[List[str]] = None

    @property
    def exception(self) -> BaseException:
        """The wrapped exception."""
        return self._exception

    def get_string_representation(self) -> List[str]:
        """
        Return the traceback as a list of lines without line terminators.

        Returns:
            Lines of the rendered traceback
        """
        if self._lines is None:
            text = "".join(
                traceback.format_exception(
                    type(self._exception),
                    self._exception,
                    self._exception.__traceback__,
                )
            )
            self._lines = text.rstrip("\n").split("\n")
        return list(self._lines)

    def __repr__(self) -> str:
        return f"ThrowableInformation({self._exception!r})"

"""
Width and padding rules for a single formatted field

A directive such as ``%-10.-20c`` carries modifiers that control how the
rendered field is fitted into the output line:

- The number before the dot is the minimum width. Shorter text is padded
  with spaces; a positive number right-justifies (pads on the left), a
  negative number left-justifies (pads on the right).
- The number after the dot is the maximum width. Longer text is truncated;
  a positive number keeps the leftmost characters, a negative number keeps
  the rightmost ones.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FormattingInfo:
    """
    Minimum/maximum width constraints for one field.

    Attributes:
        min_width: Pad the field to at least this many characters
        pad_left: True to pad on the left (right-justify)
        max_width: Truncate the field to at most this many characters.
                   None means unbounded.
        trim_left: True to drop characters from the front when truncating
    """

    min_width: int = 0
    pad_left: bool = True
    max_width: Optional[int] = None
    trim_left: bool = False

    def __post_init__(self):
        if self.min_width < 0:
            raise ValueError("min_width cannot be negative")
        if self.max_width is not None and self.max_width < 0:
            raise ValueError("max_width cannot be negative")

    @property
    def is_default(self) -> bool:
        """True if this info leaves every field unchanged."""
        return self.min_width == 0 and self.max_width is None

    def apply(self, text: str) -> str:
        """
        Fit text into the configured width.

        Truncation happens first, then padding, so a field with
        ``min_width=5, max_width=3`` turns "ABCDE" into "ABC" and then
        pads it to "ABC  ".

        Args:
            text: Raw field text

        Returns:
            Text truncated and/or padded as configured
        """
        if self.max_width is not None and len(text) > self.max_width:
            if self.trim_left:
                text = text[len(text) - self.max_width:]
            else:
                text = text[:self.max_width]

        if len(text) < self.min_width:
            if self.pad_left:
                text = text.rjust(self.min_width)
            else:
                text = text.ljust(self.min_width)

        return text

    def __repr__(self) -> str:
        """String representation."""
        max_str = "unbounded" if self.max_width is None else self.max_width
        return (
            f"FormattingInfo(min={self.min_width}, pad_left={self.pad_left}, "
            f"max={max_str}, trim_left={self.trim_left})"
        )


DEFAULT_FORMATTING = FormattingInfo()

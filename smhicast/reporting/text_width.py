"""Terminal display-width measuring and fixed-width padding."""

import unicodedata

VARIATION_SELECTOR_16 = "\ufe0f"  # requests emoji (two-column) presentation
_ZERO_WIDTH_CATEGORIES = ("Mn", "Me", "Cf")


def display_width(text: str) -> int:
    """Approximate number of terminal columns ``text`` occupies.

    Combining marks and format characters take no column. East-Asian
    wide/fullwidth characters, and any character followed by VS16,
    take two.
    """
    width = 0
    for i, ch in enumerate(text):
        if unicodedata.combining(ch) or unicodedata.category(ch) in _ZERO_WIDTH_CATEGORIES:
            continue
        emoji_presentation = text[i + 1:i + 2] == VARIATION_SELECTOR_16
        if emoji_presentation or unicodedata.east_asian_width(ch) in ("W", "F"):
            width += 2
        else:
            width += 1
    return width


def fit(text: str, width: int, align: str = "right") -> str:
    """Pad plain text to ``width`` characters; longer text overflows uncut."""
    if align == "left":
        return text.ljust(width)
    return text.rjust(width)


def pad_display(text: str, width: int, align: str = "left") -> str:
    """Pad ``text`` with spaces until it spans ``width`` terminal columns.

    Text already at or beyond ``width`` is returned unchanged.
    """
    gap = width - display_width(text)
    if gap <= 0:
        return text
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap

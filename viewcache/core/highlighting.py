"""Highlighting of search terms in rendered cells."""

import re

from rich.text import Text

HIGHLIGHT_STYLE = "bold black on yellow"


def highlight_text(text: str, patterns: list[str]) -> Text:
    """Apply highlighting to text for given patterns.

    Matching is case-insensitive; blank patterns are ignored.

    Args:
        text: The text to highlight
        patterns: List of strings to highlight in the text

    Returns:
        Rich Text object with highlighted patterns
    """
    rich_text = Text(text)
    terms = [re.escape(pattern) for pattern in patterns if pattern and pattern.strip()]
    if not text or not terms:
        return rich_text

    rich_text.highlight_regex(re.compile("|".join(terms), re.IGNORECASE), style=HIGHLIGHT_STYLE)
    return rich_text

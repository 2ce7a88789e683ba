"""Small text transforms: capitalization and HTML tag stripping."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<[a-zA-Z/].*?>")


def strip_html_tags(text: str) -> str:
    """Remove HTML tags and their attributes, keeping inner text.

    Not a sanitizer: malformed or hostile markup can survive.

    Examples:
        >>> strip_html_tags("<p class='x'>Hello <b>there</b></p>")
        'Hello there'
    """
    return _TAG_RE.sub("", text)


def _capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:]


def capitalize(text: str | None, all_words: bool = True) -> str:
    """Upper-case the first letter of every word, or only the first one.

    With *all_words*, the input is trimmed and split on single spaces.

    Raises:
        ValueError: If *text* is ``None``, empty, or whitespace only.
    """
    if text is None or not text.strip():
        msg = "Cannot capitalize an empty string"
        raise ValueError(msg)
    if all_words:
        return " ".join(_capitalize_word(word) for word in text.strip().split(" "))
    return _capitalize_word(text)

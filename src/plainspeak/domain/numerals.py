"""English words for small integers.

Covers 0-99. Anything outside that range falls back to its decimal
representation rather than raising.
"""

from __future__ import annotations

_BASE_WORDS: dict[int, str] = {
    0: "zero",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
}

# Descending, so the first threshold <= n is the tens part of n.
_TENS_WORDS: tuple[tuple[int, str], ...] = (
    (90, "ninety"),
    (80, "eighty"),
    (70, "seventy"),
    (60, "sixty"),
    (50, "fifty"),
    (40, "forty"),
    (30, "thirty"),
    (20, "twenty"),
)

_MIN_WORD_NUMERAL = 0
_MAX_WORD_NUMERAL = 99


def to_words(n: int) -> str:
    """Return *n* spelled out in English.

    Examples:
        >>> to_words(7)
        'seven'
        >>> to_words(40)
        'forty'
        >>> to_words(21)
        'twenty-one'
        >>> to_words(100)
        '100'
    """
    if n < _MIN_WORD_NUMERAL or n > _MAX_WORD_NUMERAL:
        return str(n)

    word = _BASE_WORDS.get(n)
    if word is not None:
        return word

    for threshold, tens_word in _TENS_WORDS:
        if n < threshold:
            continue
        remainder = n - threshold
        if remainder == 0:
            return tens_word
        return f"{tens_word}-{_BASE_WORDS[remainder]}"

    return str(n)

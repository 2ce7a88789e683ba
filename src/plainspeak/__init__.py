"""plainspeak — numbers, quantities, and durations as plain English."""

from plainspeak.domain.durations import InvalidDurationError, Precision, humanize_duration
from plainspeak.domain.numerals import to_words
from plainspeak.domain.quantities import quantity_phrase
from plainspeak.domain.text import capitalize, strip_html_tags

__version__ = "0.3.0"

__all__ = [
    "InvalidDurationError",
    "Precision",
    "__version__",
    "capitalize",
    "humanize_duration",
    "quantity_phrase",
    "strip_html_tags",
    "to_words",
]

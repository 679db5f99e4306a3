"""Persian-script digit transliteration."""
from __future__ import annotations

import re

# U+06F0..U+06F9 sit exactly 1728 code points above ASCII '0'..'9'.
PERSIAN_DIGIT_OFFSET = 1728

_PERSIAN_DIGITS_RE = re.compile("[۰-۹]")


def to_latin_digits(s: str) -> str:
    """Replace Persian digits (۰-۹) with ASCII digits; everything else is kept."""
    return _PERSIAN_DIGITS_RE.sub(lambda m: chr(ord(m.group(0)) - PERSIAN_DIGIT_OFFSET), s)


def has_persian_digits(s: str) -> bool:
    return _PERSIAN_DIGITS_RE.search(s) is not None

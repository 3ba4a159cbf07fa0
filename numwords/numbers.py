"""Validation and parsing of the numeric command-line argument."""

from __future__ import annotations

ULONG_MAX = (1 << 64) - 1
"""Value at which parsing saturates."""

_DIGITS = frozenset("0123456789")


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is an optional leading minus followed by digits.

    A lone ``-`` is rejected; the empty string is accepted.
    """
    if text.startswith("-") and len(text) > 1:
        text = text[1:]
    return all(char in _DIGITS for char in text)


def parse_unsigned(text: str) -> int:
    """Parse leading decimal digits of ``text`` as an unsigned number.

    Control characters (below the space character) before the digits are
    skipped, parsing stops at the first non-digit, and a value too large
    for an unsigned 64-bit integer saturates at ``ULONG_MAX``.
    """
    rest = text.lstrip("".join(chr(code) for code in range(1, 32)))
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        digit = ord(char) - ord("0")
        if result > (ULONG_MAX - digit) // 10:
            return ULONG_MAX
        result = result * 10 + digit
    return result
"""Spelling out unsigned numbers with the words of a number dictionary."""

from __future__ import annotations

from collections.abc import Iterator

from numwords.dictionary import NumberDictionary

_SCALES = tuple((10**exponent, str(10**exponent)) for exponent in (18, 15, 12, 9, 6, 3))


def spell(number: int, dictionary: NumberDictionary) -> str:
    """Return ``number`` written out in words, the words joined by single spaces.

    Raises ``MissingEntryError`` when the dictionary lacks a needed entry and
    ``ValueError`` for a negative number.
    """
    if number < 0:
        raise ValueError("only non-negative numbers can be spelled")
    return " ".join(_words(number, dictionary))


def _words(number: int, dictionary: NumberDictionary) -> Iterator[str]:
    if number < 20:
        yield dictionary.lookup(str(number))
    elif number < 100:
        tens, ones = divmod(number, 10)
        yield dictionary.lookup(str(tens * 10))
        if ones:
            yield dictionary.lookup(str(ones))
    elif number < 1000:
        yield from _hundreds(number, dictionary)
    else:
        for divisor, key in _SCALES:
            if number >= divisor:
                quotient, remainder = divmod(number, divisor)
                yield from _words(quotient, dictionary)
                yield dictionary.lookup(key)
                if remainder:
                    yield from _words(remainder, dictionary)
                return


def _hundreds(number: int, dictionary: NumberDictionary) -> Iterator[str]:
    hundreds, rest = divmod(number, 100)
    yield dictionary.lookup(str(hundreds))
    yield dictionary.lookup("100")
    if rest:
        yield from _words(rest, dictionary)
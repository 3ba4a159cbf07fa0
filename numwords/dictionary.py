"""Number dictionaries: ``key:value`` lines mapping numerals to words."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

READ_LIMIT = 1024
"""Largest number of bytes taken from a dictionary file."""


class MissingEntryError(LookupError):
    """Raised when a dictionary has no entry for a requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"no dictionary entry for {key!r}")
        self.key = key


class NumberDictionary:
    """An ordered collection of key/value entries; the first entry for a key wins."""

    def __init__(self, entries: Iterable[tuple[str, str]] = ()) -> None:
        self._entries = list(entries)
        self._index: dict[str, str] = {}
        for key, value in self._entries:
            self._index.setdefault(key, value)

    def lookup(self, key: str) -> str:
        """Return the value of the first entry whose key is exactly ``key``."""
        try:
            return self._index[key]
        except KeyError:
            raise MissingEntryError(key) from None

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


def split_lines(text: str) -> list[str]:
    """Return the newline-terminated lines of ``text``, without their newlines.

    Text after the last newline is not a complete line and is dropped.
    """
    pieces = text.split("\n")
    return pieces[: text.count("\n")]


def _parse_entry(line: str) -> tuple[str, str]:
    key, _, value = line.partition(":")
    return key, value


def parse_dictionary(text: str) -> NumberDictionary:
    """Build a dictionary from ``key:value`` lines.

    Keys and values are kept exactly as written, spaces included. A line
    without a colon becomes a key with an empty value.
    """
    return NumberDictionary(_parse_entry(line) for line in split_lines(text))


def read_dictionary(path: str | PathLike[str]) -> NumberDictionary:
    """Read and parse a dictionary file.

    Only the first ``READ_LIMIT`` bytes are read, and the text ends at the
    first NUL byte. Raises ``OSError`` when the file cannot be opened.
    """
    with open(path, "rb") as handle:
        data = handle.read(READ_LIMIT)
    data = data.split(b"\0", 1)[0]
    return parse_dictionary(data.decode("utf-8", errors="replace"))
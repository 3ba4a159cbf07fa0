"""Command line: print a number in words using a dictionary from ``dicts/``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from numwords.dictionary import MissingEntryError, NumberDictionary, parse_dictionary, read_dictionary
from numwords.numbers import is_numeric, parse_unsigned
from numwords.speller import spell

DICTIONARY_DIR = "dicts/"
DEFAULT_DICTIONARY = "en"


def _render(argument: str, dictionary: NumberDictionary) -> str:
    if not is_numeric(argument):
        raise ValueError(f"not a number: {argument!r}")
    if not argument:
        return ""
    prefix = ""
    if argument.startswith("-") and len(argument) > 1:
        prefix = "minus "
        argument = "0" + argument[1:]
    return prefix + spell(parse_unsigned(argument), dictionary) + "\n"


def render(argument: str, text: str) -> str:
    """Return the output for ``argument`` using the dictionary held in ``text``.

    An empty argument gives empty output. Raises ``ValueError`` for a
    non-numeric argument and ``MissingEntryError`` for a missing entry.
    """
    return _render(argument, parse_dictionary(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2) or not is_numeric(args[0]):
        return 1
    name = args[1] if len(args) == 2 else DEFAULT_DICTIONARY
    try:
        dictionary = read_dictionary(DICTIONARY_DIR + name)
    except OSError:
        return 1
    try:
        output = _render(args[0], dictionary)
    except MissingEntryError as error:
        print(f"Dict Error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
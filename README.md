# numwords

Spell out non-negative integers in words, driven by a plain-text number
dictionary.

## Dictionary format

A dictionary is a text file with one entry per line, a key and its words
separated by a colon:

```
0:zero
1:one
2:two
...
20:twenty
...
100:hundred
1000:thousand
1000000:million
```

- Every line must end with a newline; text after the last newline is ignored.
- Keys and values are kept exactly as written, spaces included, so `1: one`
  has the key `1` and the value ` one`.
- A line without a colon becomes a key with an empty value.
- When a key appears more than once, the first entry wins.
- Keys must appear exactly as the speller asks for them: the numbers 0–19, the
  tens 20–90, `100`, and the scale words `1000`, `1000000`, `1000000000`,
  `1000000000000`, `1000000000000000` and `1000000000000000000`.
- When read from a file, only the first 1024 bytes are used, and the text ends
  at the first NUL byte.

## Command line

```
numwords NUMBER [DICTIONARY]
```

`NUMBER` is made of decimal digits, with an optional leading `-`. When it has
the minus sign, the output starts with `minus ` and the digits after the sign
are spelled. A number too large for an unsigned 64-bit integer is spelled as
18446744073709551615. An empty `NUMBER` prints nothing.

The dictionary is read from `dicts/<DICTIONARY>` relative to the current
directory, or from `dicts/en` when no name is given. No dictionary files come
with the package; you supply them.

The command exits with status 1 when the arguments are wrong or the
dictionary cannot be read, and also when the dictionary lacks an entry the
number needs, in which case a `Dict Error:` message goes to standard error.
Otherwise it prints the words followed by a newline and exits with status 0.

With a `dicts/en` file holding the English entries:

```
$ numwords 42
forty two
$ numwords 1234
one thousand two hundred thirty four
$ numwords -7
minus seven
```

## Library

```python
from numwords.dictionary import parse_dictionary
from numwords.speller import spell

dictionary = parse_dictionary("0:zero\n1:one\n2:two\n20:twenty\n100:hundred\n")
print(spell(121, dictionary))  # one hundred twenty one
```

- `numwords.dictionary.read_dictionary(path)` loads a dictionary file (raising
  `OSError` if it cannot be opened), `parse_dictionary(text)` builds a
  `NumberDictionary` from text, and `split_lines(text)` gives the complete
  lines of a text. `NumberDictionary.lookup(key)` returns the value for a key
  and raises `MissingEntryError` (a `LookupError`) for an unknown one;
  `len()` of a dictionary is its number of entries.
- `numwords.speller.spell(number, dictionary)` returns the words joined by
  single spaces. It raises `ValueError` for a negative number and
  `MissingEntryError` when an entry is missing.
- `numwords.numbers.is_numeric(text)` checks a command-line number (a lone
  `-` is rejected, the empty string accepted) and `parse_unsigned(text)` reads
  its leading digits, saturating at `ULONG_MAX`, the largest 64-bit unsigned
  value.
- `numwords.cli.render(argument, text)` gives the full output the command
  would print for a number argument and dictionary text, and
  `numwords.cli.main(argv)` runs the command and returns its exit status.

## Tests

```
pip install -e .[test]
pytest
```
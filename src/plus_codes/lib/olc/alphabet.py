"""Open Location Code alphabet, format constants, and the digit lookup table.

The constants here are part of the code format itself. Changing any of them
breaks compatibility with codes produced elsewhere, so none are exposed
through ``Settings``.
"""

from collections.abc import Mapping
from types import MappingProxyType

# The 20 digit symbols, in value order.
CODE_ALPHABET = "23456789CFGHJMPQRVWX"

PADDING_CHARACTER = "0"
SEPARATOR = "+"

# Number of characters placed before the separator.
SEPARATOR_POSITION = 8

# Maximum number of significant digits in a code.
MAX_CODE_LENGTH = 15

# Maximum number of digits encoded as lat/lng pairs. A 10 digit code covers
# roughly 13x13 meters at the equator.
PAIR_CODE_LENGTH = 10

# Inverse of the precision of the pair section, in degrees.
PAIR_CODE_PRECISION = 8000

# Grid refinement: 5 rows by 4 columns per extra digit.
GRID_ROWS = 5
GRID_COLUMNS = 4
LAT_GRID_PRECISION = GRID_ROWS ** (MAX_CODE_LENGTH - PAIR_CODE_LENGTH)
LNG_GRID_PRECISION = GRID_COLUMNS ** (MAX_CODE_LENGTH - PAIR_CODE_LENGTH)

ENCODING_BASE = len(CODE_ALPHABET)

# Sentinel digit value for padding and separator characters.
NON_DIGIT = -1


def _build_digit_table() -> Mapping[str, int]:
    table: dict[str, int] = {}
    for value, char in enumerate(CODE_ALPHABET):
        table[char] = value
        table[char.lower()] = value
    table[PADDING_CHARACTER] = NON_DIGIT
    table[SEPARATOR] = NON_DIGIT
    return MappingProxyType(table)


_DIGIT_TABLE = _build_digit_table()


def digit_table() -> Mapping[str, int]:
    """Return the read-only character to digit value table."""
    return _DIGIT_TABLE


def digit_value(char: str) -> int:
    """Return the digit value (0-19) of an alphabet character.

    Lowercase characters map to the same value as their uppercase form.
    Padding and separator characters map to ``NON_DIGIT``.

    Raises:
        KeyError: If ``char`` is not part of the code format.
    """
    return _DIGIT_TABLE[char]

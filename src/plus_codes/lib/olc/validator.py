"""Format validation for Open Location Codes.

Pure predicates: they classify any input and never raise. A code is valid
when its length, separator, padding and characters all pass; valid codes
are then either short (separator before position 8) or full.
"""

import re

from plus_codes.lib.olc.alphabet import (
    NON_DIGIT,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_table,
)

_PADDING_RUN = re.compile(f"{PADDING_CHARACTER}+")


def _valid_length(code: str) -> bool:
    if len(code) < 2 + len(SEPARATOR):
        return False
    # A single digit after the separator is never valid
    return len(code.split(SEPARATOR)[-1]) != 1


def _valid_separator(code: str) -> bool:
    if code.count(SEPARATOR) != 1:
        return False
    separator_idx = code.index(SEPARATOR)
    return separator_idx <= SEPARATOR_POSITION and separator_idx % 2 == 0


def _valid_padding(code: str) -> bool:
    if PADDING_CHARACTER not in code:
        return True
    if code.index(SEPARATOR) < SEPARATOR_POSITION:
        return False
    if code.startswith(PADDING_CHARACTER):
        return False
    if not code.endswith(PADDING_CHARACTER + SEPARATOR):
        return False

    paddings = _PADDING_RUN.findall(code)
    if len(paddings) > 1:
        return False
    run_length = len(paddings[0])
    return run_length % 2 == 0 and run_length <= SEPARATOR_POSITION - 2


def _valid_characters(code: str) -> bool:
    # Checked before upper-casing, which can expand one character into several.
    digits = _PADDING_RUN.sub("", code.replace(SEPARATOR, ""))
    table = digit_table()
    return all(table.get(ch, NON_DIGIT) != NON_DIGIT for ch in digits)


def strip_code(code: str) -> str:
    """Remove the separator and padding from a code and uppercase it."""
    return _PADDING_RUN.sub("", code.replace(SEPARATOR, "")).upper()


def is_valid(code: object) -> bool:
    """Determine whether a string is a valid sequence of code characters.

    Args:
        code: Candidate code. Anything other than a ``str`` is invalid.

    Returns:
        True if the code passes the length, separator, padding and
        character checks.
    """
    if not isinstance(code, str):
        return False
    return _valid_length(code) and _valid_separator(code) and _valid_padding(code) and _valid_characters(code)


def is_short(code: object) -> bool:
    """Determine whether a string is a valid short code."""
    return is_valid(code) and code.index(SEPARATOR) < SEPARATOR_POSITION  # type: ignore[attr-defined]


def is_full(code: object) -> bool:
    """Determine whether a string is a valid full code."""
    return is_valid(code) and not is_short(code)

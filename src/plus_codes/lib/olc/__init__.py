"""Open Location Code library — encode, decode, validate and shorten plus codes.

Public API:
    - encode / decode: Coordinates to code and code to CodeArea (raising)
    - try_encode / try_decode: Same, returning a CodecResult instead of raising
    - is_valid / is_short / is_full: Format classification
    - shorten: Drop leading digits given a nearby reference location
    - recover_nearest: Rebuild a full code from a short code and a reference
    - precision_by_length: Cell height in degrees for a code length
    - CodeArea: Decoded bounding rectangle
    - CodecResult: Value-or-error wrapper
    - OpenLocationCodeError and subclasses: Input validation errors
"""

from plus_codes.lib.olc.alphabet import (
    CODE_ALPHABET,
    MAX_CODE_LENGTH,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_table,
    digit_value,
)
from plus_codes.lib.olc.codec import decode, encode, try_decode, try_encode
from plus_codes.lib.olc.errors import (
    InvalidCoordinatesError,
    InvalidLengthError,
    NotFullCodeError,
    NotValidShortCodeError,
    OpenLocationCodeError,
    PaddedCodeError,
)
from plus_codes.lib.olc.precision import precision_by_length
from plus_codes.lib.olc.shortener import recover_nearest, shorten
from plus_codes.lib.olc.types import CodeArea, CodecResult
from plus_codes.lib.olc.validator import is_full, is_short, is_valid

__all__ = [
    "CODE_ALPHABET",
    "MAX_CODE_LENGTH",
    "PADDING_CHARACTER",
    "PAIR_CODE_LENGTH",
    "SEPARATOR",
    "SEPARATOR_POSITION",
    "CodeArea",
    "CodecResult",
    "InvalidCoordinatesError",
    "InvalidLengthError",
    "NotFullCodeError",
    "NotValidShortCodeError",
    "OpenLocationCodeError",
    "PaddedCodeError",
    "decode",
    "digit_table",
    "digit_value",
    "encode",
    "is_full",
    "is_short",
    "is_valid",
    "precision_by_length",
    "recover_nearest",
    "shorten",
    "try_decode",
    "try_encode",
]

"""Encoding of coordinates into codes and decoding of codes into areas.

Encoding works on fixed-point integers: latitude and longitude are scaled so
that one unit is the size of a 15 digit cell, then digits are peeled off
from the least significant end with floor division. Decoding walks the
digits from the most significant end, narrowing the resolution each step.
"""

import math

from loguru import logger

from plus_codes.lib.olc.alphabet import (
    CODE_ALPHABET,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    LAT_GRID_PRECISION,
    LNG_GRID_PRECISION,
    MAX_CODE_LENGTH,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_CODE_PRECISION,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_value,
)
from plus_codes.lib.olc.errors import InvalidLengthError, NotFullCodeError, OpenLocationCodeError
from plus_codes.lib.olc.precision import (
    LATITUDE_MAX,
    LONGITUDE_MAX,
    clip_latitude,
    normalize_longitude,
    precision_by_length,
    validate_coordinates,
)
from plus_codes.lib.olc.types import CodeArea, CodecResult
from plus_codes.lib.olc.validator import is_full, strip_code

# Both resolutions start at 400 degrees so the first division by the
# encoding base yields the 20 degree top-level cell.
_INITIAL_RESOLUTION = 400.0


def _invalid_length(code_length: int) -> bool:
    if code_length < 2:
        return True
    return code_length < PAIR_CODE_LENGTH and code_length % 2 == 1


def _format_code(code: str, code_length: int) -> str:
    if code_length >= SEPARATOR_POSITION:
        return code[: code_length + 1]
    return code[:code_length] + PADDING_CHARACTER * (SEPARATOR_POSITION - code_length) + SEPARATOR


def encode(latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH) -> str:
    """Encode a location into an Open Location Code.

    Latitude is clipped to [-90, 90] and longitude wrapped into [-180, 180).
    A latitude of exactly 90 is moved down by one cell so that the point
    falls inside the northernmost row.

    Args:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        code_length: Number of significant digits. Values above 15 are
            clamped to 15.

    Returns:
        The uppercase code, including separator and any padding.

    Raises:
        InvalidCoordinatesError: If either coordinate is NaN or infinite.
        InvalidLengthError: If ``code_length`` is below 2, or odd and
            below 10.
    """
    if _invalid_length(code_length):
        logger.debug(f"Rejecting encode length {code_length}")
        raise InvalidLengthError(code_length)
    code_length = min(code_length, MAX_CODE_LENGTH)
    validate_coordinates(latitude, longitude)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    if latitude == LATITUDE_MAX:
        latitude -= precision_by_length(code_length)

    lat_val = LATITUDE_MAX * PAIR_CODE_PRECISION * LAT_GRID_PRECISION
    lat_val += latitude * PAIR_CODE_PRECISION * LAT_GRID_PRECISION
    lng_val = LONGITUDE_MAX * PAIR_CODE_PRECISION * LNG_GRID_PRECISION
    lng_val += longitude * PAIR_CODE_PRECISION * LNG_GRID_PRECISION
    lat_int = math.floor(lat_val)
    lng_int = math.floor(lng_val)

    digits: list[str] = []
    if code_length > PAIR_CODE_LENGTH:
        for _ in range(MAX_CODE_LENGTH - PAIR_CODE_LENGTH):
            digits.append(CODE_ALPHABET[(lat_int % GRID_ROWS) * GRID_COLUMNS + lng_int % GRID_COLUMNS])
            lat_int //= GRID_ROWS
            lng_int //= GRID_COLUMNS
    else:
        lat_int //= LAT_GRID_PRECISION
        lng_int //= LNG_GRID_PRECISION

    # Digits are collected least significant first and reversed at the end.
    for i in range(PAIR_CODE_LENGTH // 2):
        digits.append(CODE_ALPHABET[lng_int % ENCODING_BASE])
        digits.append(CODE_ALPHABET[lat_int % ENCODING_BASE])
        lat_int //= ENCODING_BASE
        lng_int //= ENCODING_BASE
        if i == 0:
            digits.append(SEPARATOR)

    code = "".join(reversed(digits))
    return _format_code(code, code_length)


def decode(code: str) -> CodeArea:
    """Decode a full Open Location Code into the area it covers.

    Args:
        code: A full code, case-insensitive, optionally padded.

    Returns:
        The CodeArea of the code. Digits beyond the 15th are ignored.

    Raises:
        NotFullCodeError: If ``code`` is not a valid full code.
    """
    if not is_full(code):
        logger.debug(f"Rejecting decode of {code!r}")
        raise NotFullCodeError(code)

    digits = strip_code(code)
    code_length = min(len(digits), MAX_CODE_LENGTH)

    south_latitude = -LATITUDE_MAX
    west_longitude = -LONGITUDE_MAX
    lat_resolution = _INITIAL_RESOLUTION
    lng_resolution = _INITIAL_RESOLUTION

    index = 0
    while index < min(code_length, PAIR_CODE_LENGTH):
        lat_resolution /= ENCODING_BASE
        lng_resolution /= ENCODING_BASE
        south_latitude += lat_resolution * digit_value(digits[index])
        west_longitude += lng_resolution * digit_value(digits[index + 1])
        index += 2

    while index < code_length:
        lat_resolution /= GRID_ROWS
        lng_resolution /= GRID_COLUMNS
        row, column = divmod(digit_value(digits[index]), GRID_COLUMNS)
        south_latitude += lat_resolution * row
        west_longitude += lng_resolution * column
        index += 1

    return CodeArea(
        south_latitude=south_latitude,
        west_longitude=west_longitude,
        latitude_height=lat_resolution,
        longitude_width=lng_resolution,
        latitude_center=south_latitude + lat_resolution / 2.0,
        longitude_center=west_longitude + lng_resolution / 2.0,
        code_length=index,
    )


def try_encode(latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH) -> CodecResult[str]:
    """Same as ``encode`` but returns the error instead of raising it."""
    try:
        return CodecResult(value=encode(latitude, longitude, code_length))
    except OpenLocationCodeError as e:
        return CodecResult(error=e)


def try_decode(code: str) -> CodecResult[CodeArea]:
    """Same as ``decode`` but returns the error instead of raising it."""
    try:
        return CodecResult(value=decode(code))
    except OpenLocationCodeError as e:
        return CodecResult(error=e)

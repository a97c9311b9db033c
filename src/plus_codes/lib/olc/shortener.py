"""Shortening of full codes and recovery of short codes near a reference."""

import math

from loguru import logger

from plus_codes.lib.olc.alphabet import PADDING_CHARACTER, SEPARATOR, SEPARATOR_POSITION
from plus_codes.lib.olc.codec import decode, encode
from plus_codes.lib.olc.errors import NotFullCodeError, NotValidShortCodeError, PaddedCodeError
from plus_codes.lib.olc.precision import (
    LATITUDE_MAX,
    clip_latitude,
    normalize_longitude,
    precision_by_length,
    validate_coordinates,
)
from plus_codes.lib.olc.validator import is_full, is_short

# Leading digit counts tried when shortening, most aggressive first.
_REMOVAL_LENGTHS = (8, 6, 4)

_SAFETY_FACTOR = 0.3


def shorten(code: str, latitude: float, longitude: float) -> str:
    """Remove four, six or eight leading digits given a nearby reference.

    The reference must be close to the code center: within 0.3 of the cell
    size at the removed length. The closer it is, the more digits go.

    Args:
        code: A full, unpadded code.
        latitude: Reference latitude in degrees.
        longitude: Reference longitude in degrees.

    Returns:
        The shortened code, or the full code unchanged if the reference is
        too far away, uppercased.

    Raises:
        NotFullCodeError: If ``code`` is not a valid full code.
        PaddedCodeError: If ``code`` contains padding.
        InvalidCoordinatesError: If the reference is NaN or infinite.
    """
    if not is_full(code):
        logger.debug(f"Rejecting shorten of {code!r}")
        raise NotFullCodeError(code)
    if PADDING_CHARACTER in code:
        logger.debug(f"Rejecting shorten of padded code {code!r}")
        raise PaddedCodeError(code)

    validate_coordinates(latitude, longitude)

    code_area = decode(code)
    max_diff = max(
        abs(latitude - code_area.latitude_center),
        abs(longitude - code_area.longitude_center),
    )

    for removal_length in _REMOVAL_LENGTHS:
        area_edge = precision_by_length(removal_length) * _SAFETY_FACTOR
        if max_diff < area_edge:
            logger.debug(f"Shortening {code} by {removal_length} digits (offset {max_diff:.6f} deg)")
            code = code[removal_length:]
            break

    return code.upper()


def _prefix_by_reference(latitude: float, longitude: float, prefix_length: int) -> str:
    precision = precision_by_length(prefix_length)
    rounded_latitude = math.floor(latitude / precision) * precision
    rounded_longitude = math.floor(longitude / precision) * precision
    return encode(rounded_latitude, rounded_longitude)[:prefix_length]


def recover_nearest(short_code: str, latitude: float, longitude: float) -> str:
    """Recover the full code nearest to a reference location.

    The missing leading digits are taken from the reference, then the
    result is moved by one cell in each axis when a neighboring cell has a
    center closer to the reference. Latitude is never moved past a pole;
    longitude is moved freely and wrapped by the final encode.

    Args:
        short_code: A short code, or a full code which is returned as is.
        latitude: Reference latitude in degrees.
        longitude: Reference longitude in degrees.

    Returns:
        The nearest matching full code, uppercased.

    Raises:
        NotValidShortCodeError: If ``short_code`` is neither a full code
            nor a valid short code.
        InvalidCoordinatesError: If the reference is NaN or infinite.
    """
    if is_full(short_code):
        return short_code.upper()
    if not is_short(short_code):
        logger.debug(f"Rejecting recovery of {short_code!r}")
        raise NotValidShortCodeError(short_code)

    validate_coordinates(latitude, longitude)
    reference_latitude = clip_latitude(latitude)
    reference_longitude = normalize_longitude(longitude)

    prefix_length = SEPARATOR_POSITION - short_code.index(SEPARATOR)
    code = _prefix_by_reference(reference_latitude, reference_longitude, prefix_length) + short_code
    code_area = decode(code)

    resolution = precision_by_length(prefix_length)
    half_resolution = resolution / 2

    center_latitude = code_area.latitude_center
    if reference_latitude + half_resolution < center_latitude and center_latitude - resolution >= -LATITUDE_MAX:
        center_latitude -= resolution
    elif reference_latitude - half_resolution > center_latitude and center_latitude + resolution <= LATITUDE_MAX:
        center_latitude += resolution

    center_longitude = code_area.longitude_center
    if reference_longitude + half_resolution < center_longitude:
        center_longitude -= resolution
    elif reference_longitude - half_resolution > center_longitude:
        center_longitude += resolution

    logger.debug(f"Recovered {short_code} near ({reference_latitude}, {reference_longitude}) from {code}")
    return encode(center_latitude, center_longitude, len(code) - len(SEPARATOR))

"""Coordinate clipping/normalization and cell precision by code length."""

import math

from loguru import logger

from plus_codes.lib.olc.alphabet import ENCODING_BASE, GRID_ROWS, PAIR_CODE_LENGTH
from plus_codes.lib.olc.errors import InvalidCoordinatesError

LATITUDE_MAX = 90.0
LONGITUDE_MAX = 180.0

_FULL_TURN = 360.0


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Validate that both coordinates are finite numbers.

    Args:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.

    Raises:
        InvalidCoordinatesError: If either coordinate is NaN or infinite.
    """
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        logger.debug(f"Rejecting coordinates ({latitude}, {longitude})")
        raise InvalidCoordinatesError(latitude, longitude)


def clip_latitude(latitude: float) -> float:
    """Clip a latitude into [-90, 90]."""
    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Wrap a finite longitude into [-180, 180)."""
    # Beyond one turn the loops below would be slow, or never end once 360 is
    # smaller than the float spacing.
    if abs(longitude) >= LONGITUDE_MAX + _FULL_TURN:
        longitude %= _FULL_TURN
    while longitude < -LONGITUDE_MAX:
        longitude += _FULL_TURN
    while longitude >= LONGITUDE_MAX:
        longitude -= _FULL_TURN
    return longitude


def precision_by_length(code_length: int) -> float:
    """Return the cell height in degrees for a code of the given length.

    Pair lengths give 20, 1, 0.05, 0.0025 and 0.000125 degrees for 2, 4, 6,
    8 and 10 digits. Each grid digit after that divides the height by 5.

    Args:
        code_length: Number of significant digits.

    Returns:
        Cell height in degrees.
    """
    if code_length <= PAIR_CODE_LENGTH:
        return float(ENCODING_BASE ** (code_length // -2 + 2))
    return 1.0 / (ENCODING_BASE**3 * GRID_ROWS ** (code_length - PAIR_CODE_LENGTH))

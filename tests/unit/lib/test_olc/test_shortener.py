"""Unit tests for shortening and recovering codes near a reference location."""

import pytest

from plus_codes.lib.olc.codec import decode
from plus_codes.lib.olc.errors import (
    InvalidCoordinatesError,
    NotFullCodeError,
    NotValidShortCodeError,
    PaddedCodeError,
)
from plus_codes.lib.olc.shortener import recover_nearest, shorten

# Center of 9C3W9QCJ+2VX
_FULL_CODE = "9C3W9QCJ+2VX"
_CENTER_LAT = 51.3701125
_CENTER_LNG = -1.217765625


class TestShorten:
    """Tests for shorten()."""

    @pytest.mark.parametrize(
        ("latitude", "longitude", "expected"),
        [
            (_CENTER_LAT, _CENTER_LNG, "+2VX"),
            (_CENTER_LAT + 0.0008, _CENTER_LNG, "CJ+2VX"),
            (_CENTER_LAT, _CENTER_LNG - 0.0008, "CJ+2VX"),
            (_CENTER_LAT + 0.02, _CENTER_LNG, "9QCJ+2VX"),
            (_CENTER_LAT - 0.25, _CENTER_LNG + 0.25, "9QCJ+2VX"),
            (_CENTER_LAT, _CENTER_LNG + 0.5, _FULL_CODE),
            (-30.0, 120.0, _FULL_CODE),
        ],
    )
    def test_removal_by_distance(self, latitude: float, longitude: float, expected: str) -> None:
        """The closer the reference, the more leading digits are removed."""
        assert shorten(_FULL_CODE, latitude, longitude) == expected

    def test_result_is_uppercase(self) -> None:
        """Lowercase input produces an uppercase short code."""
        assert shorten(_FULL_CODE.lower(), _CENTER_LAT, _CENTER_LNG) == "+2VX"

    def test_padded_code_rejected(self) -> None:
        """Padded codes cannot be shortened."""
        with pytest.raises(PaddedCodeError, match="Cannot shorten padded codes"):
            shorten("8F000000+", 30.0, 10.0)

    @pytest.mark.parametrize("code", ["9QCJ+2VX", "9C3W9QCJ+2V", "nonsense"])
    def test_non_full_code_rejected(self, code: str) -> None:
        """Short and invalid codes cannot be shortened."""
        with pytest.raises(NotFullCodeError):
            shorten(code, _CENTER_LAT, _CENTER_LNG)

    def test_non_finite_reference_rejected(self) -> None:
        """A NaN reference raises InvalidCoordinatesError."""
        with pytest.raises(InvalidCoordinatesError):
            shorten(_FULL_CODE, float("nan"), _CENTER_LNG)


class TestRecoverNearest:
    """Tests for recover_nearest()."""

    @pytest.mark.parametrize(
        ("short_code", "latitude", "longitude"),
        [
            ("+2VX", _CENTER_LAT, _CENTER_LNG),
            ("CJ+2VX", _CENTER_LAT + 0.0008, _CENTER_LNG),
            ("9QCJ+2VX", _CENTER_LAT + 0.02, _CENTER_LNG),
            ("9qcj+2vx", _CENTER_LAT, _CENTER_LNG),
        ],
    )
    def test_recover_within_cell(self, short_code: str, latitude: float, longitude: float) -> None:
        """A reference inside the cell recovers the same full code."""
        assert recover_nearest(short_code, latitude, longitude) == _FULL_CODE

    def test_recover_from_cell_to_the_south(self) -> None:
        """A reference just south of the cell boundary moves the result north."""
        assert recover_nearest("9QCJ+2VX", 50.9, _CENTER_LNG) == _FULL_CODE

    def test_recover_from_cell_to_the_east(self) -> None:
        """A reference just east of the cell boundary moves the result west."""
        assert recover_nearest("9QCJ+2VX", _CENTER_LAT, -0.75) == _FULL_CODE

    def test_very_large_reference_longitude_wraps(self) -> None:
        """A reference many turns away recovers as its wrapped equivalent."""
        assert recover_nearest("9QCJ+2VX", _CENTER_LAT, 1e20) == recover_nearest("9QCJ+2VX", _CENTER_LAT, -80.0)

    def test_non_finite_reference_rejected(self) -> None:
        """A NaN or infinite reference raises InvalidCoordinatesError."""
        with pytest.raises(InvalidCoordinatesError):
            recover_nearest("9QCJ+2VX", _CENTER_LAT, float("inf"))
        with pytest.raises(InvalidCoordinatesError):
            recover_nearest("9QCJ+2VX", float("nan"), _CENTER_LNG)

    def test_latitude_not_moved_past_pole(self) -> None:
        """Recovery near the north pole stays in the northernmost row."""
        assert recover_nearest("2222+22", 89.6, 1.0) == "CFX32222+22"

    def test_full_code_returned_uppercased(self) -> None:
        """Full codes are returned unchanged apart from case."""
        assert recover_nearest(_FULL_CODE.lower(), 0.0, 0.0) == _FULL_CODE

    @pytest.mark.parametrize("code", ["9C3W9QCJ+2V", "WC2300+", "", "+"])
    def test_invalid_code_rejected(self, code: str) -> None:
        """Codes that are neither full nor short are rejected."""
        with pytest.raises(NotValidShortCodeError, match="not a valid short code"):
            recover_nearest(code, _CENTER_LAT, _CENTER_LNG)


class TestShortenRecoverRoundTrip:
    """shorten() followed by recover_nearest() restores the code."""

    @pytest.mark.parametrize(
        ("full_code", "lat_offset", "lng_offset"),
        [
            ("849VCWC8+Q9", 0.0, 0.0),
            ("849VCWC8+Q9", -0.0004, -0.0004),
            ("849VCWC8+Q9", -0.01, -0.01),
            ("849VCWC8+Q9", -0.2, -0.2),
            ("9C3W9QCJ+2VX", 0.0, 0.0),
            ("9C3W9QCJ+2VX", -0.01, -0.01),
            ("9C3W9QCJ+2VX", -0.2, -0.2),
            ("76XFXW2F+R4", 0.0, 0.0),
            ("CFX32222+22", 0.0, 0.0),
            ("22222222+22", 0.0, 0.0),
        ],
    )
    def test_round_trip(self, full_code: str, lat_offset: float, lng_offset: float) -> None:
        """Recovering with the reference used to shorten yields the full code."""
        area = decode(full_code)
        latitude = area.latitude_center + lat_offset
        longitude = area.longitude_center + lng_offset
        short_code = shorten(full_code, latitude, longitude)
        assert len(short_code) < len(full_code)
        assert recover_nearest(short_code, latitude, longitude) == full_code

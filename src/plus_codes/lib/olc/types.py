"""Value types returned by the codec.

``CodeArea`` is the decoded rectangle of a code; ``CodecResult`` wraps the
outcome of the non-raising codec entry points.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from shapely.geometry import Polygon, box

from plus_codes.lib.olc.errors import OpenLocationCodeError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CodeArea:
    """Bounding rectangle of a decoded code, in plain WGS84 degrees.

    Longitude is not re-normalized, so a cell at the antimeridian may report
    an east edge of exactly 180.
    """

    south_latitude: float
    west_longitude: float
    latitude_height: float
    longitude_width: float
    latitude_center: float
    longitude_center: float
    code_length: int

    @property
    def north_latitude(self) -> float:
        return self.south_latitude + self.latitude_height

    @property
    def east_longitude(self) -> float:
        return self.west_longitude + self.longitude_width

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return ``(west, south, east, north)``, the shapely bounds order."""
        return (self.west_longitude, self.south_latitude, self.east_longitude, self.north_latitude)

    def latlng(self) -> tuple[float, float]:
        """Return the center as ``(latitude, longitude)``."""
        return self.latitude_center, self.longitude_center

    def to_polygon(self) -> Polygon:
        """Return the cell as a shapely box with ``(lng, lat)`` coordinates."""
        return box(*self.bounds)


@dataclass(frozen=True, slots=True)
class CodecResult(Generic[T]):
    """Outcome of ``try_encode``/``try_decode``: a value or an error, never both."""

    value: T | None = None
    error: OpenLocationCodeError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error.

        Raises:
            OpenLocationCodeError: The error captured when the call failed.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

"""
Representation of a specific point on earth, convertible to and from SVY21
"""

__all__ = ['Coordinate']

from typing import Tuple, Union

from svy21._types import GridCoordinate
from svy21.projection import forward, in_working_area, inverse
from svy21.utils.logging import warn_once


_OUTSIDE_WARNING = (
    'Coordinate falls outside the SVY21 working area; converted values may be '
    'inaccurate. (this warning will not repeat)'
)


class Coordinate:
    """Representation of a WGS84 coordinate on the globe (i.e., a lon/lat pair)"""

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        _bounded: bool = True,
    ):
        lon, lat = float(longitude), float(latitude)
        if _bounded:
            while not -90 <= lat <= 90:
                # Crosses one of the poles
                lat = 90 - (lat - 90) if lat > 90 else -90 - (lat + 90)
                lon = lon + 180 if lon < 0 else lon - 180

            while not -180 <= lon <= 180:
                # Crosses the antimeridian
                lon = lon - 360 if lon > 180 else lon + 360

            # Longitudes are bounded to [-180, 180)
            if lon == 180:
                lon = -180

        self.longitude = lon
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @classmethod
    def from_svy21(cls, northing: float, easting: float):
        """
        Creates a Coordinate from an SVY21 northing/easting pair.

        The result is never wrapped, so a grid position far outside Singapore comes
        back as whatever the series produces (possibly |latitude| > 90), with a
        one-time warning.

        Args:
            northing:
                The northing, in meters

            easting:
                The easting, in meters

        Returns:
            Coordinate
        """
        lat, lon = inverse(northing, easting)
        if not in_working_area(lat, lon):
            warn_once(_OUTSIDE_WARNING)

        return Coordinate(lon, lat, _bounded=False)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_str(self, reverse: bool = False) -> Tuple[str, str]:
        """
        Converts the coordinate to a tuple of strings (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)
        """
        return tuple(str(x) for x in self.to_float(reverse))  # type: ignore

    def to_svy21(self) -> GridCoordinate:
        """Convert this coordinate to an SVY21 (northing, easting) pair"""
        if not in_working_area(self.latitude, self.longitude):
            warn_once(_OUTSIDE_WARNING)

        return forward(self.latitude, self.longitude)

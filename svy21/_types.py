"""
Immutable result records returned by the svy21 transforms
"""

from typing import NamedTuple


class GridCoordinate(NamedTuple):
    """A planar SVY21 position, in meters"""
    northing: float
    easting: float


class LatLon(NamedTuple):
    """A geodetic WGS84 position, in decimal degrees"""
    latitude: float
    longitude: float

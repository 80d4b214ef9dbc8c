
from svy21._version import __version__  # noqa: F401
from svy21.utils.logging import LOGGER
from svy21._types import GridCoordinate, LatLon
from svy21.projection import forward, forward_array, in_working_area, inverse, inverse_array
from svy21.coordinates import Coordinate

__all__ = [
    'Coordinate',
    'GridCoordinate',
    'LatLon',
    'forward',
    'forward_array',
    'in_working_area',
    'inverse',
    'inverse_array',
    'LOGGER',
]

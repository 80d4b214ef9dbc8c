"""Module for miscellaneous multi-use functions"""

__all__ = ['in_bounds']

from typing import Tuple

import numpy as np


def in_bounds(latitude, longitude, bounds: Tuple[float, float, float, float]) -> bool:
    """
    Test whether every lat/lon pair falls inside a bounding box. Accepts scalars or
    (broadcastable) arrays. NaN values are never in bounds.

    Args:
        latitude:
            Latitude(s), in decimal degrees

        longitude:
            Longitude(s), in decimal degrees

        bounds:
            The box, as (min_lon, min_lat, max_lon, max_lat)

    Returns:
        bool
    """
    min_lon, min_lat, max_lon, max_lat = bounds
    lat, lon = np.asarray(latitude), np.asarray(longitude)
    inside = (lat >= min_lat) & (lat <= max_lat) & (lon >= min_lon) & (lon <= max_lon)
    return bool(np.all(inside))

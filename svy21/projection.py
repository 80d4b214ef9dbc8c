"""
Transverse Mercator conversion between WGS84 latitude/longitude and the SVY21
(Singapore) plane grid.
"""

__all__ = [
    'ORIGIN_MERIDIONAL_ARC', 'forward', 'forward_array', 'in_working_area', 'inverse',
    'inverse_array'
]

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike
from pydantic import validate_call

from svy21._const import (
    FALSE_EASTING, FALSE_NORTHING, G, N1, N2, N3, N4, ORIGIN_LATITUDE,
    ORIGIN_LONGITUDE, SCALE_FACTOR, WORKING_AREA
)
from svy21._types import GridCoordinate, LatLon
from svy21.series import meridional_arc, radius_meridian, radius_prime_vertical
from svy21.utils.functions import in_bounds


ORIGIN_MERIDIONAL_ARC = meridional_arc(ORIGIN_LATITUDE)

def _project(latitude, longitude):
    """Evaluates the forward series; shape-agnostic"""
    lat_r = np.radians(latitude)
    sin_lat = np.sin(lat_r)
    sin2_lat = sin_lat * sin_lat
    cos_lat = np.cos(lat_r)
    cos2_lat = cos_lat * cos_lat
    cos3_lat = cos2_lat * cos_lat
    cos4_lat = cos3_lat * cos_lat
    cos5_lat = cos4_lat * cos_lat
    cos6_lat = cos5_lat * cos_lat
    cos7_lat = cos6_lat * cos_lat

    rho = radius_meridian(sin2_lat)
    nu = radius_prime_vertical(sin2_lat)
    psi = nu / rho
    t = np.tan(lat_r)
    w = np.radians(np.subtract(longitude, ORIGIN_LONGITUDE))

    m = meridional_arc(latitude)

    w2 = w * w
    w4 = w2 * w2
    w6 = w4 * w2
    w8 = w6 * w2

    psi2 = psi * psi
    psi3 = psi2 * psi
    psi4 = psi3 * psi

    t2 = t * t
    t4 = t2 * t2
    t6 = t4 * t2

    n_term1 = w2 / 2.0 * nu * sin_lat * cos_lat
    n_term2 = w4 / 24.0 * nu * sin_lat * cos3_lat * (4.0 * psi2 + psi - t2)
    n_term3 = w6 / 720.0 * nu * sin_lat * cos5_lat * (
        (8.0 * psi4) * (11.0 - 24.0 * t2)
        - (28.0 * psi3) * (1.0 - 6.0 * t2)
        + psi2 * (1.0 - 32.0 * t2)
        - psi * 2.0 * t2
        + t4
    )
    n_term4 = w8 / 40320.0 * nu * sin_lat * cos7_lat * (1385.0 - 3111.0 * t2 + 543.0 * t4 - t6)
    northing = FALSE_NORTHING + SCALE_FACTOR * (
        m - ORIGIN_MERIDIONAL_ARC + n_term1 + n_term2 + n_term3 + n_term4
    )

    e_term1 = w2 / 6.0 * cos2_lat * (psi - t2)
    e_term2 = w4 / 120.0 * cos4_lat * (
        (4.0 * psi3) * (1.0 - 6.0 * t2)
        + psi2 * (1.0 + 8.0 * t2)
        - psi * 2.0 * t2
        + t4
    )
    e_term3 = w6 / 5040.0 * cos6_lat * (61.0 - 479.0 * t2 + 179.0 * t4 - t6)
    easting = FALSE_EASTING + SCALE_FACTOR * nu * w * cos_lat * (
        1.0 + e_term1 + e_term2 + e_term3
    )

    return northing, easting


def _unproject(northing, easting):
    """Evaluates the inverse series; shape-agnostic"""
    n_prime = np.subtract(northing, FALSE_NORTHING)
    m_prime = ORIGIN_MERIDIONAL_ARC + (n_prime / SCALE_FACTOR)
    sigma = (m_prime * np.pi) / (180.0 * G)

    # Foot-point latitude, in radians
    lat_prime = (
        sigma
        + ((3.0 * N1 / 2.0) - (27.0 * N3 / 32.0)) * np.sin(2.0 * sigma)
        + ((21.0 * N2 / 16.0) - (55.0 * N4 / 32.0)) * np.sin(4.0 * sigma)
        + (151.0 * N3 / 96.0) * np.sin(6.0 * sigma)
        + (1097.0 * N4 / 512.0) * np.sin(8.0 * sigma)
    )

    sin_lat_prime = np.sin(lat_prime)
    sin2_lat_prime = sin_lat_prime * sin_lat_prime

    rho_prime = radius_meridian(sin2_lat_prime)
    nu_prime = radius_prime_vertical(sin2_lat_prime)
    psi_prime = nu_prime / rho_prime
    psi_prime2 = psi_prime * psi_prime
    psi_prime3 = psi_prime2 * psi_prime
    psi_prime4 = psi_prime3 * psi_prime
    t_prime = np.tan(lat_prime)
    t_prime2 = t_prime * t_prime
    t_prime4 = t_prime2 * t_prime2
    t_prime6 = t_prime4 * t_prime2

    e_prime = np.subtract(easting, FALSE_EASTING)
    x = e_prime / (SCALE_FACTOR * nu_prime)
    x2 = x * x
    x3 = x2 * x
    x5 = x3 * x2
    x7 = x5 * x2

    lat_factor = t_prime / (SCALE_FACTOR * rho_prime)
    lat_term1 = lat_factor * ((e_prime * x) / 2.0)
    lat_term2 = lat_factor * ((e_prime * x3) / 24.0) * (
        (-4.0 * psi_prime2) + (9.0 * psi_prime) * (1.0 - t_prime2) + (12.0 * t_prime2)
    )
    lat_term3 = lat_factor * ((e_prime * x5) / 720.0) * (
        (8.0 * psi_prime4) * (11.0 - 24.0 * t_prime2)
        - (12.0 * psi_prime3) * (21.0 - 71.0 * t_prime2)
        + (15.0 * psi_prime2) * (15.0 - 98.0 * t_prime2 + 15.0 * t_prime4)
        + (180.0 * psi_prime) * (5.0 * t_prime2 - 3.0 * t_prime4)
        + 360.0 * t_prime4
    )
    lat_term4 = lat_factor * ((e_prime * x7) / 40320.0) * (
        1385.0 - 3633.0 * t_prime2 + 4095.0 * t_prime4 + 1575.0 * t_prime6
    )
    lat_r = lat_prime - lat_term1 + lat_term2 - lat_term3 + lat_term4

    # Secant of the corrected latitude, not the foot-point latitude
    sec_lat = 1.0 / np.cos(lat_r)
    lon_term1 = x * sec_lat
    lon_term2 = ((x3 * sec_lat) / 6.0) * (psi_prime + 2.0 * t_prime2)
    lon_term3 = ((x5 * sec_lat) / 120.0) * (
        (-4.0 * psi_prime3) * (1.0 - 6.0 * t_prime2)
        + psi_prime2 * (9.0 - 68.0 * t_prime2)
        + 72.0 * psi_prime * t_prime2
        + 24.0 * t_prime4
    )
    lon_term4 = ((x7 * sec_lat) / 5040.0) * (
        61.0 + 662.0 * t_prime2 + 1320.0 * t_prime4 + 720.0 * t_prime6
    )
    lon_r = np.radians(ORIGIN_LONGITUDE) + lon_term1 - lon_term2 + lon_term3 - lon_term4

    return np.degrees(lat_r), np.degrees(lon_r)


@validate_call
def forward(latitude: float, longitude: float) -> GridCoordinate:
    """
    Convert a WGS84 latitude/longitude to SVY21 northing/easting.

    Arguments are validated as floats, so ints, bools and numeric strings are coerced
    and anything else raises a pydantic ValidationError. Values are not range-checked.
    Positions outside the Singapore working area (see in_working_area()) still convert
    but lose accuracy quickly, and latitudes of +/-90 degrees produce meaningless values.

    Args:
        latitude:
            The latitude, in decimal degrees

        longitude:
            The longitude, in decimal degrees

    Returns:
        GridCoordinate of (northing, easting), in meters
    """
    northing, easting = _project(latitude, longitude)
    return GridCoordinate(float(northing), float(easting))


@validate_call
def inverse(northing: float, easting: float) -> LatLon:
    """
    Convert an SVY21 northing/easting to WGS84 latitude/longitude.

    Arguments are validated as floats, so ints, bools and numeric strings are coerced
    and anything else raises a pydantic ValidationError. Values are not range-checked.

    Args:
        northing:
            The northing, in meters

        easting:
            The easting, in meters

    Returns:
        LatLon of (latitude, longitude), in decimal degrees
    """
    latitude, longitude = _unproject(northing, easting)
    return LatLon(float(latitude), float(longitude))


def forward_array(latitudes: ArrayLike, longitudes: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized counterpart of forward(). Inputs are broadcast against one another.

    Returns:
        (northings, eastings) as float arrays
    """
    lat = np.asarray(latitudes, dtype=float)
    lon = np.asarray(longitudes, dtype=float)
    return _project(lat, lon)


def inverse_array(northings: ArrayLike, eastings: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized counterpart of inverse(). Inputs are broadcast against one another.

    Returns:
        (latitudes, longitudes) as float arrays
    """
    return _unproject(
        np.asarray(northings, dtype=float),
        np.asarray(eastings, dtype=float),
    )


def in_working_area(latitude, longitude) -> bool:
    """
    Whether a position (or every position in a pair of arrays) lies in the region
    the SVY21 grid is meant for. The transforms never call this themselves.
    """
    return in_bounds(latitude, longitude, WORKING_AREA)

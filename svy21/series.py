"""
Ellipsoidal series shared by the forward and inverse SVY21 transforms.

All functions are numpy ufunc compositions, so each accepts a scalar or an array and
returns a value of matching shape.
"""

__all__ = ['meridional_arc', 'radius_meridian', 'radius_prime_vertical']

import numpy as np

from svy21._const import (
    MERIDIAN_A0, MERIDIAN_A2, MERIDIAN_A4, MERIDIAN_A6, WGS84_A, WGS84_E2
)


def meridional_arc(latitude):
    """
    Length of the meridian arc from the equator to a latitude.

    Args:
        latitude:
            The latitude, in decimal degrees

    Returns:
        The arc length, in meters
    """
    lat_r = np.radians(latitude)
    return WGS84_A * (
        (MERIDIAN_A0 * lat_r)
        - (MERIDIAN_A2 * np.sin(2.0 * lat_r))
        + (MERIDIAN_A4 * np.sin(4.0 * lat_r))
        - (MERIDIAN_A6 * np.sin(6.0 * lat_r))
    )


def radius_meridian(sin2_latitude):
    """
    Radius of curvature in the meridian plane (rho).

    Args:
        sin2_latitude:
            The squared sine of the latitude

    Returns:
        The radius, in meters
    """
    num = WGS84_A * (1.0 - WGS84_E2)
    denom = np.power(1.0 - WGS84_E2 * sin2_latitude, 3.0 / 2.0)
    return num / denom


def radius_prime_vertical(sin2_latitude):
    """Radius of curvature in the prime vertical (nu), in meters"""
    return WGS84_A / np.sqrt(1.0 - WGS84_E2 * sin2_latitude)

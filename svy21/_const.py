"""
Constants declarations for svy21
"""

import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1.0 / 298.257223563  # Flattening
WGS84_B = WGS84_A * (1.0 - WGS84_F)
WGS84_E2 = (2.0 * WGS84_F) - (WGS84_F * WGS84_F)  # Eccentricity squared
WGS84_E4 = WGS84_E2 * WGS84_E2
WGS84_E6 = WGS84_E4 * WGS84_E2

# Meridional arc series coefficients
MERIDIAN_A0 = 1.0 - (WGS84_E2 / 4.0) - (3.0 * WGS84_E4 / 64.0) - (5.0 * WGS84_E6 / 256.0)
MERIDIAN_A2 = (3.0 / 8.0) * (WGS84_E2 + (WGS84_E4 / 4.0) + (15.0 * WGS84_E6 / 128.0))
MERIDIAN_A4 = (15.0 / 256.0) * (WGS84_E4 + (3.0 * WGS84_E6 / 4.0))
MERIDIAN_A6 = 35.0 * WGS84_E6 / 3072.0

# SVY21 Projection
# Fundamental point: Base 7 at Pierce Reservoir.
# Latitude: 1 22 02.9154 N, longitude: 103 49 31.9752 E (of Greenwich).
# The published origin (1 22 00 N, 103 50 00 E) puts computed grid values slightly off the
# reference data; the truncated values below reproduce it.
ORIGIN_LATITUDE = 1.366666  # degrees
ORIGIN_LONGITUDE = 103.833333  # degrees
FALSE_NORTHING = 38744.572  # meters
FALSE_EASTING = 28001.642  # meters
SCALE_FACTOR = 1.0

# Third flattening and its powers, for the foot-point latitude series
N1 = (WGS84_A - WGS84_B) / (WGS84_A + WGS84_B)
N2 = N1 * N1
N3 = N2 * N1
N4 = N2 * N2

# Meridian arc length per degree of rectifying latitude
G = WGS84_A * (1.0 - N1) * (1.0 - N2) * (1.0 + (9.0 * N2 / 4.0) + (225.0 * N4 / 64.0)) * (
    math.pi / 180.0
)

# (min_lon, min_lat, max_lon, max_lat) of the region the grid is meant for
WORKING_AREA = (103.55, 1.1, 104.15, 1.5)

import numpy as np
from pyproj import Transformer
from pytest import approx

from svy21.projection import forward, inverse


# Transverse Mercator with the same ellipsoid, origin and false offsets as svy21,
# evaluated by PROJ's own (non-series) algorithm
SVY21_TMERC = (
    '+proj=tmerc +lat_0=1.366666 +lon_0=103.833333 +k=1 '
    '+x_0=28001.642 +y_0=38744.572 +ellps=WGS84 +units=m +no_defs'
)
TO_GRID = Transformer.from_crs('EPSG:4326', SVY21_TMERC, always_xy=True)
FROM_GRID = Transformer.from_crs(SVY21_TMERC, 'EPSG:4326', always_xy=True)


def test_forward_matches_tmerc():
    for lat in np.linspace(1.1, 1.5, 9):
        for lon in np.linspace(103.6, 104.1, 11):
            easting, northing = TO_GRID.transform(lon, lat)
            result = forward(lat, lon)
            assert result.northing == approx(northing, abs=1e-6)
            assert result.easting == approx(easting, abs=1e-6)


def test_inverse_matches_tmerc():
    for northing in np.linspace(15000., 50000., 8):
        for easting in np.linspace(2000., 55000., 11):
            lon, lat = FROM_GRID.transform(easting, northing)
            result = inverse(northing, easting)
            # 1e-8 degrees is ~1mm on the ground
            assert result.latitude == approx(lat, abs=1e-8)
            assert result.longitude == approx(lon, abs=1e-8)

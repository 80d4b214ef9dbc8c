from pytest import approx

import svy21.utils.logging
from svy21 import Coordinate, GridCoordinate, forward, inverse
from tests.functions import assert_grid_coordinates_equal


def test_coordinate_init():
    c = Coordinate(103.8, 1.3)
    assert c.longitude == 103.8
    assert c.latitude == 1.3

    c = Coordinate('103.8', '1.3')
    assert c.longitude == 103.8
    assert c.latitude == 1.3

    # Test longitude adjustment
    assert Coordinate(181., 0) == Coordinate(-179., 0)
    assert Coordinate(361., 0) == Coordinate(1., 0.)
    assert Coordinate(-181, 0) == Coordinate(179, 0)
    assert Coordinate(180, 0) == Coordinate(-180, 0)

    # Test latitude adjustment
    assert Coordinate(1, 91) == Coordinate(-179, 89)
    assert Coordinate(1, -91) == Coordinate(-179, -89)

    # Test unbounded coordinates don't auto-adjust
    assert Coordinate(360, 100, _bounded=False).to_float() == (360, 100)


def test_coordinate_hash():
    coords = [
        Coordinate(103.8, 1.3),
        Coordinate(103.8, 1.3),
        Coordinate(103.9, 1.4)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(103.8, 1.3) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(103.8, 1.3)) == '<Coordinate(103.8, 1.3)>'


def test_coordinate_to_float():
    assert Coordinate(103.8, 1.3).to_float() == (103.8, 1.3)
    assert Coordinate(103.8, 1.3).to_float(reverse=True) == (1.3, 103.8)


def test_coordinate_to_str():
    assert Coordinate(103.8, 1.3).to_str() == ('103.8', '1.3')
    assert Coordinate(103.8, 1.3).to_str(reverse=True) == ('1.3', '103.8')


def test_coordinate_to_svy21():
    result = Coordinate(103.77367436885834, 1.2949192688485278).to_svy21()
    assert isinstance(result, GridCoordinate)
    assert_grid_coordinates_equal(result, (30811.26429645264, 21362.157043860374))


def test_coordinate_from_svy21():
    c = Coordinate.from_svy21(30811.26429645264, 21362.157043860374)
    assert c.latitude == approx(1.2949192688483109, abs=1e-10)
    assert c.longitude == approx(103.77367436887495, abs=1e-10)

    # Not wrapped across the poles or antimeridian
    lat, lon = inverse(12_000_000., 28001.642)
    assert lat > 90
    c = Coordinate.from_svy21(12_000_000., 28001.642)
    assert c.to_float() == (lon, lat)


def test_coordinate_svy21_round_trip():
    c = Coordinate(103.8255487, 1.3674765)
    assert Coordinate.from_svy21(*c.to_svy21()).to_float() == approx(c.to_float(), abs=1e-9)


def test_coordinate_outside_working_area(caplog, monkeypatch):
    monkeypatch.setattr(svy21.utils.logging, '_WARNINGS', set())

    Coordinate(103.8198, 1.3521).to_svy21()
    assert 'working area' not in caplog.text

    # Converted anyway
    assert Coordinate(103.8, 10.).to_svy21() == forward(10., 103.8)
    assert 'working area' in caplog.text

    Coordinate.from_svy21(1000000., 28001.642)
    assert caplog.text.count('working area') == 1

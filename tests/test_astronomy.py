import pytest

from ezan.astronomy import (
    Angle,
    Coordinates,
    interpolate,
    interpolate_angles,
    julian_century,
    julian_day,
    qibla,
    quadrant_shift_angle,
    solar_coordinates,
    unwind_angle,
)


@pytest.mark.parametrize(
    "latitude, longitude",
    [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -200.0)],
)
def test_coordinates_out_of_range(latitude, longitude):
    with pytest.raises(ValueError):
        Coordinates(latitude, longitude)


def test_coordinates_edges_are_valid():
    assert Coordinates(90.0, -180.0).latitude == 90.0
    assert Coordinates(-90.0, 180.0).longitude == 180.0


@pytest.mark.parametrize(
    "degrees, expected",
    [(-45.0, 315.0), (361.0, 1.0), (360.0, 0.0), (259.0, 259.0), (2340.0, 180.0)],
)
def test_unwind_angle(degrees, expected):
    assert unwind_angle(degrees) == pytest.approx(expected)


@pytest.mark.parametrize(
    "degrees, expected",
    [(360.0, 0.0), (361.0, 1.0), (1.0, 1.0), (-1.0, -1.0), (-181.0, 179.0), (180.0, 180.0), (359.0, -1.0)],
)
def test_quadrant_shift_angle(degrees, expected):
    assert quadrant_shift_angle(degrees) == pytest.approx(expected)


def test_angle_trigonometry():
    assert Angle(30.0).sin() == pytest.approx(0.5)
    assert Angle(60.0).cos() == pytest.approx(0.5)
    assert Angle(45.0).tan() == pytest.approx(1.0)
    assert Angle.from_radians(Angle(123.0).radians).degrees == pytest.approx(123.0)
    assert Angle(-30.0).unwound().degrees == pytest.approx(330.0)


def test_julian_day():
    assert julian_day(2000, 1, 1, 12) == 2451545.0
    assert julian_day(1992, 10, 13) == 2448908.5
    assert julian_day(2010, 1, 2) == 2455198.5
    assert julian_century(2451545.0) == 0.0


def test_interpolate():
    assert interpolate(2.0, 1.0, 3.0, 0.5) == pytest.approx(2.5)
    assert interpolate(0.877366, 0.884226, 0.870531, 4.35 / 24) == pytest.approx(0.876125, abs=1e-6)


def test_interpolate_angles_across_wrap():
    assert interpolate_angles(1.0, 359.0, 3.0, 0.5) == pytest.approx(2.0)


def test_solar_coordinates():
    # 1992 October 13.0
    solar = solar_coordinates(2448908.5)

    assert solar.declination == pytest.approx(-7.78507, abs=1e-3)
    assert solar.right_ascension == pytest.approx(198.38083, abs=1e-3)


def test_solar_coordinates_right_ascension_is_unwound():
    for jd in (2451545.0, 2455198.5, 2457215.5):
        assert 0.0 <= solar_coordinates(jd).right_ascension < 360.0


@pytest.mark.parametrize(
    "latitude, longitude, bearing",
    [
        (40.7128, -74.0059, 58.4817),  # New York
        (51.5074, -0.1278, 118.9872),  # London
        (-33.8688, 151.2093, 277.4996),  # Sydney
    ],
)
def test_qibla(latitude, longitude, bearing):
    assert qibla(Coordinates(latitude, longitude)) == pytest.approx(bearing, abs=0.01)

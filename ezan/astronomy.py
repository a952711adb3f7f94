"""
Low-precision solar ephemeris (Meeus, "Astronomical Algorithms") used for prayer times.
Angles are degrees unless the name says otherwise.
"""

import math
from dataclasses import dataclass

JULIAN_EPOCH_J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Kaaba, Makkah
MAKKAH_LATITUDE = 21.4225241
MAKKAH_LONGITUDE = 39.8261818


def _deg2rad(d: float) -> float:
    return d * math.pi / 180.0


def _rad2deg(r: float) -> float:
    return r * 180.0 / math.pi


def normalize_to_scale(value: float, scale: float) -> float:
    """Normalize value to [0, scale)."""
    return value - scale * math.floor(value / scale)


def unwind_angle(degrees: float) -> float:
    """Normalize angle to [0, 360)."""
    return normalize_to_scale(degrees, 360.0)


def quadrant_shift_angle(degrees: float) -> float:
    """Shift angle into [-180, 180]."""
    if -180.0 <= degrees <= 180.0:
        return degrees
    return degrees - 360.0 * round(degrees / 360.0)


@dataclass(frozen=True)
class Angle:
    """A plain degree value with the trigonometry the ephemeris needs."""

    degrees: float

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(_rad2deg(radians))

    @property
    def radians(self) -> float:
        return _deg2rad(self.degrees)

    def unwound(self) -> "Angle":
        return Angle(unwind_angle(self.degrees))

    def quadrant_shifted(self) -> "Angle":
        return Angle(quadrant_shift_angle(self.degrees))

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        return math.tan(self.radians)


@dataclass(frozen=True)
class Coordinates:
    """Observer position in decimal degrees (north and east positive)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be within [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude must be within [-180, 180], got {self.longitude}")


@dataclass(frozen=True)
class SolarCoordinates:
    """Equatorial position of the sun and sidereal time at one Julian day."""

    declination: float
    right_ascension: float
    apparent_sidereal_time: float


def julian_day(year: int, month: int, day: int, hour_utc: float = 0.0) -> float:
    """Julian date at given UTC time (default midnight UTC)."""
    if month <= 2:
        year -= 1
        month += 12
    A = math.floor(year / 100)
    B = 2 - A + math.floor(A / 4)
    jd = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + B - 1524.5
    jd += hour_utc / 24.0
    return jd


def julian_century(jd: float) -> float:
    return (jd - JULIAN_EPOCH_J2000) / DAYS_PER_CENTURY


def mean_solar_longitude(T: float) -> float:
    """Geometric mean longitude of the sun."""
    return unwind_angle(280.4664567 + 36000.76983 * T + 0.0003032 * T**2)


def mean_lunar_longitude(T: float) -> float:
    """Geometric mean longitude of the moon."""
    return unwind_angle(218.3165 + 481267.8813 * T)


def ascending_lunar_node_longitude(T: float) -> float:
    return unwind_angle(125.04452 - 1934.136261 * T + 0.0020708 * T**2 + T**3 / 450000.0)


def mean_solar_anomaly(T: float) -> float:
    return unwind_angle(357.52911 + 35999.05029 * T - 0.0001537 * T**2)


def solar_equation_of_the_center(T: float, mean_anomaly: float) -> float:
    M = _deg2rad(mean_anomaly)
    term1 = (1.914602 - 0.004817 * T - 0.000014 * T**2) * math.sin(M)
    term2 = (0.019993 - 0.000101 * T) * math.sin(2 * M)
    term3 = 0.000289 * math.sin(3 * M)
    return term1 + term2 + term3


def apparent_solar_longitude(T: float, mean_longitude: float) -> float:
    """Apparent longitude of the sun, referred to the true equinox of the date."""
    longitude = mean_longitude + solar_equation_of_the_center(T, mean_solar_anomaly(T))
    omega = 125.04 - 1934.136 * T
    return unwind_angle(longitude - 0.00569 - 0.00478 * math.sin(_deg2rad(omega)))


def mean_obliquity_of_the_ecliptic(T: float) -> float:
    return 23.439291 - 0.013004167 * T - 0.0000001639 * T**2 + 0.0000005036 * T**3


def apparent_obliquity_of_the_ecliptic(T: float, mean_obliquity: float) -> float:
    omega = 125.04 - 1934.136 * T
    return mean_obliquity + 0.00256 * math.cos(_deg2rad(omega))


def mean_sidereal_time(T: float) -> float:
    """Mean sidereal time at Greenwich."""
    jd = T * DAYS_PER_CENTURY + JULIAN_EPOCH_J2000
    theta = (
        280.46061837
        + 360.98564736629 * (jd - JULIAN_EPOCH_J2000)
        + 0.000387933 * T**2
        - T**3 / 38710000.0
    )
    return unwind_angle(theta)


def nutation_in_longitude(solar_longitude: float, lunar_longitude: float, ascending_node: float) -> float:
    term1 = (-17.2 / 3600) * math.sin(_deg2rad(ascending_node))
    term2 = (1.32 / 3600) * math.sin(2 * _deg2rad(solar_longitude))
    term3 = (0.23 / 3600) * math.sin(2 * _deg2rad(lunar_longitude))
    term4 = (0.21 / 3600) * math.sin(2 * _deg2rad(ascending_node))
    return term1 - term2 - term3 + term4


def nutation_in_obliquity(solar_longitude: float, lunar_longitude: float, ascending_node: float) -> float:
    term1 = (9.2 / 3600) * math.cos(_deg2rad(ascending_node))
    term2 = (0.57 / 3600) * math.cos(2 * _deg2rad(solar_longitude))
    term3 = (0.10 / 3600) * math.cos(2 * _deg2rad(lunar_longitude))
    term4 = (0.09 / 3600) * math.cos(2 * _deg2rad(ascending_node))
    return term1 + term2 + term3 - term4


def solar_coordinates(jd: float) -> SolarCoordinates:
    """Declination, right ascension and apparent sidereal time for a Julian day."""
    T = julian_century(jd)
    L0 = mean_solar_longitude(T)
    Lp = mean_lunar_longitude(T)
    omega = ascending_lunar_node_longitude(T)
    lam = Angle(apparent_solar_longitude(T, L0))
    theta0 = mean_sidereal_time(T)
    d_psi = nutation_in_longitude(L0, Lp, omega)
    d_epsilon = nutation_in_obliquity(L0, Lp, omega)
    epsilon0 = mean_obliquity_of_the_ecliptic(T)
    epsilon = Angle(apparent_obliquity_of_the_ecliptic(T, epsilon0))

    declination = _rad2deg(math.asin(epsilon.sin() * lam.sin()))
    # Right ascension (same quadrant as lambda)
    right_ascension = unwind_angle(_rad2deg(math.atan2(epsilon.cos() * lam.sin(), lam.cos())))
    apparent_sidereal_time = theta0 + d_psi * math.cos(_deg2rad(epsilon0 + d_epsilon))

    return SolarCoordinates(
        declination=declination,
        right_ascension=right_ascension,
        apparent_sidereal_time=apparent_sidereal_time,
    )


def altitude_of_celestial_body(latitude: float, declination: float, hour_angle: float) -> float:
    phi = Angle(latitude)
    delta = Angle(declination)
    H = Angle(hour_angle)
    return _rad2deg(math.asin(phi.sin() * delta.sin() + phi.cos() * delta.cos() * H.cos()))


def interpolate(y2: float, y1: float, y3: float, n: float) -> float:
    """Interpolate y2 at fraction n of a day, given the values the day before (y1) and after (y3)."""
    a = y2 - y1
    b = y3 - y2
    c = b - a
    return y2 + (n / 2) * (a + b + n * c)


def interpolate_angles(y2: float, y1: float, y3: float, n: float) -> float:
    """Like interpolate, but across the 360 degree wrap."""
    a = unwind_angle(y2 - y1)
    b = unwind_angle(y3 - y2)
    c = b - a
    return y2 + (n / 2) * (a + b + n * c)


def approximate_transit(longitude: float, sidereal_time: float, right_ascension: float) -> float:
    """Fraction of the day (from 0h UTC) at which the sun transits."""
    Lw = -longitude
    return normalize_to_scale((right_ascension + Lw - sidereal_time) / 360.0, 1.0)


def corrected_transit(
    m0: float,
    longitude: float,
    solar: SolarCoordinates,
    prev_solar: SolarCoordinates,
    next_solar: SolarCoordinates,
) -> float:
    """Transit in hours from 0h UTC."""
    Lw = -longitude
    theta = unwind_angle(solar.apparent_sidereal_time + 360.985647 * m0)
    a = unwind_angle(
        interpolate_angles(solar.right_ascension, prev_solar.right_ascension, next_solar.right_ascension, m0)
    )
    H = quadrant_shift_angle(theta - Lw - a)
    dm = H / -360.0
    return (m0 + dm) * 24.0


def corrected_hour_angle(
    m0: float,
    altitude: float,
    latitude: float,
    longitude: float,
    after_transit: bool,
    solar: SolarCoordinates,
    prev_solar: SolarCoordinates,
    next_solar: SolarCoordinates,
) -> float | None:
    """
    Hours from 0h UTC at which the sun passes the given altitude (negative = below horizon).
    Returns None if the sun never reaches that altitude (polar day/night).
    """
    h0 = Angle(altitude)
    phi = Angle(latitude)
    d2 = Angle(solar.declination)
    Lw = -longitude

    cos_h0 = (h0.sin() - phi.sin() * d2.sin()) / (phi.cos() * d2.cos())
    if cos_h0 < -1 or cos_h0 > 1:
        return None
    H0 = _rad2deg(math.acos(cos_h0))

    m = m0 + H0 / 360.0 if after_transit else m0 - H0 / 360.0
    theta = unwind_angle(solar.apparent_sidereal_time + 360.985647 * m)
    a = unwind_angle(
        interpolate_angles(solar.right_ascension, prev_solar.right_ascension, next_solar.right_ascension, m)
    )
    delta = interpolate(solar.declination, prev_solar.declination, next_solar.declination, m)
    H = theta - Lw - a
    h = altitude_of_celestial_body(latitude, delta, H)
    dm = (h - altitude) / (360.0 * Angle(delta).cos() * phi.cos() * Angle(H).sin())
    return (m + dm) * 24.0


def qibla(coordinates: Coordinates) -> float:
    """Bearing from true north (clockwise, degrees) toward the Kaaba."""
    delta_lng = Angle(MAKKAH_LONGITUDE - coordinates.longitude)
    phi = Angle(coordinates.latitude)
    term1 = delta_lng.sin()
    term2 = phi.cos() * Angle(MAKKAH_LATITUDE).tan()
    term3 = phi.sin() * delta_lng.cos()
    return Angle.from_radians(math.atan2(term1, term2 - term3)).unwound().degrees

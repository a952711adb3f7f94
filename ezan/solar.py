"""
Solar transit, sunrise, sunset and depression-angle crossings for one UTC day.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from ezan.astronomy import (
    Angle,
    Coordinates,
    SolarCoordinates,
    approximate_transit,
    corrected_hour_angle,
    corrected_transit,
    julian_day,
    solar_coordinates,
)

# Sunrise/sunset: 50 arcminutes below the horizon (refraction + solar semidiameter)
SUNRISE_SUNSET_ANGLE = 50.0 / 60.0


class NoSuchCrossingError(Exception):
    """The sun never reaches the requested altitude on that day."""


def utc_midnight(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


@dataclass(frozen=True)
class SolarPosition:
    """Sun geometry for one date and observer. All instants are aware UTC datetimes."""

    day: date
    coordinates: Coordinates
    solar: SolarCoordinates
    prev_solar: SolarCoordinates
    next_solar: SolarCoordinates
    approximate_transit: float
    transit: datetime
    sunrise: datetime
    sunset: datetime

    @property
    def declination(self) -> float:
        return self.solar.declination

    def _instant(self, hours: float) -> datetime:
        return utc_midnight(self.day) + timedelta(hours=hours)

    def instant_for_altitude(self, altitude: float, after_transit: bool) -> datetime | None:
        hours = corrected_hour_angle(
            self.approximate_transit,
            altitude,
            self.coordinates.latitude,
            self.coordinates.longitude,
            after_transit,
            self.solar,
            self.prev_solar,
            self.next_solar,
        )
        if hours is None:
            return None
        return self._instant(hours)

    def instant_for_depression(self, depression: float, before_transit: bool) -> datetime | None:
        """
        Instant the sun is `depression` degrees below the horizon, before or after transit.
        Returns None if the sun never gets that low (or never rises that high) on this day.
        """
        return self.instant_for_altitude(-depression, after_transit=not before_transit)

    def afternoon(self, shadow_factor: float) -> datetime | None:
        """Instant an object's shadow is shadow_factor times its length plus its noon shadow."""
        tangent = abs(self.coordinates.latitude - self.declination)
        inverse = shadow_factor + Angle(tangent).tan()
        angle = Angle.from_radians(math.atan(1.0 / inverse))
        return self.instant_for_altitude(angle.degrees, after_transit=True)


def solar_position(day: date, coordinates: Coordinates) -> SolarPosition:
    """
    Compute transit, sunrise and sunset for `day` (taken as 0h UTC) at `coordinates`.

    Raises:
        NoSuchCrossingError: when the sun does not rise or set that day (polar day/night).
    """
    jd = julian_day(day.year, day.month, day.day)
    solar = solar_coordinates(jd)
    prev_solar = solar_coordinates(jd - 1)
    next_solar = solar_coordinates(jd + 1)

    m0 = approximate_transit(coordinates.longitude, solar.apparent_sidereal_time, solar.right_ascension)
    transit_hours = corrected_transit(m0, coordinates.longitude, solar, prev_solar, next_solar)

    def hour_angle(after_transit: bool) -> float | None:
        return corrected_hour_angle(
            m0,
            -SUNRISE_SUNSET_ANGLE,
            coordinates.latitude,
            coordinates.longitude,
            after_transit,
            solar,
            prev_solar,
            next_solar,
        )

    sunrise_hours = hour_angle(False)
    sunset_hours = hour_angle(True)
    if sunrise_hours is None or sunset_hours is None:
        raise NoSuchCrossingError(
            f"sun does not rise or set at ({coordinates.latitude}, {coordinates.longitude}) on {day.isoformat()}"
        )

    midnight = utc_midnight(day)
    return SolarPosition(
        day=day,
        coordinates=coordinates,
        solar=solar,
        prev_solar=prev_solar,
        next_solar=next_solar,
        approximate_transit=m0,
        transit=midnight + timedelta(hours=transit_hours),
        sunrise=midnight + timedelta(hours=sunrise_hours),
        sunset=midnight + timedelta(hours=sunset_hours),
    )

"""
Seasonal twilight bounds of the Moonsighting Committee (Khalid Shaukat).

The committee fitted the length of morning and evening twilight, in minutes, as a
piecewise-linear function of latitude and the number of days since the winter
solstice. The fitted length is measured from sunrise (backwards) or sunset.
"""

import calendar
import math
from datetime import datetime, timedelta

from ezan.models import Twilight

NORTHERN_OFFSET = 10


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def days_since_solstice(day_of_year: int, year: int, latitude: float) -> int:
    """Days since the local winter solstice (December in the north, June in the south)."""
    days_in_year = 366 if calendar.isleap(year) else 365
    if latitude >= 0:
        days = day_of_year + NORTHERN_OFFSET
        if days >= days_in_year:
            days -= days_in_year
        return days
    southern_offset = 173 if calendar.isleap(year) else 172
    days = day_of_year - southern_offset
    if days < 0:
        days += days_in_year
    return days


def _seasonal_minutes(a: float, b: float, c: float, d: float, dyy: int) -> float:
    if dyy < 91:
        return a + (b - a) / 91.0 * dyy
    if dyy < 137:
        return b + (c - b) / 46.0 * (dyy - 91)
    if dyy < 183:
        return c + (d - c) / 46.0 * (dyy - 137)
    if dyy < 229:
        return d + (c - d) / 46.0 * (dyy - 183)
    if dyy < 275:
        return c + (b - c) / 46.0 * (dyy - 229)
    return b + (a - b) / 91.0 * (dyy - 275)


def morning_twilight_minutes(latitude: float, day_of_year: int, year: int) -> float:
    lat = abs(latitude)
    a = 75 + 28.65 / 55.0 * lat
    b = 75 + 19.44 / 55.0 * lat
    c = 75 + 32.74 / 55.0 * lat
    d = 75 + 48.10 / 55.0 * lat
    return _seasonal_minutes(a, b, c, d, days_since_solstice(day_of_year, year, latitude))


def evening_twilight_minutes(latitude: float, day_of_year: int, year: int, twilight: Twilight) -> float:
    lat = abs(latitude)
    if twilight is Twilight.RED:
        a = 62 + 17.40 / 55.0 * lat
        b = 62 - 7.16 / 55.0 * lat
        c = 62 + 5.12 / 55.0 * lat
        d = 62 + 19.44 / 55.0 * lat
    elif twilight is Twilight.WHITE:
        a = 75 + 25.60 / 55.0 * lat
        b = 75 + 7.16 / 55.0 * lat
        c = 75 + 36.84 / 55.0 * lat
        d = 75 + 81.84 / 55.0 * lat
    else:
        a = 75 + 25.60 / 55.0 * lat
        b = 75 + 2.05 / 55.0 * lat
        c = 75 - 9.21 / 55.0 * lat
        d = 75 + 6.14 / 55.0 * lat
    return _seasonal_minutes(a, b, c, d, days_since_solstice(day_of_year, year, latitude))


def season_adjusted_morning_twilight(latitude: float, day_of_year: int, year: int, sunrise: datetime) -> datetime:
    """Earliest acceptable Fajr: sunrise minus the fitted morning twilight."""
    minutes = morning_twilight_minutes(latitude, day_of_year, year)
    return sunrise + timedelta(seconds=_round_half_away(minutes * -60.0))


def season_adjusted_evening_twilight(
    latitude: float,
    day_of_year: int,
    year: int,
    sunset: datetime,
    twilight: Twilight,
) -> datetime:
    """Latest acceptable Ishaa: sunset plus the fitted evening twilight."""
    minutes = evening_twilight_minutes(latitude, day_of_year, year, twilight)
    return sunset + timedelta(seconds=_round_half_away(minutes * 60.0))

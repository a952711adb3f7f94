"""
Daily prayer schedule: Fajr, Sunrise, Dhuhr, Asr, Maghrib, Ishaa, Qiyam and the next day's Fajr.

Fajr is never earlier than its safety bound, Ishaa never later than its
safety bound. The bound is the Moonsighting Committee seasonal twilight when
that method is selected, otherwise a portion of the night chosen by the
high latitude rule.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone
from typing import Callable

from ezan.astronomy import Coordinates
from ezan.models import DuskAngle, DuskInterval, Parameters, Prayer, Rounding, rounded_minute
from ezan.solar import NoSuchCrossingError, SolarPosition, solar_position
from ezan.twilight import season_adjusted_evening_twilight, season_adjusted_morning_twilight

logger = logging.getLogger(__name__)

# Above this latitude the Moonsighting Committee takes a seventh of the night for Fajr and Ishaa
MOONSIGHTING_SEVENTH_LATITUDE = 55.0

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ConfigurationError(Exception):
    """Schedule requested without date, location or parameters."""


# Latest first: the first one already started is the current prayer
_LOOKUP_ORDER = (
    Prayer.FAJR_TOMORROW,
    Prayer.QIYAM,
    Prayer.ISHAA,
    Prayer.MAGHRIB,
    Prayer.ASR,
    Prayer.DHUHR,
    Prayer.SUNRISE,
    Prayer.FAJR,
)


def _as_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


@dataclass(frozen=True)
class PrayerSchedule:
    """Final, rounded prayer instants (aware UTC) for one date and place."""

    fajr: datetime
    sunrise: datetime
    dhuhr: datetime
    asr: datetime
    maghrib: datetime
    ishaa: datetime
    middle_of_the_night: datetime
    qiyam: datetime
    fajr_tomorrow: datetime
    coordinates: Coordinates
    date: date
    parameters: Parameters

    def time(self, prayer: Prayer) -> datetime:
        return getattr(self, prayer.value)

    def current(self, at: datetime) -> Prayer | None:
        """Latest prayer that has started at `at`, or None before today's Fajr."""
        at = _as_utc(at)
        for prayer in _LOOKUP_ORDER:
            if self.time(prayer) <= at:
                return prayer
        return None

    def next(self, at: datetime) -> Prayer:
        current = self.current(at)
        if current is None:
            return Prayer.FAJR
        return current.successor

    def time_remaining(self, at: datetime) -> timedelta:
        """Time from `at` until the next prayer starts (negative once past Fajr tomorrow)."""
        return self.time(self.next(at)) - _as_utc(at)

    def as_dict(self) -> dict[str, datetime]:
        return {prayer.value: self.time(prayer) for prayer in Prayer}


def current_prayer(schedule: PrayerSchedule, clock: Clock = utc_now) -> Prayer | None:
    return schedule.current(clock())


def next_prayer(schedule: PrayerSchedule, clock: Clock = utc_now) -> Prayer:
    return schedule.next(clock())


def time_remaining(schedule: PrayerSchedule, clock: Clock = utc_now) -> timedelta:
    return schedule.time_remaining(clock())


def raw_fajr(parameters: Parameters, solar: SolarPosition, night: timedelta) -> datetime | None:
    """Fajr from the dawn angle alone (or the 1/7 rule for the committee at high latitude)."""
    if parameters.is_moonsighting_committee and abs(solar.coordinates.latitude) >= MOONSIGHTING_SEVENTH_LATITUDE:
        return solar.sunrise - night / 7
    return solar.instant_for_depression(parameters.fajr_angle, before_transit=True)


def safe_fajr(parameters: Parameters, solar: SolarPosition, night: timedelta) -> datetime:
    """Earliest Fajr allowed by the high latitude policy."""
    if parameters.is_moonsighting_committee:
        day = solar.day
        return season_adjusted_morning_twilight(
            solar.coordinates.latitude, day.timetuple().tm_yday, day.year, solar.sunrise
        )
    morning, _ = parameters.night_portions()
    return solar.sunrise - night * morning


def raw_ishaa(parameters: Parameters, solar: SolarPosition, night: timedelta) -> datetime | None:
    """Ishaa from the dusk angle or interval alone (or the 1/7 rule for the committee at high latitude)."""
    dusk = parameters.dusk
    if isinstance(dusk, DuskInterval):
        return solar.sunset + timedelta(minutes=dusk.minutes)
    if parameters.is_moonsighting_committee and abs(solar.coordinates.latitude) >= MOONSIGHTING_SEVENTH_LATITUDE:
        return solar.sunset + night / 7
    return solar.instant_for_depression(dusk.degrees, before_transit=False)


def safe_ishaa(parameters: Parameters, solar: SolarPosition, night: timedelta) -> datetime:
    """Latest Ishaa allowed by the high latitude policy."""
    if parameters.is_moonsighting_committee:
        day = solar.day
        return season_adjusted_evening_twilight(
            solar.coordinates.latitude, day.timetuple().tm_yday, day.year, solar.sunset, parameters.twilight
        )
    _, evening = parameters.night_portions()
    return solar.sunset + night * evening


def _fajr(parameters: Parameters, solar: SolarPosition, night: timedelta) -> datetime:
    fajr = raw_fajr(parameters, solar, night)
    bound = safe_fajr(parameters, solar, night)
    if fajr is None:
        logger.debug(f"sun does not reach {parameters.fajr_angle} degrees on {solar.day}, using safety bound")
        return bound
    if fajr < bound:
        logger.debug(f"Fajr {fajr.isoformat()} before safety bound {bound.isoformat()}")
        return bound
    return fajr


def _ishaa(parameters: Parameters, solar: SolarPosition, night: timedelta) -> datetime:
    ishaa = raw_ishaa(parameters, solar, night)
    if isinstance(parameters.dusk, DuskInterval):
        return ishaa
    bound = safe_ishaa(parameters, solar, night)
    if ishaa is None:
        logger.debug(f"sun does not reach {parameters.dusk.degrees} degrees on {solar.day}, using safety bound")
        return bound
    if ishaa > bound:
        logger.debug(f"Ishaa {ishaa.isoformat()} after safety bound {bound.isoformat()}")
        return bound
    return ishaa


def _maghrib(parameters: Parameters, solar: SolarPosition, ishaa: datetime) -> datetime:
    if not parameters.maghrib_angle:
        return solar.sunset
    by_angle = solar.instant_for_depression(parameters.maghrib_angle, before_transit=False)
    if by_angle is not None and solar.sunset < by_angle < ishaa:
        return by_angle
    return solar.sunset


def _finalize(instant: datetime, prayer: Prayer, parameters: Parameters) -> datetime:
    adjusted = instant + timedelta(minutes=parameters.time_adjustment(prayer))
    return rounded_minute(adjusted, parameters.rounding)


def _night(day: date, coordinates: Coordinates) -> tuple[SolarPosition, SolarPosition, timedelta]:
    today = solar_position(day, coordinates)
    tomorrow = solar_position(day + timedelta(days=1), coordinates)
    return today, tomorrow, tomorrow.sunrise - today.sunset


def compute_schedule(day: date, coordinates: Coordinates, parameters: Parameters) -> PrayerSchedule:
    """
    Compute the prayer schedule for `day` (a civil date, taken as 0h UTC).

    Raises:
        TypeError: if `day` is not a date.
        NoSuchCrossingError: if the sun does not rise, set or reach the Asr altitude.
    """
    if isinstance(day, datetime):
        day = day.date()
    if not isinstance(day, date):
        raise TypeError(f"day must be a datetime.date, got {type(day).__name__}")

    solar, solar_tomorrow, night = _night(day, coordinates)

    asr = solar.afternoon(parameters.madhab.shadow)
    if asr is None:
        raise NoSuchCrossingError(f"no Asr shadow crossing on {day.isoformat()}")

    ishaa = _ishaa(parameters, solar, night)
    maghrib = _maghrib(parameters, solar, ishaa)

    final_maghrib = _finalize(maghrib, Prayer.MAGHRIB, parameters)

    # Tomorrow's Fajr needs tomorrow's night, which ends at the sunrise after it
    _, _, night_tomorrow = _night(solar_tomorrow.day, coordinates)
    fajr_tomorrow = _finalize(_fajr(parameters, solar_tomorrow, night_tomorrow), Prayer.FAJR_TOMORROW, parameters)

    night_duration = fajr_tomorrow - final_maghrib
    middle_of_the_night = rounded_minute(final_maghrib + night_duration / 2, Rounding.NEAREST)
    qiyam = rounded_minute(final_maghrib + night_duration * 2 / 3, Rounding.NEAREST)

    return PrayerSchedule(
        fajr=_finalize(_fajr(parameters, solar, night), Prayer.FAJR, parameters),
        sunrise=_finalize(solar.sunrise, Prayer.SUNRISE, parameters),
        dhuhr=_finalize(solar.transit, Prayer.DHUHR, parameters),
        asr=_finalize(asr, Prayer.ASR, parameters),
        maghrib=final_maghrib,
        ishaa=_finalize(ishaa, Prayer.ISHAA, parameters),
        middle_of_the_night=middle_of_the_night,
        qiyam=qiyam,
        fajr_tomorrow=fajr_tomorrow,
        coordinates=coordinates,
        date=day,
        parameters=parameters,
    )


@dataclass(frozen=True)
class ScheduleBuilder:
    """Collects the inputs of a schedule; every step returns a new builder."""

    # quoted: the field shadows datetime.date in the class body
    date: "date | None" = None
    coordinates: Coordinates | None = None
    parameters: Parameters | None = None

    def on(self, day: "date") -> "ScheduleBuilder":
        return replace(self, date=day)

    def for_location(self, coordinates: Coordinates) -> "ScheduleBuilder":
        return replace(self, coordinates=coordinates)

    def with_configuration(self, parameters: Parameters) -> "ScheduleBuilder":
        return replace(self, parameters=parameters)

    def calculate(self) -> PrayerSchedule:
        missing = [
            name
            for name, value in (
                ("date", self.date),
                ("coordinates", self.coordinates),
                ("parameters", self.parameters),
            )
            if value is None
        ]
        if missing:
            raise ConfigurationError(
                f"date, coordinates and parameters are required to calculate prayer times; missing: {', '.join(missing)}"
            )
        return compute_schedule(self.date, self.coordinates, self.parameters)

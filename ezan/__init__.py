"""ezan: Islamic prayer times from solar position, after the Adhan algorithm."""

from ezan.astronomy import Angle, Coordinates, qibla
from ezan.methods import method_from_name, parameters_for
from ezan.models import (
    DuskAngle,
    DuskInterval,
    HighLatitudeRule,
    Madhab,
    Method,
    Parameters,
    Prayer,
    Rounding,
    TimeAdjustment,
    Twilight,
    rounded_minute,
)
from ezan.schedule import (
    ConfigurationError,
    PrayerSchedule,
    ScheduleBuilder,
    compute_schedule,
    current_prayer,
    next_prayer,
    time_remaining,
)
from ezan.solar import NoSuchCrossingError, SolarPosition, solar_position

__all__ = [
    "Angle",
    "ConfigurationError",
    "Coordinates",
    "DuskAngle",
    "DuskInterval",
    "HighLatitudeRule",
    "Madhab",
    "Method",
    "NoSuchCrossingError",
    "Parameters",
    "Prayer",
    "PrayerSchedule",
    "Rounding",
    "ScheduleBuilder",
    "SolarPosition",
    "TimeAdjustment",
    "Twilight",
    "compute_schedule",
    "current_prayer",
    "method_from_name",
    "next_prayer",
    "parameters_for",
    "qibla",
    "rounded_minute",
    "solar_position",
    "time_remaining",
]

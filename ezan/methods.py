"""
Calculation-authority presets.

Each method maps to an immutable Parameters record. The Turkey preset is the
Diyanet setup: Fajr 18, Ishaa 17, and the Diyanet safety minutes on sunrise,
Dhuhr, Asr and Maghrib.
"""

import re

from ezan.models import (
    DuskAngle,
    DuskInterval,
    Madhab,
    Method,
    Parameters,
    Rounding,
    TimeAdjustment,
)

PRESETS: dict[Method, Parameters] = {
    Method.MUSLIM_WORLD_LEAGUE: Parameters(
        fajr_angle=18.0,
        dusk=DuskAngle(17.0),
        method_adjustments=TimeAdjustment(dhuhr=1),
        method=Method.MUSLIM_WORLD_LEAGUE,
    ),
    Method.EGYPTIAN: Parameters(
        fajr_angle=19.5,
        dusk=DuskAngle(17.5),
        method_adjustments=TimeAdjustment(dhuhr=1),
        method=Method.EGYPTIAN,
    ),
    Method.KARACHI: Parameters(
        fajr_angle=18.0,
        dusk=DuskAngle(18.0),
        method_adjustments=TimeAdjustment(dhuhr=1),
        method=Method.KARACHI,
    ),
    # Add +30 minutes to Ishaa by hand during Ramadan
    Method.UMM_AL_QURA: Parameters(
        fajr_angle=18.5,
        dusk=DuskInterval(90),
        method=Method.UMM_AL_QURA,
    ),
    Method.DUBAI: Parameters(
        fajr_angle=18.2,
        dusk=DuskAngle(18.2),
        method_adjustments=TimeAdjustment(sunrise=-3, dhuhr=3, asr=3, maghrib=3),
        method=Method.DUBAI,
    ),
    Method.MOONSIGHTING_COMMITTEE: Parameters(
        fajr_angle=18.0,
        dusk=DuskAngle(18.0),
        method_adjustments=TimeAdjustment(dhuhr=5, maghrib=3),
        is_moonsighting_committee=True,
        method=Method.MOONSIGHTING_COMMITTEE,
    ),
    Method.NORTH_AMERICA: Parameters(
        fajr_angle=15.0,
        dusk=DuskAngle(15.0),
        method_adjustments=TimeAdjustment(dhuhr=1),
        method=Method.NORTH_AMERICA,
    ),
    Method.KUWAIT: Parameters(
        fajr_angle=18.0,
        dusk=DuskAngle(17.5),
        method=Method.KUWAIT,
    ),
    Method.QATAR: Parameters(
        fajr_angle=18.0,
        dusk=DuskInterval(90),
        method=Method.QATAR,
    ),
    Method.SINGAPORE: Parameters(
        fajr_angle=20.0,
        dusk=DuskAngle(18.0),
        method_adjustments=TimeAdjustment(sunrise=1, dhuhr=1, maghrib=1, ishaa=1),
        rounding=Rounding.UP,
        method=Method.SINGAPORE,
    ),
    Method.TEHRAN: Parameters(
        fajr_angle=17.7,
        dusk=DuskAngle(14.0),
        maghrib_angle=4.5,
        method=Method.TEHRAN,
    ),
    Method.TURKEY: Parameters(
        fajr_angle=18.0,
        dusk=DuskAngle(17.0),
        method_adjustments=TimeAdjustment(sunrise=-7, dhuhr=5, asr=4, maghrib=7),
        method=Method.TURKEY,
    ),
    Method.OTHER: Parameters(
        fajr_angle=0.0,
        dusk=DuskAngle(0.0),
        method=Method.OTHER,
    ),
}

_ALIASES = {
    "mwl": Method.MUSLIM_WORLD_LEAGUE,
    "isna": Method.NORTH_AMERICA,
    "makkah": Method.UMM_AL_QURA,
    "mecca": Method.UMM_AL_QURA,
    "egypt": Method.EGYPTIAN,
    "diyanet": Method.TURKEY,
    "moonsighting": Method.MOONSIGHTING_COMMITTEE,
}


def _key(name: str) -> str:
    return re.sub(r"[^a-z]", "", name.lower())


def parameters_for(method: Method, madhab: Madhab = Madhab.SHAFI) -> Parameters:
    """Preset parameters for `method`, with the given madhab for Asr."""
    return PRESETS[method].with_madhab(madhab)


def method_from_name(name: str) -> Method:
    """
    Resolve a method from user input: "NorthAmerica", "north_america", "ISNA" ...
    Raises ValueError for unknown names.
    """
    key = _key(name)
    for method in Method:
        if key == _key(method.value) or key == _key(method.name):
            return method
    if key in _ALIASES:
        return _ALIASES[key]
    raise ValueError(f"unknown calculation method: {name!r}")

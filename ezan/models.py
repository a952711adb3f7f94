"""Value types shared by the calculators: prayers, settings and the rounding policy."""

from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from enum import Enum
from typing import TypeAlias


class Prayer(Enum):
    """The eight schedule positions, in canonical daily order."""

    FAJR = "fajr"
    SUNRISE = "sunrise"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHAA = "ishaa"
    QIYAM = "qiyam"
    FAJR_TOMORROW = "fajr_tomorrow"

    @property
    def successor(self) -> "Prayer":
        """Next position in the day; FAJR_TOMORROW is terminal."""
        order = list(Prayer)
        index = order.index(self)
        return order[min(index + 1, len(order) - 1)]

    def transliteration(self, on: date) -> str:
        """English transliteration; Dhuhr is Jumua when `on` is a Friday."""
        if self is Prayer.DHUHR and on.weekday() == 4:
            return "Jumua"
        return _TRANSLITERATIONS[self]


_TRANSLITERATIONS = {
    Prayer.FAJR: "Fajr",
    Prayer.SUNRISE: "Sunrise",
    Prayer.DHUHR: "Dhuhr",
    Prayer.ASR: "Asr",
    Prayer.MAGHRIB: "Maghrib",
    Prayer.ISHAA: "Ishaa",
    Prayer.QIYAM: "Qiyam",
    Prayer.FAJR_TOMORROW: "Fajr",
}


class Madhab(Enum):
    """Jurisprudential school; the value is the Asr shadow factor."""

    SHAFI = 1
    HANAFI = 2

    @property
    def shadow(self) -> int:
        return self.value


class HighLatitudeRule(Enum):
    MIDDLE_OF_THE_NIGHT = "middle_of_the_night"
    SEVENTH_OF_THE_NIGHT = "seventh_of_the_night"
    TWILIGHT_ANGLE = "twilight_angle"


class Rounding(Enum):
    NEAREST = "nearest"
    UP = "up"
    NONE = "none"


class Twilight(Enum):
    """Which evening glow (shafaq) ends Maghrib; used by the moonsighting committee method."""

    GENERAL = "general"  # combination of red and white
    RED = "red"  # ahmer: Shafi, Maliki, Hanbali
    WHITE = "white"  # abyad: Hanafi


class Method(Enum):
    """Calculation authorities with a preset in ezan.methods."""

    MUSLIM_WORLD_LEAGUE = "MuslimWorldLeague"
    EGYPTIAN = "Egyptian"
    KARACHI = "Karachi"
    UMM_AL_QURA = "UmmAlQura"
    DUBAI = "Dubai"
    MOONSIGHTING_COMMITTEE = "MoonsightingCommittee"
    NORTH_AMERICA = "NorthAmerica"
    KUWAIT = "Kuwait"
    QATAR = "Qatar"
    SINGAPORE = "Singapore"
    TEHRAN = "Tehran"
    TURKEY = "Turkey"
    OTHER = "Other"


@dataclass(frozen=True)
class DuskAngle:
    """Ishaa starts when the sun is `degrees` below the horizon after sunset."""

    degrees: float


@dataclass(frozen=True)
class DuskInterval:
    """Ishaa starts a fixed number of minutes after sunset."""

    minutes: int


Dusk: TypeAlias = DuskAngle | DuskInterval


@dataclass(frozen=True)
class TimeAdjustment:
    """Per-prayer offsets in minutes, positive or negative."""

    fajr: int = 0
    sunrise: int = 0
    dhuhr: int = 0
    asr: int = 0
    maghrib: int = 0
    ishaa: int = 0

    def for_prayer(self, prayer: Prayer) -> int:
        if prayer is Prayer.FAJR or prayer is Prayer.FAJR_TOMORROW:
            return self.fajr
        if prayer is Prayer.SUNRISE:
            return self.sunrise
        if prayer is Prayer.DHUHR:
            return self.dhuhr
        if prayer is Prayer.ASR:
            return self.asr
        if prayer is Prayer.MAGHRIB:
            return self.maghrib
        if prayer is Prayer.ISHAA:
            return self.ishaa
        return 0


@dataclass(frozen=True)
class Parameters:
    """Everything that decides how a schedule is computed. Never mutated; derive copies instead."""

    fajr_angle: float
    dusk: Dusk
    maghrib_angle: float | None = None
    madhab: Madhab = Madhab.SHAFI
    high_latitude_rule: HighLatitudeRule = HighLatitudeRule.MIDDLE_OF_THE_NIGHT
    rounding: Rounding = Rounding.NEAREST
    twilight: Twilight = Twilight.GENERAL
    adjustments: TimeAdjustment = TimeAdjustment()
    method_adjustments: TimeAdjustment = TimeAdjustment()
    is_moonsighting_committee: bool = False
    method: Method = Method.OTHER

    def night_portions(self) -> tuple[float, float]:
        """(morning, evening) fraction of the night used as the dawn/dusk safety bound."""
        if self.high_latitude_rule is HighLatitudeRule.MIDDLE_OF_THE_NIGHT:
            return 1.0 / 2.0, 1.0 / 2.0
        if self.high_latitude_rule is HighLatitudeRule.SEVENTH_OF_THE_NIGHT:
            return 1.0 / 7.0, 1.0 / 7.0
        # Twilight angle: degrees read as sixtieths of the night
        evening = self.dusk.degrees / 60.0 if isinstance(self.dusk, DuskAngle) else 0.0
        return self.fajr_angle / 60.0, evening

    def time_adjustment(self, prayer: Prayer) -> int:
        """User and method minutes for `prayer`, summed."""
        return self.adjustments.for_prayer(prayer) + self.method_adjustments.for_prayer(prayer)

    def with_madhab(self, madhab: Madhab) -> "Parameters":
        return replace(self, madhab=madhab)

    def with_high_latitude_rule(self, rule: HighLatitudeRule) -> "Parameters":
        return replace(self, high_latitude_rule=rule)

    def with_rounding(self, rounding: Rounding) -> "Parameters":
        return replace(self, rounding=rounding)

    def with_twilight(self, twilight: Twilight) -> "Parameters":
        return replace(self, twilight=twilight)

    def with_adjustments(self, adjustments: TimeAdjustment) -> "Parameters":
        return replace(self, adjustments=adjustments)


def rounded_minute(instant: datetime, rounding: Rounding) -> datetime:
    """Snap `instant` to a whole minute according to `rounding`."""
    if rounding is Rounding.NONE:
        return instant
    floor = instant.replace(second=0, microsecond=0)
    if floor == instant:
        return instant
    if rounding is Rounding.UP:
        return floor + timedelta(minutes=1)
    # Nearest: 30 seconds and above round up
    if instant.second >= 30:
        return floor + timedelta(minutes=1)
    return floor

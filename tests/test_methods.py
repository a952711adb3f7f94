import pytest

from ezan import (
    DuskAngle,
    DuskInterval,
    Madhab,
    Method,
    Prayer,
    Rounding,
    method_from_name,
    parameters_for,
)
from ezan.methods import PRESETS


def test_every_method_has_a_preset():
    assert set(PRESETS) == set(Method)
    for method, params in PRESETS.items():
        assert params.method is method


@pytest.mark.parametrize(
    "method, fajr, dusk",
    [
        (Method.MUSLIM_WORLD_LEAGUE, 18.0, DuskAngle(17.0)),
        (Method.EGYPTIAN, 19.5, DuskAngle(17.5)),
        (Method.KARACHI, 18.0, DuskAngle(18.0)),
        (Method.UMM_AL_QURA, 18.5, DuskInterval(90)),
        (Method.DUBAI, 18.2, DuskAngle(18.2)),
        (Method.MOONSIGHTING_COMMITTEE, 18.0, DuskAngle(18.0)),
        (Method.NORTH_AMERICA, 15.0, DuskAngle(15.0)),
        (Method.KUWAIT, 18.0, DuskAngle(17.5)),
        (Method.QATAR, 18.0, DuskInterval(90)),
        (Method.SINGAPORE, 20.0, DuskAngle(18.0)),
        (Method.TEHRAN, 17.7, DuskAngle(14.0)),
        (Method.TURKEY, 18.0, DuskAngle(17.0)),
        (Method.OTHER, 0.0, DuskAngle(0.0)),
    ],
)
def test_preset_angles(method, fajr, dusk):
    params = parameters_for(method)

    assert params.fajr_angle == fajr
    assert params.dusk == dusk


def test_preset_specifics():
    assert parameters_for(Method.TEHRAN).maghrib_angle == 4.5
    assert parameters_for(Method.SINGAPORE).rounding is Rounding.UP

    singapore = parameters_for(Method.SINGAPORE)
    assert singapore.time_adjustment(Prayer.FAJR) == 0
    assert singapore.time_adjustment(Prayer.SUNRISE) == 1
    assert singapore.time_adjustment(Prayer.DHUHR) == 1
    assert singapore.time_adjustment(Prayer.ASR) == 0
    assert singapore.time_adjustment(Prayer.MAGHRIB) == 1
    assert singapore.time_adjustment(Prayer.ISHAA) == 1
    assert parameters_for(Method.MOONSIGHTING_COMMITTEE).is_moonsighting_committee
    assert not parameters_for(Method.MUSLIM_WORLD_LEAGUE).is_moonsighting_committee

    turkey = parameters_for(Method.TURKEY)
    assert turkey.time_adjustment(Prayer.SUNRISE) == -7
    assert turkey.time_adjustment(Prayer.DHUHR) == 5
    assert turkey.time_adjustment(Prayer.ASR) == 4
    assert turkey.time_adjustment(Prayer.MAGHRIB) == 7


def test_madhab_is_applied_without_touching_preset():
    hanafi = parameters_for(Method.KARACHI, Madhab.HANAFI)

    assert hanafi.madhab is Madhab.HANAFI
    assert PRESETS[Method.KARACHI].madhab is Madhab.SHAFI


@pytest.mark.parametrize(
    "name, method",
    [
        ("MuslimWorldLeague", Method.MUSLIM_WORLD_LEAGUE),
        ("muslim_world_league", Method.MUSLIM_WORLD_LEAGUE),
        ("MWL", Method.MUSLIM_WORLD_LEAGUE),
        ("NorthAmerica", Method.NORTH_AMERICA),
        ("isna", Method.NORTH_AMERICA),
        ("Turkey", Method.TURKEY),
        ("diyanet", Method.TURKEY),
        ("Makkah", Method.UMM_AL_QURA),
        ("moonsighting", Method.MOONSIGHTING_COMMITTEE),
        ("Moonsighting Committee", Method.MOONSIGHTING_COMMITTEE),
    ],
)
def test_method_from_name(name, method):
    assert method_from_name(name) is method


def test_unknown_method_name():
    with pytest.raises(ValueError, match="unknown calculation method"):
        method_from_name("Atlantis")

from datetime import date, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from ezan import Coordinates, Madhab, Method, Prayer, compute_schedule, parameters_for
from index import app

client = TestClient(app)


@pytest.fixture
def raleigh_params():
    return {
        "lat": 35.7750,
        "lng": -78.6336,
        "date": "2015-07-12",
        "calculationMethod": "NorthAmerica",
    }


def test_root():
    response = client.get("/")

    assert response.status_code == 200
    assert "/api/timesForGPS" in response.json()["endpoints"]


def test_times_for_gps_utc(raleigh_params):
    response = client.get("/api/timesForGPS", params=raleigh_params)

    assert response.status_code == 200
    times = response.json()["times"]["2015-07-12"]
    assert len(times) == 6
    assert times[0] == "08:42"
    assert times[1] == "10:08"
    assert times[2] == "17:21"
    assert times[4] == "00:32"
    assert times[5] == "01:57"


def test_times_for_gps_matches_library(raleigh_params):
    response = client.get("/api/timesForGPS", params={**raleigh_params, "timezoneOffset": -240})
    schedule = compute_schedule(
        date(2015, 7, 12),
        Coordinates(35.7750, -78.6336),
        parameters_for(Method.NORTH_AMERICA, Madhab.SHAFI),
    )
    edt = timezone(timedelta(hours=-4))

    expected = [
        schedule.time(prayer).astimezone(edt).strftime("%H:%M")
        for prayer in (Prayer.FAJR, Prayer.SUNRISE, Prayer.DHUHR, Prayer.ASR, Prayer.MAGHRIB, Prayer.ISHAA)
    ]
    assert response.json()["times"]["2015-07-12"] == expected
    assert expected[0] == "04:42"
    assert expected[4] == "20:32"


def test_times_for_gps_several_days(raleigh_params):
    response = client.get("/api/timesForGPS", params={**raleigh_params, "days": 3})

    assert list(response.json()["times"]) == ["2015-07-12", "2015-07-13", "2015-07-14"]


@pytest.mark.parametrize(
    "override",
    [
        {"calculationMethod": "Atlantis"},
        {"date": "2015-13-01"},
        {"lat": 95.0},
    ],
)
def test_times_for_gps_bad_input(raleigh_params, override):
    response = client.get("/api/timesForGPS", params={**raleigh_params, **override})

    assert response.status_code == 422


def test_times_for_gps_polar_day():
    response = client.get(
        "/api/timesForGPS",
        params={"lat": 69.6492, "lng": 18.9553, "date": "2015-06-21", "calculationMethod": "MWL"},
    )

    assert response.status_code == 422


def test_schedule_singapore():
    response = client.post(
        "/api/schedule",
        json={
            "coordinates": {"latitude": 1.370844612058886, "longitude": 103.80145644060552},
            "method": "Singapore",
            "date": {"year": 2021, "month": 1, "day": 13},
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["date"] == "2021-01-13"
    assert body["method"] == "Singapore"
    # 05:50 and 13:15 in Singapore (UTC+8)
    assert body["times"]["fajr"] == "2021-01-12T21:50:00+00:00"
    assert body["times"]["dhuhr"] == "2021-01-13T05:15:00+00:00"
    assert set(body["times"]) == {prayer.value for prayer in Prayer}
    assert body["next"] in {prayer.value for prayer in Prayer}
    assert 0.0 <= body["qibla"] < 360.0


def test_schedule_invalid_date():
    response = client.post(
        "/api/schedule",
        json={
            "coordinates": {"latitude": 21.4225, "longitude": 39.8262},
            "method": "UmmAlQura",
            "date": {"year": 2024, "month": 2, "day": 30},
        },
    )

    assert response.status_code == 422


def test_schedule_polar_day():
    response = client.post(
        "/api/schedule",
        json={
            "coordinates": {"latitude": 69.6492, "longitude": 18.9553},
            "method": "MuslimWorldLeague",
            "date": {"year": 2015, "month": 6, "day": 21},
        },
    )

    assert response.status_code == 422

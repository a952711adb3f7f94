import logging
from datetime import datetime, timedelta, timezone

from fastapi import FastAPI, HTTPException

from ezan import (
    ConfigurationError,
    Coordinates,
    Madhab,
    NoSuchCrossingError,
    Prayer,
    ScheduleBuilder,
    method_from_name,
    parameters_for,
    qibla,
)
from ezan.dtos import RootDto
from ezan.schedule import utc_now
from ezan.settings import load_settings

settings = load_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Prayer Times API",
    description="API service for calculating Islamic prayer times",
    version="2.0.0"
)

# [0]: Imsak, [1]: Gunes, [2]: Ogle, [3]: Ikindi, [4]: Aksam, [5]: Yatsi
DAILY_PRAYERS = (
    Prayer.FAJR,
    Prayer.SUNRISE,
    Prayer.DHUHR,
    Prayer.ASR,
    Prayer.MAGHRIB,
    Prayer.ISHAA,
)


@app.get("/")
def root():
    return {
        "service": "Prayer Times API",
        "status": "online",
        "endpoints": {
            "/api/timesForGPS": "Get prayer times for GPS coordinates",
            "/api/schedule": "Get the full schedule for a JSON request",
        }
    }


def _madhab(name: str) -> Madhab:
    if name.lower() == "hanafi":
        return Madhab.HANAFI
    return Madhab.SHAFI


@app.get("/api/timesForGPS")
def get_times_for_gps(
    lat: float,
    lng: float,
    date: str,
    days: int = 1,
    timezoneOffset: int = 0, # Minutes east of UTC, e.g., 180
    calculationMethod: str = settings.default_method,
):
    try:
        method = method_from_name(calculationMethod)
        coordinates = Coordinates(lat, lng)
        start_date = datetime.strptime(date, "%Y-%m-%d").date()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    local = timezone(timedelta(minutes=timezoneOffset))
    builder = (
        ScheduleBuilder()
        .for_location(coordinates)
        .with_configuration(parameters_for(method, _madhab(settings.default_madhab)))
    )
    logger.info(f"timesForGPS {method.value} at ({lat}, {lng}) from {date} for {days} day(s)")

    response_times = {}

    for i in range(days):
        current_day = start_date + timedelta(days=i)
        date_key = current_day.strftime("%Y-%m-%d")

        try:
            schedule = builder.on(current_day).calculate()
        except NoSuchCrossingError as e:
            raise HTTPException(status_code=422, detail=str(e))

        response_times[date_key] = [
            schedule.time(prayer).astimezone(local).strftime("%H:%M")
            for prayer in DAILY_PRAYERS
        ]

    return {"times": response_times}


@app.post("/api/schedule")
def post_schedule(request: RootDto):
    try:
        schedule = (
            ScheduleBuilder()
            .on(request.to_date())
            .for_location(request.to_coordinates())
            .with_configuration(request.to_parameters())
            .calculate()
        )
    except (ConfigurationError, NoSuchCrossingError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    now = utc_now()
    current = schedule.current(now)
    return {
        "date": schedule.date.isoformat(),
        "method": request.method.value,
        "times": {
            name: instant.isoformat()
            for name, instant in schedule.as_dict().items()
        },
        "middle_of_the_night": schedule.middle_of_the_night.isoformat(),
        "current": current.value if current is not None else None,
        "next": schedule.next(now).value,
        "qibla": round(qibla(schedule.coordinates), 4),
    }

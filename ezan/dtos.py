"""Request models for JSON input: coordinates, method name, madhab and an optional date."""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from ezan.astronomy import Coordinates
from ezan.methods import parameters_for
from ezan.models import Madhab, Method, Parameters
from ezan.schedule import Clock, utc_now


class CoordinatesDto(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def to_coordinates(self) -> Coordinates:
        return Coordinates(self.latitude, self.longitude)


class MazhabDto(str, Enum):
    HANAFI = "Hanafi"
    SHAFI = "Shafi"

    def to_madhab(self) -> Madhab:
        return Madhab.HANAFI if self is MazhabDto.HANAFI else Madhab.SHAFI


class DateDto(BaseModel):
    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def check_calendar_date(self) -> "DateDto":
        # raises ValueError for e.g. day 32
        dt.date(self.year, self.month, self.day)
        return self

    @classmethod
    def today(cls, clock: Clock = utc_now) -> "DateDto":
        now = clock()
        return cls(year=now.year, month=now.month, day=now.day)

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)


class RootDto(BaseModel):
    """
    {"coordinates": {"latitude": .., "longitude": ..}, "method": "MuslimWorldLeague",
     "mazhab": "Hanafi", "date": {"year": .., "month": .., "day": ..}}

    `mazhab` defaults to Shafi and `date` to today (UTC).
    """

    coordinates: CoordinatesDto
    method: Method
    mazhab: MazhabDto = MazhabDto.SHAFI
    date: DateDto = Field(default_factory=DateDto.today)

    def to_coordinates(self) -> Coordinates:
        return self.coordinates.to_coordinates()

    def to_parameters(self) -> Parameters:
        return parameters_for(self.method, self.mazhab.to_madhab())

    def to_date(self) -> dt.date:
        return self.date.to_date()

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class WeatherDate(BaseModel):
    """One day of a park's denormalized forecast."""
    model_config = ConfigDict(populate_by_name=True)

    date: str
    temperature_day_f: str = Field(alias="temperatureDayF")
    temperature_day_c: str = Field(alias="temperatureDayC")
    temperature_night_f: str = Field(alias="temperatureNightF")
    temperature_night_c: str = Field(alias="temperatureNightC")
    weather_icon: str = Field(alias="weatherIcon")
    last_updated: str = Field(alias="lastUpdated")


class DailyTemperature(BaseModel):
    model_config = ConfigDict(extra="ignore")

    day: float
    night: float


class DailyCondition(BaseModel):
    model_config = ConfigDict(extra="ignore")

    icon: str = ""


class DailyForecast(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dt: int
    temp: DailyTemperature
    weather: List[DailyCondition] = []


class OneCallResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    daily: List[DailyForecast] = []

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.errors import ParseError


class ImageData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str


class ParkData(BaseModel):
    """A park entry from the NPS /parks catalog."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    park_code: str = Field(alias="parkCode")
    full_name: str = Field("", alias="fullName")
    description: str = ""
    latitude: str = ""
    longitude: str = ""
    states: str = ""
    designation: str = ""
    directions_info: str = Field("", alias="directionsInfo")
    weather_info: str = Field("", alias="weatherInfo")
    images: List[ImageData] = []

    @field_validator("full_name", "description", "latitude", "longitude", "states",
                     "designation", "directions_info", "weather_info", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value

    @property
    def image_urls(self):
        return [image.url for image in self.images]


class ParkCatalog(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: List[ParkData] = []


class AlertData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    description: str = ""
    category: str = ""
    url: str = ""


class AlertList(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: List[AlertData] = []


def parse_site_count(value) -> int:
    """Parse an NPS numeric string; raises ParseError for anything non-integral."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid site count: {value!r}") from e


class CampgroundData(BaseModel):
    """A campground entry from the NPS /campgrounds endpoint."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str = ""
    park_code: str = Field("", alias="parkCode")
    description: str = ""
    latitude: str = ""
    longitude: str = ""
    reservation_info: str = Field("", alias="reservationInfo")
    reservation_url: str = Field("", alias="reservationUrl")
    directions_overview: str = Field("", alias="directionsOverview")
    weather_overview: str = Field("", alias="weatherOverview")
    reservable: int = Field(0, alias="numberOfSitesReservable")
    first_come_first_serve: int = Field(0, alias="numberOfSitesFirstComeFirstServe")
    images: List[ImageData] = []

    @field_validator("name", "description", "latitude", "longitude", "reservation_info",
                     "reservation_url", "directions_overview", "weather_overview", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("reservable", "first_come_first_serve", mode="before")
    @classmethod
    def default_unparsable_to_zero(cls, value):
        try:
            return parse_site_count(value)
        except ParseError:
            return 0

    @property
    def image_urls(self):
        return [image.url for image in self.images]


class CampgroundList(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: List[CampgroundData] = []

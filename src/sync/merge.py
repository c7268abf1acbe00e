from typing import Optional

from src.db.database import ParkDB, CampgroundDB
from src.models.park import ParkData, CampgroundData


def merge_park(current: Optional[ParkDB], incoming: ParkData) -> ParkDB:
    """Create or update a park from a catalog entry; incoming text fields always win."""
    record = current if current is not None else ParkDB(park_code=incoming.park_code, images=[])
    record.name = incoming.full_name
    record.description = incoming.description
    record.latitude = incoming.latitude
    record.longitude = incoming.longitude
    record.states = incoming.states
    record.designation = incoming.designation
    record.directions_info = incoming.directions_info
    record.weather_info = incoming.weather_info
    return record


def merge_campground(current: Optional[CampgroundDB], incoming: CampgroundData, park_id: int) -> CampgroundDB:
    """Create or update a campground; images and map_image are left to the image pipeline."""
    record = current if current is not None else CampgroundDB(camp_id=incoming.id, images=[])
    record.park_id = park_id
    record.name = incoming.name
    record.description = incoming.description
    record.latitude = incoming.latitude
    record.longitude = incoming.longitude
    record.reservation_info = incoming.reservation_info
    record.reservation_url = incoming.reservation_url
    record.directions_overview = incoming.directions_overview
    record.weather_overview = incoming.weather_overview
    record.reservable = incoming.reservable
    record.first_come_first_serve = incoming.first_come_first_serve
    return record

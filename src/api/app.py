from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Depends
from typing import Optional
from sqlalchemy.orm import Session
import logging

from src import config
from src.db.database import get_db, create_tables, ParkDB, CampgroundDB, AlertDB
from src.sync.alerts import fetch_alerts
from src.sync.scheduler import run_park_sync, WeeklyTrigger
from src.sync.weather import fetch_and_store_weather

logger = logging.getLogger(__name__)

weekly_trigger = WeeklyTrigger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    if config.ENABLE_SCHEDULER:
        weekly_trigger.start()
    yield
    weekly_trigger.stop()


app = FastAPI(
    title="National Parks Sync API",
    description="Triggers and read endpoints for national park, campground, weather and alert data",
    version="1.0.0",
    lifespan=lifespan
)


def park_summary(park):
    return {
        "park_code": park.park_code,
        "name": park.name,
        "states": park.states,
        "designation": park.designation,
        "latitude": park.latitude,
        "longitude": park.longitude,
        "campgrounds": park.campgrounds,
        "images": park.images or [],
    }


def get_park_or_404(db, park_code):
    park = db.query(ParkDB).filter(ParkDB.park_code == park_code).first()
    if not park:
        raise HTTPException(status_code=404, detail="Park not found")
    return park


@app.get("/")
def read_root():
    return {"message": "Welcome to the National Parks Sync API"}


@app.get("/fetchParks")
def fetch_parks():
    logger.info("=============== FETCHING NATIONAL PARKS DATA ===============")
    try:
        summary = run_park_sync()
    except Exception as e:
        logger.error(f"Error fetching national parks: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    if summary is None:
        return {"message": "National Parks data is already being fetched.", "status": "skipped"}
    return {"message": "National Parks data has been stored successfully.", "status": "ok", "summary": summary}


@app.get("/fetchWeather")
def fetch_weather():
    logger.info("=============== FETCHING WEATHER DATA ===============")
    try:
        updated = fetch_and_store_weather()
    except Exception as e:
        logger.error(f"Error fetching weather: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info("============= Weather data has been stored successfully. ==============")
    return {"message": "Weather data has been stored successfully.", "parks_updated": updated}


@app.get("/fetchAlerts")
def fetch_alerts_route():
    logger.info("=============== FETCHING ALERTS DATA ===============")
    try:
        stored = fetch_alerts()
    except Exception as e:
        logger.error(f"Error fetching alerts: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info("============= Alerts data has been stored successfully. ==============")
    return {"message": "Alerts data has been stored successfully.", "alerts_stored": stored}


@app.get("/parks")
def get_parks(db: Session = Depends(get_db), state: Optional[str] = None):
    query = db.query(ParkDB)
    if state:
        query = query.filter(ParkDB.states.ilike(f"%{state}%"))
    return [park_summary(park) for park in query.order_by(ParkDB.name).all()]


@app.get("/parks/{park_code}")
def get_park(park_code: str, db: Session = Depends(get_db)):
    park = get_park_or_404(db, park_code)
    result = park_summary(park)
    result.update({
        "description": park.description,
        "directions_info": park.directions_info,
        "weather_info": park.weather_info,
        "weather": park.weather or [],
        "alerts": [
            {"title": a.title, "category": a.category, "url": a.url}
            for a in park.alerts
        ],
    })
    return result


@app.get("/parks/{park_code}/campgrounds")
def get_park_campgrounds(park_code: str, db: Session = Depends(get_db)):
    park = get_park_or_404(db, park_code)
    campgrounds = db.query(CampgroundDB).filter(CampgroundDB.park_id == park.id).order_by(CampgroundDB.name).all()
    return [
        {
            "camp_id": c.camp_id,
            "name": c.name,
            "latitude": c.latitude,
            "longitude": c.longitude,
            "reservation_url": c.reservation_url,
            "reservable": c.reservable,
            "first_come_first_serve": c.first_come_first_serve,
            "images": c.images or [],
            "map_image": c.map_image,
        }
        for c in campgrounds
    ]


@app.get("/parks/{park_code}/alerts")
def get_park_alerts(park_code: str, db: Session = Depends(get_db)):
    park = get_park_or_404(db, park_code)
    alerts = db.query(AlertDB).filter(AlertDB.park_id == park.id).order_by(AlertDB.id).all()
    return [
        {"title": a.title, "description": a.description, "category": a.category, "url": a.url}
        for a in alerts
    ]

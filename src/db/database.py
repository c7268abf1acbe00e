from sqlalchemy import create_engine, Column, String, Text, Integer, DateTime, ForeignKey, JSON
from sqlalchemy.orm import declarative_base, relationship, sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import func
import logging

from src import config
from src.errors import PersistError

# Get logger
logger = logging.getLogger(__name__)

Base = declarative_base()

# Define the Park table structure
class ParkDB(Base):
    __tablename__ = "parks"
    id = Column(Integer, primary_key=True, autoincrement=True)
    park_code = Column(String, unique=True, index=True, nullable=False)
    name = Column(String)
    description = Column(Text)
    latitude = Column(String)
    longitude = Column(String)
    states = Column(String)
    designation = Column(String)
    directions_info = Column(Text)
    weather_info = Column(Text)
    images = Column(JSON, default=list)  # Stored file names, in ingestion order
    campgrounds = Column(Integer, nullable=True)
    weather = Column(JSON, default=list)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    campground_records = relationship("CampgroundDB", back_populates="park")
    alerts = relationship("AlertDB", back_populates="park")

# Define the Campground table structure
class CampgroundDB(Base):
    __tablename__ = "campgrounds"
    id = Column(Integer, primary_key=True, autoincrement=True)
    camp_id = Column(String, unique=True, index=True, nullable=False)
    park_id = Column(Integer, ForeignKey("parks.id"), nullable=False)
    name = Column(String)
    description = Column(Text)
    latitude = Column(String)
    longitude = Column(String)
    reservation_info = Column(Text)
    reservation_url = Column(String)
    directions_overview = Column(Text)
    weather_overview = Column(Text)
    reservable = Column(Integer, default=0)
    first_come_first_serve = Column(Integer, default=0)
    images = Column(JSON, default=list)
    map_image = Column(String, nullable=True)  # Set once, never refreshed
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    park = relationship("ParkDB", back_populates="campground_records")

# Define the Alert table structure
class AlertDB(Base):
    __tablename__ = "alerts"
    id = Column(Integer, primary_key=True, autoincrement=True)
    park_id = Column(Integer, ForeignKey("parks.id"), nullable=False, index=True)
    title = Column(String)
    description = Column(Text)
    category = Column(String)
    url = Column(String)

    park = relationship("ParkDB", back_populates="alerts")

engine = create_engine(config.DB_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables(bind=None):
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created (if they didn't exist previously).")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def save(db, record):
    """Add and commit a single record; rolls back and raises PersistError on failure."""
    try:
        db.add(record)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistError(f"Could not save {record.__tablename__} record: {e}") from e
    return record

"""Database setup and models for the food map.

This module provides the database connection, the locations table, and
utilities for the FastAPI request cycle using SQLAlchemy.
"""

import os

from sqlalchemy import create_engine, Column, Integer, Text, Float, JSON
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv

load_dotenv()

# Database setup
DATABASE_URL = os.getenv("FOODMAP_DATABASE_URL", "sqlite:///./food_map.db")
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

DEFAULT_CATEGORY = "general"


class Location(Base):
    """A food spot shown on the map.

    Rows are created once and never updated or deleted.

    Attributes:
        id: Primary key auto-incrementing ID.
        name: Display name of the spot.
        description: Optional free text.
        latitude: Latitude in degrees, [-90, 90].
        longitude: Longitude in degrees, [-180, 180].
        category: Category key used for display and group filtering.
        icon: Optional emoji shown on the marker and in the list.
        brand: Optional brand or chain name.
        address: Optional street address.
        tags: Ordered list of short labels.
    """

    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    category = Column(Text, nullable=False, default=DEFAULT_CATEGORY)
    icon = Column(Text, nullable=True)
    brand = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)

    def to_dict(self):
        """Convert the location to its JSON representation.

        Returns:
            Dictionary representation of the location.
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "category": self.category or DEFAULT_CATEGORY,
            "icon": self.icon,
            "brand": self.brand,
            "address": self.address,
            "tags": list(self.tags or []),
        }

    def __repr__(self):
        return f"<Location {self.id} {self.name} ({self.category})>"


def get_db():
    """Dependency for getting database session.

    Yields:
        Database session that will be closed after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize the database by creating all tables."""
    Base.metadata.create_all(bind=engine)

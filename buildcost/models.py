from sqlalchemy import Column, Integer, String, Float, DateTime, JSON
from datetime import datetime, timezone
from .database import Base
import enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Enums ---
# Stored as VARCHAR. The values double as the JSON wire strings.

class MaterialType(str, enum.Enum):
    STANDARD = "Standard"
    PREMIUM = "Premium"
    LUXURY = "Luxury"


class Feature(str, enum.Enum):
    PARKING = "Parking"
    ELEVATOR = "Elevator"
    GARDEN = "Garden"
    SOLAR_PANELS = "Solar Panels"


# --- Tables ---

class Project(Base):
    """Point-in-time snapshot of one estimate. Never updated after insert."""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)  # insertion order, tie-break for list()
    project_id = Column(String, unique=True, nullable=False, index=True)  # public UUID hex
    project_name = Column(String, nullable=False)
    location = Column(String, nullable=False)
    floor_area = Column(Float, nullable=False)
    number_of_floors = Column(Integer, nullable=False)
    material_type = Column(String, nullable=False)
    additional_features = Column(JSON, default=list)
    estimated_cost = Column(Float, nullable=False)
    cost_breakdown = Column(JSON, nullable=False)  # {baseCost, materialMultiplier, additionalFeaturesCost}
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)

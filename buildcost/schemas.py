from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Union
from datetime import datetime, timezone

from .calculators.cost_calculator import whole_number

Number = Union[int, float]


class CostCalculationRequest(BaseModel):
    floor_area: float = Field(gt=0, allow_inf_nan=False, alias="floorArea")
    number_of_floors: int = Field(gt=0, alias="numberOfFloors")
    material_type: str = Field(alias="materialType")
    # Not enum-checked: unknown feature names are priced at 0
    additional_features: List[str] = Field(default_factory=list, alias="additionalFeatures")

    class Config:
        populate_by_name = True


class CostBreakdown(BaseModel):
    base_cost: Number = Field(alias="baseCost")
    material_multiplier: Number = Field(alias="materialMultiplier")
    additional_features_cost: Number = Field(alias="additionalFeaturesCost")
    total_cost: Number = Field(alias="totalCost")

    @field_validator("base_cost", "material_multiplier", "additional_features_cost", "total_cost")
    @classmethod
    def whole_numbers_as_int(cls, v):
        return whole_number(v)

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def from_breakdown(cls, breakdown) -> "CostBreakdown":
        return cls.model_validate(breakdown.to_dict())


class ProjectCreate(BaseModel):
    """Incoming project. Every field optional here; the store reports what's missing."""
    project_name: Optional[str] = Field(default=None, alias="projectName")
    location: Optional[str] = None
    floor_area: Optional[float] = Field(default=None, alias="floorArea")
    number_of_floors: Optional[int] = Field(default=None, alias="numberOfFloors")
    material_type: Optional[str] = Field(default=None, alias="materialType")
    additional_features: Optional[List[str]] = Field(default=None, alias="additionalFeatures")

    class Config:
        populate_by_name = True


class Project(BaseModel):
    id: str
    project_name: str = Field(alias="projectName")
    location: str
    floor_area: Number = Field(alias="floorArea")
    number_of_floors: int = Field(alias="numberOfFloors")
    material_type: str = Field(alias="materialType")
    additional_features: List[str] = Field(default_factory=list, alias="additionalFeatures")
    estimated_cost: Number = Field(alias="estimatedCost")
    cost_breakdown: CostBreakdown = Field(alias="costBreakdown")
    created_at: datetime = Field(alias="createdAt")

    @field_validator("floor_area", "estimated_cost")
    @classmethod
    def whole_numbers_as_int(cls, v):
        return whole_number(v)

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    class Config:
        populate_by_name = True
        frozen = True


class RateTables(BaseModel):
    material_rates: dict = Field(alias="materialRates")
    feature_costs: dict = Field(alias="featureCosts")

    class Config:
        populate_by_name = True

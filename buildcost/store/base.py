"""
Project store contract.

create() validates, prices and persists a project; list() returns every
project newest first; get() fetches one by id. There is no update or delete:
a stored project is a frozen snapshot of the estimate at creation time.
"""

import logging
import math
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional, Union

import pydantic

from .. import schemas
from ..calculators import CostCalculator
from ..exceptions import ValidationError
from ..models import Feature, MaterialType

logger = logging.getLogger(__name__)

MATERIAL_TYPES = {m.value for m in MaterialType}
FEATURES = {f.value for f in Feature}

# Wire names, in the order errors are reported
_FIELD_NAMES = {
    "project_name": "projectName",
    "location": "location",
    "floor_area": "floorArea",
    "number_of_floors": "numberOfFloors",
    "material_type": "materialType",
    "additional_features": "additionalFeatures",
}


def new_project_id() -> str:
    return uuid.uuid4().hex


def validate_project_input(data: Union[schemas.ProjectCreate, dict]) -> schemas.ProjectCreate:
    """
    Check required fields are present and well-formed.

    Returns a cleaned ProjectCreate (names trimmed, features defaulted to []).
    Raises ValidationError listing every offending field by its wire name.
    """
    if not isinstance(data, schemas.ProjectCreate):
        try:
            data = schemas.ProjectCreate.model_validate(data)
        except pydantic.ValidationError as e:
            bad = []
            for err in e.errors():
                name = str(err["loc"][0]) if err["loc"] else "body"
                name = _FIELD_NAMES.get(name, name)
                if name not in bad:
                    bad.append(name)
            raise ValidationError(bad) from e

    bad = []
    project_name = (data.project_name or "").strip()
    location = (data.location or "").strip()

    if not project_name:
        bad.append("project_name")
    if not location:
        bad.append("location")
    if data.floor_area is None or not math.isfinite(data.floor_area) or data.floor_area < 1:
        bad.append("floor_area")
    if data.number_of_floors is None or data.number_of_floors < 1:
        bad.append("number_of_floors")
    if data.material_type not in MATERIAL_TYPES:
        bad.append("material_type")
    features = list(data.additional_features or [])
    if any(f not in FEATURES for f in features):
        bad.append("additional_features")

    if bad:
        raise ValidationError([_FIELD_NAMES[name] for name in bad])

    return data.model_copy(update={
        "project_name": project_name,
        "location": location,
        "additional_features": features,
    })


class ProjectStore(ABC):
    """Backend-independent create/list/get over Project snapshots."""

    def __init__(self, calculator: Optional[CostCalculator] = None):
        self.calculator = calculator or CostCalculator()

    def create(self, data: Union[schemas.ProjectCreate, dict]) -> schemas.Project:
        project_input = validate_project_input(data)
        breakdown = self.calculator.calculate(
            project_input.floor_area,
            project_input.number_of_floors,
            project_input.material_type,
            project_input.additional_features,
        )
        project = schemas.Project(
            id=new_project_id(),
            project_name=project_input.project_name,
            location=project_input.location,
            floor_area=project_input.floor_area,
            number_of_floors=project_input.number_of_floors,
            material_type=project_input.material_type,
            additional_features=project_input.additional_features,
            estimated_cost=breakdown.total_cost,
            cost_breakdown=schemas.CostBreakdown.from_breakdown(breakdown),
            created_at=datetime.now(timezone.utc),
        )
        saved = self._insert(project)
        logger.info("Created project %s (%s), total %s", saved.id, saved.project_name, saved.estimated_cost)
        return saved

    @abstractmethod
    def _insert(self, project: schemas.Project) -> schemas.Project:
        """Persist a fully built project and return it as stored."""

    @abstractmethod
    def list(self) -> List[schemas.Project]:
        """All projects, created_at descending."""

    @abstractmethod
    def get(self, project_id: str) -> schemas.Project:
        """Raises ProjectNotFound if no project has this id."""

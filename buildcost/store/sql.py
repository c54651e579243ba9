"""
SQLAlchemy-backed project store.

One row per project in the `projects` table. Atomicity of create() comes from
the database transaction; the public id is a UUID with a UNIQUE constraint.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..exceptions import ProjectNotFound, StorageFailure
from .base import ProjectStore

logger = logging.getLogger(__name__)


def _to_schema(row: models.Project) -> schemas.Project:
    return schemas.Project(
        id=row.project_id,
        project_name=row.project_name,
        location=row.location,
        floor_area=row.floor_area,
        number_of_floors=row.number_of_floors,
        material_type=row.material_type,
        additional_features=row.additional_features or [],
        estimated_cost=row.estimated_cost,
        cost_breakdown=row.cost_breakdown,
        created_at=row.created_at,
    )


class SqlProjectStore(ProjectStore):

    def __init__(self, db: Session, calculator=None):
        super().__init__(calculator)
        self.db = db

    def _insert(self, project: schemas.Project) -> schemas.Project:
        row = models.Project(
            project_id=project.id,
            project_name=project.project_name,
            location=project.location,
            floor_area=project.floor_area,
            number_of_floors=project.number_of_floors,
            material_type=project.material_type,
            additional_features=list(project.additional_features),
            estimated_cost=project.estimated_cost,
            cost_breakdown=project.cost_breakdown.model_dump(by_alias=True),
            created_at=project.created_at,
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to save project %s", project.id)
            raise StorageFailure("Failed to save project") from e
        return _to_schema(row)

    def list(self) -> List[schemas.Project]:
        try:
            rows = (
                self.db.query(models.Project)
                .order_by(models.Project.created_at.desc(), models.Project.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.exception("Failed to list projects")
            raise StorageFailure("Failed to list projects") from e
        return [_to_schema(row) for row in rows]

    def get(self, project_id: str) -> schemas.Project:
        try:
            row = self.db.query(models.Project).filter(models.Project.project_id == project_id).first()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch project %s", project_id)
            raise StorageFailure("Failed to fetch project") from e
        if row is None:
            raise ProjectNotFound(project_id)
        return _to_schema(row)

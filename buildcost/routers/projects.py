"""
Projects API - saved estimates.

GET  /api/projects              - all projects, newest first
POST /api/projects              - validate, price and save a project
GET  /api/projects/{id}         - one project
GET  /api/projects/{id}/summary - display strings (₹, Indian grouping)
GET  /api/projects/{id}/pdf     - PDF estimate download

Projects are never updated or deleted.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import Response

from .. import schemas
from ..config import settings
from ..exceptions import ProjectNotFound, StorageFailure, ValidationError
from ..formatting import project_summary
from ..pdf_generator import generate_project_pdf
from ..store import ProjectStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


def _load(project_id: str, store: ProjectStore) -> schemas.Project:
    try:
        return store.get(project_id)
    except ProjectNotFound:
        raise HTTPException(status_code=404, detail="Project not found")
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Storage error")


@router.get("", response_model=List[schemas.Project])
def list_projects(store: ProjectStore = Depends(get_store)):
    try:
        return store.list()
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Storage error")


@router.post("", response_model=schemas.Project, status_code=201)
def create_project(project: Dict[str, Any] = Body(...), store: ProjectStore = Depends(get_store)):
    # Wrong types come back as 400 with field names, like missing fields
    try:
        return store.create(project)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail={"message": e.message, "fields": e.fields})
    except StorageFailure:
        raise HTTPException(status_code=500, detail="Storage error")


@router.get("/{project_id}", response_model=schemas.Project)
def get_project(project_id: str, store: ProjectStore = Depends(get_store)):
    return _load(project_id, store)


@router.get("/{project_id}/summary")
def get_project_summary(project_id: str, store: ProjectStore = Depends(get_store)):
    return project_summary(_load(project_id, store))


@router.get("/{project_id}/pdf")
def download_pdf(project_id: str, store: ProjectStore = Depends(get_store)):
    """
    Generate and download a PDF estimate.

    Returns: application/pdf
    """
    project = _load(project_id, store)
    pdf_bytes = generate_project_pdf(project, company_name=settings.COMPANY_NAME)

    filename = f"Estimate-{project.id[:8]}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )

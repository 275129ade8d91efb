"""
Project API Endpoints
"""

from fastapi import APIRouter, Depends, Query
import logging

from ims_release.api.v1.deps import get_project, get_repository
from ims_release.errors import ValidationError
from ims_release.models import Project
from ims_release.repository import ORDERINGS, Repository
from ims_release.schemas.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdate,
)
from ims_release.services.projects import validate_project_fields
from ims_release.services.release_lifecycle import ensure_project_deletable

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


def _envelope(*projects: Project) -> ProjectListResponse:
    return ProjectListResponse(result=[ProjectResponse.model_validate(p) for p in projects])


@router.get("", response_model=ProjectListResponse)
def list_projects(
    ordering: str = Query("newest", description="newest or oldest"),
    repo: Repository = Depends(get_repository),
):
    """
    List all projects
    """
    if ordering not in ORDERINGS:
        raise ValidationError("Ordering must be 'newest' or 'oldest'.")
    return _envelope(*repo.list_projects(ordering))


@router.post("", response_model=ProjectListResponse)
def create_project(
    body: ProjectCreate,
    repo: Repository = Depends(get_repository),
):
    """
    Create a project
    """
    status = validate_project_fields(body.name, body.shorthand, body.status)
    project = Project(
        name=body.name,
        shorthand=body.shorthand,
        description=body.description,
        status=status,
    )
    project = repo.save_project(project)
    logger.info(f"Created project {project.id} ({project.shorthand})")
    return _envelope(project)


@router.get("/{project_id}", response_model=ProjectListResponse)
def get_project_detail(project: Project = Depends(get_project)):
    """
    Get a single project
    """
    return _envelope(project)


@router.put("/{project_id}", response_model=ProjectListResponse)
def update_project(
    body: ProjectUpdate,
    project: Project = Depends(get_project),
    repo: Repository = Depends(get_repository),
):
    """
    Replace the fields of a project
    """
    status = validate_project_fields(body.name, body.shorthand, body.status)
    project.name = body.name
    project.shorthand = body.shorthand
    project.description = body.description
    project.status = status
    project = repo.update_project(project)
    logger.info(f"Updated project {project.id}")
    return _envelope(project)


@router.delete("/{project_id}", response_model=ProjectListResponse)
def delete_project(
    project: Project = Depends(get_project),
    repo: Repository = Depends(get_repository),
):
    """
    Delete a project without releases
    """
    ensure_project_deletable(repo.count_releases(project))
    project_id, shorthand = project.id, project.shorthand
    repo.delete_project(project)
    logger.info(f"Deleted project {project_id} ({shorthand})")
    return ProjectListResponse()

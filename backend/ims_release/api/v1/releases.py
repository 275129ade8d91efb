"""
Release API Endpoints
"""

from fastapi import APIRouter, Depends, Query
import logging

from ims_release.api.v1.deps import get_project, get_release, get_repository
from ims_release.config import Settings, get_settings
from ims_release.errors import ValidationError
from ims_release.models import Project, Release
from ims_release.repository import ORDERINGS, Repository
from ims_release.schemas.release import (
    ReleaseCreate,
    ReleaseListResponse,
    ReleaseResponse,
    ReleaseUpdate,
)
from ims_release.services.release_lifecycle import (
    apply_update,
    create_release,
    ensure_release_deletable,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects/{project_id}/releases", tags=["releases"])


def _envelope(*releases: Release) -> ReleaseListResponse:
    return ReleaseListResponse(result=[ReleaseResponse.model_validate(r) for r in releases])


@router.get("", response_model=ReleaseListResponse)
def list_releases(
    ordering: str = Query("newest", description="newest or oldest"),
    project: Project = Depends(get_project),
    repo: Repository = Depends(get_repository),
):
    """
    List the releases of a project
    """
    if ordering not in ORDERINGS:
        raise ValidationError("Ordering must be 'newest' or 'oldest'.")
    return _envelope(*repo.list_releases(project, ordering))


@router.post("", response_model=ReleaseListResponse)
def add_release(
    body: ReleaseCreate,
    project: Project = Depends(get_project),
    repo: Repository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    """
    Create a release for a project
    """
    release = create_release(
        project,
        identifier=body.identifier,
        scanlator=settings.SCANLATOR,
        version=body.version,
        status=body.status,
    )
    release = repo.save_release(release)
    logger.info(f"Created release {release.id} ({release.identifier}) for project {project.id}")
    return _envelope(release)


@router.get("/{release_id}", response_model=ReleaseListResponse)
def get_release_detail(release: Release = Depends(get_release)):
    """
    Get a single release
    """
    return _envelope(release)


@router.put("/{release_id}", response_model=ReleaseListResponse)
def update_release(
    body: ReleaseUpdate,
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
):
    """
    Update identifier, version and/or status of a release

    Released releases only accept a strictly higher version and keep
    their identifier; versions never go down.
    """
    apply_update(release, identifier=body.identifier, version=body.version, status=body.status)
    release = repo.update_release(release)
    logger.info(f"Updated release {release.id}: {release.identifier} v{release.version} ({release.status.value})")
    return _envelope(release)


@router.delete("/{release_id}", response_model=ReleaseListResponse)
def delete_release(
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
):
    """
    Delete a release without pages
    """
    ensure_release_deletable(repo.count_pages(release))
    release_id = release.id
    repo.delete_release(release)
    logger.info(f"Deleted release {release_id}")
    return ReleaseListResponse()

"""
Thumbnail Endpoint
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ims_release.api.v1.deps import get_blob_store, get_project, get_release, get_repository
from ims_release.config import Settings, get_settings
from ims_release.models import Project, Release
from ims_release.repository import Repository
from ims_release.services.blob_store import BlobStore
from ims_release.services.mime import mime_to_content_type
from ims_release.services.pages import generate_page_key
from ims_release.services.thumbnails import make_thumbnail

router = APIRouter(prefix="/projects/{project_id}/releases/{release_id}", tags=["thumbnails"])


@router.get("/thumbnails/{name}")
def get_thumbnail(
    name: str,
    project: Project = Depends(get_project),
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
    blobs: BlobStore = Depends(get_blob_store),
    settings: Settings = Depends(get_settings),
):
    """
    Get a downscaled version of a page image
    """
    page = repo.find_page_by_name(release, name)
    data = blobs.get(generate_page_key(project.id, release.id, page.name))
    thumbnail = make_thumbnail(
        data,
        page.mime_type,
        settings.THUMBNAIL_MAX_WIDTH,
        settings.THUMBNAIL_MAX_HEIGHT,
    )
    return Response(content=thumbnail, media_type=mime_to_content_type(page.mime_type))

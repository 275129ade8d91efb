"""
Page API Endpoints
Pages are uploaded, read and deleted; they are never edited
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
import logging

from ims_release.api.v1.deps import get_blob_store, get_project, get_release, get_repository
from ims_release.errors import ImsReleaseError
from ims_release.models import Page, Project, Release
from ims_release.repository import Repository
from ims_release.schemas.page import PageCreate, PageListResponse, PageResponse
from ims_release.services.blob_store import BlobStore
from ims_release.services.mime import mime_to_content_type
from ims_release.services.pages import (
    decode_page_data,
    generate_page_key,
    verify_image_matches_name,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects/{project_id}/releases/{release_id}/pages", tags=["pages"])


def _envelope(*pages: Page) -> PageListResponse:
    return PageListResponse(result=[PageResponse.model_validate(p) for p in pages])


@router.get("", response_model=PageListResponse)
def list_pages(
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
):
    """
    List the pages of a release ordered by name
    """
    return _envelope(*repo.list_pages(release))


@router.post("", response_model=PageListResponse)
def upload_page(
    body: PageCreate,
    project: Project = Depends(get_project),
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
    blobs: BlobStore = Depends(get_blob_store),
):
    """
    Upload a page image (base64 encoded PNG or JPEG)

    The image format must agree with the suffix of the page name.
    """
    data = decode_page_data(body.data)
    verify_image_matches_name(body.name, data)

    key = generate_page_key(project.id, release.id, body.name)
    blobs.set(key, data)

    try:
        page = repo.save_page(Page(release_id=release.id, name=body.name))
    except ImsReleaseError:
        # Keep blob storage in sync with the pages table
        try:
            blobs.unset(key)
        except ImsReleaseError as e:
            logger.error(f"Could not remove orphaned blob {key}: {e.message}")
        raise

    logger.info(f"Stored page {page.id} '{page.name}' for release {release.id} ({len(data)} bytes)")
    return _envelope(page)


@router.get("/{name}")
def get_page_image(
    name: str,
    project: Project = Depends(get_project),
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
    blobs: BlobStore = Depends(get_blob_store),
):
    """
    Get the raw image of a page
    """
    page = repo.find_page_by_name(release, name)
    data = blobs.get(generate_page_key(project.id, release.id, page.name))
    return Response(content=data, media_type=mime_to_content_type(page.mime_type))


@router.delete("/{page_id}", response_model=PageListResponse)
def delete_page(
    page_id: int,
    project: Project = Depends(get_project),
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
    blobs: BlobStore = Depends(get_blob_store),
):
    """
    Delete a page and its stored image
    """
    page = repo.find_page(release, page_id)
    key = generate_page_key(project.id, release.id, page.name)
    repo.delete_page(page)

    try:
        blobs.unset(key)
    except ImsReleaseError as e:
        logger.warning(f"Page {page_id} deleted but its image could not be removed: {e.message}")

    logger.info(f"Deleted page {page_id} from release {release.id}")
    return PageListResponse()

"""
Release Download Endpoint
Serves the zip archive of a released release
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from urllib.parse import quote
import logging

from ims_release.api.v1.deps import get_blob_store, get_project, get_release, get_repository
from ims_release.errors import NotFoundError
from ims_release.models import Project, Release
from ims_release.repository import Repository
from ims_release.services.archive import ArchiveBuilder
from ims_release.services.blob_store import BlobStore
from ims_release.services.release_lifecycle import generate_archive_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects/{project_id}/releases/{release_id}", tags=["downloads"])


@router.get("/download/{name}")
def download_release(
    name: str,
    project: Project = Depends(get_project),
    release: Release = Depends(get_release),
    repo: Repository = Depends(get_repository),
    blobs: BlobStore = Depends(get_blob_store),
):
    """
    Download the archive of a release

    Only released releases are served, and only under their canonical
    archive name.
    """
    if not release.is_released:
        raise NotFoundError()
    if name != generate_archive_name(project, release):
        raise NotFoundError()

    archive = ArchiveBuilder(repo, blobs).build(project, release)
    if archive.update_error is not None:
        logger.error(f"Serving release {release.id} with a stale stored checksum: {archive.update_error}")

    return Response(
        content=archive.data,
        media_type="application/zip",
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(archive.name)}",
            "X-Checksum-CRC32": archive.checksum,
        },
    )

"""
Shared API Dependencies
Repository, blob store, auth and path lookups
"""

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session
from typing import Optional
import logging
import secrets

from ims_release.config import Settings, get_settings
from ims_release.database import get_db
from ims_release.errors import UnauthorizedError
from ims_release.models import Project, Release
from ims_release.repository import Repository
from ims_release.services.blob_store import BlobStore, FileBlobStore

logger = logging.getLogger(__name__)

PROTECTED_METHODS = ("POST", "PUT", "DELETE")


def get_repository(db: Session = Depends(get_db)) -> Repository:
    return Repository(db)


def get_blob_store(settings: Settings = Depends(get_settings)) -> BlobStore:
    return FileBlobStore(settings.IMAGE_DIRECTORY)


def verify_auth_token(
    request: Request,
    auth_token: Optional[str] = Header(None, alias="Auth-Token"),
    settings: Settings = Depends(get_settings),
):
    """Require the configured token on write requests"""
    if not settings.AUTH_TOKEN or request.method not in PROTECTED_METHODS:
        return
    if auth_token is None or not secrets.compare_digest(auth_token, settings.AUTH_TOKEN):
        logger.warning(f"Rejected unauthenticated {request.method} {request.url.path}")
        raise UnauthorizedError()


def get_project(project_id: int, repo: Repository = Depends(get_repository)) -> Project:
    return repo.find_project(project_id)


def get_release(
    release_id: int,
    project: Project = Depends(get_project),
    repo: Repository = Depends(get_repository),
) -> Release:
    return repo.find_release(project, release_id)

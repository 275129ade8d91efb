"""
Release Lifecycle
Creation, edit guard and deletion rules for releases, plus the
canonical archive name
"""

from datetime import datetime
from typing import Optional
import logging

from ims_release.errors import (
    DownversioningNotAllowedError,
    IdentifierTooLongError,
    InvalidStatusError,
    MustUpversionError,
    PagesNotEmptyError,
    ReleasesNotEmptyError,
    ValidationError,
)
from ims_release.models.project import Project
from ims_release.models.release import IDENTIFIER_MAX_LENGTH, Release, ReleaseStatus

logger = logging.getLogger(__name__)


def parse_release_status(value) -> ReleaseStatus:
    """Parse a wire status; anything but released/draft is rejected"""
    try:
        return ReleaseStatus(value)
    except ValueError:
        raise InvalidStatusError(f"Invalid release status: {value!r}.")


def validate_identifier(identifier: str) -> str:
    if len(identifier) > IDENTIFIER_MAX_LENGTH:
        raise IdentifierTooLongError()
    return identifier


def validate_version(version: int) -> int:
    if version < 0:
        raise ValidationError("Release version must not be negative.")
    return version


def create_release(
    project: Project,
    identifier: str,
    scanlator: str,
    version: int = 0,
    status="draft",
) -> Release:
    """
    Build a new, unsaved release for a project

    Raises:
        InvalidStatusError: status is not released or draft
        IdentifierTooLongError: identifier longer than 10 characters
    """
    parsed_status = parse_release_status(status)
    validate_identifier(identifier)
    validate_version(version)

    return Release(
        project_id=project.id,
        identifier=identifier,
        scanlator=scanlator,
        version=version,
        status=parsed_status,
        checksum="",
        released_on=datetime.utcnow(),
    )


def check_edit_guard(release: Release, version: int) -> None:
    """
    Reject updates that would break version monotonicity

    Order of checks:
        1. a lower version is always refused
        2. a released release must move to a strictly higher version
    A draft release accepts any version >= the current one.
    """
    if version < release.version:
        raise DownversioningNotAllowedError()

    if release.status == ReleaseStatus.RELEASED and version == release.version:
        raise MustUpversionError()


def apply_update(
    release: Release,
    identifier: Optional[str] = None,
    version: Optional[int] = None,
    status=None,
) -> Release:
    """
    Apply an update to a release in place

    Omitted fields keep their current values. On success releasedOn is
    stamped with the current time.
    """
    new_identifier = release.identifier if identifier is None else identifier
    new_version = release.version if version is None else version
    new_status = release.status if status is None else parse_release_status(status)

    validate_identifier(new_identifier)
    validate_version(new_version)
    check_edit_guard(release, new_version)

    logger.debug(
        f"Release {release.id}: {release.identifier}/v{release.version}/{release.status.value} -> "
        f"{new_identifier}/v{new_version}/{new_status.value}"
    )

    release.identifier = new_identifier
    release.version = new_version
    release.status = new_status
    release.released_on = datetime.utcnow()
    return release


def apply_checksum(release: Release, checksum: str) -> Release:
    """Record a new archive checksum; like any update it stamps releasedOn"""
    release.checksum = checksum
    release.released_on = datetime.utcnow()
    return release


def ensure_release_deletable(page_count: int) -> None:
    if page_count > 0:
        raise PagesNotEmptyError()


def ensure_project_deletable(release_count: int) -> None:
    if release_count > 0:
        raise ReleasesNotEmptyError()


def generate_archive_name(project: Project, release: Release) -> str:
    """Canonical zip name, also the only file name the download route accepts"""
    return f"{project.shorthand} - {release.identifier}[{release.version}][{release.scanlator}].zip"

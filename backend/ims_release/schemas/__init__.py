"""Pydantic Schemas Package"""

from ims_release.schemas.common import ErrorResponse
from ims_release.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectListResponse
)
from ims_release.schemas.release import (
    ReleaseCreate,
    ReleaseUpdate,
    ReleaseResponse,
    ReleaseListResponse
)
from ims_release.schemas.page import (
    PageCreate,
    PageResponse,
    PageListResponse
)
from ims_release.schemas.member import (
    MemberCreate,
    MemberUpdate,
    MemberResponse,
    MemberListResponse
)

__all__ = [
    "ErrorResponse",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ProjectListResponse",
    "ReleaseCreate",
    "ReleaseUpdate",
    "ReleaseResponse",
    "ReleaseListResponse",
    "PageCreate",
    "PageResponse",
    "PageListResponse",
    "MemberCreate",
    "MemberUpdate",
    "MemberResponse",
    "MemberListResponse",
]

"""
Release Pydantic Schemas
For request/response validation
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from ims_release.models.release import ReleaseStatus
from ims_release.schemas.common import camel_field


class ReleaseCreate(BaseModel):
    """Schema for creating a release"""

    identifier: str
    version: int = 0
    status: str = Field("draft", description="released or draft")


class ReleaseUpdate(BaseModel):
    """Schema for updating a release; omitted fields are kept"""

    identifier: Optional[str] = None
    version: Optional[int] = None
    status: Optional[str] = None


class ReleaseResponse(BaseModel):
    """Schema for release response"""

    id: int
    identifier: str
    scanlator: str
    version: int
    status: ReleaseStatus
    checksum: str
    released_on: datetime = camel_field("released_on", "releasedOn")
    project_id: int = camel_field("project_id", "projectId")

    class Config:
        from_attributes = True


class ReleaseListResponse(BaseModel):
    """Envelope with releases"""

    error: Optional[str] = None
    result: List[ReleaseResponse] = []

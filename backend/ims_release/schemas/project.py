"""
Project Pydantic Schemas
For request/response validation
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from ims_release.models.project import ProjectStatus
from ims_release.schemas.common import camel_field


class ProjectCreate(BaseModel):
    """Schema for creating or replacing a project"""

    name: str
    shorthand: str
    description: str = ""
    status: str = Field(..., description="completed, active, stalled or dropped")


class ProjectUpdate(ProjectCreate):
    """Schema for updating a project (same fields as create)"""


class ProjectResponse(BaseModel):
    """Schema for project response"""

    id: int
    name: str
    shorthand: str
    description: str
    status: ProjectStatus
    created_at: datetime = camel_field("created_at", "createdAt")

    class Config:
        from_attributes = True


class ProjectListResponse(BaseModel):
    """Envelope with projects"""

    error: Optional[str] = None
    result: List[ProjectResponse] = []

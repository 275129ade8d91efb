"""
Member Pydantic Schemas
For request/response validation
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from ims_release.schemas.common import camel_field


class MemberCreate(BaseModel):
    """Schema for creating or replacing a member"""

    name: str
    biography: str = ""


class MemberUpdate(MemberCreate):
    """Schema for updating a member"""


class MemberResponse(BaseModel):
    """Schema for member response"""

    id: int
    name: str
    biography: str
    created_at: datetime = camel_field("created_at", "createdAt")

    class Config:
        from_attributes = True


class MemberListResponse(BaseModel):
    """Envelope with members"""

    error: Optional[str] = None
    result: List[MemberResponse] = []

"""
Page Pydantic Schemas
For request/response validation
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from ims_release.services.mime import MimeType
from ims_release.schemas.common import camel_field


class PageCreate(BaseModel):
    """Schema for uploading a page"""

    name: str
    data: str = Field(..., description="Base64 encoded PNG or JPEG image")


class PageResponse(BaseModel):
    """Schema for page response"""

    id: int
    name: str
    created_at: datetime = camel_field("created_at", "createdAt")
    release_id: int = camel_field("release_id", "releaseId")
    mime_type: MimeType = camel_field("mime_type", "mimeType")

    class Config:
        from_attributes = True


class PageListResponse(BaseModel):
    """Envelope with pages"""

    error: Optional[str] = None
    result: List[PageResponse] = []

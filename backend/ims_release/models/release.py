"""
Release Model
Represents one released (or draft) chapter of a project
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
from ims_release.database import Base

IDENTIFIER_MAX_LENGTH = 10


class ReleaseStatus(str, enum.Enum):
    """Lifecycle state of a release; the value is the wire/stored form"""

    RELEASED = "released"
    DRAFT = "draft"


class Release(Base):
    """Release model, owner of its pages"""

    __tablename__ = "releases"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    identifier = Column(String(IDENTIFIER_MAX_LENGTH), nullable=False)
    scanlator = Column(String(255), nullable=False)
    version = Column(Integer, nullable=False, default=0)
    status = Column(
        Enum(ReleaseStatus, values_callable=lambda e: [m.value for m in e], native_enum=False, length=20),
        nullable=False,
        default=ReleaseStatus.DRAFT,
        index=True,
    )

    # CRC32 of the last built archive, hex encoded; empty until first build
    checksum = Column(String(8), nullable=False, default="")

    released_on = Column(DateTime, default=datetime.utcnow, nullable=False)

    project = relationship("Project", back_populates="releases")
    pages = relationship("Page", back_populates="release", lazy="dynamic")

    def __repr__(self):
        return (
            f"<Release(id={self.id}, project_id={self.project_id}, identifier='{self.identifier}', "
            f"version={self.version}, status='{self.status}')>"
        )

    @property
    def is_released(self):
        """Check if the release is publicly released"""
        return self.status == ReleaseStatus.RELEASED

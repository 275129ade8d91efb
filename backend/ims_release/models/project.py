"""
Project Model
Represents a scanlation project (one manga series worked on by the group)
"""

import enum

from sqlalchemy import Column, Integer, String, DateTime, Text, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
from ims_release.database import Base

SHORTHAND_MAX_LENGTH = 30


class ProjectStatus(str, enum.Enum):
    """Publishing state of a project; the value is the wire/stored form"""

    COMPLETED = "completed"
    ACTIVE = "active"
    STALLED = "stalled"
    DROPPED = "dropped"


class Project(Base):
    """Project model, owner of its releases"""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    shorthand = Column(String(SHORTHAND_MAX_LENGTH), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    status = Column(
        Enum(ProjectStatus, values_callable=lambda e: [m.value for m in e], native_enum=False, length=20),
        nullable=False,
        default=ProjectStatus.ACTIVE,
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    releases = relationship("Release", back_populates="project", lazy="dynamic")

    def __repr__(self):
        return f"<Project(id={self.id}, shorthand='{self.shorthand}', status='{self.status}')>"

"""
Member Model
Represents a member of the scanlation group
"""

from sqlalchemy import Column, Integer, DateTime, Text
from datetime import datetime
from ims_release.database import Base


class Member(Base):
    """Group member with a short biography"""

    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    biography = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Member(id={self.id}, name='{self.name}')>"

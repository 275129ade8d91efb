"""
Page Model
Represents a single page image of a release.
The image bytes live in the blob store; only metadata is stored here.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from ims_release.database import Base
from ims_release.services.mime import MimeType, classify

NAME_MAX_LENGTH = 255


class Page(Base):
    """Page model; immutable once created"""

    __tablename__ = "pages"
    __table_args__ = (
        UniqueConstraint("release_id", "name", name="uq_pages_release_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    release_id = Column(Integer, ForeignKey("releases.id"), nullable=False, index=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    release = relationship("Release", back_populates="pages")

    def __repr__(self):
        return f"<Page(id={self.id}, release_id={self.release_id}, name='{self.name}')>"

    @property
    def mime_type(self) -> MimeType:
        """Derived from the name suffix, never stored"""
        return classify(self.name or "")

"""
Repository
SQLAlchemy access to projects, releases, pages and members.
Every write is committed on its own; database failures are raised as
StorageError (ConflictError for unique constraint violations).
"""

from contextlib import contextmanager
from typing import List
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ims_release.errors import ConflictError, NotFoundError, StorageError
from ims_release.models import Member, Page, Project, Release

logger = logging.getLogger(__name__)

ORDERINGS = ("newest", "oldest")


class Repository:
    """Persistence gateway over one database session"""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _write(self, what: str):
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Constraint violation while saving {what}: {e.orig}")
            raise ConflictError(f"The {what} conflicts with an existing one.")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error while saving {what}: {e}")
            raise StorageError()

    @contextmanager
    def _read(self, what: str):
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Database error while reading {what}: {e}")
            raise StorageError()

    # ========================================================================
    # PROJECTS
    # ========================================================================

    def list_projects(self, ordering: str = "newest") -> List[Project]:
        with self._read("projects"):
            query = self.db.query(Project)
            if ordering == "oldest":
                query = query.order_by(Project.created_at.asc(), Project.id.asc())
            else:
                query = query.order_by(Project.created_at.desc(), Project.id.desc())
            return query.all()

    def find_project(self, project_id: int) -> Project:
        with self._read("project"):
            project = self.db.query(Project).filter(Project.id == project_id).first()
        if not project:
            raise NotFoundError("Project not found.")
        return project

    def save_project(self, project: Project) -> Project:
        with self._write("project"):
            self.db.add(project)
        self.db.refresh(project)
        return project

    def update_project(self, project: Project) -> Project:
        with self._write("project"):
            self.db.add(project)
        self.db.refresh(project)
        return project

    def delete_project(self, project: Project) -> None:
        with self._write("project"):
            self.db.delete(project)

    # ========================================================================
    # RELEASES
    # ========================================================================

    def list_releases(self, project: Project, ordering: str = "newest") -> List[Release]:
        with self._read("releases"):
            query = self.db.query(Release).filter(Release.project_id == project.id)
            if ordering == "oldest":
                query = query.order_by(Release.released_on.asc(), Release.id.asc())
            else:
                query = query.order_by(Release.released_on.desc(), Release.id.desc())
            return query.all()

    def count_releases(self, project: Project) -> int:
        with self._read("releases"):
            return self.db.query(Release).filter(Release.project_id == project.id).count()

    def find_release(self, project: Project, release_id: int) -> Release:
        with self._read("release"):
            release = self.db.query(Release).filter(
                Release.id == release_id,
                Release.project_id == project.id,
            ).first()
        if not release:
            raise NotFoundError("Release not found.")
        return release

    def save_release(self, release: Release) -> Release:
        with self._write("release"):
            self.db.add(release)
        self.db.refresh(release)
        return release

    def update_release(self, release: Release) -> Release:
        with self._write("release"):
            self.db.add(release)
        self.db.refresh(release)
        return release

    def delete_release(self, release: Release) -> None:
        with self._write("release"):
            self.db.delete(release)

    # ========================================================================
    # PAGES
    # ========================================================================

    def list_pages(self, release: Release) -> List[Page]:
        """Pages of a release ordered by name"""
        with self._read("pages"):
            pages = self.db.query(Page).filter(Page.release_id == release.id).all()
        # Codepoint order regardless of database collation
        return sorted(pages, key=lambda p: p.name)

    def count_pages(self, release: Release) -> int:
        with self._read("pages"):
            return self.db.query(Page).filter(Page.release_id == release.id).count()

    def find_page(self, release: Release, page_id: int) -> Page:
        with self._read("page"):
            page = self.db.query(Page).filter(
                Page.id == page_id,
                Page.release_id == release.id,
            ).first()
        if not page:
            raise NotFoundError("Page not found.")
        return page

    def find_page_by_name(self, release: Release, name: str) -> Page:
        with self._read("page"):
            page = self.db.query(Page).filter(
                Page.name == name,
                Page.release_id == release.id,
            ).first()
        if not page:
            raise NotFoundError("Page not found.")
        return page

    def save_page(self, page: Page) -> Page:
        with self._write("page"):
            self.db.add(page)
        self.db.refresh(page)
        return page

    def delete_page(self, page: Page) -> None:
        with self._write("page"):
            self.db.delete(page)

    # ========================================================================
    # MEMBERS
    # ========================================================================

    def list_members(self) -> List[Member]:
        with self._read("members"):
            return self.db.query(Member).order_by(Member.id.asc()).all()

    def find_member(self, member_id: int) -> Member:
        with self._read("member"):
            member = self.db.query(Member).filter(Member.id == member_id).first()
        if not member:
            raise NotFoundError("Member not found.")
        return member

    def save_member(self, member: Member) -> Member:
        with self._write("member"):
            self.db.add(member)
        self.db.refresh(member)
        return member

    def update_member(self, member: Member) -> Member:
        with self._write("member"):
            self.db.add(member)
        self.db.refresh(member)
        return member

    def delete_member(self, member: Member) -> None:
        with self._write("member"):
            self.db.delete(member)

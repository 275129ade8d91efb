"""
Pytest configuration and fixtures for IMS Release tests.
"""

import base64
import io
import os
import tempfile

import pytest
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker

# Set test environment variables before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["IMAGE_DIRECTORY"] = tempfile.mkdtemp(prefix="ims_test_images_")
os.environ["SCANLATOR"] = "scans"
os.environ["AUTH_TOKEN"] = ""

from ims_release.api.v1.deps import get_blob_store
from ims_release.database import Base, create_db_engine, get_db
from ims_release.main import app
from ims_release.models import Page, Project, ProjectStatus, Release, ReleaseStatus
from ims_release.repository import Repository
from ims_release.services.blob_store import FileBlobStore
from ims_release.services.pages import generate_page_key


def make_image(fmt: str, size=(40, 60), color=(200, 30, 30)) -> bytes:
    """Encode a solid-colour image in the given Pillow format."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.fixture
def engine():
    """In-memory SQLite shared across threads."""
    db_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    import ims_release.models  # noqa: F401
    Base.metadata.create_all(bind=db_engine)
    yield db_engine
    Base.metadata.drop_all(bind=db_engine)
    db_engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def repo(db_session):
    return Repository(db_session)


@pytest.fixture
def blob_store(tmp_path):
    return FileBlobStore(tmp_path / "images")


@pytest.fixture
def client(db_session, blob_store):
    """Test client wired to the in-memory database and temporary blob store."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def png_bytes():
    return make_image("PNG")


@pytest.fixture
def jpg_bytes():
    return make_image("JPEG")


@pytest.fixture
def project(repo):
    return repo.save_project(Project(
        name="Short Story",
        shorthand="short",
        description="A short story.",
        status=ProjectStatus.ACTIVE,
    ))


@pytest.fixture
def make_release(repo, project):
    """Factory persisting releases of the default project."""

    def _make(identifier="v1", version=1, status=ReleaseStatus.DRAFT, scanlator="scans"):
        return repo.save_release(Release(
            project_id=project.id,
            identifier=identifier,
            scanlator=scanlator,
            version=version,
            status=status,
            checksum="",
        ))

    return _make


@pytest.fixture
def release(make_release):
    return make_release()


@pytest.fixture
def released_release(make_release):
    return make_release(identifier="v1", version=1, status=ReleaseStatus.RELEASED)


@pytest.fixture
def add_page(repo, blob_store, project):
    """Factory storing a page row and its image."""

    def _add(release, name, data):
        blob_store.set(generate_page_key(project.id, release.id, name), data)
        return repo.save_page(Page(release_id=release.id, name=name))

    return _add

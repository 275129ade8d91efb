"""
Tests for page upload, retrieval and deletion.
"""

import pytest

from conftest import b64
from ims_release.errors import StorageError
from ims_release.api.v1.deps import get_repository
from ims_release.main import app
from ims_release.repository import Repository
from ims_release.services.pages import generate_page_key


class FailingPageRepository(Repository):
    def save_page(self, page):
        raise StorageError()


def _pages_url(project, release):
    return f"/projects/{project.id}/releases/{release.id}/pages"


class TestPageUpload:
    """POST .../pages"""

    def test_upload_png(self, client, project, release, blob_store, png_bytes):
        response = client.post(_pages_url(project, release), json={"name": "001.png", "data": b64(png_bytes)})
        assert response.status_code == 200

        page = response.json()["result"][0]
        assert page["name"] == "001.png"
        assert page["mimeType"] == "image/png"
        assert page["releaseId"] == release.id
        assert blob_store.get(generate_page_key(project.id, release.id, "001.png")) == png_bytes

    def test_upload_jpg(self, client, project, release, jpg_bytes):
        response = client.post(_pages_url(project, release), json={"name": "002.jpg", "data": b64(jpg_bytes)})
        assert response.status_code == 200
        assert response.json()["result"][0]["mimeType"] == "image/jpeg"

    def test_jpeg_bytes_under_png_name(self, client, project, release, blob_store, jpg_bytes):
        response = client.post(_pages_url(project, release), json={"name": "fileName.png", "data": b64(jpg_bytes)})
        assert response.status_code == 417
        assert response.json()["error"] == "The uploaded image is neither a valid JPG/JPEG or PNG image."

        assert client.get(_pages_url(project, release)).json()["result"] == []
        assert not blob_store.exists(generate_page_key(project.id, release.id, "fileName.png"))

    def test_not_an_image(self, client, project, release):
        response = client.post(_pages_url(project, release), json={"name": "001.png", "data": b64(b"plain text")})
        assert response.status_code == 417

    def test_bad_base64(self, client, project, release):
        response = client.post(_pages_url(project, release), json={"name": "001.png", "data": "***"})
        assert response.status_code == 417
        assert response.json()["error"] == "The supplied image data is not base64 encoded."

    @pytest.mark.parametrize("name", ["001.gif", "001.jpeg", "001.PNG", "001"])
    def test_unsupported_suffix(self, client, project, release, png_bytes, name):
        response = client.post(_pages_url(project, release), json={"name": name, "data": b64(png_bytes)})
        assert response.status_code == 417

    def test_empty_name(self, client, project, release, png_bytes):
        response = client.post(_pages_url(project, release), json={"name": "", "data": b64(png_bytes)})
        assert response.status_code == 400
        assert response.json()["error"] == "Page name is empty."

    def test_name_too_long(self, client, project, release, png_bytes):
        name = "a" * 252 + ".png"
        response = client.post(_pages_url(project, release), json={"name": name, "data": b64(png_bytes)})
        assert response.status_code == 400

    @pytest.mark.parametrize("name", ["a/001.png", "..\\001.png"])
    def test_name_with_path_separator(self, client, project, release, png_bytes, name):
        response = client.post(_pages_url(project, release), json={"name": name, "data": b64(png_bytes)})
        assert response.status_code == 400
        assert response.json()["error"] == "Page name must not contain path separators."
        assert client.get(_pages_url(project, release)).json()["result"] == []

    def test_duplicate_name(self, client, project, release, png_bytes):
        body = {"name": "001.png", "data": b64(png_bytes)}
        assert client.post(_pages_url(project, release), json=body).status_code == 200
        assert client.post(_pages_url(project, release), json=body).status_code == 409

    def test_missing_data_field(self, client, project, release):
        response = client.post(_pages_url(project, release), json={"name": "001.png"})
        assert response.status_code == 400
        assert response.json()["error"] == "JSON format error or missing field detected."

    def test_missing_release(self, client, project, png_bytes):
        response = client.post(f"/projects/{project.id}/releases/999/pages", json={"name": "001.png", "data": b64(png_bytes)})
        assert response.status_code == 404

    def test_failed_save_removes_blob(self, client, db_session, project, release, blob_store, png_bytes):
        app.dependency_overrides[get_repository] = lambda: FailingPageRepository(db_session)
        response = client.post(_pages_url(project, release), json={"name": "001.png", "data": b64(png_bytes)})

        assert response.status_code == 500
        assert not blob_store.exists(generate_page_key(project.id, release.id, "001.png"))


class TestPageRead:
    """GET .../pages and .../pages/{name}"""

    def test_list_sorted_by_name(self, client, project, release, add_page, png_bytes, jpg_bytes):
        add_page(release, "010.png", png_bytes)
        add_page(release, "002.jpg", jpg_bytes)
        add_page(release, "001.png", png_bytes)

        response = client.get(_pages_url(project, release))
        assert response.status_code == 200
        assert [p["name"] for p in response.json()["result"]] == ["001.png", "002.jpg", "010.png"]

    def test_get_raw_image(self, client, project, release, add_page, jpg_bytes):
        add_page(release, "001.jpg", jpg_bytes)

        response = client.get(f"{_pages_url(project, release)}/001.jpg")
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/jpeg"
        assert response.content == jpg_bytes

    def test_get_missing_page(self, client, project, release):
        response = client.get(f"{_pages_url(project, release)}/404.png")
        assert response.status_code == 404


class TestPageDelete:
    """DELETE .../pages/{pageId}"""

    def test_delete_page(self, client, project, release, blob_store, add_page, png_bytes):
        page = add_page(release, "001.png", png_bytes)

        response = client.delete(f"{_pages_url(project, release)}/{page.id}")
        assert response.status_code == 200
        assert client.get(_pages_url(project, release)).json()["result"] == []
        assert not blob_store.exists(generate_page_key(project.id, release.id, "001.png"))

    def test_delete_missing_page(self, client, project, release):
        response = client.delete(f"{_pages_url(project, release)}/999")
        assert response.status_code == 404

    def test_delete_bad_page_id(self, client, project, release):
        response = client.delete(f"{_pages_url(project, release)}/first")
        assert response.status_code == 400

    def test_release_deletable_after_pages_removed(self, client, project, release, add_page, png_bytes):
        page = add_page(release, "001.png", png_bytes)
        release_url = f"/projects/{project.id}/releases/{release.id}"

        assert client.delete(release_url).status_code == 417
        assert client.delete(f"{_pages_url(project, release)}/{page.id}").status_code == 200
        assert client.delete(release_url).status_code == 200
        assert client.delete(f"/projects/{project.id}").status_code == 200

"""
Tests for the release endpoints and the edit guard over HTTP.
"""

from datetime import datetime

import pytest

from ims_release.models import ReleaseStatus


class TestReleaseCrud:
    """Create, read and delete releases."""

    def test_create_defaults(self, client, project):
        response = client.post(f"/projects/{project.id}/releases", json={"identifier": "c1"})
        assert response.status_code == 200

        release = response.json()["result"][0]
        assert release["identifier"] == "c1"
        assert release["version"] == 0
        assert release["status"] == "draft"
        assert release["scanlator"] == "scans"
        assert release["projectId"] == project.id
        assert release["checksum"] == ""
        assert "releasedOn" in release

    def test_create_released(self, client, project):
        response = client.post(
            f"/projects/{project.id}/releases",
            json={"identifier": "c2", "version": 3, "status": "released"},
        )
        assert response.status_code == 200
        assert response.json()["result"][0]["status"] == "released"

    def test_create_for_missing_project(self, client):
        response = client.post("/projects/999/releases", json={"identifier": "c1"})
        assert response.status_code == 404

    def test_create_invalid_status(self, client, project):
        response = client.post(
            f"/projects/{project.id}/releases",
            json={"identifier": "c1", "status": "unknown"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid release status: 'unknown'."

    def test_create_identifier_too_long(self, client, project):
        response = client.post(f"/projects/{project.id}/releases", json={"identifier": "x" * 11})
        assert response.status_code == 400

    def test_list_releases(self, client, project, make_release):
        make_release(identifier="c1")
        make_release(identifier="c2")
        response = client.get(f"/projects/{project.id}/releases?ordering=oldest")
        assert response.status_code == 200
        assert [r["identifier"] for r in response.json()["result"]] == ["c1", "c2"]

    def test_get_release(self, client, project, release):
        response = client.get(f"/projects/{project.id}/releases/{release.id}")
        assert response.status_code == 200
        assert response.json()["result"][0]["id"] == release.id

    def test_release_of_other_project_not_found(self, client, repo, release):
        from ims_release.models import Project, ProjectStatus
        other = repo.save_project(Project(name="Other", shorthand="other", description="", status=ProjectStatus.ACTIVE))
        response = client.get(f"/projects/{other.id}/releases/{release.id}")
        assert response.status_code == 404

    def test_bad_release_id(self, client, project):
        response = client.get(f"/projects/{project.id}/releases/first")
        assert response.status_code == 400
        assert response.json()["error"] == "Bad request."

    def test_delete_empty_release(self, client, project, release):
        response = client.delete(f"/projects/{project.id}/releases/{release.id}")
        assert response.status_code == 200
        assert client.get(f"/projects/{project.id}/releases/{release.id}").status_code == 404

    def test_delete_release_with_pages_refused(self, client, project, release, add_page, png_bytes):
        add_page(release, "001.png", png_bytes)
        response = client.delete(f"/projects/{project.id}/releases/{release.id}")
        assert response.status_code == 417
        assert response.json()["error"] == "The release still has pages. Delete them first."


class TestReleaseUpdate:
    """Edit guard mapped to 417 responses."""

    def _put(self, client, project, release, body):
        return client.put(f"/projects/{project.id}/releases/{release.id}", json=body)

    def test_downversion_of_released(self, client, project, make_release):
        release = make_release(version=5, status=ReleaseStatus.RELEASED)
        response = self._put(client, project, release, {"version": 2})
        assert response.status_code == 417
        assert response.json()["error"] == "The version of a release cannot be decreased."

        stored = client.get(f"/projects/{project.id}/releases/{release.id}").json()["result"][0]
        assert stored["version"] == 5

    @pytest.mark.parametrize("version, code", [(4, 417), (5, 417), (6, 200)])
    def test_released_version_monotonicity(self, client, project, make_release, version, code):
        release = make_release(version=5, status=ReleaseStatus.RELEASED)
        response = self._put(client, project, release, {"version": version, "status": "released"})
        assert response.status_code == code

    def test_released_identifier_change(self, client, project, released_release):
        response = self._put(client, project, released_release, {"identifier": "c9", "version": 2})
        assert response.status_code == 200

        stored = client.get(f"/projects/{project.id}/releases/{released_release.id}").json()["result"][0]
        assert stored["identifier"] == "c9"
        assert stored["version"] == 2
        assert stored["status"] == "released"

    def test_draft_to_released(self, client, project, release):
        before = release.released_on
        response = self._put(
            client, project, release,
            {"identifier": "c1", "version": 2, "status": "released"},
        )
        assert response.status_code == 200

        stored = client.get(f"/projects/{project.id}/releases/{release.id}").json()["result"][0]
        assert stored["identifier"] == "c1"
        assert stored["version"] == 2
        assert stored["status"] == "released"
        assert datetime.fromisoformat(stored["releasedOn"]) > before

    @pytest.mark.parametrize("status", ["draft", "released"])
    def test_draft_same_version_any_status(self, client, project, release, status):
        response = self._put(client, project, release, {"version": release.version, "status": status})
        assert response.status_code == 200
        assert response.json()["result"][0]["status"] == status

    def test_update_invalid_status(self, client, project, release):
        response = self._put(client, project, release, {"status": "unknown"})
        assert response.status_code == 400

    def test_update_malformed_json(self, client, project, release):
        response = client.put(
            f"/projects/{project.id}/releases/{release.id}",
            content=b"[",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "JSON format error or missing field detected."

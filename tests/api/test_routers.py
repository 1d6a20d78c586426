"""
Tests for the API router endpoints.
"""

import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from fsedit.entities.edit import EditBatchResult
from fsedit.exceptions import FileRepositoryError
from fsedit.main import app

client = TestClient(app)


@pytest.fixture
def api_container(dependency_container):
    """Route the API to a container sandboxed in the temporary directory."""
    with patch("fsedit.api.dependencies.container", dependency_container):
        yield dependency_container


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


class TestFilesReadAPI:
    """Test cases for the read-only file endpoints."""

    def test_read_file(self, api_container):
        response = client.get("/files/read", params={"path": "test1.txt", "startLine": 2, "endLine": 3})

        assert response.status_code == 200
        data = response.json()
        assert data["lines"] == ["beta", "gamma"]
        assert data["startLine"] == 2
        assert data["endLine"] == 3
        assert data["totalLines"] == 3
        assert data["encoding"] == "ascii"
        assert len(data["contentHash"]) == 64

    def test_read_file_not_found(self, api_container):
        response = client.get("/files/read", params={"path": "missing.txt"})

        assert response.status_code == 404
        assert "File does not exist" in response.json()["detail"]

    def test_read_file_access_denied(self, api_container):
        response = client.get("/files/read", params={"path": "/etc/hosts"})

        assert response.status_code == 403
        assert "Access denied" in response.json()["detail"]

    def test_read_file_invalid_range(self, api_container):
        response = client.get("/files/read", params={"path": "test1.txt", "startLine": 0})

        assert response.status_code == 400
        assert response.json()["detail"] == "StartLine must be 1 or greater (got 0)"

    def test_read_file_io_error(self):
        with patch("fsedit.api.routers.get_read_file_uc") as mock_uc:
            mock_uc.return_value.execute.side_effect = FileRepositoryError("Failed to read x")

            response = client.get("/files/read", params={"path": "x"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to read x"

    def test_read_file_missing_path_parameter(self):
        response = client.get("/files/read")

        assert response.status_code == 422

    def test_file_info(self, api_container, temp_directory):
        response = client.get("/files/info", params={"path": "test2.py"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "test2.py"
        assert data["path"] == os.path.join(temp_directory, "test2.py")
        assert data["type"] == "py"
        assert data["totalLines"] == 1

    def test_roots(self, api_container, temp_directory):
        response = client.get("/files/roots")

        assert response.status_code == 200
        assert response.json() == {"roots": [temp_directory]}


class TestFilesEditAPI:
    """Test cases for the mutating file endpoints."""

    def test_edit(self, api_container, temp_directory):
        response = client.post(
            "/files/edit",
            json={
                "path": "test1.txt",
                "edits": [{"lineNumber": 2, "type": "Insert", "text": "X"}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["editCount"] == 1
        assert data["dryRun"] is False
        assert "+X" in data["diff"].splitlines()
        assert _read(os.path.join(temp_directory, "test1.txt")) == b"alpha\nX\nbeta\ngamma\n"

    def test_edit_dry_run(self, api_container, temp_directory):
        response = client.post(
            "/files/edit",
            json={
                "path": "test1.txt",
                "edits": [{"lineNumber": 1, "type": "Delete"}],
                "dryRun": True,
            },
        )

        assert response.json()["dryRun"] is True
        assert _read(os.path.join(temp_directory, "test1.txt")) == b"alpha\nbeta\ngamma\n"

    def test_edit_failure_has_all_errors(self, api_container):
        response = client.post(
            "/files/edit",
            json={
                "path": "test1.txt",
                "edits": [
                    {"lineNumber": 7, "type": "Delete"},
                    {"lineNumber": 1, "type": "Replace", "oldText": "zzz", "text": "a"},
                    {"lineNumber": 0, "type": "Insert", "text": "a"},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert len(data["errors"]) == 2

    def test_edit_schema_error(self, api_container):
        response = client.post(
            "/files/edit",
            json={"path": "test1.txt", "edits": [{"lineNumber": 1, "type": "Explode"}]},
        )

        data = response.json()
        assert data["success"] is False
        assert data["errors"] == ["Edit #1: type: Unknown edit type: 'Explode'"]

    def test_edit_passes_options(self):
        with patch("fsedit.api.routers.get_edit_file_uc") as mock_uc:
            mock_uc.return_value.run.return_value = EditBatchResult(success=True, message="ok")

            response = client.post(
                "/files/edit",
                json={
                    "path": "a.txt",
                    "edits": [],
                    "options": {"encoding": "utf16be", "preserveOriginalEncoding": False},
                },
            )

        assert response.status_code == 200
        mock_uc.return_value.run.assert_called_once_with(
            "a.txt",
            [],
            dry_run=False,
            options={"encoding": "utf16be", "preserveOriginalEncoding": False},
        )

    def test_write(self, api_container, temp_directory):
        response = client.post(
            "/files/write",
            json={"path": "out/new.txt", "content": "x\n", "options": {"encoding": "utf16le"}},
        )

        data = response.json()
        assert data["success"] is True
        assert data["preservedEncoding"] == "utf16le"
        assert _read(os.path.join(temp_directory, "out", "new.txt")) == b"\xff\xfex\x00\n\x00"

    def test_write_outside_roots(self, api_container):
        response = client.post("/files/write", json={"path": "/tmp/../elsewhere.txt", "content": "x"})

        assert response.status_code == 200
        assert response.json()["success"] is False

    def test_replace_text(self, api_container, temp_directory):
        response = client.post(
            "/files/replace-text",
            json={"path": "test1.txt", "oldText": "gamma", "newText": "GAMMA"},
        )

        assert response.json()["success"] is True
        assert _read(os.path.join(temp_directory, "test1.txt")) == b"alpha\nbeta\nGAMMA\n"

class TestFilesPathsAPI:
    """Test cases for the directory, move and copy endpoints."""

    def test_mkdir(self, api_container, temp_directory):
        response = client.post("/files/mkdir", json={"path": "a/b"})

        assert response.status_code == 200
        assert response.json() == {"path": os.path.join(temp_directory, "a", "b"), "created": True}

    def test_mkdir_over_file(self, api_container):
        response = client.post("/files/mkdir", json={"path": "test1.txt"})

        assert response.status_code == 409

    def test_move(self, api_container, temp_directory):
        response = client.post(
            "/files/move", json={"source": "subdir", "destination": "docs"}
        )

        assert response.status_code == 200
        assert response.json()["kind"] == "directory"
        assert os.path.isfile(os.path.join(temp_directory, "docs", "test3.md"))

    def test_move_missing_source(self, api_container):
        response = client.post("/files/move", json={"source": "nope", "destination": "x"})

        assert response.status_code == 404

    def test_move_into_itself(self, api_container):
        response = client.post(
            "/files/move", json={"source": "subdir", "destination": "subdir/deeper"}
        )

        assert response.status_code == 400
        assert "into itself" in response.json()["detail"]

    def test_copy(self, api_container, temp_directory):
        response = client.post(
            "/files/copy", json={"source": "test1.txt", "destination": "copy.txt"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "copy.txt"
        assert data["size"] == 17
        assert _read(os.path.join(temp_directory, "copy.txt")) == b"alpha\nbeta\ngamma\n"

    def test_copy_existing_destination(self, api_container):
        response = client.post(
            "/files/copy", json={"source": "test1.txt", "destination": "test2.py"}
        )

        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_copy_outside_roots(self, api_container):
        response = client.post(
            "/files/copy", json={"source": "test1.txt", "destination": "/etc/copied"}
        )

        assert response.status_code == 403



class TestToolsAPI:
    """Test cases for the tools endpoints."""

    def test_list_tools(self, api_container):
        response = client.get("/tools")

        assert response.status_code == 200
        assert len(response.json()["tools"]) == 9

    def test_call_tool(self, api_container):
        response = client.post("/tools/files.read", json={"arguments": {"path": "test1.txt"}})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "files.read"
        assert data["result"]["lines"] == ["alpha", "beta", "gamma"]

    def test_unknown_tool(self, api_container):
        response = client.post("/tools/files.nope", json={"arguments": {}})

        assert response.status_code == 404
        assert response.json()["detail"] == "Unknown tool: files.nope"

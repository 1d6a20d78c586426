"""
Tests for the 'files.*' tools handler.
"""

import json
import os

import pytest


@pytest.fixture
def tools(dependency_container):
    return dependency_container.get_files_tools_handler()


def _call(tools, name, arguments):
    return json.loads(tools.dispatch(name, arguments))


class TestFilesToolsHandler:
    """Test cases for FilesToolsHandler."""

    def test_available_tools(self, tools):
        names = [spec["name"] for spec in tools.available_tools()]

        assert names == [
            "files.read",
            "files.write",
            "files.edit",
            "files.replace_text",
            "files.info",
            "files.mkdir",
            "files.move",
            "files.copy",
            "files.roots",
        ]
        for spec in tools.available_tools():
            assert spec["parameters"]["type"] == "object"

    def test_unknown_tool(self, tools):
        with pytest.raises(ValueError, match="Unknown tool: files.delete"):
            tools.dispatch("files.delete", {})

    def test_read(self, tools):
        result = _call(tools, "files.read", {"path": "test1.txt", "startLine": 2})

        assert result["status"] == "ok"
        assert result["lines"] == ["beta", "gamma"]
        assert result["totalLines"] == 3
        assert result["encoding"] == "ascii"

    def test_read_rejects_non_integer_line(self, tools):
        result = _call(tools, "files.read", {"path": "test1.txt", "startLine": "2"})

        assert result["status"] == "error"
        assert result["message"] == "'startLine' must be an integer"

    def test_read_missing_file(self, tools):
        result = _call(tools, "files.read", {"path": "missing.txt"})

        assert result["status"] == "error"
        assert result["message"].startswith("File does not exist")
        assert result["errors"] == [result["message"]]

    def test_edit(self, tools, temp_directory):
        result = _call(
            tools,
            "files.edit",
            {
                "path": "test1.txt",
                "edits": [
                    {"lineNumber": 2, "type": "Replace", "oldText": "eta", "text": "ETA"},
                    {"lineNumber": 4, "type": "Insert", "text": "delta"},
                ],
            },
        )

        assert result["success"] is True
        assert result["editCount"] == 2
        assert result["preservedEncoding"] == "ascii"
        with open(os.path.join(temp_directory, "test1.txt"), "rb") as f:
            assert f.read() == b"alpha\nbETA\ngamma\ndelta\n"

    def test_edit_dry_run(self, tools, temp_directory):
        result = _call(
            tools,
            "files.edit",
            {"path": "test1.txt", "edits": [{"lineNumber": 1, "type": "Delete"}], "dryRun": True},
        )

        assert result["success"] is True
        assert result["dryRun"] is True
        with open(os.path.join(temp_directory, "test1.txt"), "rb") as f:
            assert f.read() == b"alpha\nbeta\ngamma\n"

    def test_edit_failure_is_a_result(self, tools):
        result = _call(
            tools,
            "files.edit",
            {"path": "test1.txt", "edits": [{"lineNumber": 9, "type": "Delete"}]},
        )

        assert result["success"] is False
        assert result["errors"] == ["Edit #1 (line 9): Cannot delete line 9: file has 3 lines"]

    def test_write_keeps_non_ascii_text(self, tools, temp_directory):
        raw = tools.dispatch(
            "files.write",
            {"path": "new.txt", "content": "déjà vu\n", "options": {"encoding": "utf8-bom"}},
        )

        assert "utf8-bom" in raw
        with open(os.path.join(temp_directory, "new.txt"), "rb") as f:
            assert f.read() == b"\xef\xbb\xbf" + "déjà vu\n".encode("utf-8")
        assert "déjà vu" in _call(tools, "files.read", {"path": "new.txt"})["lines"]

    def test_replace_text(self, tools):
        result = _call(
            tools, "files.replace_text", {"path": "test2.py", "oldText": "world", "newText": "there"}
        )

        assert result["success"] is True
        assert result["editCount"] == 1

    def test_info(self, tools):
        result = _call(tools, "files.info", {"path": "subdir/test3.md"})

        assert result["status"] == "ok"
        assert result["name"] == "test3.md"
        assert result["totalLines"] == 3

    def test_roots(self, tools, temp_directory):
        assert _call(tools, "files.roots", {}) == {"status": "ok", "roots": [temp_directory]}

    def test_arguments_must_be_an_object(self, tools):
        result = _call(tools, "files.read", ["test1.txt"])

        assert result["status"] == "error"
        assert result["message"] == "Tool arguments must be an object"

    def test_mkdir(self, tools, temp_directory):
        result = _call(tools, "files.mkdir", {"path": "build/out"})

        assert result == {
            "status": "ok",
            "path": os.path.join(temp_directory, "build", "out"),
            "created": True,
        }

    def test_move(self, tools, temp_directory):
        result = _call(tools, "files.move", {"source": "test2.py", "destination": "src/main.py"})

        assert result["status"] == "ok"
        assert result["kind"] == "file"
        assert os.path.isfile(os.path.join(temp_directory, "src", "main.py"))

    def test_move_to_existing_destination(self, tools):
        result = _call(tools, "files.move", {"source": "test1.txt", "destination": "test2.py"})

        assert result["status"] == "error"
        assert result["message"].startswith("Destination path already exists")

    def test_copy(self, tools, temp_directory):
        result = _call(tools, "files.copy", {"source": "test1.txt", "destination": "copy.txt"})

        assert result["status"] == "ok"
        assert result["path"] == os.path.join(temp_directory, "copy.txt")
        assert _call(tools, "files.read", {"path": "copy.txt"})["lines"] == ["alpha", "beta", "gamma"]

    def test_copy_rejects_non_boolean_overwrite(self, tools):
        result = _call(
            tools,
            "files.copy",
            {"source": "test1.txt", "destination": "test2.py", "overwrite": "yes"},
        )

        assert result["status"] == "error"
        assert result["message"] == "'overwrite' must be a boolean"

    def test_copy_outside_roots(self, tools):
        result = _call(tools, "files.copy", {"source": "test1.txt", "destination": "/etc/copied"})

        assert result["status"] == "error"
        assert "Access denied" in result["message"]

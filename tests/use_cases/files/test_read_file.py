"""
Tests for the ReadFileUseCase.
"""

import os

import pytest

from fsedit.entities.encoding import FileEncoding
from fsedit.exceptions import AccessDeniedError, EditValidationError, NotFoundError
from fsedit.use_cases.editing.content_hasher import compute_content_hash
from fsedit.use_cases.files.read_file import ReadFileUseCase


@pytest.fixture
def read_uc(file_repository, sandbox, mock_logger):
    return ReadFileUseCase(file_repository, sandbox, mock_logger)


class TestReadFileUseCase:
    """Test cases for ReadFileUseCase."""

    def test_read_whole_file(self, read_uc, temp_directory):
        path = os.path.join(temp_directory, "test1.txt")

        result = read_uc.execute(path)

        assert result.path == path
        assert result.lines == ["alpha", "beta", "gamma"]
        assert result.start_line == 1
        assert result.end_line == 3
        assert result.total_lines == 3
        assert result.encoding is FileEncoding.ASCII
        assert result.content_hash == compute_content_hash(b"alpha\nbeta\ngamma\n")

    def test_read_range(self, read_uc):
        result = read_uc.execute("test1.txt", 2, 2)

        assert result.lines == ["beta"]
        assert result.start_line == 2
        assert result.end_line == 2
        # the hash always covers the whole file
        assert result.content_hash == compute_content_hash(b"alpha\nbeta\ngamma\n")

    def test_end_is_clamped(self, read_uc):
        result = read_uc.execute("test1.txt", 2, 99)

        assert result.lines == ["beta", "gamma"]
        assert result.end_line == 3

    def test_start_beyond_end_of_file(self, read_uc):
        result = read_uc.execute("test1.txt", 5)

        assert result.lines == []
        assert result.start_line == 5
        assert result.end_line == 4

    def test_crlf_file(self, read_uc):
        result = read_uc.execute("subdir/test3.md")

        assert result.lines == ["# Test Markdown", "", "This is a test."]

    def test_utf16_file(self, read_uc, make_file):
        path = make_file("wide.txt", b"\xfe\xff" + "ein\nzwei".encode("utf-16-be"))

        result = read_uc.execute(path)

        assert result.lines == ["ein", "zwei"]
        assert result.encoding is FileEncoding.UTF16_BE

    def test_empty_file(self, read_uc, make_file):
        result = read_uc.execute(make_file("empty.txt", b""))

        assert result.lines == []
        assert result.total_lines == 0
        assert result.end_line == 0

    def test_invalid_start(self, read_uc):
        with pytest.raises(EditValidationError, match="Invalid line range") as exc_info:
            read_uc.execute("test1.txt", 0)

        assert exc_info.value.errors == ["StartLine must be 1 or greater (got 0)"]

    def test_end_before_start(self, read_uc):
        with pytest.raises(EditValidationError) as exc_info:
            read_uc.execute("test1.txt", 3, 2)

        assert exc_info.value.errors == ["EndLine (2) must not be before StartLine"]

    def test_missing_file(self, read_uc):
        with pytest.raises(NotFoundError):
            read_uc.execute("missing.txt")

    def test_outside_roots(self, read_uc):
        with pytest.raises(AccessDeniedError):
            read_uc.execute("../outside.txt")

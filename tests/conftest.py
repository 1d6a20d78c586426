"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from fsedit.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fsedit.adapters.files.root_sandbox_adapter import RootSandboxAdapter
from fsedit.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Real path of the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        with open(os.path.join(temp_dir, "test1.txt"), "wb") as f:
            f.write(b"alpha\nbeta\ngamma\n")

        with open(os.path.join(temp_dir, "test2.py"), "wb") as f:
            f.write(b"print('Hello, world!')")

        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "test3.md"), "wb") as f:
            f.write(b"# Test Markdown\r\n\r\nThis is a test.\r\n")

        yield temp_dir


@pytest.fixture
def make_file(temp_directory):
    """
    Factory writing raw bytes to a file inside the temporary directory.

    Returns:
        Callable (name, data) -> absolute path
    """

    def _make(name: str, data: bytes) -> str:
        path = os.path.join(temp_directory, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
        return path

    return _make


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def file_repository(mock_logger):
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def sandbox(temp_directory, mock_logger):
    return RootSandboxAdapter([temp_directory], mock_logger)


@pytest.fixture
def dependency_container(temp_directory, mock_logger):
    """
    Create a dependency container whose sandbox is the temporary directory.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(roots=[temp_directory])
    # Replace the logger with our mock
    container._logger = mock_logger
    return container

"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from fsedit.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fsedit.adapters.files.root_sandbox_adapter import RootSandboxAdapter
from fsedit.config.settings import Settings, settings as default_settings
from fsedit.ports.files.file_repository_port import FileRepositoryPort
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.ports.tools.tools_port import ToolsHandlerPort
from fsedit.use_cases.files.copy_file import CopyFileUseCase
from fsedit.use_cases.files.create_directory import CreateDirectoryUseCase
from fsedit.use_cases.files.edit_file import EditFileUseCase
from fsedit.use_cases.files.file_info import FileInfoUseCase
from fsedit.use_cases.files.move_path import MovePathUseCase
from fsedit.use_cases.files.read_file import ReadFileUseCase
from fsedit.use_cases.files.replace_text import ReplaceTextUseCase
from fsedit.use_cases.files.write_file import WriteFileUseCase
from fsedit.use_cases.tools.files_tools import FilesToolsHandler


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    The accessible roots come from the settings unless given explicitly, so
    several containers with independent sandboxes can coexist.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        roots: Optional[list[str]] = None,
    ):
        self._settings = settings
        self._roots = roots
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get the application settings.

        Returns:
            The settings given at construction, or the global settings
        """
        return self._settings or default_settings

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_sandbox(self) -> SandboxPort:
        """
        Get sandbox adapter instance.

        Returns:
            SandboxPort implementation over the accessible roots
        """
        if "sandbox" not in self._instances:
            roots = self._roots if self._roots is not None else self.get_settings().roots
            self._instances["sandbox"] = RootSandboxAdapter(roots, self._logger)
        return self._instances["sandbox"]

    def get_edit_file_use_case(self) -> EditFileUseCase:
        """
        Get edit file use case with injected dependencies.

        Returns:
            Configured EditFileUseCase
        """
        if "edit_file_use_case" not in self._instances:
            self._instances["edit_file_use_case"] = EditFileUseCase(
                self.get_file_repository(),
                self.get_sandbox(),
                self._logger,
                max_diff_bytes=self.get_settings().max_diff_bytes,
            )
        return self._instances["edit_file_use_case"]

    def get_read_file_use_case(self) -> ReadFileUseCase:
        """
        Get read file use case with injected dependencies.

        Returns:
            Configured ReadFileUseCase
        """
        if "read_file_use_case" not in self._instances:
            self._instances["read_file_use_case"] = ReadFileUseCase(
                self.get_file_repository(), self.get_sandbox(), self._logger
            )
        return self._instances["read_file_use_case"]

    def get_write_file_use_case(self) -> WriteFileUseCase:
        """
        Get write file use case with injected dependencies.

        Returns:
            Configured WriteFileUseCase
        """
        if "write_file_use_case" not in self._instances:
            self._instances["write_file_use_case"] = WriteFileUseCase(
                self.get_file_repository(),
                self.get_sandbox(),
                self._logger,
                max_diff_bytes=self.get_settings().max_diff_bytes,
                default_encoding=self.get_settings().default_encoding,
            )
        return self._instances["write_file_use_case"]

    def get_replace_text_use_case(self) -> ReplaceTextUseCase:
        """
        Get replace text use case with injected dependencies.

        Returns:
            Configured ReplaceTextUseCase
        """
        if "replace_text_use_case" not in self._instances:
            self._instances["replace_text_use_case"] = ReplaceTextUseCase(
                self.get_file_repository(),
                self.get_sandbox(),
                self._logger,
                max_diff_bytes=self.get_settings().max_diff_bytes,
            )
        return self._instances["replace_text_use_case"]

    def get_file_info_use_case(self) -> FileInfoUseCase:
        """
        Get file info use case with injected dependencies.

        Returns:
            Configured FileInfoUseCase
        """
        if "file_info_use_case" not in self._instances:
            self._instances["file_info_use_case"] = FileInfoUseCase(
                self.get_file_repository(), self.get_sandbox(), self._logger
            )
        return self._instances["file_info_use_case"]

    def get_create_directory_use_case(self) -> CreateDirectoryUseCase:
        """
        Get create directory use case with injected dependencies.

        Returns:
            Configured CreateDirectoryUseCase
        """
        if "create_directory_use_case" not in self._instances:
            self._instances["create_directory_use_case"] = CreateDirectoryUseCase(
                self.get_file_repository(), self.get_sandbox(), self._logger
            )
        return self._instances["create_directory_use_case"]

    def get_move_path_use_case(self) -> MovePathUseCase:
        if "move_path_use_case" not in self._instances:
            self._instances["move_path_use_case"] = MovePathUseCase(
                self.get_file_repository(), self.get_sandbox(), self._logger
            )
        return self._instances["move_path_use_case"]

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        if "copy_file_use_case" not in self._instances:
            self._instances["copy_file_use_case"] = CopyFileUseCase(
                self.get_file_repository(), self.get_sandbox(), self._logger
            )
        return self._instances["copy_file_use_case"]

    def get_files_tools_handler(self) -> ToolsHandlerPort:
        """
        Registry of the 'files.*' tools backed by the file use cases.
        """
        if "files_tools_handler" not in self._instances:
            self._instances["files_tools_handler"] = FilesToolsHandler(
                self.get_edit_file_use_case(),
                self.get_read_file_use_case(),
                self.get_write_file_use_case(),
                self.get_replace_text_use_case(),
                self.get_file_info_use_case(),
                self.get_create_directory_use_case(),
                self.get_move_path_use_case(),
                self.get_copy_file_use_case(),
                self.get_sandbox(),
                self._logger,
            )
        return self._instances["files_tools_handler"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

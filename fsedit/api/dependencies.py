"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from fsedit.container import container
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


def get_edit_file_uc() -> EditFileUseCase:
    """
    Get the edit file use case from the container.

    Returns:
        EditFileUseCase: The edit file use case instance
    """
    return container.get_edit_file_use_case()


def get_read_file_uc() -> ReadFileUseCase:
    """
    Get the read file use case from the container.

    Returns:
        ReadFileUseCase: The read file use case instance
    """
    return container.get_read_file_use_case()


def get_write_file_uc() -> WriteFileUseCase:
    return container.get_write_file_use_case()


def get_replace_text_uc() -> ReplaceTextUseCase:
    return container.get_replace_text_use_case()


def get_file_info_uc() -> FileInfoUseCase:
    return container.get_file_info_use_case()


def get_create_directory_uc() -> CreateDirectoryUseCase:
    return container.get_create_directory_use_case()


def get_move_path_uc() -> MovePathUseCase:
    return container.get_move_path_use_case()


def get_copy_file_uc() -> CopyFileUseCase:
    return container.get_copy_file_use_case()


def get_sandbox() -> SandboxPort:
    return container.get_sandbox()


def get_files_tools() -> ToolsHandlerPort:
    """
    Get the files tools handler from the container.

    Returns:
        ToolsHandlerPort: The 'files.*' tools handler
    """
    return container.get_files_tools_handler()

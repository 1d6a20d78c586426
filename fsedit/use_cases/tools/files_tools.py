"""
Tools "files.*" mapped to the file use cases.
"""

import json
import logging
from typing import Any, Callable, Optional

from fsedit.exceptions import EditError, SchemaError
from fsedit.ports.files.sandbox_port import SandboxPort
from fsedit.ports.tools.tools_port import ToolsHandlerPort, ToolSpec
from fsedit.use_cases.files.copy_file import CopyFileUseCase
from fsedit.use_cases.files.create_directory import CreateDirectoryUseCase
from fsedit.use_cases.files.edit_file import EditFileUseCase
from fsedit.use_cases.files.file_info import FileInfoUseCase
from fsedit.use_cases.files.move_path import MovePathUseCase
from fsedit.use_cases.files.read_file import ReadFileUseCase
from fsedit.use_cases.files.replace_text import ReplaceTextUseCase
from fsedit.use_cases.files.write_file import WriteFileUseCase

_ENCODINGS = ["utf8", "utf8-bom", "ascii", "utf16le", "utf16be", "utf32le", "system", "auto"]

_EDIT_ITEM_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "lineNumber": {
            "type": "integer",
            "description": "1-based line number in the file as it is before this batch",
        },
        "type": {
            "type": "string",
            "enum": ["Insert", "Delete", "Replace", "ReplaceSection"],
        },
        "text": {
            "type": "string",
            "description": "New text; use \\n to produce several lines",
        },
        "oldText": {
            "type": "string",
            "description": "Replace only: substring of the line to replace (first match)",
        },
        "endLine": {
            "type": "integer",
            "description": "ReplaceSection only: last line of the section (inclusive)",
        },
    },
    "required": ["lineNumber", "type"],
}

_OPTIONS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "encoding": {"type": "string", "enum": _ENCODINGS},
        "preserveOriginalEncoding": {"type": "boolean"},
    },
    "additionalProperties": False,
}


class FilesToolsHandler(ToolsHandlerPort):
    """Handler for file tools that can be called by an LLM."""

    def __init__(
        self,
        edit_file_uc: EditFileUseCase,
        read_file_uc: ReadFileUseCase,
        write_file_uc: WriteFileUseCase,
        replace_text_uc: ReplaceTextUseCase,
        file_info_uc: FileInfoUseCase,
        create_directory_uc: CreateDirectoryUseCase,
        move_path_uc: MovePathUseCase,
        copy_file_uc: CopyFileUseCase,
        sandbox: SandboxPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the files tools handler.

        Args:
            edit_file_uc: Use case for line edit batches
            read_file_uc: Use case for reading lines
            write_file_uc: Use case for whole-file writes
            replace_text_uc: Use case for simple text substitution
            file_info_uc: Use case for file metadata
            create_directory_uc: Use case for creating directories
            move_path_uc: Use case for moving files and directories
            copy_file_uc: Use case for copying files
            sandbox: Access control, queried for the accessible roots
            logger: Logger instance to use for logging
        """
        self._edit_file_uc = edit_file_uc
        self._read_file_uc = read_file_uc
        self._write_file_uc = write_file_uc
        self._replace_text_uc = replace_text_uc
        self._file_info_uc = file_info_uc
        self._create_directory_uc = create_directory_uc
        self._move_path_uc = move_path_uc
        self._copy_file_uc = copy_file_uc
        self._sandbox = sandbox
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            "files.read": self._handle_read,
            "files.write": self._handle_write,
            "files.edit": self._handle_edit,
            "files.replace_text": self._handle_replace_text,
            "files.info": self._handle_info,
            "files.mkdir": self._handle_mkdir,
            "files.move": self._handle_move,
            "files.copy": self._handle_copy,
            "files.roots": self._handle_roots,
        }

    # ------------------------- internal helpers -------------------------
    @staticmethod
    def _optional_int(arguments: dict[str, Any], key: str) -> Optional[int]:
        value = arguments.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise SchemaError(f"'{key}' must be an integer")
        return value

    def _handle_read(self, arguments: dict[str, Any]) -> dict[str, Any]:
        result = self._read_file_uc.execute(
            str(arguments.get("path") or ""),
            self._optional_int(arguments, "startLine"),
            self._optional_int(arguments, "endLine"),
        )
        return {"status": "ok", **result.to_dict()}

    def _handle_write(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return self._write_file_uc.run(
            str(arguments.get("path") or ""),
            arguments.get("content"),
            arguments.get("options"),
        ).to_dict()

    def _handle_edit(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return self._edit_file_uc.run(
            str(arguments.get("path") or ""),
            arguments.get("edits"),
            dry_run=bool(arguments.get("dryRun", False)),
            options=arguments.get("options"),
        ).to_dict()

    def _handle_replace_text(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return self._replace_text_uc.run(
            str(arguments.get("path") or ""),
            arguments.get("oldText"),
            arguments.get("newText"),
            dry_run=bool(arguments.get("dryRun", False)),
        ).to_dict()

    def _handle_info(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return {"status": "ok", **self._file_info_uc.execute(str(arguments.get("path") or ""))}

    def _handle_mkdir(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return {
            "status": "ok",
            **self._create_directory_uc.execute(str(arguments.get("path") or "")),
        }

    def _handle_move(self, arguments: dict[str, Any]) -> dict[str, Any]:
        result = self._move_path_uc.execute(
            str(arguments.get("source") or ""), str(arguments.get("destination") or "")
        )
        return {"status": "ok", **result}

    def _handle_copy(self, arguments: dict[str, Any]) -> dict[str, Any]:
        overwrite = arguments.get("overwrite", False)
        if not isinstance(overwrite, bool):
            raise SchemaError("'overwrite' must be a boolean")
        result = self._copy_file_uc.execute(
            str(arguments.get("source") or ""),
            str(arguments.get("destination") or ""),
            overwrite=overwrite,
        )
        return {"status": "ok", **result}

    def _handle_roots(self, arguments: dict[str, Any]) -> dict[str, Any]:
        return {"status": "ok", "roots": self._sandbox.roots()}

    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available file tools.

        Returns:
            List of tool specifications for file operations
        """
        return [
            {
                "name": "files.read",
                "description": (
                    "Read lines of a text file with automatic encoding detection. "
                    "Returns numbered-range lines, total line count, encoding and a SHA-256 content hash."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string"},
                        "startLine": {"type": "integer", "description": "First line (1-based)"},
                        "endLine": {"type": "integer", "description": "Last line (inclusive)"},
                    },
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.write",
                "description": "Create a new file or completely overwrite an existing file.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string"},
                        "content": {"type": "string"},
                        "options": _OPTIONS_SCHEMA,
                    },
                    "required": ["path", "content"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.edit",
                "description": (
                    "Apply a batch of line edits in one step. All line numbers refer to the file "
                    "before the batch. The batch is all-or-nothing: any invalid edit or missing "
                    "oldText leaves the file untouched and every error is reported. The file's "
                    "encoding is preserved by default. Concurrent edits of the same file are not "
                    "guarded against, and a write failure can leave the file incomplete."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string"},
                        "edits": {"type": "array", "items": _EDIT_ITEM_SCHEMA},
                        "dryRun": {
                            "type": "boolean",
                            "description": "Preview the diff without writing (default: false)",
                        },
                        "options": _OPTIONS_SCHEMA,
                    },
                    "required": ["path", "edits"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.replace_text",
                "description": "Replace the first occurrence of a text anywhere in a file.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string"},
                        "oldText": {"type": "string"},
                        "newText": {"type": "string"},
                        "dryRun": {"type": "boolean"},
                    },
                    "required": ["path", "oldText", "newText"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.info",
                "description": "Get size, modification time, encoding, line count and content hash of a file.",
                "parameters": {
                    "type": "object",
                    "properties": {"path": {"type": "string"}},
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.mkdir",
                "description": "Create a directory, including missing parents. Succeeds if it already exists.",
                "parameters": {
                    "type": "object",
                    "properties": {"path": {"type": "string"}},
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.move",
                "description": "Move or rename a file or directory. The destination must not exist.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "source": {"type": "string"},
                        "destination": {"type": "string"},
                    },
                    "required": ["source", "destination"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.copy",
                "description": "Copy a file to a new location.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "source": {"type": "string"},
                        "destination": {"type": "string"},
                        "overwrite": {
                            "type": "boolean",
                            "description": "Replace an existing destination file (default: false)",
                        },
                    },
                    "required": ["source", "destination"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "files.roots",
                "description": "List the directories that may be read and edited.",
                "parameters": {
                    "type": "object",
                    "properties": {},
                    "additionalProperties": False,
                },
            },
        ]

    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Dispatch a tool invocation to the appropriate use case.

        Args:
            name: Name of the tool to invoke
            arguments: Arguments to pass to the tool

        Returns:
            JSON-encoded result; failures are encoded too, never raised

        Raises:
            ValueError: If the tool name is unknown
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")

        self._logger.info(f"Executing {name} tool")
        try:
            if not isinstance(arguments, dict):
                raise SchemaError("Tool arguments must be an object")
            payload = handler(arguments)
        except EditError as e:
            self._logger.warning(f"{name} error: {e}")
            payload = {"status": "error", "message": str(e), "errors": e.errors}
        except Exception as e:
            self._logger.error(f"{name} error: {e}")
            payload = {"status": "error", "message": str(e), "errors": [str(e)]}
        return json.dumps(payload, ensure_ascii=False)

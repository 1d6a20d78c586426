"""
Pydantic models for API requests and responses.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from fsedit.entities.edit import EditBatchResult, ReadResult


class ReadFileResponse(BaseModel):
    """Schema for a range of lines read from a file."""

    path: str = Field(..., description="Absolute file path")
    lines: List[str] = Field(..., description="Requested lines, without terminators")
    startLine: int = Field(..., description="First returned line (1-based)")
    endLine: int = Field(..., description="Last returned line (inclusive)")
    totalLines: int = Field(..., description="Number of lines in the file")
    encoding: str = Field(..., description="Detected encoding")
    contentHash: str = Field(..., description="SHA-256 of the file bytes")

    @classmethod
    def from_result(cls, result: ReadResult):
        """Create a ReadFileResponse from a ReadResult entity."""
        return cls(**result.to_dict())


class FileInfoResponse(BaseModel):
    """Schema for file information."""

    name: str = Field(..., description="File name")
    path: str = Field(..., description="Full file path")
    size: int = Field(..., description="File size in bytes")
    type: str = Field(..., description="File type/extension")
    modified: float = Field(..., description="Modification time (epoch seconds)")
    encoding: str = Field(..., description="Detected encoding")
    totalLines: int = Field(..., description="Number of lines")
    contentHash: str = Field(..., description="SHA-256 of the file bytes")


class RootsResponse(BaseModel):
    """Schema for the accessible directories."""

    roots: List[str] = Field(..., description="Accessible root directories")


class WriteOptionsModel(BaseModel):
    """Schema for write options."""

    encoding: Optional[str] = Field(
        None,
        description="utf8, utf8-bom, ascii, utf16le, utf16be, utf32le, system or auto",
    )
    preserveOriginalEncoding: Optional[bool] = Field(
        None, description="Keep the encoding of the existing file"
    )


class WriteFileRequest(BaseModel):
    """Schema for a whole-file write."""

    path: str = Field(..., description="File path")
    content: str = Field(..., description="Content to write")
    options: Optional[WriteOptionsModel] = Field(None, description="Encoding options")


class EditFileRequest(BaseModel):
    """Schema for a batch of line edits."""

    path: str = Field(..., description="File path")
    edits: List[Any] = Field(
        ..., description="Edit objects: {lineNumber, type, text?, oldText?, endLine?}"
    )
    dryRun: bool = Field(False, description="Preview without writing")
    options: Optional[WriteOptionsModel] = Field(None, description="Encoding options")


class ReplaceTextRequest(BaseModel):
    """Schema for the simple text substitution."""

    path: str = Field(..., description="File path")
    oldText: str = Field(..., description="Text to find (first occurrence)")
    newText: str = Field(..., description="Replacement text")
    dryRun: bool = Field(False, description="Preview without writing")


class CreateDirectoryRequest(BaseModel):
    """Schema for creating a directory."""

    path: str = Field(..., description="Directory path")


class CreateDirectoryResponse(BaseModel):
    """Schema for a created directory."""

    path: str = Field(..., description="Absolute directory path")
    created: bool = Field(..., description="False if the directory already existed")


class MovePathRequest(BaseModel):
    """Schema for moving a file or directory."""

    source: str = Field(..., description="Existing file or directory")
    destination: str = Field(..., description="New path; must not exist")


class MovePathResponse(BaseModel):
    """Schema for a completed move."""

    source: str = Field(..., description="Absolute source path")
    destination: str = Field(..., description="Absolute destination path")
    kind: str = Field(..., description="'file' or 'directory'")


class CopyFileRequest(BaseModel):
    """Schema for copying a file."""

    source: str = Field(..., description="File to copy")
    destination: str = Field(..., description="Path of the copy")
    overwrite: bool = Field(False, description="Replace an existing destination file")


class CopyFileResponse(BaseModel):
    """Schema for a completed copy."""

    source: str = Field(..., description="Absolute source path")
    path: str = Field(..., description="Absolute path of the copy")
    name: str = Field(..., description="File name of the copy")
    size: int = Field(..., description="Size of the copy in bytes")


class EditResultResponse(BaseModel):
    """Schema for the result of a write or edit."""

    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable summary")
    editCount: int = Field(0, description="Number of applied edits")
    diff: str = Field("", description="Unified diff of the change")
    preservedEncoding: Optional[str] = Field(None, description="Encoding used to write")
    contentHash: Optional[str] = Field(None, description="SHA-256 of the final bytes")
    errors: List[str] = Field(default_factory=list, description="Every discovered error")
    dryRun: bool = Field(False, description="Whether the file was left untouched on purpose")

    @classmethod
    def from_result(cls, result: EditBatchResult):
        """Create an EditResultResponse from an EditBatchResult entity."""
        return cls(**result.to_dict())


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")


class ToolCallRequest(BaseModel):
    """Schema for invoking one tool."""

    arguments: dict[str, Any] = Field(
        default_factory=dict, description="Arguments passed to the tool"
    )


class ToolCallResponse(BaseModel):
    """Schema for a tool result."""

    name: str = Field(..., description="Tool name")
    result: dict[str, Any] = Field(..., description="Decoded tool result")

"""
FastAPI router definitions for the API endpoints.
"""

import json
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from fsedit.api.dependencies import (
    get_copy_file_uc,
    get_create_directory_uc,
    get_edit_file_uc,
    get_file_info_uc,
    get_files_tools,
    get_move_path_uc,
    get_read_file_uc,
    get_replace_text_uc,
    get_sandbox,
    get_write_file_uc,
)
from fsedit.api.schemas import (
    CopyFileRequest,
    CopyFileResponse,
    CreateDirectoryRequest,
    CreateDirectoryResponse,
    EditFileRequest,
    EditResultResponse,
    ErrorResponse,
    FileInfoResponse,
    MovePathRequest,
    MovePathResponse,
    ReadFileResponse,
    ReplaceTextRequest,
    RootsResponse,
    ToolCallRequest,
    ToolCallResponse,
    WriteFileRequest,
    WriteOptionsModel,
)
from fsedit.exceptions import AccessDeniedError, AlreadyExistsError, EditError, NotFoundError

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _http_error(e: Exception) -> HTTPException:
    """Map an exception raised by a use case onto an HTTP error."""
    if isinstance(e, AccessDeniedError):
        return HTTPException(status_code=403, detail=str(e))
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, AlreadyExistsError):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, EditError):
        detail = "; ".join(e.errors) if e.errors != [str(e)] else str(e)
        return HTTPException(status_code=400, detail=detail)
    return HTTPException(status_code=500, detail=str(e))


def _options(options: Optional[WriteOptionsModel]) -> Optional[dict]:
    return options.model_dump(exclude_none=True) if options is not None else None


@router.get("/files/read", response_model=ReadFileResponse, responses=_ERROR_RESPONSES)
def read_file(
    path: str = Query(..., description="Path of the file to read"),
    startLine: Optional[int] = Query(None, description="First line (1-based)"),
    endLine: Optional[int] = Query(None, description="Last line (inclusive)"),
):
    """
    Read a range of lines from a file.

    Args:
        path: Path of the file to read
        startLine: First line to return (default: 1)
        endLine: Last line to return (default: end of file)

    Returns:
        ReadFileResponse: The lines with encoding and content hash

    Raises:
        HTTPException: 403 outside the roots, 404 missing file, 400 invalid request
    """
    try:
        result = get_read_file_uc().execute(path, startLine, endLine)
        return ReadFileResponse.from_result(result)
    except Exception as e:
        raise _http_error(e)


@router.get("/files/info", response_model=FileInfoResponse, responses=_ERROR_RESPONSES)
def file_info(path: str = Query(..., description="Path of the file")):
    """
    Get metadata, encoding, line count and content hash of a file.

    Raises:
        HTTPException: 403 outside the roots, 404 missing file, 400 invalid request
    """
    try:
        return FileInfoResponse(**get_file_info_uc().execute(path))
    except Exception as e:
        raise _http_error(e)


@router.get("/files/roots", response_model=RootsResponse)
def list_roots():
    """List the directories that may be read and edited."""
    return RootsResponse(roots=get_sandbox().roots())


@router.post("/files/write", response_model=EditResultResponse)
def write_file(body: WriteFileRequest):
    """
    Create or overwrite a file.

    Failures are reported in the body with success=false and every error.
    """
    result = get_write_file_uc().run(body.path, body.content, _options(body.options))
    return EditResultResponse.from_result(result)


@router.post("/files/edit", response_model=EditResultResponse)
def edit_file(body: EditFileRequest):
    """
    Apply a batch of line edits to a file.

    Args:
        body: Request body with the path, the edits, dryRun and options

    Returns:
        EditResultResponse: Outcome with diff, encoding and content hash;
        a rejected batch is reported with success=false and every error
    """
    result = get_edit_file_uc().run(
        body.path, body.edits, dry_run=body.dryRun, options=_options(body.options)
    )
    return EditResultResponse.from_result(result)


@router.post("/files/replace-text", response_model=EditResultResponse)
def replace_text(body: ReplaceTextRequest):
    """Replace the first occurrence of a text in a file."""
    result = get_replace_text_uc().run(
        body.path, body.oldText, body.newText, dry_run=body.dryRun
    )
    return EditResultResponse.from_result(result)


@router.post("/files/mkdir", response_model=CreateDirectoryResponse, responses=_ERROR_RESPONSES)
def create_directory(body: CreateDirectoryRequest):
    """
    Create a directory, including missing parents.

    Raises:
        HTTPException: 403 outside the roots, 409 if a file is in the way
    """
    try:
        return CreateDirectoryResponse(**get_create_directory_uc().execute(body.path))
    except Exception as e:
        raise _http_error(e)


@router.post("/files/move", response_model=MovePathResponse, responses=_ERROR_RESPONSES)
def move_path(body: MovePathRequest):
    """
    Move or rename a file or directory.

    Raises:
        HTTPException: 403 outside the roots, 404 missing source,
        409 existing destination, 400 move into itself
    """
    try:
        return MovePathResponse(**get_move_path_uc().execute(body.source, body.destination))
    except Exception as e:
        raise _http_error(e)


@router.post("/files/copy", response_model=CopyFileResponse, responses=_ERROR_RESPONSES)
def copy_file(body: CopyFileRequest):
    """
    Copy a file.

    Raises:
        HTTPException: 403 outside the roots, 404 missing source,
        409 existing destination without overwrite
    """
    try:
        result = get_copy_file_uc().execute(
            body.source, body.destination, overwrite=body.overwrite
        )
        return CopyFileResponse(**result)
    except Exception as e:
        raise _http_error(e)


@router.get("/tools")
def list_tools():
    """List the available 'files.*' tools with their JSON schemas."""
    return {"tools": get_files_tools().available_tools()}


@router.post(
    "/tools/{name}",
    response_model=ToolCallResponse,
    responses={404: {"model": ErrorResponse}},
)
def call_tool(name: str, body: ToolCallRequest):
    """
    Invoke one tool by name.

    Raises:
        HTTPException: 404 if the tool is unknown
    """
    try:
        raw = get_files_tools().dispatch(name, body.arguments)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ToolCallResponse(name=name, result=json.loads(raw))

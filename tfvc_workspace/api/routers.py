"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from tfvc_workspace.api.dependencies import get_find_workspace_uc, get_strings
from tfvc_workspace.api.schemas import (
    ErrorResponse,
    ParseOutputRequest,
    WorkspaceResponse,
)
from tfvc_workspace.entities.execution_result import ExecutionResult
from tfvc_workspace.exceptions import TfvcError
from tfvc_workspace.use_cases.commands.find_workspace import FindWorkspace

router = APIRouter()


@router.get(
    "/workspace",
    response_model=WorkspaceResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def find_workspace(
    local_path: str = Query(..., description="Local folder to find the workspace for"),
    restrict: Optional[bool] = Query(
        None, description="Pick the team project matching local_path"
    ),
):
    """
    Run 'tf workfold' for a local folder.

    Args:
        local_path: Local folder to look up
        restrict: Overrides the configured restriction when given

    Returns:
        WorkspaceResponse: The workspace mapping the folder

    Raises:
        HTTPException: 404 if tf reported no workspace, 400 if tf failed
    """
    try:
        workspace = get_find_workspace_uc().execute(local_path, restrict)
    except TfvcError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if workspace is None:
        raise HTTPException(status_code=404, detail="No workspace found")
    return WorkspaceResponse.from_entity(workspace)


@router.post(
    "/workspace/parse",
    response_model=Optional[WorkspaceResponse],
    responses={400: {"model": ErrorResponse}},
)
def parse_workspace_output(body: ParseOutputRequest):
    """
    Parse output captured from 'tf workfold' without running tf.

    Args:
        body: Captured output and the invocation it came from

    Returns:
        WorkspaceResponse, or null when the output is empty

    Raises:
        HTTPException: If the output reports an error
    """
    try:
        command = FindWorkspace(
            body.local_path, body.restrict_workspace, strings=get_strings()
        )
        result = ExecutionResult(
            exit_code=body.exit_code, stdout=body.stdout, stderr=body.stderr
        )
        if body.variant == "exe":
            workspace = command.parse_exe_output(result)
        else:
            workspace = command.parse_output(result)
    except TfvcError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if workspace is None:
        return None
    return WorkspaceResponse.from_entity(workspace)

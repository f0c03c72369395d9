"""
Pydantic models for API requests and responses.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class WorkspaceMappingInfo(BaseModel):
    """Schema for one workspace mapping."""

    server_path: str = Field(..., description="Server path, starting with '$/'")
    local_path: Optional[str] = Field(None, description="Local folder (none if cloaked)")
    cloaked: bool = Field(False, description="Whether the server path is cloaked")


class WorkspaceResponse(BaseModel):
    """Schema for a workspace."""

    name: Optional[str] = Field(None, description="Workspace name")
    server: Optional[str] = Field(None, description="Decoded collection URL")
    default_team_project: Optional[str] = Field(
        None, description="Team project used by default"
    )
    comment: Optional[str] = Field(None, description="Workspace comment")
    computer: Optional[str] = Field(None, description="Computer owning the workspace")
    owner: Optional[str] = Field(None, description="Workspace owner")
    mappings: List[WorkspaceMappingInfo] = Field(..., description="Mappings in tf order")

    @classmethod
    def from_entity(cls, workspace_entity):
        """Create a WorkspaceResponse schema from a Workspace entity."""
        details = workspace_entity.get_details()
        return cls(
            name=details["name"],
            server=details["server"],
            default_team_project=details["default_team_project"],
            comment=details["comment"],
            computer=details["computer"],
            owner=details["owner"],
            mappings=[WorkspaceMappingInfo(**m) for m in details["mappings"]],
        )


class ParseOutputRequest(BaseModel):
    """Schema for parsing captured 'tf workfold' output."""

    local_path: str = Field(..., description="Local path the command was run for")
    restrict_workspace: bool = Field(
        False, description="Pick the team project matching local_path"
    )
    variant: Literal["clc", "exe"] = Field(
        "clc", description="Command line variant that produced the output"
    )
    exit_code: int = Field(0, description="Exit code of tf")
    stdout: Optional[str] = Field(None, description="Captured standard output")
    stderr: Optional[str] = Field(None, description="Captured standard error")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")

"""
Workspace domain entities.
"""

from dataclasses import dataclass
from typing import Any, Optional

SERVER_PATH_ROOT = "$/"


@dataclass(frozen=True)
class WorkspaceMapping:
    """
    One server path to local path association of a workspace.

    Cloaked mappings exclude a server path from the workspace and carry no
    local path.
    """

    server_path: str
    local_path: Optional[str] = None
    cloaked: bool = False

    @property
    def team_project(self) -> Optional[str]:
        """First path segment after '$/', or None when the path has none."""
        return get_team_project(self.server_path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "server_path": self.server_path,
            "local_path": self.local_path,
            "cloaked": self.cloaked,
        }


@dataclass(frozen=True)
class Workspace:
    """
    Workspace reported by 'tf workfold'.

    Fields the tool did not report are None, never an empty string.
    """

    default_team_project: Optional[str]
    mappings: tuple[WorkspaceMapping, ...]
    name: Optional[str] = None
    server: Optional[str] = None
    comment: Optional[str] = None
    computer: Optional[str] = None
    owner: Optional[str] = None

    def __post_init__(self):
        if not self.mappings:
            raise ValueError("A workspace requires at least one mapping")

    def get_details(self) -> dict[str, Any]:
        """
        Get the workspace as a plain dictionary.

        Returns:
            Dictionary with workspace information and its mappings
        """
        return {
            "name": self.name,
            "server": self.server,
            "default_team_project": self.default_team_project,
            "comment": self.comment,
            "computer": self.computer,
            "owner": self.owner,
            "mappings": [m.to_dict() for m in self.mappings],
        }


def get_team_project(server_path: Optional[str]) -> Optional[str]:
    """
    Extract the team project from a server path.

    '$/project1/subfolder' -> 'project1'. Paths that do not start with '$/'
    or that point at the collection root have no team project.
    """
    if not server_path or not server_path.startswith(SERVER_PATH_ROOT):
        return None
    project = server_path[len(SERVER_PATH_ROOT):].split("/", 1)[0].strip()
    return project or None

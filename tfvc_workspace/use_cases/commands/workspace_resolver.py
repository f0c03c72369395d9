"""
Builds the Workspace value from the fields parsed out of 'tf workfold'.
"""

from typing import Optional, Sequence
from urllib.parse import unquote

from tfvc_workspace.entities.workspace import Workspace, WorkspaceMapping


def _normalize_path(path: str) -> str:
    normalized = path.replace("\\", "/").lower()
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")
    return normalized


def _path_segments(path: str) -> list[str]:
    return [segment for segment in _normalize_path(path).split("/") if segment]


def _is_within(path: str, folder: str) -> bool:
    """True if path equals folder or lies below it."""
    path = _normalize_path(path)
    folder = _normalize_path(folder)
    if path == folder:
        return True
    if not folder.endswith("/"):
        folder += "/"
    return path.startswith(folder)


def _select_mapping(
    mappings: Sequence[WorkspaceMapping], local_path: str
) -> Optional[WorkspaceMapping]:
    candidates = [m for m in mappings if not m.cloaked and m.team_project]

    best: Optional[WorkspaceMapping] = None
    best_length = -1
    for mapping in candidates:
        if not mapping.local_path or not _is_within(local_path, mapping.local_path):
            continue
        length = len(_normalize_path(mapping.local_path))
        # strict comparison keeps the first mapping on ties
        if length > best_length:
            best, best_length = mapping, length

    # Only the part of local_path below the matched folder can name a
    # more specific team project.
    segments = _path_segments(local_path)
    if best is not None:
        segments = segments[len(_path_segments(best.local_path)):]
    remainder = set(segments)
    for mapping in candidates:
        if mapping.team_project.lower() in remainder:
            return mapping
    return best


def resolve_workspace(
    name: Optional[str],
    server: Optional[str],
    comment: Optional[str],
    computer: Optional[str],
    owner: Optional[str],
    mappings: Sequence[WorkspaceMapping],
    local_path: str,
    restrict_workspace: bool = False,
) -> Workspace:
    """
    Assemble the Workspace and pick its default team project.

    Without restriction the default team project comes from the first
    mapping. With restriction, the mapping with the longest local folder
    containing local_path is used, unless the part of local_path below that
    folder names the team project of another mapping. When nothing matches
    the first mapping is used. A mapping of the collection root '$/' has no
    team project, so the first mapping that has one is used instead. Only a
    workspace that maps nothing but '$/' has no default team project.

    Args:
        name: Workspace name
        server: Collection URL, possibly percent-encoded
        comment: Workspace comment
        computer: Computer the workspace belongs to
        owner: Workspace owner
        mappings: Mappings in the order the tool reported them (non-empty)
        local_path: Path the command was run for
        restrict_workspace: Whether to select the team project for local_path

    Returns:
        Workspace
    """
    selected: Optional[WorkspaceMapping] = None
    if restrict_workspace:
        selected = _select_mapping(mappings, local_path)
    if selected is None:
        selected = mappings[0]

    team_project = selected.team_project
    if team_project is None:
        team_project = next((m.team_project for m in mappings if m.team_project), None)

    return Workspace(
        name=name,
        server=unquote(server) if server else None,
        default_team_project=team_project,
        comment=comment,
        computer=computer,
        owner=owner,
        mappings=tuple(mappings),
    )

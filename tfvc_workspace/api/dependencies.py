"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from tfvc_workspace.config.strings import StringTable
from tfvc_workspace.container import container
from tfvc_workspace.use_cases.workspace.find_workspace import FindWorkspaceUseCase


def get_find_workspace_uc() -> FindWorkspaceUseCase:
    """
    Get the find workspace use case from the container.

    Returns:
        FindWorkspaceUseCase: The find workspace use case instance
    """
    return container.get_find_workspace_use_case()


def get_strings() -> StringTable:
    return container.get_strings()

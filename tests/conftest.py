"""
Pytest configuration and shared fixtures.
"""

import pytest
from unittest.mock import MagicMock

SEPARATOR = "=" * 149
EXE_SEPARATOR = "=" * 77


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def clc_output():
    """Output of 'tf workfold' from the CLC for a workspace with one mapping."""
    return (
        f"{SEPARATOR}\n"
        "Workspace:  MyWorkspace\n"
        "Collection: http://server:8080/tfs/\n"
        "$/project1: /path"
    )


@pytest.fixture
def exe_output():
    """Output of 'tf workfold' from tf.exe for a workspace with one mapping."""
    return (
        f"{EXE_SEPARATOR}\n"
        "Workspace : MyWorkspace (Jason Prickett)\n"
        "Collection: http://server:8080/tfs/\n"
        " $/project1/subfolder: /path\n"
    )

"""
Process runner port interface defining the contract for running the tf executable.
"""

from abc import ABC, abstractmethod
from typing import Any

from tfvc_workspace.entities.execution_result import ExecutionResult


class ProcessRunnerPort(ABC):
    """Port interface for running an external command line tool."""

    @abstractmethod
    def run(
        self, tool_path: str, arguments: list[str], options: dict[str, Any]
    ) -> ExecutionResult:
        """
        Run the tool once and capture its output.

        Args:
            tool_path: Path or name of the executable
            arguments: Real (unmasked) arguments passed to the executable
            options: Process options, currently only 'cwd'

        Returns:
            ExecutionResult with exit code, stdout and stderr

        Raises:
            TfvcError: If the executable cannot be started or times out
        """
        pass

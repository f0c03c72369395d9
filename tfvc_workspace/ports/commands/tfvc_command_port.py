"""
TFVC command port interface shared by the tf commands.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from tfvc_workspace.entities.arguments import ArgumentBuilder
from tfvc_workspace.entities.execution_result import ExecutionResult

T = TypeVar("T")


class TfvcCommandPort(ABC, Generic[T]):
    """
    A tf command knows how to build its arguments for both command line
    variants (the cross-platform CLC and the Windows tf.exe) and how to parse
    the output each variant produces.
    """

    @abstractmethod
    def get_arguments(self) -> ArgumentBuilder:
        """Arguments for the CLC variant."""
        pass

    @abstractmethod
    def get_options(self) -> dict[str, Any]:
        """Process options for the CLC variant."""
        pass

    @abstractmethod
    def parse_output(self, execution_result: ExecutionResult) -> Optional[T]:
        """
        Parse CLC output.

        Raises:
            TfvcError: If the output reports a failure
        """
        pass

    @abstractmethod
    def get_exe_arguments(self) -> ArgumentBuilder:
        """Arguments for the tf.exe variant."""
        pass

    @abstractmethod
    def get_exe_options(self) -> dict[str, Any]:
        """Process options for the tf.exe variant."""
        pass

    @abstractmethod
    def parse_exe_output(self, execution_result: ExecutionResult) -> Optional[T]:
        """
        Parse tf.exe output.

        Raises:
            TfvcError: If the output reports a failure
        """
        pass

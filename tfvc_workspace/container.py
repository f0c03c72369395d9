"""
Dependency injection container for managing application dependencies.
"""

import logging

from tfvc_workspace.adapters.process.subprocess_runner import SubprocessRunner
from tfvc_workspace.config.settings import Settings, settings as default_settings
from tfvc_workspace.config.strings import StringTable, strings as default_strings
from tfvc_workspace.ports.process.process_runner_port import ProcessRunnerPort
from tfvc_workspace.use_cases.workspace.find_workspace import FindWorkspaceUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Settings | None = None):
        self._instances = {}
        self._settings = settings or default_settings
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_strings(self) -> StringTable:
        return default_strings

    def get_process_runner(self) -> ProcessRunnerPort:
        """
        Get process runner adapter instance.

        Returns:
            ProcessRunnerPort implementation
        """
        if "process_runner" not in self._instances:
            self._instances["process_runner"] = SubprocessRunner(
                timeout=self._settings.tfvc_timeout,
                strings=self.get_strings(),
                logger=self._logger,
            )
        return self._instances["process_runner"]

    def get_find_workspace_use_case(self) -> FindWorkspaceUseCase:
        """
        Get find workspace use case with injected dependencies.

        Returns:
            Configured FindWorkspaceUseCase
        """
        if "find_workspace_use_case" not in self._instances:
            self._instances["find_workspace_use_case"] = self.create_find_workspace_use_case()
        return self._instances["find_workspace_use_case"]

    def create_find_workspace_use_case(
        self,
        tf_location: str | None = None,
        restrict_workspace: bool | None = None,
    ) -> FindWorkspaceUseCase:
        """
        Build a new find workspace use case, overriding settings where given.

        Args:
            tf_location: Path to the tf executable (default: settings)
            restrict_workspace: Default restrict mode (default: settings)

        Returns:
            FindWorkspaceUseCase sharing the container's runner and logger
        """
        if restrict_workspace is None:
            restrict_workspace = self._settings.tfvc_restrict_workspace
        return FindWorkspaceUseCase(
            self.get_process_runner(),
            tf_location=tf_location or self._settings.tfvc_location,
            restrict_workspace=restrict_workspace,
            strings=self.get_strings(),
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

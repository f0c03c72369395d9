"""
'tf workfold' command used to find the workspace that maps a local path.
"""

import logging
from typing import Any, Optional

from typing_extensions import override

from tfvc_workspace.config.strings import StringTable, strings as default_strings
from tfvc_workspace.entities.arguments import ArgumentBuilder
from tfvc_workspace.entities.execution_result import ExecutionResult
from tfvc_workspace.entities.workspace import Workspace
from tfvc_workspace.exceptions import TfvcError
from tfvc_workspace.ports.commands.tfvc_command_port import TfvcCommandPort
from tfvc_workspace.use_cases.commands.workfold_parser import (
    CLC_FORMAT,
    EXE_FORMAT,
    WorkfoldParser,
)

COMMAND = "workfold"


class FindWorkspace(TfvcCommandPort[Workspace]):
    """
    Runs 'tf workfold -noprompt <localPath>' in <localPath> and returns the
    workspace that maps it.
    """

    def __init__(
        self,
        local_path: Optional[str],
        restrict_workspace: bool = False,
        strings: Optional[StringTable] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the command.

        Args:
            local_path: Local folder to find the workspace for
            restrict_workspace: Pick the default team project matching local_path
            strings: Table used to compose error messages
            logger: Logger instance to use for logging

        Raises:
            TfvcError: ArgumentRequired if local_path is empty
        """
        self._strings = strings or default_strings
        if local_path is None or not str(local_path).strip():
            raise TfvcError.create_argument_required_error(
                "localPath", self._strings.ArgumentRequired
            )
        self._local_path: str = local_path
        self._restrict_workspace = restrict_workspace
        self._logger = logger or logging.getLogger(__name__)

    @property
    def local_path(self) -> str:
        return self._local_path

    @property
    def restrict_workspace(self) -> bool:
        return self._restrict_workspace

    def get_command(self) -> str:
        return COMMAND

    def _build_arguments(self) -> ArgumentBuilder:
        return ArgumentBuilder(COMMAND).add_secret(self._local_path)

    @override
    def get_arguments(self) -> ArgumentBuilder:
        return self._build_arguments()

    @override
    def get_options(self) -> dict[str, Any]:
        return {"cwd": self._local_path}

    @override
    def get_exe_arguments(self) -> ArgumentBuilder:
        return self._build_arguments()

    @override
    def get_exe_options(self) -> dict[str, Any]:
        return {"cwd": self._local_path}

    @override
    def parse_output(self, execution_result: ExecutionResult) -> Optional[Workspace]:
        """
        Parse the CLC output, e.g.

            =====================================================
            Workspace:  MyWorkspace
            Collection: http://server:8080/tfs/
            $/project1: /path
        """
        parser = WorkfoldParser(CLC_FORMAT, self._strings, COMMAND, self._logger)
        return self._parse(execution_result, parser)

    @override
    def parse_exe_output(self, execution_result: ExecutionResult) -> Optional[Workspace]:
        """
        Parse the tf.exe output, e.g.

            ==============================
            Workspace : MyWorkspace (Jason Prickett)
            Collection: http://server:8080/tfs/
             $/project1/subfolder: /path
        """
        parser = WorkfoldParser(EXE_FORMAT, self._strings, COMMAND, self._logger)
        return self._parse(execution_result, parser)

    def _parse(
        self, execution_result: ExecutionResult, parser: WorkfoldParser
    ) -> Optional[Workspace]:
        return parser.parse(
            execution_result,
            local_path=self._local_path,
            restrict_workspace=self._restrict_workspace,
        )

    def __repr__(self) -> str:
        return (
            f"FindWorkspace({self.get_arguments().get_arguments_for_display()!r}, "
            f"restrict_workspace={self._restrict_workspace})"
        )

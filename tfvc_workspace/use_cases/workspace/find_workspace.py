"""
Use case for finding the TFVC workspace of a local folder.
"""

import logging
from typing import Optional

from tfvc_workspace.config.strings import StringTable
from tfvc_workspace.entities.workspace import Workspace
from tfvc_workspace.exceptions import TfvcError, TfvcErrorCodes
from tfvc_workspace.ports.process.process_runner_port import ProcessRunnerPort
from tfvc_workspace.use_cases.commands.find_workspace import FindWorkspace
from tfvc_workspace.use_cases.commands.workfold_parser import TfvcVariant


class FindWorkspaceUseCase:
    """Use case for running 'tf workfold' and parsing its output."""

    def __init__(
        self,
        process_runner: ProcessRunnerPort,
        tf_location: str,
        restrict_workspace: bool = False,
        strings: Optional[StringTable] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            process_runner: Port used to run the tf executable
            tf_location: Path to the tf executable; 'tf.exe' selects the
                Windows output format, anything else the CLC format
            restrict_workspace: Default for restricting the team project to
                the one matching the local path
            strings: Table used to compose error messages
            logger: Logger instance to use for logging
        """
        self._process_runner = process_runner
        self._tf_location = tf_location
        self._variant = TfvcVariant.from_location(tf_location)
        self._restrict_workspace = restrict_workspace
        self._strings = strings
        self._logger = logger or logging.getLogger(__name__)

    @property
    def variant(self) -> TfvcVariant:
        return self._variant

    def execute(
        self, local_path: str, restrict_workspace: Optional[bool] = None
    ) -> Optional[Workspace]:
        """
        Find the workspace mapping a local folder.

        Args:
            local_path: Local folder to look up
            restrict_workspace: Overrides the default restriction when given

        Returns:
            The Workspace, or None when tf reported nothing

        Raises:
            TfvcError: If the folder is not in a workspace or tf failed
        """
        if restrict_workspace is None:
            restrict_workspace = self._restrict_workspace
        command = FindWorkspace(
            local_path, restrict_workspace, strings=self._strings, logger=self._logger
        )

        if self._variant is TfvcVariant.EXE:
            arguments = command.get_exe_arguments()
            options = command.get_exe_options()
        else:
            arguments = command.get_arguments()
            options = command.get_options()

        try:
            self._logger.info(
                f"Running tf ({self._variant.value}): {arguments.get_arguments_for_display()}"
            )
            result = self._process_runner.run(self._tf_location, arguments.build(), options)
            if self._variant is TfvcVariant.EXE:
                workspace = command.parse_exe_output(result)
            else:
                workspace = command.parse_output(result)
        except TfvcError:
            raise
        except Exception as e:
            self._logger.error(f"Error finding workspace: {e}")
            raise TfvcError(
                f"Failed to find workspace: {str(e)}",
                tfvc_error_code=TfvcErrorCodes.TF_EXEC_FAILED,
                tfvc_command=command.get_command(),
            )

        if workspace is None:
            self._logger.info("No workspace found")
        else:
            self._logger.info(
                f"Found workspace {workspace.name} with {len(workspace.mappings)} mapping(s)"
            )
        return workspace

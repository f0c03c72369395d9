"""
Subprocess adapter that runs the tf executable.
"""

import logging
import subprocess
from typing import Any, Optional

from typing_extensions import override

from tfvc_workspace.config.strings import StringTable, strings as default_strings
from tfvc_workspace.entities.execution_result import ExecutionResult
from tfvc_workspace.exceptions import TfvcError, TfvcErrorCodes
from tfvc_workspace.ports.process.process_runner_port import ProcessRunnerPort


class SubprocessRunner(ProcessRunnerPort):
    """Runs the tool with subprocess.run and captures text output."""

    def __init__(
        self,
        timeout: float = 60.0,
        strings: Optional[StringTable] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the runner.

        Args:
            timeout: Seconds to wait for the process before giving up
            strings: Table used to compose error messages
            logger: Logger instance to use for logging
        """
        self._timeout = timeout
        self._strings = strings or default_strings
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def run(
        self, tool_path: str, arguments: list[str], options: dict[str, Any]
    ) -> ExecutionResult:
        cwd = options.get("cwd")
        try:
            result = subprocess.run(
                [tool_path, *arguments],
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            self._logger.error(f"Could not start {tool_path}: {e}")
            raise TfvcError(
                self._strings.compose(self._strings.TfvcNotFound, str(e)),
                tfvc_error_code=TfvcErrorCodes.NOT_FOUND,
            )
        except subprocess.TimeoutExpired:
            self._logger.error(f"{tool_path} timed out after {self._timeout}s")
            raise TfvcError(
                self._strings.TfTimedOut,
                tfvc_error_code=TfvcErrorCodes.TF_EXEC_FAILED,
            )

        self._logger.debug(f"{tool_path} exited with code {result.returncode}")
        return ExecutionResult(
            exit_code=result.returncode,
            stdout=result.stdout or None,
            stderr=result.stderr or None,
        )

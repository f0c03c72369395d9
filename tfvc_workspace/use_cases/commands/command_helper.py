"""
Helpers shared by the tf commands: line splitting and error classification.
"""

import logging
import re
from typing import Optional

from tfvc_workspace.config.strings import StringTable, strings as default_strings
from tfvc_workspace.entities.execution_result import ExecutionResult
from tfvc_workspace.exceptions import TfvcError, TfvcErrorCodes

logger = logging.getLogger(__name__)

_NOT_A_WORKSPACE_PATTERNS = (
    # CLC
    re.compile(r"workspace could not be determined", re.IGNORECASE),
    # tf.exe
    re.compile(r"unable to determine the source control server", re.IGNORECASE),
)

# (pattern, error code, name of the StringTable entry used as message prefix)
_ERROR_TABLE: tuple[tuple[re.Pattern[str], TfvcErrorCodes, str], ...] = (
    (
        re.compile(r"Authentication failed", re.IGNORECASE),
        TfvcErrorCodes.AUTHENTICATION_FAILED,
        "TfExecFailedError",
    ),
    (
        re.compile(r"project collection URL to use could not be determined", re.IGNORECASE),
        TfvcErrorCodes.NOT_A_TFVC_REPOSITORY,
        "NotATfvcRepository",
    ),
    (
        re.compile(r"Repository not found", re.IGNORECASE),
        TfvcErrorCodes.REPOSITORY_NOT_FOUND,
        "TfExecFailedError",
    ),
    (
        re.compile(r"'java' is not recognized as an internal or external command", re.IGNORECASE),
        TfvcErrorCodes.NOT_FOUND,
        "TfInitializeFailureError",
    ),
    (
        re.compile(r"There is no working folder mapping", re.IGNORECASE),
        TfvcErrorCodes.FILE_NOT_IN_MAPPINGS,
        "TfExecFailedError",
    ),
    (
        re.compile(r"TF30063: You are not authorized to access", re.IGNORECASE),
        TfvcErrorCodes.NOT_AUTHORIZED_TO_ACCESS,
        "TfExecFailedError",
    ),
)

_VM_INIT_FAILURE = re.compile(r"Error occurred during initialization of VM", re.IGNORECASE)


def split_into_lines(text: Optional[str], filter_empty_lines: bool = False) -> list[str]:
    """Split tool output on '\\n' or '\\r\\n'."""
    if not text:
        return []
    lines = re.split(r"\r?\n", text)
    if filter_empty_lines:
        lines = [line for line in lines if line.strip()]
    return lines


def is_not_a_workspace_message(stderr: Optional[str]) -> bool:
    """True when stderr says the path is not inside any workspace."""
    if not stderr:
        return False
    return any(p.search(stderr) for p in _NOT_A_WORKSPACE_PATTERNS)


def process_errors(
    command: str,
    execution_result: ExecutionResult,
    table: Optional[StringTable] = None,
) -> None:
    """
    Raise a classified TfvcError when the tool exited with a non-zero code.

    Args:
        command: tf sub-command that produced the result
        execution_result: Result to inspect
        table: String table used to compose the error message

    Raises:
        TfvcError: If exit_code is not 0
    """
    if not execution_result.exit_code:
        return

    table = table or default_strings
    stderr = execution_result.stderr or ""
    stdout = execution_result.stdout or ""

    code = TfvcErrorCodes.TF_EXEC_FAILED
    message = table.TfExecFailedError
    if is_not_a_workspace_message(stderr):
        code = TfvcErrorCodes.NOT_A_TFVC_REPOSITORY
        message = table.NoWorkspaceMappings
    elif _VM_INIT_FAILURE.search(stdout):
        code = TfvcErrorCodes.NOT_FOUND
        message = table.TfInitializeFailureError
    else:
        for pattern, error_code, prefix_name in _ERROR_TABLE:
            if pattern.search(stderr):
                code = error_code
                message = getattr(table, prefix_name)
                break

    logger.debug(f"TFVC errors ({command}, exit code {execution_result.exit_code}): {stderr}")
    raise TfvcError(
        table.compose(message, stderr),
        tfvc_error_code=code,
        stdout=execution_result.stdout,
        stderr=execution_result.stderr,
        exit_code=execution_result.exit_code,
        tfvc_command=command,
    )

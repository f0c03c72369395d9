"""
Custom exceptions for the application.
"""

from enum import Enum
from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class TfvcErrorCodes(str, Enum):
    """Classification of failures reported by the TFVC command line."""

    ARGUMENT_REQUIRED = "ArgumentRequired"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    FILE_NOT_IN_MAPPINGS = "FileNotInMappings"
    NOT_AN_ENU_TF_COMMAND_LINE = "NotAnEnuTfCommandLine"
    NOT_A_TFVC_REPOSITORY = "NotATfvcRepository"
    NOT_AUTHORIZED_TO_ACCESS = "NotAuthorizedToAccess"
    NOT_FOUND = "NotFound"
    REPOSITORY_NOT_FOUND = "RepositoryNotFound"
    TF_EXEC_FAILED = "TfExecFailed"


class TfvcError(BaseAppError):
    """Exception raised when a tf command fails or its output cannot be used."""

    def __init__(
        self,
        message: str,
        tfvc_error_code: TfvcErrorCodes,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
        exit_code: Optional[int] = None,
        tfvc_command: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.tfvc_error_code = tfvc_error_code
        self.stdout = stdout
        self.stderr = stderr
        self.exit_code = exit_code
        self.tfvc_command = tfvc_command

    @classmethod
    def create_argument_required_error(
        cls, argument_name: str, prefix: str = "Argument is required"
    ) -> "TfvcError":
        return cls(
            f"{prefix}: {argument_name}",
            tfvc_error_code=TfvcErrorCodes.ARGUMENT_REQUIRED,
        )

    def __repr__(self) -> str:
        return (
            f"TfvcError(code={self.tfvc_error_code.value!r}, "
            f"message={self.message!r}, exit_code={self.exit_code!r})"
        )

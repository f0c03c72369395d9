"""
Parser for the output of 'tf workfold'.

The CLC and tf.exe print the same information with small formatting
differences. A single parser handles both, driven by an OutputFormat.

CLC:
    =========================================================
    Workspace:  MyWorkspace
    Collection: http://server:8080/tfs/
    $/project1: /path

tf.exe:
    =============================
    Workspace : MyWorkspace (Jason Prickett)
    Collection: http://server:8080/tfs/
     $/project1/subfolder: /path
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tfvc_workspace.config.strings import StringTable
from tfvc_workspace.entities.execution_result import ExecutionResult
from tfvc_workspace.entities.workspace import SERVER_PATH_ROOT, Workspace, WorkspaceMapping
from tfvc_workspace.exceptions import TfvcError, TfvcErrorCodes
from tfvc_workspace.use_cases.commands.command_helper import (
    is_not_a_workspace_message,
    process_errors,
    split_into_lines,
)
from tfvc_workspace.use_cases.commands.workspace_resolver import resolve_workspace

CLOAKED_PREFIX = "(cloaked)"

_SEPARATOR = re.compile(r"^=+\s*$")
# last parenthesized group, one level of nesting
_TRAILING_PARENTHETICAL = re.compile(r"\s+\((?:[^()]|\([^()]*\))*\)\s*$")

# header label -> Workspace field
_LABELS = {
    "Workspace": "name",
    "Collection": "server",
    "Comment": "comment",
    "Computer": "computer",
    "Owner": "owner",
    "Owner(s)": "owner",
}


class TfvcVariant(str, Enum):
    CLC = "clc"
    EXE = "exe"

    @classmethod
    def from_location(cls, tf_location: str) -> "TfvcVariant":
        """tf.exe is the native Windows client, anything else is the CLC."""
        name = re.split(r"[\\/]", tf_location.strip())[-1].lower()
        return cls.EXE if name == "tf.exe" else cls.CLC


@dataclass(frozen=True)
class OutputFormat:
    variant: TfvcVariant
    header: re.Pattern[str]
    mapping_indent: str = ""
    strip_name_suffix: bool = False


CLC_FORMAT = OutputFormat(
    variant=TfvcVariant.CLC,
    header=re.compile(r"^(?P<label>[^\s:][^:]*?):\s*(?P<value>.*)$"),
)

EXE_FORMAT = OutputFormat(
    variant=TfvcVariant.EXE,
    header=re.compile(r"^(?P<label>[^\s:][^:]*?)\s*:\s*(?P<value>.*)$"),
    mapping_indent=" ",
    strip_name_suffix=True,
)


class WorkfoldParser:
    """Turns an ExecutionResult of 'tf workfold' into a Workspace."""

    def __init__(
        self,
        output_format: OutputFormat,
        table: StringTable,
        command: str = "workfold",
        logger: Optional[logging.Logger] = None,
    ):
        self._format = output_format
        self._strings = table
        self._command = command
        self._logger = logger or logging.getLogger(__name__)

    def parse(
        self,
        execution_result: ExecutionResult,
        local_path: str,
        restrict_workspace: bool = False,
    ) -> Optional[Workspace]:
        """
        Parse the output of one invocation.

        Returns:
            The Workspace, or None when the tool printed nothing at all

        Raises:
            TfvcError: NotATfvcRepository when no workspace covers the path,
                NotAnEnuTfCommandLine when the labels are not English, or the
                classified error of a failed invocation
        """
        stdout = execution_result.stdout or ""
        stderr = execution_result.stderr or ""

        if not stdout.strip() and is_not_a_workspace_message(stderr):
            raise self._error(
                self._strings.NoWorkspaceMappings,
                TfvcErrorCodes.NOT_A_TFVC_REPOSITORY,
                execution_result,
                detail=stderr,
            )

        process_errors(self._command, execution_result, self._strings)

        if not stdout.strip():
            if stderr.strip():
                raise self._error(
                    self._strings.TfExecFailedError,
                    TfvcErrorCodes.TF_EXEC_FAILED,
                    execution_result,
                    detail=stderr,
                )
            self._logger.debug("tf workfold produced no output")
            return None

        fields: dict[str, Optional[str]] = dict.fromkeys(set(_LABELS.values()))
        mappings: list[WorkspaceMapping] = []
        content_lines = self._content_lines(stdout)

        for line in content_lines:
            mapping = self._parse_mapping(line)
            if mapping is not None:
                mappings.append(mapping)
                continue
            match = self._format.header.match(line)
            if match is None:
                continue
            field_name = _LABELS.get(match.group("label"))
            if field_name is None or fields[field_name] is not None:
                continue
            fields[field_name] = match.group("value").strip() or None

        if content_lines and fields["name"] is None and fields["server"] is None:
            raise self._error(
                self._strings.NotAnEnuTfCommandLine,
                TfvcErrorCodes.NOT_AN_ENU_TF_COMMAND_LINE,
                execution_result,
            )

        if not mappings:
            raise self._error(
                self._strings.NoWorkspaceMappings,
                TfvcErrorCodes.NOT_A_TFVC_REPOSITORY,
                execution_result,
            )

        name = fields["name"]
        if name and self._format.strip_name_suffix:
            name = _TRAILING_PARENTHETICAL.sub("", name) or None

        self._logger.debug(
            f"Parsed workspace {name!r} with {len(mappings)} mapping(s) "
            f"({self._format.variant.value})"
        )
        return resolve_workspace(
            name=name,
            server=fields["server"],
            comment=fields["comment"],
            computer=fields["computer"],
            owner=fields["owner"],
            mappings=mappings,
            local_path=local_path,
            restrict_workspace=restrict_workspace,
        )

    def _content_lines(self, stdout: str) -> list[str]:
        """Non-blank lines following the '=====' separator, if there is one."""
        lines = split_into_lines(stdout)
        for i, line in enumerate(lines):
            if _SEPARATOR.match(line):
                lines = lines[i + 1:]
                break
        return [line.rstrip() for line in lines if line.strip()]

    def _parse_mapping(self, line: str) -> Optional[WorkspaceMapping]:
        indent = self._format.mapping_indent
        if indent and line.startswith(indent):
            line = line[len(indent):]

        cloaked = line.startswith(CLOAKED_PREFIX)
        if cloaked:
            line = line[len(CLOAKED_PREFIX):].strip()
        elif not line.startswith(SERVER_PATH_ROOT):
            return None

        # Server paths cannot contain ':', the first one ends the server path.
        server_path, separator, local_path = line.partition(":")
        server_path = server_path.strip()
        if not server_path.startswith(SERVER_PATH_ROOT):
            return None
        local_path = local_path.strip() if separator else ""
        return WorkspaceMapping(
            server_path=server_path,
            local_path=local_path or None,
            cloaked=cloaked,
        )

    def _error(
        self,
        prefix: str,
        code: TfvcErrorCodes,
        execution_result: ExecutionResult,
        detail: Optional[str] = None,
    ) -> TfvcError:
        return TfvcError(
            self._strings.compose(prefix, detail),
            tfvc_error_code=code,
            stdout=execution_result.stdout,
            stderr=execution_result.stderr,
            exit_code=execution_result.exit_code,
            tfvc_command=self._command,
        )

"""
Execution result domain entity.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExecutionResult:
    """Exit code and captured output of one tf invocation."""

    exit_code: int
    stdout: Optional[str] = None
    stderr: Optional[str] = None

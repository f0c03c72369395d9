"""
User-facing strings used to compose error messages.

The table is passed to commands explicitly so that a localized table can be
swapped in without touching the parsing code.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StringTable:
    ArgumentRequired: str = "Argument is required"
    NoWorkspaceMappings: str = (
        "Could not find a workspace with mappings. "
        "Perhaps this is not a TFVC workspace."
    )
    NotAnEnuTfCommandLine: str = (
        "It appears you have configured a non-English version of the TF "
        "executable. Please ensure an English version is properly configured."
    )
    NotATfvcRepository: str = "The current folder is not within a TFVC repository."
    TfExecFailedError: str = "Execution of the TFVC command line failed unexpectedly."
    TfInitializeFailureError: str = (
        "Unable to initialize the TF executable. "
        "Please verify the installation of Java."
    )
    TfvcNotFound: str = (
        "The TFVC command line was not found. "
        "Please ensure TFVC_LOCATION points to the tf executable."
    )
    TfTimedOut: str = "The TFVC command line did not finish in time."

    def compose(self, prefix: str, detail: str | None = None) -> str:
        """Join a table entry with an optional detail taken from the tool output."""
        detail = (detail or "").strip()
        return f"{prefix} {detail}" if detail else prefix


strings = StringTable()

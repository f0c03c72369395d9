import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from tfvc_workspace.container import container
from tfvc_workspace.entities.execution_result import ExecutionResult
from tfvc_workspace.entities.workspace import Workspace
from tfvc_workspace.exceptions import TfvcError
from tfvc_workspace.use_cases.commands.find_workspace import FindWorkspace
from tfvc_workspace.use_cases.commands.workfold_parser import TfvcVariant

EXIT_FOUND = 0
EXIT_NO_WORKSPACE = 1
EXIT_TFVC_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfvc-workspace",
        description="Find the TFVC workspace that maps a local folder (tf workfold).",
    )
    parser.add_argument("local_path", help="Local folder to look up")
    parser.add_argument(
        "--restrict",
        action="store_true",
        default=None,
        help="Pick the default team project matching LOCAL_PATH",
    )
    parser.add_argument(
        "--tf",
        default=None,
        help="Path to the tf executable (default: TFVC_LOCATION or 'tf')",
    )
    parser.add_argument(
        "--parse",
        metavar="FILE",
        default=None,
        help="Parse saved 'tf workfold' output from FILE ('-' for stdin) instead of running tf",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in TfvcVariant],
        default=None,
        help="Output format of --parse input (default: derived from --tf)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render a table with colors instead of JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _parse_saved_output(
    path: str, local_path: str, restrict: bool, variant: TfvcVariant
) -> Optional[Workspace]:
    text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    command = FindWorkspace(local_path, restrict, strings=container.get_strings())
    result = ExecutionResult(exit_code=0, stdout=text)
    if variant is TfvcVariant.EXE:
        return command.parse_exe_output(result)
    return command.parse_output(result)


def _print_pretty(workspace: Workspace) -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    console = Console(soft_wrap=True)
    summary = Table(box=box.ROUNDED, show_header=False, title="Workspace")
    summary.add_column("field", style="bold cyan")
    summary.add_column("value")
    for label, value in (
        ("Name", workspace.name),
        ("Collection", workspace.server),
        ("Team project", workspace.default_team_project),
        ("Owner", workspace.owner),
        ("Computer", workspace.computer),
        ("Comment", workspace.comment),
    ):
        if value is not None:
            summary.add_row(label, value)
    console.print(summary)

    mappings = Table(box=box.ROUNDED, title="Mappings")
    mappings.add_column("Server path", style="magenta")
    mappings.add_column("Local path")
    for m in workspace.mappings:
        local = "[dim](cloaked)[/dim]" if m.cloaked else (m.local_path or "")
        mappings.add_row(m.server_path, local)
    console.print(mappings)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = container.settings
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    restrict = settings.tfvc_restrict_workspace if args.restrict is None else args.restrict
    tf_location = args.tf or settings.tfvc_location

    try:
        if args.parse:
            variant = (
                TfvcVariant(args.variant)
                if args.variant
                else TfvcVariant.from_location(tf_location)
            )
            workspace = _parse_saved_output(args.parse, args.local_path, restrict, variant)
        elif args.tf:
            uc = container.create_find_workspace_use_case(tf_location, restrict)
            workspace = uc.execute(args.local_path)
        else:
            workspace = container.get_find_workspace_use_case().execute(
                args.local_path, restrict
            )
    except TfvcError as e:
        print(f"Error ({e.tfvc_error_code.value}): {e}", file=sys.stderr)
        return EXIT_TFVC_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TFVC_ERROR

    if workspace is None:
        print("No workspace found", file=sys.stderr)
        return EXIT_NO_WORKSPACE

    if args.pretty:
        _print_pretty(workspace)
    else:
        print(json.dumps(workspace.get_details(), ensure_ascii=False, indent=2))
    return EXIT_FOUND


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""
Tests for the tfvc-workspace command line.
"""

import json

from unittest.mock import MagicMock, patch

from tfvc_workspace import cli
from tfvc_workspace.entities.workspace import Workspace, WorkspaceMapping
from tfvc_workspace.exceptions import TfvcError, TfvcErrorCodes

SEPARATOR = "=" * 149


def _workspace() -> Workspace:
    return Workspace(
        name="MyWorkspace",
        server="http://server:8080/tfs/",
        default_team_project="project1",
        mappings=(WorkspaceMapping("$/project1", "/path"),),
    )


class TestCli:
    """Test cases for cli.main."""

    def test_parse_saved_output(self, tmp_path, capsys):
        output = tmp_path / "workfold.txt"
        output.write_text(
            f"{SEPARATOR}\n"
            "Workspace:  MyWorkspace\n"
            "Collection: http://server:8080/tfs/\n"
            "$/project1: /path\n"
        )

        code = cli.main(["/path", "--parse", str(output), "--variant", "clc"])

        assert code == cli.EXIT_FOUND
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "MyWorkspace"
        assert data["default_team_project"] == "project1"

    def test_parse_saved_output_pretty(self, tmp_path, capsys):
        output = tmp_path / "workfold.txt"
        output.write_text(
            "=============================\n"
            "Workspace : MyWorkspace (Jason Prickett)\n"
            "Collection: http://server:8080/tfs/\n"
            " $/project1/subfolder: /path\n"
        )

        code = cli.main(["/path", "--parse", str(output), "--variant", "exe", "--pretty"])

        assert code == cli.EXIT_FOUND
        out = capsys.readouterr().out
        assert "MyWorkspace" in out
        assert "$/project1/subfolder" in out

    def test_missing_file(self, tmp_path, capsys):
        code = cli.main(["/path", "--parse", str(tmp_path / "missing.txt")])

        assert code == cli.EXIT_TFVC_ERROR
        assert "Error" in capsys.readouterr().err

    def test_runs_use_case_from_container(self, capsys):
        mock_uc = MagicMock()
        mock_uc.execute.return_value = _workspace()
        with patch.object(cli.container, "get_find_workspace_use_case", return_value=mock_uc):
            code = cli.main(["/path", "--restrict"])

        assert code == cli.EXIT_FOUND
        mock_uc.execute.assert_called_once_with("/path", True)
        assert json.loads(capsys.readouterr().out)["server"] == "http://server:8080/tfs/"

    def test_no_workspace(self, capsys):
        mock_uc = MagicMock()
        mock_uc.execute.return_value = None
        with patch.object(cli.container, "get_find_workspace_use_case", return_value=mock_uc):
            code = cli.main(["/path"])

        assert code == cli.EXIT_NO_WORKSPACE
        assert "No workspace found" in capsys.readouterr().err

    def test_tfvc_error(self, capsys):
        mock_uc = MagicMock()
        mock_uc.execute.side_effect = TfvcError(
            "Could not find a workspace with mappings.",
            tfvc_error_code=TfvcErrorCodes.NOT_A_TFVC_REPOSITORY,
        )
        with patch.object(cli.container, "get_find_workspace_use_case", return_value=mock_uc):
            code = cli.main(["/path"])

        assert code == cli.EXIT_TFVC_ERROR
        assert "NotATfvcRepository" in capsys.readouterr().err

    def test_explicit_tf_location(self, capsys):
        mock_uc = MagicMock()
        mock_uc.execute.return_value = _workspace()
        with patch.object(
            cli.container, "create_find_workspace_use_case", return_value=mock_uc
        ) as mock_create:
            code = cli.main(["/path", "--tf", "C:\\VS\\tf.exe", "--restrict"])

        assert code == cli.EXIT_FOUND
        mock_create.assert_called_once_with("C:\\VS\\tf.exe", True)
        mock_uc.execute.assert_called_once_with("/path")

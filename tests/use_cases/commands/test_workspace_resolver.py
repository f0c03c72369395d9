"""
Tests for resolve_workspace.
"""

from tfvc_workspace.entities.workspace import WorkspaceMapping
from tfvc_workspace.use_cases.commands.workspace_resolver import resolve_workspace


def _resolve(mappings, local_path, restrict=True, server=None):
    return resolve_workspace(
        name="MyWorkspace",
        server=server,
        comment=None,
        computer=None,
        owner=None,
        mappings=mappings,
        local_path=local_path,
        restrict_workspace=restrict,
    )


class TestResolveWorkspace:
    """Test cases for the default team project selection."""

    def test_first_mapping_without_restrict(self):
        mappings = [
            WorkspaceMapping("$/project1/sub", "/path"),
            WorkspaceMapping("$/project2", "/path2"),
        ]
        workspace = _resolve(mappings, "/path2", restrict=False)
        assert workspace.default_team_project == "project1"

    def test_team_project_segment_in_local_path(self):
        mappings = [
            WorkspaceMapping("$/project1", "/path"),
            WorkspaceMapping("$/project2", "/path2"),
        ]
        workspace = _resolve(mappings, "/path/to/workspace/project2")
        assert workspace.default_team_project == "project2"

    def test_team_project_segment_ignores_case(self):
        mappings = [
            WorkspaceMapping("$/Alpha", "/src/a"),
            WorkspaceMapping("$/Beta", "/src/b"),
        ]
        workspace = _resolve(mappings, "/work/beta/src")
        # server path casing is kept
        assert workspace.default_team_project == "Beta"

    def test_longest_local_prefix_wins(self):
        mappings = [
            WorkspaceMapping("$/alpha", "/src"),
            WorkspaceMapping("$/beta", "/src/nested"),
        ]
        workspace = _resolve(mappings, "/src/nested/module")
        assert workspace.default_team_project == "beta"

    def test_prefix_respects_path_boundaries(self):
        mappings = [
            WorkspaceMapping("$/alpha", "/src/ab"),
            WorkspaceMapping("$/beta", "/src/a"),
        ]
        workspace = _resolve(mappings, "/src/abc")
        # neither folder contains /src/abc, fall back to the first mapping
        assert workspace.default_team_project == "alpha"

    def test_windows_paths(self):
        mappings = [
            WorkspaceMapping("$/alpha", "C:\\src\\one"),
            WorkspaceMapping("$/beta", "C:\\src\\two"),
        ]
        workspace = _resolve(mappings, "c:/SRC/two/lib")
        assert workspace.default_team_project == "beta"

    def test_equal_prefixes_keep_output_order(self):
        mappings = [
            WorkspaceMapping("$/alpha", "/src"),
            WorkspaceMapping("$/beta", "/src"),
        ]
        workspace = _resolve(mappings, "/src/lib")
        assert workspace.default_team_project == "alpha"

    def test_cloaked_mappings_are_skipped(self):
        mappings = [
            WorkspaceMapping("$/alpha", "/src"),
            WorkspaceMapping("$/beta", None, cloaked=True),
        ]
        workspace = _resolve(mappings, "/other/beta")
        assert workspace.default_team_project == "alpha"

    def test_no_match_falls_back_to_first_mapping(self):
        mappings = [
            WorkspaceMapping("$/alpha", "/src"),
            WorkspaceMapping("$/beta", "/other"),
        ]
        workspace = _resolve(mappings, "/elsewhere")
        assert workspace.default_team_project == "alpha"

    def test_server_is_decoded(self):
        mappings = [WorkspaceMapping("$/alpha", "/src")]
        workspace = _resolve(
            mappings, "/src", server="http://server:8080/tfs/spaces%20in%20the%20name/"
        )
        assert workspace.server == "http://server:8080/tfs/spaces in the name/"

    def test_absent_server_stays_none(self):
        workspace = _resolve([WorkspaceMapping("$/alpha", "/src")], "/src")
        assert workspace.server is None

    def test_mappings_are_preserved_in_order(self):
        mappings = [
            WorkspaceMapping("$/b", "/b"),
            WorkspaceMapping("$/a", "/a"),
        ]
        workspace = _resolve(mappings, "/a")
        assert list(workspace.mappings) == mappings

    def test_project_name_above_mapped_folder_is_ignored(self):
        mappings = [
            WorkspaceMapping("$/tools", "/repo/tools-root"),
            WorkspaceMapping("$/web", "/repo/tools/web"),
        ]
        workspace = _resolve(mappings, "/repo/tools/web/src")
        # 'tools' is a folder above /repo/tools/web, the containing mapping wins
        assert workspace.default_team_project == "web"

    def test_project_name_below_mapped_folder_refines_selection(self):
        mappings = [
            WorkspaceMapping("$/alpha", "/src"),
            WorkspaceMapping("$/beta", "/elsewhere"),
        ]
        workspace = _resolve(mappings, "/src/vendor/beta")
        assert workspace.default_team_project == "beta"

    def test_root_mapping_uses_next_team_project(self):
        mappings = [
            WorkspaceMapping("$/", "/src"),
            WorkspaceMapping("$/project1", "/src/project1"),
        ]
        workspace = _resolve(mappings, "/src", restrict=False)
        assert workspace.default_team_project == "project1"

    def test_only_root_mapping_has_no_team_project(self):
        workspace = _resolve([WorkspaceMapping("$/", "/src")], "/src")
        assert workspace.default_team_project is None

"""
Tests for the ArgumentBuilder.
"""

from tfvc_workspace.entities.arguments import SECRET_MASK, ArgumentBuilder


class TestArgumentBuilder:
    """Test cases for the ArgumentBuilder."""

    def test_command_and_noprompt(self):
        builder = ArgumentBuilder("workfold")
        assert builder.build() == ["workfold", "-noprompt"]
        assert builder.get_command() == "workfold"

    def test_secret_is_masked_for_display_only(self):
        builder = ArgumentBuilder("workfold").add_secret("/home/me/src")
        assert builder.build() == ["workfold", "-noprompt", "/home/me/src"]
        assert builder.get_arguments_for_display() == "workfold -noprompt ********"
        assert str(builder) == "workfold -noprompt ********"

    def test_mask_is_eight_asterisks(self):
        assert SECRET_MASK == "*" * 8

    def test_add_switch(self):
        builder = ArgumentBuilder("workfold").add_switch("recursive").add("/src")
        assert builder.get_arguments_for_display() == "workfold -noprompt -recursive /src"

    def test_build_returns_copy(self):
        builder = ArgumentBuilder("workfold")
        builder.build().append("extra")
        assert builder.build() == ["workfold", "-noprompt"]

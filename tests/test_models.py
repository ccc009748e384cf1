"""Unit tests for rcprompt.models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from rcprompt.models import GitInfo, NixShellMode, PromptConfig, PromptContext


class TestNixShellMode:
    def test_pure(self):
        assert NixShellMode.classify("pure") is NixShellMode.PURE

    def test_impure(self):
        assert NixShellMode.classify("impure") is NixShellMode.IMPURE

    @pytest.mark.parametrize("value", ["1", "yes", "PURE", "unknown"])
    def test_any_other_value_is_impure(self, value):
        assert NixShellMode.classify(value) is NixShellMode.IMPURE

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_is_none(self, value):
        assert NixShellMode.classify(value) is None


class TestPromptContext:
    def test_is_immutable(self):
        context = PromptContext(exit_status=0, working_directory=Path("/"))
        with pytest.raises(ValidationError):
            context.exit_status = 1

    def test_working_directory_is_required(self):
        with pytest.raises(ValidationError) as exc_info:
            PromptContext(exit_status=0)
        assert exc_info.value.errors()[0]["loc"] == ("working_directory",)

    def test_path_is_coerced(self):
        context = PromptContext(exit_status=0, working_directory="/srv")
        assert context.working_directory == Path("/srv")

    def test_equal_inputs_compare_equal(self):
        a = PromptContext(exit_status=1, nix_shell="pure", working_directory=Path("/x"))
        b = PromptContext(exit_status=1, nix_shell="pure", working_directory=Path("/x"))
        assert a == b


class TestGitInfo:
    def test_defaults_to_clean(self):
        assert GitInfo(branch_name="main").is_dirty is False

    def test_branch_name_is_required(self):
        with pytest.raises(ValidationError):
            GitInfo()


class TestPromptConfig:
    def test_defaults(self):
        config = PromptConfig()
        assert config.git_enabled is True
        assert config.git_timeout == 2.0
        assert config.remote_session_vars == ["SSH_CLIENT", "SSH_CONNECTION", "SSH_TTY"]
        assert config.nix_shell_var == "IN_NIX_SHELL"
        assert config.abbreviate_home is True
        assert config.color is True

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValidationError):
            PromptConfig(git_timeout=timeout)

    def test_default_lists_are_independent(self):
        first = PromptConfig()
        first.remote_session_vars.append("MOSH")
        assert "MOSH" not in PromptConfig().remote_session_vars

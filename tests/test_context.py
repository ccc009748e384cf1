"""Unit tests for rcprompt.context."""

from pathlib import Path
from unittest.mock import patch

from rcprompt.context import build_context, get_working_directory, is_remote_session
from rcprompt.models import NixShellMode, PromptConfig


class TestIsRemoteSession:
    def test_no_indicator_is_local(self):
        assert is_remote_session({}, ["SSH_CLIENT"]) is False

    def test_empty_indicator_is_local(self):
        assert is_remote_session({"SSH_CLIENT": ""}, ["SSH_CLIENT"]) is False

    def test_any_indicator_marks_remote(self):
        env = {"SSH_TTY": "/dev/pts/3"}
        assert is_remote_session(env, ["SSH_CLIENT", "SSH_TTY"]) is True

    def test_unlisted_variable_is_ignored(self):
        assert is_remote_session({"SSH_TTY": "/dev/pts/3"}, ["SSH_CLIENT"]) is False


class TestGetWorkingDirectory:
    def test_prefers_pwd(self):
        assert get_working_directory({"PWD": "/home/me/link"}) == Path("/home/me/link")

    @patch("rcprompt.context.os.getcwd", return_value="/real/dir")
    def test_falls_back_to_getcwd_without_pwd(self, _getcwd):
        assert get_working_directory({}) == Path("/real/dir")

    @patch("rcprompt.context.os.getcwd", return_value="/real/dir")
    def test_ignores_relative_pwd(self, _getcwd):
        assert get_working_directory({"PWD": "relative"}) == Path("/real/dir")


class TestBuildContext:
    def test_local_session_without_nix(self):
        context = build_context(0, environ={"PWD": "/srv/app"})
        assert context.exit_status == 0
        assert context.is_remote_session is False
        assert context.nix_shell is None
        assert context.nix_shell_mode is None
        assert context.working_directory == Path("/srv/app")

    def test_remote_session_from_ssh_client(self):
        env = {"PWD": "/srv", "SSH_CLIENT": "10.0.0.1 51234 22"}
        assert build_context(0, environ=env).is_remote_session is True

    def test_pure_nix_shell(self):
        context = build_context(0, environ={"PWD": "/srv", "IN_NIX_SHELL": "pure"})
        assert context.nix_shell_mode is NixShellMode.PURE

    def test_impure_nix_shell(self):
        context = build_context(0, environ={"PWD": "/srv", "IN_NIX_SHELL": "impure"})
        assert context.nix_shell_mode is NixShellMode.IMPURE

    def test_empty_nix_indicator_means_no_nix_shell(self):
        context = build_context(0, environ={"PWD": "/srv", "IN_NIX_SHELL": ""})
        assert context.nix_shell is None

    def test_exit_status_is_kept(self):
        assert build_context(127, environ={"PWD": "/srv"}).exit_status == 127

    def test_explicit_cwd_wins_over_pwd(self):
        context = build_context(0, environ={"PWD": "/srv"}, cwd="/tmp")
        assert context.working_directory == Path("/tmp")

    def test_custom_indicator_variables(self):
        config = PromptConfig(remote_session_vars=["MOSH_SESSION"], nix_shell_var="NIX_MODE")
        env = {"PWD": "/srv", "MOSH_SESSION": "1", "NIX_MODE": "pure", "SSH_CLIENT": "x"}
        context = build_context(0, environ=env, config=config)
        assert context.is_remote_session is True
        assert context.nix_shell == "pure"

    def test_reads_process_environment_by_default(self, clean_env):
        clean_env.setenv("PWD", "/from/env")
        clean_env.setenv("SSH_CONNECTION", "10.0.0.1 51234 10.0.0.2 22")
        context = build_context(1)
        assert context.is_remote_session is True
        assert context.working_directory == Path("/from/env")

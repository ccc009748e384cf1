"""Shared pytest fixtures for test isolation helpers."""

from pathlib import Path

import pytest

import rcprompt.config as config_module


@pytest.fixture()
def rcprompt_config_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Redirect rcprompt config paths to a temp directory."""
    config_dir = tmp_path / ".rcprompt"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    return config_dir, config_file


@pytest.fixture()
def config_dir(rcprompt_config_paths: tuple[Path, Path]) -> Path:
    return rcprompt_config_paths[0]


@pytest.fixture()
def config_file(rcprompt_config_paths: tuple[Path, Path]) -> Path:
    return rcprompt_config_paths[1]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove environment variables that change prompt or config behavior."""
    for name in (
        "SSH_CLIENT",
        "SSH_CONNECTION",
        "SSH_TTY",
        "IN_NIX_SHELL",
        "NO_COLOR",
        "RCPROMPT_GIT",
        "RCPROMPT_GIT_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

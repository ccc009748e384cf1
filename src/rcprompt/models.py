"""Data models for rcprompt."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rcprompt.constants import (
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_NIX_SHELL_VAR,
    DEFAULT_REMOTE_SESSION_VARS,
)


class NixShellMode(str, Enum):
    PURE = "pure"
    IMPURE = "impure"

    @classmethod
    def classify(cls, value: str | None) -> "NixShellMode | None":
        """Map a raw ``IN_NIX_SHELL`` value to a mode.

        Anything other than ``"pure"`` counts as impure, including values
        nix itself never sets.
        """
        if not value:
            return None
        if value == cls.PURE.value:
            return cls.PURE
        return cls.IMPURE


class GitInfo(BaseModel):
    """State of the git work tree containing the working directory."""

    model_config = ConfigDict(frozen=True)

    branch_name: str
    is_dirty: bool = False


class PromptContext(BaseModel):
    """Everything a single prompt render depends on, captured once per cycle."""

    model_config = ConfigDict(frozen=True)

    exit_status: int = Field(description="Exit status of the last foreground command.")
    is_remote_session: bool = Field(
        default=False,
        description="True when the shell runs inside an SSH session.",
    )
    nix_shell: str | None = Field(
        default=None,
        description="Raw value of the nix-shell indicator, or None outside nix-shell.",
    )
    working_directory: Path = Field(
        description="Current directory, displayed and used for the git query.",
    )

    @field_validator("nix_shell", mode="before")
    @classmethod
    def _empty_nix_shell_is_none(cls, value: str | None) -> str | None:
        return value or None

    @property
    def nix_shell_mode(self) -> NixShellMode | None:
        return NixShellMode.classify(self.nix_shell)


@dataclass(frozen=True)
class RenderedPrompt:
    """Primary and continuation prompt strings for one prompt cycle."""

    primary: str
    continuation: str


class PromptConfig(BaseModel):
    """User configuration for rcprompt."""

    git_enabled: bool = Field(
        default=True,
        description=(
            "Query git for the branch fragment. Can be disabled via RCPROMPT_GIT=false "
            "for very large repositories."
        ),
    )
    git_timeout: float = Field(
        default=DEFAULT_GIT_TIMEOUT,
        gt=0,
        description=(
            "Seconds to wait for each git call before dropping the branch fragment. "
            "Overridden by RCPROMPT_GIT_TIMEOUT."
        ),
    )
    remote_session_vars: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REMOTE_SESSION_VARS),
        description="Environment variables whose presence marks an SSH session.",
    )
    nix_shell_var: str = Field(
        default=DEFAULT_NIX_SHELL_VAR,
        description="Environment variable holding the nix-shell mode ('pure' or 'impure').",
    )
    abbreviate_home: bool = Field(
        default=True,
        description="Show the home directory as '~' in the working directory.",
    )
    color: bool = Field(
        default=True,
        description="Emit ANSI colors. Forced off when NO_COLOR is set.",
    )

"""Per-prompt driver that runs the registered renderer once per cycle."""

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from rcprompt.context import build_context
from rcprompt.git import GitQuery, StaticGitQuery, SubprocessGitQuery
from rcprompt.models import PromptConfig, PromptContext, RenderedPrompt
from rcprompt.prompt import render
from rcprompt.shell.dialects import ShellDialect

log = logging.getLogger(__name__)

RenderCallback = Callable[[PromptContext], RenderedPrompt]


def make_git_query(config: PromptConfig) -> GitQuery:
    """Return the git query matching the configuration."""
    if not config.git_enabled:
        return StaticGitQuery(None)
    return SubprocessGitQuery(timeout=config.git_timeout)


def make_renderer(
    config: PromptConfig,
    dialect: ShellDialect,
    git_query: GitQuery | None = None,
    home: Path | None = None,
) -> RenderCallback:
    """Bind configuration and dialect into a ``context -> prompt`` callback."""
    git_query = git_query or make_git_query(config)
    if not config.abbreviate_home:
        home = None
    elif home is None:
        home = Path.home()

    def _render(context: PromptContext) -> RenderedPrompt:
        return render(context, git_query, dialect=dialect, color=config.color, home=home)

    return _render


class PromptHook:
    """Host side of the shell's before-prompt hook.

    Each call to ``before_prompt`` captures a fresh context and runs the
    registered callback exactly once. Nothing is carried between cycles.
    """

    def __init__(self, config: PromptConfig, callback: RenderCallback | None = None):
        self.config = config
        self._callback = callback

    def register(self, callback: RenderCallback) -> None:
        self._callback = callback

    def before_prompt(
        self,
        exit_status: int,
        environ: Mapping[str, str] | None = None,
        cwd: str | os.PathLike[str] | None = None,
    ) -> RenderedPrompt:
        if self._callback is None:
            raise RuntimeError("no prompt renderer registered")
        context = build_context(exit_status, environ=environ, cwd=cwd, config=self.config)
        return self._callback(context)

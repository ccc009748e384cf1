"""Prompt string assembly for rcprompt."""

import logging
from pathlib import Path

from rcprompt.constants import Color
from rcprompt.git import GitQuery, SubprocessGitQuery
from rcprompt.models import GitInfo, NixShellMode, PromptContext, RenderedPrompt
from rcprompt.shell.dialects import BASH, ShellDialect

log = logging.getLogger(__name__)


class Painter:
    """Turn color tokens into dialect-wrapped escape sequences."""

    def __init__(self, dialect: ShellDialect, enabled: bool = True):
        self.dialect = dialect
        self.enabled = enabled

    def __call__(self, color: Color) -> str:
        if not self.enabled:
            return ""
        return self.dialect.nonprinting(color.value)


def exit_color(exit_status: int) -> Color:
    return Color.GREEN if exit_status == 0 else Color.RED


def host_color(is_remote_session: bool) -> Color:
    return Color.RED if is_remote_session else Color.BLUE


def nix_color(mode: NixShellMode) -> Color:
    return Color.GREEN if mode is NixShellMode.PURE else Color.RED


def git_color(info: GitInfo) -> Color:
    return Color.RED if info.is_dirty else Color.GREEN


def nix_fragment(context: PromptContext, paint: Painter) -> str:
    """Return ``"(nix-shell: <mode>) "`` or an empty string outside nix-shell."""
    mode = context.nix_shell_mode
    if mode is None:
        return ""
    value = paint.dialect.escape(context.nix_shell or "")
    return f"(nix-shell: {paint(nix_color(mode))}{value}{paint(Color.WHITE)}) "


def git_fragment(info: GitInfo | None, paint: Painter) -> str:
    """Return ``" (<branch>)"`` or an empty string outside a work tree."""
    if info is None:
        return ""
    branch = paint.dialect.escape(info.branch_name)
    return f" ({paint(git_color(info))}{branch}{paint(Color.RESET)})"


def display_path(path: Path, home: Path | None = None) -> str:
    """Return *path* for display, with *home* abbreviated to ``~``.

    A root home directory is never abbreviated, as with bash's ``\\w``.
    """
    if home is not None and home != Path(home.anchor):
        if path == home:
            return "~"
        try:
            return f"~/{path.relative_to(home).as_posix()}"
        except ValueError:
            pass
    return str(path)


def render(
    context: PromptContext,
    git_query: GitQuery | None = None,
    *,
    dialect: ShellDialect = BASH,
    color: bool = True,
    home: Path | None = None,
) -> RenderedPrompt:
    """Render the primary and continuation prompts for one prompt cycle.

    The timestamp, user and hostname are emitted as the dialect's
    placeholders, which the shell expands each time it draws the prompt.
    The only side effect is the git query for ``context.working_directory``.

    Args:
        context: Inputs captured by the shell hook.
        git_query: Source of git state; defaults to running ``git``.
        dialect: Prompt language of the target shell.
        color: When False, every color token renders as an empty string.
        home: Home directory to abbreviate as ``~``; no abbreviation if None.

    Returns:
        The rendered ``(primary, continuation)`` pair.
    """
    git_query = git_query or SubprocessGitQuery()
    paint = Painter(dialect, enabled=color)

    status_color = paint(exit_color(context.exit_status))
    white = paint(Color.WHITE)
    reset = paint(Color.RESET)

    git_info = git_query.query(context.working_directory)
    cwd = dialect.escape(display_path(context.working_directory, home))

    primary = (
        f"{white}{dialect.timestamp} {nix_fragment(context, paint)}"
        f"{paint(Color.GREEN)}{dialect.user}{white}@"
        f"{paint(host_color(context.is_remote_session))}{dialect.hostname}"
        f"{white}:{reset}{cwd}{git_fragment(git_info, paint)}\n"
        f"{status_color} +{reset} "
    )
    continuation = f"{status_color} |{reset} "
    log.debug("rendered primary=%r continuation=%r", primary, continuation)
    return RenderedPrompt(primary=primary, continuation=continuation)

"""Build a PromptContext from the shell's process environment."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from rcprompt.models import PromptConfig, PromptContext

log = logging.getLogger(__name__)


def is_remote_session(environ: Mapping[str, str], variables: list[str]) -> bool:
    """Return whether any of the remote-session indicator variables is set."""
    return any(environ.get(name, "") for name in variables)


def get_working_directory(environ: Mapping[str, str]) -> Path:
    """Return the logical working directory.

    ``PWD`` is preferred over ``os.getcwd()`` so symlinked paths display the
    way the user typed them.
    """
    pwd = environ.get("PWD", "")
    if pwd and os.path.isabs(pwd):
        return Path(pwd)
    return Path(os.getcwd())


def build_context(
    exit_status: int,
    environ: Mapping[str, str] | None = None,
    cwd: str | os.PathLike[str] | None = None,
    config: PromptConfig | None = None,
) -> PromptContext:
    """Capture the prompt inputs for one render.

    Args:
        exit_status: Exit status of the last command, captured by the shell
            hook before it ran anything else.
        environ: Environment to read; defaults to ``os.environ``.
        cwd: Explicit working directory; defaults to ``PWD`` or the process cwd.
        config: Configuration naming the indicator variables.

    Returns:
        An immutable ``PromptContext``.
    """
    environ = os.environ if environ is None else environ
    config = config or PromptConfig()

    working_directory = Path(cwd) if cwd is not None else get_working_directory(environ)
    context = PromptContext(
        exit_status=exit_status,
        is_remote_session=is_remote_session(environ, config.remote_session_vars),
        nix_shell=environ.get(config.nix_shell_var, ""),
        working_directory=working_directory,
    )
    log.debug("context=%s", context)
    return context

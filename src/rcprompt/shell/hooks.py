"""Shell snippets that install rcprompt's before-prompt hook."""

import shlex
import shutil

from rcprompt.models import RenderedPrompt
from rcprompt.shell.dialects import ShellDialect, get_dialect

HOOK_FUNCTION = "__rcprompt_precmd"

# Both hooks read $? before running anything else; any earlier command
# would overwrite the status being rendered.
BASH_HOOK = """\
{function}() {{
    local __rcprompt_status=$?
    eval "$({executable} render --shell bash --exit-status "$__rcprompt_status")"
    return $__rcprompt_status
}}
if [[ ";${{PROMPT_COMMAND:-}};" != *";{function};"* ]]; then
    PROMPT_COMMAND="{function}${{PROMPT_COMMAND:+;$PROMPT_COMMAND}}"
fi
"""

ZSH_HOOK = """\
{function}() {{
    local __rcprompt_status=$?
    eval "$({executable} render --shell zsh --exit-status "$__rcprompt_status")"
    return $__rcprompt_status
}}
typeset -ga precmd_functions
if (( ! ${{precmd_functions[(I){function}]}} )); then
    precmd_functions=({function} $precmd_functions)
fi
"""

HOOK_TEMPLATES = {"bash": BASH_HOOK, "zsh": ZSH_HOOK}


def _resolve_executable() -> str:
    """Return the rcprompt command to call from the hook."""
    return shutil.which("rcprompt") or "rcprompt"


def hook_script(shell: str, executable: str | None = None) -> str:
    """Return the script that wires rcprompt into *shell*'s prompt cycle.

    The bash hook is prepended to ``PROMPT_COMMAND``; the zsh hook goes to
    the front of ``precmd_functions``. Sourcing the script twice installs
    the hook once.

    Raises:
        ValueError: If *shell* is not supported.
    """
    try:
        template = HOOK_TEMPLATES[shell]
    except KeyError:
        raise ValueError(f"unsupported shell {shell!r}") from None
    executable = executable or _resolve_executable()
    return template.format(function=HOOK_FUNCTION, executable=shlex.quote(executable))


def format_assignments(prompt: RenderedPrompt, dialect: ShellDialect | str) -> str:
    """Return shell code assigning the rendered prompts to the dialect's variables."""
    if isinstance(dialect, str):
        dialect = get_dialect(dialect)
    return (
        f"{dialect.prompt_var}={shlex.quote(prompt.primary)}\n"
        f"{dialect.continuation_var}={shlex.quote(prompt.continuation)}\n"
    )

"""Terminal color tokens shared across rcprompt."""

from enum import Enum


class Color(str, Enum):
    """ANSI SGR sequences used in the prompt."""

    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    BLUE = "\033[0;34m"
    WHITE = "\033[0;37m"
    RESET = "\033[0m"


DEFAULT_GIT_TIMEOUT = 2.0
DEFAULT_NIX_SHELL_VAR = "IN_NIX_SHELL"
DEFAULT_REMOTE_SESSION_VARS = ("SSH_CLIENT", "SSH_CONNECTION", "SSH_TTY")

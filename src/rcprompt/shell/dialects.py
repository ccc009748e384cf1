"""Prompt syntax for the supported shells."""

from collections.abc import Callable
from dataclasses import dataclass


def _escape_bash(text: str) -> str:
    # PS1 goes through backslash decoding and then double-quote expansion
    # (promptvars), so `\`, `$` and backticks each need two levels of quoting.
    out = []
    for char in text:
        if char == "\\":
            out.append("\\\\\\\\")
        elif char in "$`":
            out.append("\\\\" + char)
        else:
            out.append(char)
    return "".join(out)


def _escape_zsh(text: str) -> str:
    return text.replace("%", "%%")


@dataclass(frozen=True)
class ShellDialect:
    """Placeholders and quoting rules for one shell's prompt language."""

    name: str
    timestamp: str
    user: str
    hostname: str
    nonprint_start: str
    nonprint_end: str
    prompt_var: str
    continuation_var: str
    escape: Callable[[str], str]

    def nonprinting(self, sequence: str) -> str:
        """Wrap an escape sequence so line editing gives it zero width."""
        if not sequence:
            return ""
        return f"{self.nonprint_start}{sequence}{self.nonprint_end}"


BASH = ShellDialect(
    name="bash",
    timestamp="\\t",
    user="\\u",
    hostname="\\h",
    nonprint_start="\\[",
    nonprint_end="\\]",
    prompt_var="PS1",
    continuation_var="PS2",
    escape=_escape_bash,
)

ZSH = ShellDialect(
    name="zsh",
    timestamp="%*",
    user="%n",
    hostname="%m",
    nonprint_start="%{",
    nonprint_end="%}",
    prompt_var="PROMPT",
    continuation_var="PROMPT2",
    escape=_escape_zsh,
)

DIALECTS: dict[str, ShellDialect] = {d.name: d for d in (BASH, ZSH)}


def get_dialect(name: str) -> ShellDialect:
    """Return the dialect for a shell name.

    Raises:
        ValueError: If the shell is not supported.
    """
    try:
        return DIALECTS[name]
    except KeyError:
        raise ValueError(
            f"unsupported shell {name!r} (expected one of: {', '.join(sorted(DIALECTS))})"
        ) from None

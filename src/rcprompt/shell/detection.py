"""Detect which supported shell rcprompt is rendering for."""

import logging
import os
from collections.abc import Mapping

from rcprompt.shell.dialects import DIALECTS

log = logging.getLogger(__name__)

DEFAULT_SHELL = "bash"


def _classify_shell(value: str) -> str | None:
    """Return the supported shell kind for a name or path, if any."""
    name = os.path.basename(value.strip()).lower()
    # Login shells show up as "-bash" in some process listings.
    name = name.lstrip("-")
    return name if name in DIALECTS else None


def detect_shell(environ: Mapping[str, str] | None = None) -> str:
    """Return the shell named by ``$SHELL``, falling back to bash."""
    environ = os.environ if environ is None else environ
    shell = environ.get("SHELL", "")
    kind = _classify_shell(shell) if shell else None
    if kind is None:
        log.debug("unsupported or missing SHELL=%r; using %s", shell, DEFAULT_SHELL)
        return DEFAULT_SHELL
    return kind

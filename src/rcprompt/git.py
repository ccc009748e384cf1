"""Git work tree queries for the prompt's branch fragment."""

import logging
import os
import subprocess
from pathlib import Path
from typing import Protocol

from rcprompt.constants import DEFAULT_GIT_TIMEOUT
from rcprompt.models import GitInfo

log = logging.getLogger(__name__)

DETACHED_HEAD_NAME = "HEAD"


class GitQuery(Protocol):
    def query(self, directory: Path) -> GitInfo | None:
        """Return git state for *directory*, or None outside a work tree."""
        ...


class SubprocessGitQuery:
    """Query git state by running the ``git`` binary.

    At most three commands run per query: the work tree check, then the
    dirty check and the branch name, which only run when the first one
    succeeds. Every failure (not a repository, git missing, permission
    error, timeout) is reported as ``None``.
    """

    def __init__(self, timeout: float = DEFAULT_GIT_TIMEOUT, executable: str = "git"):
        self.timeout = timeout
        self.executable = executable

    def _run(self, directory: Path, *args: str, ok_codes: tuple[int, ...] = (0,)) -> str | None:
        """Run one git command in *directory*; return stdout when the exit code is accepted."""
        # Keep `git status` from taking the index lock behind the user's back.
        env = {**os.environ, "GIT_OPTIONAL_LOCKS": "0"}
        try:
            result = subprocess.run(
                [self.executable, *args],
                cwd=directory,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env=env,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            log.debug("git %s failed: %s", " ".join(args), e)
            return None
        if result.returncode not in ok_codes:
            log.debug("git %s returned rc=%d", " ".join(args), result.returncode)
            return None
        return result.stdout

    def query(self, directory: Path) -> GitInfo | None:
        inside = self._run(directory, "rev-parse", "--is-inside-work-tree")
        if inside is None or inside.strip() != "true":
            return None

        status = self._run(directory, "status", "--porcelain", "--untracked-files=no")
        if status is None:
            return None

        # symbolic-ref exits 1 on a detached HEAD and works on an unborn branch.
        branch = self._run(directory, "symbolic-ref", "--short", "-q", "HEAD", ok_codes=(0, 1))
        if branch is None:
            return None
        lines = branch.splitlines()
        branch_name = lines[0].strip() if lines else ""

        info = GitInfo(
            branch_name=branch_name or DETACHED_HEAD_NAME,
            is_dirty=bool(status.strip()),
        )
        log.debug("git state for %s: %s", directory, info)
        return info


class StaticGitQuery:
    """Return a fixed answer; used when git is disabled and in tests."""

    def __init__(self, info: GitInfo | None = None):
        self.info = info

    def query(self, directory: Path) -> GitInfo | None:
        return self.info

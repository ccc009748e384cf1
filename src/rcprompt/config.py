"""Configuration for rcprompt."""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from rcprompt.models import PromptConfig

log = logging.getLogger(__name__)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "PromptConfig",
    "load_config",
    "save_config",
    "reset_config",
    "update_config",
]

CONFIG_DIR = Path.home() / ".rcprompt"
CONFIG_FILE = CONFIG_DIR / "config.json"
BOOLEAN_TRUE_STRINGS = {"1", "true", "yes", "on"}
BOOLEAN_FALSE_STRINGS = {"0", "false", "no", "off"}
LIST_FIELDS = {"remote_session_vars"}


def load_config(*, apply_env: bool = True) -> PromptConfig:
    """Load config from file, with env var overrides.

    Reads ``~/.rcprompt/config.json`` and, unless *apply_env* is False,
    applies environment variable overrides (``RCPROMPT_GIT``,
    ``RCPROMPT_GIT_TIMEOUT`` and ``NO_COLOR``).  Falls back to defaults when
    the file is absent, contains invalid JSON or holds invalid values.

    Returns:
        The resolved ``PromptConfig`` instance.
    """
    raw_config: dict[str, Any] = {}

    _restrict_mode(CONFIG_DIR, 0o700)
    _restrict_mode(CONFIG_FILE, 0o600)

    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE) as f:
                loaded = json.load(f)
        except json.JSONDecodeError as exc:
            log.warning(
                "invalid config JSON in %s (%s); falling back to defaults",
                CONFIG_FILE,
                exc,
            )
        else:
            if isinstance(loaded, dict):
                raw_config = loaded
            log.debug("loaded config from %s", CONFIG_FILE)

    try:
        config = PromptConfig.model_validate(raw_config)
    except ValidationError as exc:
        log.warning(
            "invalid config values in %s (%d errors); falling back to defaults",
            CONFIG_FILE,
            exc.error_count(),
        )
        config = PromptConfig()

    if apply_env:
        _apply_env_overrides(config)
    return config


def _apply_env_overrides(config: PromptConfig) -> None:
    if git_raw := os.environ.get("RCPROMPT_GIT"):
        normalized = git_raw.strip().lower()
        if normalized in BOOLEAN_TRUE_STRINGS:
            config.git_enabled = True
        elif normalized in BOOLEAN_FALSE_STRINGS:
            config.git_enabled = False
    if timeout_raw := os.environ.get("RCPROMPT_GIT_TIMEOUT"):
        try:
            timeout = float(timeout_raw)
        except ValueError:
            timeout = 0.0
        if timeout > 0:
            config.git_timeout = timeout
        else:
            log.warning("ignoring invalid RCPROMPT_GIT_TIMEOUT=%r", timeout_raw)
    # https://no-color.org: presence disables color regardless of value.
    if os.environ.get("NO_COLOR") is not None:
        config.color = False


def update_config(config: PromptConfig, key: str, raw_value: str) -> PromptConfig:
    """Return a copy of *config* with one field set from its string form.

    List fields take a comma-separated value.

    Raises:
        KeyError: If *key* is not a configuration field.
        pydantic.ValidationError: If *raw_value* is not valid for the field.
    """
    if key not in PromptConfig.model_fields:
        raise KeyError(key)
    value: Any = raw_value
    if key in LIST_FIELDS:
        value = [item.strip() for item in raw_value.split(",") if item.strip()]
    return PromptConfig.model_validate({**config.model_dump(), key: value})


def save_config(config: PromptConfig) -> None:
    """Write ``~/.rcprompt/config.json`` atomically with owner-only permissions.

    Raises:
        OSError: If the config directory or file cannot be created or written.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True, mode=0o700)
    _restrict_mode(CONFIG_DIR, 0o700)
    # mkstemp creates the file 0o600 next to its destination so the
    # final os.replace stays on one filesystem.
    fd, temp_name = tempfile.mkstemp(dir=CONFIG_DIR, prefix=f".{CONFIG_FILE.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(config.model_dump(), f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_name, CONFIG_FILE)
    except Exception:
        Path(temp_name).unlink(missing_ok=True)
        raise
    log.debug("saved config to %s", CONFIG_FILE)


def reset_config() -> Path | None:
    """Delete the stored config file. Returns the removed path, if any."""
    if not CONFIG_FILE.exists():
        return None
    CONFIG_FILE.unlink()
    log.debug("removed config %s", CONFIG_FILE)
    return CONFIG_FILE


def _restrict_mode(path: Path, mode: int) -> None:
    """Drop group/other bits from an existing *path*."""
    if not path.exists():
        return
    current = stat.S_IMODE(path.stat().st_mode)
    if current & 0o077:
        path.chmod(mode)
        log.warning("tightened permissions on %s from %o to %o", path, current, mode)

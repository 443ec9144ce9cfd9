"""Installer settings data structures and loading.

Provides immutable settings loaded once at the entry point from an optional
TOML file. Every key is optional; missing keys keep their defaults.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

SETTINGS_ENV_VAR = "GRAYLOG_INSTALLER_CONFIG"

LockScope = Literal["system", "user"]


@dataclass(frozen=True)
class InstallerSettings:
    """Immutable installer tunables.

    install_dir is relative to the invoking user's home directory unless
    absolute. poll_max_attempts of 0 polls until healthy without limit.
    """

    install_dir: Path = Path("docker/graylog")
    compose_version: str = "1.24.0"
    default_root_password: str = "admin"
    initial_wait_seconds: float = 10.0
    poll_interval_seconds: float = 2.0
    poll_max_attempts: int = 150
    lock_scope: LockScope = "system"
    lock_dir: Path = Path("/tmp")

    def resolve_install_dir(self, home_dir: Path) -> Path:
        """Return the absolute installation directory for the given home."""
        if self.install_dir.is_absolute():
            return self.install_dir
        return home_dir / self.install_dir


def default_settings_path() -> Path:
    """Return the settings path, honouring GRAYLOG_INSTALLER_CONFIG."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "graylog-installer" / "config.toml"


def _positive_number(data: dict, key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float) or value < 0:
        raise ValueError(f"'{key}' must be a non-negative number, got {value!r}")
    return float(value)


def load_settings(settings_path: Path) -> InstallerSettings:
    """Load settings from a TOML file if present; otherwise return defaults.

    Example settings file:
      install_dir = "/srv/graylog"
      compose_version = "1.29.2"
      poll_max_attempts = 0   # wait forever
      lock_scope = "user"

    Raises:
        ValueError: If a key holds a value of the wrong type or range
    """
    defaults = InstallerSettings()
    if not settings_path.exists():
        return defaults

    try:
        data = tomllib.loads(settings_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed settings file {settings_path}: {e}") from e

    poll_max_attempts = data.get("poll_max_attempts", defaults.poll_max_attempts)
    if isinstance(poll_max_attempts, bool) or not isinstance(poll_max_attempts, int):
        raise ValueError(f"'poll_max_attempts' must be an integer, got {poll_max_attempts!r}")
    if poll_max_attempts < 0:
        raise ValueError(f"'poll_max_attempts' must be >= 0, got {poll_max_attempts}")

    lock_scope = data.get("lock_scope", defaults.lock_scope)
    if lock_scope not in ("system", "user"):
        raise ValueError(f"'lock_scope' must be 'system' or 'user', got {lock_scope!r}")

    default_password = str(data.get("default_root_password", defaults.default_root_password))
    if not default_password:
        raise ValueError("'default_root_password' cannot be empty")

    return InstallerSettings(
        install_dir=Path(str(data.get("install_dir", defaults.install_dir))).expanduser(),
        compose_version=str(data.get("compose_version", defaults.compose_version)),
        default_root_password=default_password,
        initial_wait_seconds=_positive_number(
            data, "initial_wait_seconds", defaults.initial_wait_seconds
        ),
        poll_interval_seconds=_positive_number(
            data, "poll_interval_seconds", defaults.poll_interval_seconds
        ),
        poll_max_attempts=poll_max_attempts,
        lock_scope=lock_scope,
        lock_dir=Path(str(data.get("lock_dir", defaults.lock_dir))),
    )

"""Single-instance lock based on directory creation.

mkdir is atomic on every local filesystem, so the directory's existence is
the lock. Symlinked or hard-linked installer copies share no lock.
"""

import logging
from pathlib import Path
from types import TracebackType

from graylog_installer.core.errors import LockUnavailableError
from graylog_installer.core.settings import LockScope

logger = logging.getLogger(__name__)


def instance_lock_path(lock_dir: Path, script_name: str, scope: LockScope, uid: int) -> Path:
    """Return the lock directory path for the given scope.

    system: one installer per machine. user: one installer per uid.
    """
    if scope == "system":
        return lock_dir / f"{script_name}.lock"
    return lock_dir / f"{script_name}.{uid}.lock"


class InstanceLock:
    """Context manager holding the lock directory for the duration of a run.

    The directory is removed on exit whether the block returns normally or
    raises (including SystemExit and KeyboardInterrupt).
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._held = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def held(self) -> bool:
        return self._held

    def acquire(self) -> None:
        """Create the lock directory.

        Raises:
            LockUnavailableError: If the directory already exists
        """
        try:
            self._path.mkdir()
        except FileExistsError as e:
            raise LockUnavailableError(f"Unable to acquire script lock: {self._path}") from e
        self._held = True
        logger.debug("Acquired script lock: %s", self._path)

    def release(self) -> None:
        if self._held and self._path.is_dir():
            self._path.rmdir()
            logger.debug("Released script lock: %s", self._path)
        self._held = False

    def __enter__(self) -> "InstanceLock":
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

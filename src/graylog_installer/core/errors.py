"""Installer error taxonomy.

Every error is fatal at the point it is detected. Each carries the process
exit code the CLI error boundary terminates with.
"""

EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_TARGET_EXISTS = 3
EXIT_CONTAINER_NOT_RUNNING = 5
EXIT_POLL_TIMEOUT = 6


class InstallerError(Exception):
    """Base class for fatal installer errors."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class UnsupportedHostError(InstallerError):
    """Host operating system is not the supported distribution."""

    exit_code = EXIT_USAGE


class PrivilegeError(InstallerError):
    """Superuser rights could not be obtained."""


class UnableToEscalate(PrivilegeError):
    """A command needs elevation but the process cannot escalate."""


class ExternalCommandFailure(InstallerError):
    """A child process exited non-zero or could not be started."""


class UserDeclinedError(InstallerError):
    """The operator answered no to a confirmation prompt."""


class HealthCheckFailure(InstallerError):
    """The deployed primary container is not running."""

    exit_code = EXIT_CONTAINER_NOT_RUNNING


class PollTimeout(InstallerError):
    """The primary container never reported healthy within the attempt budget."""

    exit_code = EXIT_POLL_TIMEOUT


class LockUnavailableError(InstallerError):
    """Another installer instance holds the lock marker."""

    exit_code = EXIT_USAGE


class MissingDependencyError(InstallerError):
    """A required binary is not on the search path."""

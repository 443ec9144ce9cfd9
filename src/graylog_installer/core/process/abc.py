"""Process execution interface.

Every external program the installer drives (apt-get, sudo, sysctl, tee,
docker, docker-compose) is started through CommandRunner so that tests can
substitute an in-memory fake that records argv and returns canned results.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished child process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


class CommandRunner(ABC):
    """Abstract interface for starting child processes."""

    @abstractmethod
    def run(
        self,
        argv: Sequence[str],
        *,
        operation_context: str,
        input_text: str | None = None,
        cwd: Path | None = None,
        capture_output: bool = False,
    ) -> CommandResult:
        """Run argv to completion and report its exit status.

        Non-zero exit codes are returned, not raised; the caller owns the
        failure policy.

        Args:
            argv: Program and arguments
            operation_context: Human-readable description used in error messages
            input_text: Text fed to stdin, if any
            cwd: Working directory for the child
            capture_output: Capture stdout/stderr instead of inheriting the terminal

        Returns:
            CommandResult with exit code and captured output (empty if not captured)

        Raises:
            ExternalCommandFailure: If the program cannot be started
        """
        ...

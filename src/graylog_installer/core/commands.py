"""External command description."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExternalCommand:
    """One child process invocation, built ad hoc by a step.

    Attributes:
        argv: Program and arguments
        requires_elevation: Run as root (directly or through sudo)
        tolerates_failure: Return a non-zero exit code instead of aborting
        input_text: Text fed to the child's stdin
        cwd: Working directory for the child
        description: What the command does, for error messages
    """

    argv: tuple[str, ...]
    requires_elevation: bool = False
    tolerates_failure: bool = False
    input_text: str | None = None
    cwd: Path | None = None
    description: str | None = None

    @property
    def operation_context(self) -> str:
        if self.description is not None:
            return self.description
        return f"run {self.argv[0]}"

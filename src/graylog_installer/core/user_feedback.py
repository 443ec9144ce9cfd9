"""User-facing progress output with mode awareness."""

from abc import ABC, abstractmethod
from pathlib import Path

import click

from graylog_installer.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress output that's mode-aware.

    Steps call ctx.feedback methods instead of printing, so the output mode
    (colour on/off, verbose on/off, captured to a log file) is decided once
    at the entry point.

    Colour conventions:
    - info() → green
    - verbose() → green, only when --verbose is set
    - success() → magenta, marks the end of a step
    - warning() → red, non-fatal problems
    - prompt() → blue, no trailing newline

    Fatal errors are printed by the CLI error boundary, not through feedback.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show a progress message."""

    @abstractmethod
    def verbose(self, message: str) -> None:
        """Show a message only in verbose mode."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a step-completed message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a problem that does not stop the run on its own."""

    @abstractmethod
    def prompt(self, message: str) -> None:
        """Show a question; the answer is read separately."""

    def captured_output(self) -> str | None:
        """Return output captured instead of displayed, or None if nothing is captured."""
        return None

    def close(self) -> None:
        """Release resources held by the feedback sink."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to the terminal."""

    def __init__(self, *, verbose: bool, color: bool) -> None:
        self._verbose = verbose
        # None lets click decide from the stream; False strips styles
        self._color: bool | None = None if color else False

    def _emit(self, message: str, fg: str, nl: bool = True) -> None:
        user_output(click.style(message, fg=fg), nl=nl, color=self._color)

    def info(self, message: str) -> None:
        self._emit(message, "green")

    def verbose(self, message: str) -> None:
        if self._verbose:
            self._emit(message, "green")

    def success(self, message: str) -> None:
        self._emit(message, "magenta")

    def warning(self, message: str) -> None:
        self._emit(message, "red")

    def prompt(self, message: str) -> None:
        self._emit(message + " ", "blue", nl=False)


class CapturedFeedback(UserFeedback):
    """Unattended-mode feedback written to a log file instead of the terminal.

    Used with --yes so an unattended run stays quiet unless it fails. The
    error boundary prints captured_output() on abnormal termination; close()
    removes the log file on every exit path.
    """

    def __init__(self, log_path: Path, *, verbose: bool) -> None:
        self._log_path = log_path
        self._verbose = verbose
        self._log_path.touch(exist_ok=True)

    @property
    def log_path(self) -> Path:
        return self._log_path

    def _write(self, message: str, nl: bool = True) -> None:
        with self._log_path.open("a", encoding="utf-8") as f:
            f.write(message + ("\n" if nl else ""))

    def info(self, message: str) -> None:
        self._write(message)

    def verbose(self, message: str) -> None:
        if self._verbose:
            self._write(message)

    def success(self, message: str) -> None:
        self._write(message)

    def warning(self, message: str) -> None:
        self._write(message)

    def prompt(self, message: str) -> None:
        self._write(message + " ", nl=False)

    def captured_output(self) -> str | None:
        if not self._log_path.exists():
            return None
        return self._log_path.read_text(encoding="utf-8")

    def close(self) -> None:
        if self._log_path.exists():
            self._log_path.unlink()

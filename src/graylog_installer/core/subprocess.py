"""Subprocess execution with rich error context.

Wraps subprocess.run() so that failures surface as ExternalCommandFailure
carrying the operation, the command line, the exit code and any output.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from graylog_installer.core.errors import ExternalCommandFailure


def format_command_failure(
    cmd: Sequence[str],
    operation_context: str,
    returncode: int,
    stdout: str | None = None,
    stderr: str | None = None,
) -> str:
    """Build the multi-line error message for a failed command."""
    cmd_str = " ".join(str(arg) for arg in cmd)
    error_msg = f"Failed to {operation_context}"
    error_msg += f"\nCommand: {cmd_str}"
    error_msg += f"\nExit code: {returncode}"

    if stdout and stdout.strip():
        error_msg += f"\nstdout: {stdout.strip()}"

    if stderr and stderr.strip():
        error_msg += f"\nstderr: {stderr.strip()}"

    return error_msg


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    input_text: str | None = None,
    capture_output: bool = True,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        input_text: Text fed to the child's stdin
        capture_output: Whether to capture stdout/stderr (default: True)
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        ExternalCommandFailure: If the command fails or its binary is missing
    """
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            input=input_text,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        raise ExternalCommandFailure(
            format_command_failure(cmd, operation_context, e.returncode, e.stdout, e.stderr)
        ) from e

    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise ExternalCommandFailure(error_msg) from e

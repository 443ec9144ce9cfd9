"""Tests for subprocess wrapper with rich error context."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from graylog_installer.core.errors import ExternalCommandFailure
from graylog_installer.core.subprocess import format_command_failure, run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("graylog_installer.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "buster\n"
        mock_result.stderr = ""
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["lsb_release", "-cs"],
            operation_context="detect distribution codename",
            cwd=Path("/tmp"),
        )

        assert result == mock_result
        assert result.stdout == "buster\n"

        mock_run.assert_called_once_with(
            ["lsb_release", "-cs"],
            cwd=Path("/tmp"),
            input=None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )


def test_input_text_is_passed_to_stdin() -> None:
    """Test that input_text becomes the child's stdin."""
    with patch("graylog_installer.core.subprocess.subprocess.run") as mock_run:
        mock_run.return_value = Mock(spec=subprocess.CompletedProcess)

        run_subprocess_with_context(
            ["tee", "/etc/sysctl.d/999-graylog-swappiness.cfg"],
            operation_context="persist vm.swappiness",
            input_text="vm.swappiness=1\n",
            check=False,
        )

        kwargs = mock_run.call_args.kwargs
        assert kwargs["input"] == "vm.swappiness=1\n"
        assert kwargs["check"] is False


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    """Test that subprocess failure with stderr includes stderr in error message."""
    with patch("graylog_installer.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=100,
            cmd=["apt-get", "install", "docker-ce"],
            stderr="E: Unable to locate package docker-ce",
        )

        with pytest.raises(ExternalCommandFailure) as exc_info:
            run_subprocess_with_context(
                ["apt-get", "install", "docker-ce"],
                operation_context="install Docker packages",
            )

        error_message = str(exc_info.value)
        assert "Failed to install Docker packages" in error_message
        assert "Command: apt-get install docker-ce" in error_message
        assert "Exit code: 100" in error_message
        assert "stderr: E: Unable to locate package docker-ce" in error_message


def test_failure_preserves_exception_chain() -> None:
    """Test that the original CalledProcessError is kept as __cause__."""
    with patch("graylog_installer.core.subprocess.subprocess.run") as mock_run:
        original = subprocess.CalledProcessError(returncode=1, cmd=["docker", "ps"])
        mock_run.side_effect = original

        with pytest.raises(ExternalCommandFailure) as exc_info:
            run_subprocess_with_context(["docker", "ps"], operation_context="list containers")

        assert exc_info.value.__cause__ is original


def test_missing_binary_is_reported() -> None:
    """Test that FileNotFoundError is converted with the missing program named."""
    with patch("graylog_installer.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("ip")

        with pytest.raises(ExternalCommandFailure) as exc_info:
            run_subprocess_with_context(
                ["ip", "-o", "-4", "addr", "show"], operation_context="list IPv4 addresses"
            )

        error_message = str(exc_info.value)
        assert "Command not found while trying to list IPv4 addresses: ip" in error_message
        assert "Full command: ip -o -4 addr show" in error_message


def test_format_command_failure_skips_blank_output() -> None:
    """Whitespace-only stdout/stderr are left out of the message."""
    message = format_command_failure(
        ["sysctl", "-w", "vm.swappiness=1"], "set vm.swappiness", 255, "  ", "\n"
    )

    assert message == (
        "Failed to set vm.swappiness\nCommand: sysctl -w vm.swappiness=1\nExit code: 255"
    )

"""Run external commands with the installer's fail-fast policy."""

import logging

from graylog_installer.core.commands import ExternalCommand
from graylog_installer.core.errors import ExternalCommandFailure, UnableToEscalate
from graylog_installer.core.host.abc import Host
from graylog_installer.core.process.abc import CommandResult, CommandRunner
from graylog_installer.core.subprocess import format_command_failure

logger = logging.getLogger(__name__)

SUDO_PREFIX = ("sudo", "-H", "--")


class StepRunner:
    """Executes ExternalCommands directly or through sudo.

    A non-zero exit aborts the installation with ExternalCommandFailure
    unless the command is marked failure-tolerant, in which case the exit
    code is handed back to the caller.
    """

    def __init__(
        self,
        runner: CommandRunner,
        host: Host,
        *,
        allow_delegated_elevation: bool = True,
    ) -> None:
        self._runner = runner
        self._host = host
        self._allow_delegated_elevation = allow_delegated_elevation

    def resolve_argv(self, cmd: ExternalCommand) -> tuple[str, ...]:
        """Return the argv actually executed for cmd.

        Raises:
            UnableToEscalate: If cmd needs root, the process is not root and
                delegated elevation is disabled
        """
        if not cmd.requires_elevation or self._host.is_elevated():
            return cmd.argv
        if not self._allow_delegated_elevation:
            cmd_str = " ".join(cmd.argv)
            raise UnableToEscalate(f"Unable to run requested command as root: {cmd_str}")
        return SUDO_PREFIX + cmd.argv

    def _execute(self, cmd: ExternalCommand, *, capture_output: bool) -> CommandResult:
        argv = self.resolve_argv(cmd)
        result = self._runner.run(
            argv,
            operation_context=cmd.operation_context,
            input_text=cmd.input_text,
            cwd=cmd.cwd,
            capture_output=capture_output,
        )
        if result.returncode != 0:
            if cmd.tolerates_failure:
                logger.debug("Tolerated exit code %d from %s", result.returncode, argv)
                return result
            raise ExternalCommandFailure(
                format_command_failure(
                    argv, cmd.operation_context, result.returncode, result.stdout, result.stderr
                )
            )
        return result

    def run(self, cmd: ExternalCommand) -> int:
        """Run cmd with inherited stdout/stderr and return its exit code."""
        return self._execute(cmd, capture_output=False).returncode

    def capture(self, cmd: ExternalCommand) -> str:
        """Run cmd and return its stdout."""
        return self._execute(cmd, capture_output=True).stdout

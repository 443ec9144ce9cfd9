"""Real process execution via subprocess."""

import logging
from collections.abc import Sequence
from pathlib import Path

from graylog_installer.core.process.abc import CommandResult, CommandRunner
from graylog_installer.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealCommandRunner(CommandRunner):
    """Starts child processes with subprocess.run()."""

    def run(
        self,
        argv: Sequence[str],
        *,
        operation_context: str,
        input_text: str | None = None,
        cwd: Path | None = None,
        capture_output: bool = False,
    ) -> CommandResult:
        logger.debug("Running %s (cwd=%s)", list(argv), cwd)
        result = run_subprocess_with_context(
            argv,
            operation_context=operation_context,
            cwd=cwd,
            input_text=input_text,
            capture_output=capture_output,
            check=False,
        )
        logger.debug("Exit code %d from %s", result.returncode, argv[0])
        return CommandResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

"""Application context with dependency injection."""

import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from graylog_installer.core.consent import ConsentGate
from graylog_installer.core.host.abc import Host
from graylog_installer.core.host.real import RealHost
from graylog_installer.core.privilege import PrivilegeEscalator
from graylog_installer.core.process.abc import CommandRunner
from graylog_installer.core.process.real import RealCommandRunner
from graylog_installer.core.prompt.abc import Prompter
from graylog_installer.core.prompt.real import RealPrompter
from graylog_installer.core.run_config import RunConfig
from graylog_installer.core.settings import InstallerSettings
from graylog_installer.core.step_runner import StepRunner
from graylog_installer.core.time.abc import Time
from graylog_installer.core.time.real import RealTime
from graylog_installer.core.user_feedback import (
    CapturedFeedback,
    InteractiveFeedback,
    UserFeedback,
)
from graylog_installer.ops.docker import Docker
from graylog_installer.ops.docker_real import RealDocker

SCRIPT_NAME = "graylog-installer"
DEBUG_ENV_VAR = "GRAYLOG_INSTALLER_DEBUG"


@dataclass(frozen=True)
class InstallerContext:
    """Immutable context holding all dependencies for an installation run.

    Created at the CLI entry point and threaded through every step, so no
    step reads configuration or collaborators from ambient state.
    """

    runner: CommandRunner
    host: Host
    docker: Docker
    prompter: Prompter
    time: Time
    feedback: UserFeedback
    run_config: RunConfig
    settings: InstallerSettings

    @property
    def steps(self) -> StepRunner:
        return StepRunner(self.runner, self.host)

    @property
    def consent(self) -> ConsentGate:
        return ConsentGate(self.run_config, self.feedback, self.prompter)

    @property
    def escalator(self) -> PrivilegeEscalator:
        return PrivilegeEscalator(self.runner, self.host, self.feedback)


def configure_debug_logging() -> None:
    """Enable debug logging when GRAYLOG_INSTALLER_DEBUG is set."""
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[DEBUG %(name)s:%(lineno)d] %(message)s",
            stream=sys.stderr,
        )


def create_feedback(run_config: RunConfig) -> UserFeedback:
    """Choose the feedback implementation for the run mode.

    --yes runs unattended: progress is captured in a temporary log file and
    only shown if the run fails.
    """
    if run_config.assume_yes:
        fd, log_name = tempfile.mkstemp(prefix=f"{SCRIPT_NAME}.")
        os.close(fd)
        return CapturedFeedback(Path(log_name), verbose=run_config.verbose)
    return InteractiveFeedback(verbose=run_config.verbose, color=not run_config.color_disabled)


def create_context(run_config: RunConfig, settings: InstallerSettings) -> InstallerContext:
    """Create production context with real implementations.

    Args:
        run_config: Options resolved from the command line
        settings: Tunables loaded from the settings file

    Returns:
        InstallerContext wired to the real system
    """
    runner: CommandRunner = RealCommandRunner()
    host: Host = RealHost()
    docker: Docker = RealDocker(StepRunner(runner, host))

    return InstallerContext(
        runner=runner,
        host=host,
        docker=docker,
        prompter=RealPrompter(),
        time=RealTime(),
        feedback=create_feedback(run_config),
        run_config=run_config,
        settings=settings,
    )

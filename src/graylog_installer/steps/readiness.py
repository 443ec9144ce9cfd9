"""Readiness poll for the Graylog container."""

import logging
from dataclasses import dataclass
from pathlib import Path

from graylog_installer.core.context import InstallerContext
from graylog_installer.core.errors import HealthCheckFailure, PollTimeout
from graylog_installer.steps.compose_file import compose_project_name

logger = logging.getLogger(__name__)

GRAYLOG_SERVICE = "graylog"


@dataclass
class HealthPollState:
    """Loop-local record of the latest status query."""

    attempt_count: int = 0
    status_text: str = ""
    ready_text: str = ""


def graylog_container_filter(project_dir: Path) -> str:
    """Return the `docker ps` name filter for the Graylog service of the project."""
    return f"{compose_project_name(project_dir)}_{GRAYLOG_SERVICE}"


def wait_until_healthy(ctx: InstallerContext, container_filter: str | None = None) -> int:
    """Block until the container reports "(healthy)".

    Sleeps the initial wait once, then queries the container status. A
    container that is not "Up" is a failed deployment and aborts at once;
    "still starting" is retried after the poll interval. With
    poll_max_attempts > 0 the poll gives up after that many queries.

    Returns:
        Number of status queries performed

    Raises:
        HealthCheckFailure: If the container is not running
        PollTimeout: If the attempt budget is exhausted
    """
    settings = ctx.settings
    install_dir = settings.resolve_install_dir(ctx.host.home_dir())
    if container_filter is None:
        container_filter = graylog_container_filter(install_dir)
    state = HealthPollState()

    ctx.feedback.info("Wait to be up...")
    ctx.time.sleep(settings.initial_wait_seconds)

    while True:
        status = ctx.docker.container_status(container_filter)
        state.attempt_count += 1
        state.status_text = status.state
        state.ready_text = status.detail
        logger.debug(
            "Poll %d: state=%r detail=%r", state.attempt_count, state.status_text, state.ready_text
        )

        ctx.feedback.verbose(state.status_text)
        ctx.feedback.verbose(state.ready_text)
        ctx.feedback.info(
            f"You can view startup logs in {install_dir} by running 'bash viewlogs.sh graylog'"
        )

        if not status.is_running:
            raise HealthCheckFailure("Error when starting graylog ... Exiting ...")

        if status.is_healthy:
            return state.attempt_count

        if 0 < settings.poll_max_attempts <= state.attempt_count:
            raise PollTimeout(
                f"Graylog did not become healthy after {state.attempt_count} status checks "
                f"(last status: {state.ready_text})"
            )

        ctx.feedback.info(f"Current status : {state.ready_text}")
        ctx.time.sleep(settings.poll_interval_seconds)

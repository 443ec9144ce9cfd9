"""Superuser access checks."""

import logging

from graylog_installer.core.dependencies import check_binary
from graylog_installer.core.host.abc import Host
from graylog_installer.core.process.abc import CommandRunner
from graylog_installer.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class PrivilegeEscalator:
    """Validates that root access is available, as root or via sudo."""

    def __init__(self, runner: CommandRunner, host: Host, feedback: UserFeedback) -> None:
        self._runner = runner
        self._host = host
        self._feedback = feedback

    def ensure_elevated(self, allow_delegated_elevation: bool = True) -> bool:
        """Return True if commands can run as root.

        Already root succeeds immediately. Otherwise, when delegation is
        allowed, sudo must exist, `sudo -v` must refresh the cached
        credentials (possibly prompting for a password), and a probe run
        through sudo must report effective uid 0. No retries.
        """
        if self._host.is_elevated():
            self._feedback.verbose("Successfully acquired superuser credentials.")
            return True

        if allow_delegated_elevation and self._delegated_elevation_works():
            self._feedback.verbose("Successfully acquired superuser credentials.")
            return True

        self._feedback.verbose("Unable to acquire superuser credentials.")
        return False

    def _delegated_elevation_works(self) -> bool:
        if not check_binary(self._host, self._feedback, "sudo"):
            return False

        self._feedback.info("Sudo: Updating cached credentials ...")
        refresh = self._runner.run(["sudo", "-v"], operation_context="refresh sudo credentials")
        if refresh.returncode != 0:
            self._feedback.verbose("Sudo: Couldn't acquire credentials ...")
            return False

        probe = self._runner.run(
            ["sudo", "-H", "--", "id", "-u"],
            operation_context="probe effective uid through sudo",
            capture_output=True,
        )
        effective_uid = probe.stdout.strip()
        logger.debug("sudo probe: exit=%d uid=%r", probe.returncode, effective_uid)
        return probe.returncode == 0 and effective_uid == "0"

"""Ordered provisioning workflow."""

import logging

from graylog_installer.core.context import InstallerContext
from graylog_installer.core.errors import PrivilegeError
from graylog_installer.steps.deployment_target import DeploymentTarget
from graylog_installer.steps.kernel_tuner import configure_kernel
from graylog_installer.steps.package_installer import install_docker
from graylog_installer.steps.stack_deployer import deploy_stack
from graylog_installer.steps.summary import report

logger = logging.getLogger(__name__)

WELCOME_LINES = (
    "Welcome to graylog installer",
    "",
    "This script will",
    "",
    " - Install docker engine",
    " - Install docker-compose",
    " - Configure some kernel parameter for Elasticsearch to work",
    " - Start a graylog project within docker",
    "",
)


def welcome(ctx: InstallerContext) -> None:
    """Ask for consent, then make sure root access is available.

    Raises:
        UserDeclinedError: If the operator does not answer yes
        PrivilegeError: If neither root nor working sudo is available
    """
    for line in WELCOME_LINES:
        ctx.feedback.info(line)

    ctx.consent.require("Are you sure ? [N/y]", "Exiting...")
    ctx.feedback.info("Starting installation")

    ctx.feedback.info("Check we are root or sudo is installed")
    if not ctx.escalator.ensure_elevated():
        raise PrivilegeError("Please install sudo or run as root")


def run_installation(ctx: InstallerContext) -> DeploymentTarget:
    """Run every provisioning step in order; the first failure aborts the rest."""
    welcome(ctx)
    logger.debug("Consent and privileges confirmed")

    install_docker(ctx)
    configure_kernel(ctx)
    target = deploy_stack(ctx)

    report(ctx, target)
    return target

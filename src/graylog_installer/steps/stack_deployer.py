"""Deployment of the Graylog docker-compose project."""

import base64
import hashlib
import logging
import secrets
from pathlib import Path

from graylog_installer.core.context import InstallerContext
from graylog_installer.core.dependencies import check_binary
from graylog_installer.core.errors import EXIT_TARGET_EXISTS, InstallerError
from graylog_installer.steps.compose_file import (
    COMPOSE_FILE_NAME,
    VIEWLOGS_SCRIPT,
    VIEWLOGS_SCRIPT_NAME,
    render_compose_file,
)
from graylog_installer.steps.deployment_target import DeploymentTarget
from graylog_installer.steps.network import guess_external_address
from graylog_installer.steps.readiness import wait_until_healthy

logger = logging.getLogger(__name__)

SECRET_BYTES = 16


def generate_password_secret() -> str:
    """Return 16 random bytes, base64-encoded (like `openssl rand -base64 16`)."""
    return base64.b64encode(secrets.token_bytes(SECRET_BYTES)).decode("ascii")


def sha256_hex(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _read_answer(ctx: InstallerContext, prompt: str) -> str:
    """Show prompt and read a line; unattended runs answer with the default ("")."""
    ctx.feedback.prompt(prompt)
    if ctx.run_config.assume_yes:
        ctx.feedback.info("")
        return ""
    return ctx.prompter.read_line().strip()


def collect_root_password(ctx: InstallerContext, target: DeploymentTarget) -> None:
    default = ctx.settings.default_root_password
    answer = _read_answer(ctx, f"Enter desired graylog root password [{default}]")
    target.password_defaulted = not answer
    target.root_password = answer or default
    target.root_password_digest = sha256_hex(target.root_password)
    ctx.feedback.verbose(f"SHA256 root password is {target.root_password_digest}")


def collect_external_address(ctx: InstallerContext, target: DeploymentTarget) -> None:
    ctx.feedback.verbose("Get external IP")
    guess = guess_external_address(ctx.host.ipv4_addresses())
    logger.debug("Guessed external address: %r", guess)

    answer = _read_answer(ctx, f"What is your external IP ? [{guess}]")
    address = answer or guess
    if not address:
        raise InstallerError("Unable to determine the external IP address. Exiting ...")
    target.external_address = address
    ctx.feedback.verbose(f"External IP will be {address}")


def prepare_install_directory(ctx: InstallerContext, target: DeploymentTarget) -> Path:
    """Create the project directory, asking before reusing an existing one.

    Raises:
        UserDeclinedError: Exit code 3 if the directory exists and the
            operator declines to overwrite it
        InstallerError: If the directory cannot be created
    """
    ctx.feedback.verbose("Create project directory")
    install_dir = ctx.settings.resolve_install_dir(ctx.host.home_dir())
    if install_dir.exists():
        ctx.consent.require(
            "Docker project already exist override ? [N/y]",
            f"Unable to create {install_dir} directory. File exist",
            EXIT_TARGET_EXISTS,
        )
    try:
        install_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise InstallerError(f"Unable to create {install_dir} directory: {e.strerror}") from e
    target.install_directory = install_dir
    return install_dir


def write_project_files(install_dir: Path, target: DeploymentTarget) -> None:
    """Write docker-compose.yaml and the executable viewlogs.sh helper."""
    assert target.password_secret is not None
    assert target.root_password_digest is not None
    assert target.external_address is not None

    compose_text = render_compose_file(
        target.password_secret, target.root_password_digest, target.external_address
    )
    viewlogs = install_dir / VIEWLOGS_SCRIPT_NAME
    try:
        (install_dir / COMPOSE_FILE_NAME).write_text(compose_text, encoding="utf-8")
        viewlogs.write_text(VIEWLOGS_SCRIPT, encoding="utf-8")
        viewlogs.chmod(viewlogs.stat().st_mode | 0o111)
    except OSError as e:
        raise InstallerError(
            f"Unable to write project files in {install_dir}: {e.strerror}"
        ) from e


def deploy_stack(ctx: InstallerContext) -> DeploymentTarget:
    """Render the Graylog project, start it and wait until Graylog is healthy.

    Returns:
        The fully populated DeploymentTarget
    """
    ctx.feedback.info("Install graylog docker compose project")
    target = DeploymentTarget()

    target.password_secret = generate_password_secret()
    collect_root_password(ctx, target)
    collect_external_address(ctx, target)

    install_dir = prepare_install_directory(ctx, target)
    write_project_files(install_dir, target)

    check_binary(ctx.host, ctx.feedback, "docker-compose", fatal=True)
    check_binary(ctx.host, ctx.feedback, "docker", fatal=True)

    ctx.feedback.info("Download docker image")
    ctx.docker.pull(install_dir)

    ctx.feedback.info("Start Graylog...")
    ctx.docker.up(install_dir)

    wait_until_healthy(ctx)

    ctx.feedback.success("Graylog installation completed")
    return target

"""Docker CE and docker-compose installation on Debian."""

import logging

from graylog_installer.core.commands import ExternalCommand
from graylog_installer.core.context import InstallerContext
from graylog_installer.core.errors import UnsupportedHostError

logger = logging.getLogger(__name__)

SUPPORTED_OS = "Debian"
DOCKER_GPG_KEY_URL = "https://download.docker.com/linux/debian/gpg"
DOCKER_APT_REPO_URL = "https://download.docker.com/linux/debian"
COMPOSE_RELEASES_URL = "https://github.com/docker/compose/releases/download"
COMPOSE_INSTALL_PATH = "/usr/local/bin/docker-compose"

PREREQUISITE_PACKAGES = (
    "apt-transport-https",
    "ca-certificates",
    "curl",
    "gnupg2",
    "software-properties-common",
)
DOCKER_PACKAGES = ("docker-ce", "docker-ce-cli", "containerd.io")
DOCKER_GROUP = "docker"

# (verbose message, command) pairs
InstallPlan = list[tuple[str, ExternalCommand]]


def _elevated(*argv: str, description: str) -> ExternalCommand:
    return ExternalCommand(argv=argv, requires_elevation=True, description=description)


def _apt_install(
    yes_flag: str | None, packages: tuple[str, ...], description: str
) -> ExternalCommand:
    argv = ("apt-get", "install")
    if yes_flag:
        argv += (yes_flag,)
    return _elevated(*argv, *packages, description=description)


def compose_download_url(version: str, system: str, machine: str) -> str:
    return f"{COMPOSE_RELEASES_URL}/{version}/docker-compose-{system}-{machine}"


def build_docker_plan(ctx: InstallerContext) -> InstallPlan:
    """Return the ordered commands installing Docker CE from the Docker APT repository."""
    yes_flag = ctx.run_config.package_manager_yes_flag
    codename = ctx.host.distribution_codename()
    apt_source = f"deb [arch=amd64] {DOCKER_APT_REPO_URL} {codename} stable"

    return [
        ("Update APT source", _elevated("apt-get", "update", description="update APT sources")),
        (
            "Install prerequisite",
            _apt_install(yes_flag, PREREQUISITE_PACKAGES, "install prerequisite packages"),
        ),
        (
            "Add docker apt PGP key",
            _elevated(
                "bash",
                "-c",
                f"curl -fsSL {DOCKER_GPG_KEY_URL} | apt-key add -",
                description="add Docker APT signing key",
            ),
        ),
        (
            "Add docker apt repository",
            _elevated("add-apt-repository", apt_source, description="add Docker APT repository"),
        ),
        ("Update APT source", _elevated("apt-get", "update", description="update APT sources")),
        ("Install docker", _apt_install(yes_flag, DOCKER_PACKAGES, "install Docker packages")),
        (
            "Add current user in docker group",
            _elevated(
                "adduser",
                "-quiet",
                ctx.host.username(),
                DOCKER_GROUP,
                description="add user to docker group",
            ),
        ),
    ]


def build_compose_plan(ctx: InstallerContext) -> InstallPlan:
    """Return the ordered commands installing the pinned docker-compose release."""
    system, machine = ctx.host.platform()
    url = compose_download_url(ctx.settings.compose_version, system, machine)

    return [
        (
            "Download docker-compose script",
            _elevated(
                "curl", "-L", url, "-o", COMPOSE_INSTALL_PATH, description="download docker-compose"
            ),
        ),
        (
            "Chmod docker compose",
            _elevated(
                "chmod", "+x", COMPOSE_INSTALL_PATH, description="make docker-compose executable"
            ),
        ),
    ]


def ensure_supported_host(ctx: InstallerContext) -> None:
    """Abort unless /etc/issue names the supported distribution.

    Raises:
        UnsupportedHostError: If the host is not Debian
    """
    ctx.feedback.verbose("Check OS Distro is Debian")
    os_identifier = ctx.host.os_identifier()
    logger.debug("Detected OS identifier: %r", os_identifier)
    if os_identifier != SUPPORTED_OS:
        ctx.feedback.warning("This script only work on debian")
        raise UnsupportedHostError(f"Unsupported distribution {os_identifier!r}. Exiting ...")


def _run_plan(ctx: InstallerContext, plan: InstallPlan) -> None:
    for message, command in plan:
        ctx.feedback.verbose(message)
        ctx.steps.run(command)


def install_docker(ctx: InstallerContext) -> None:
    """Install Docker CE and docker-compose.

    The host check runs before any command. There is no rollback: a failing
    command leaves the earlier ones applied.
    """
    ensure_supported_host(ctx)

    ctx.feedback.verbose("Start installing docker")
    ctx.feedback.info("Start docker installation")
    _run_plan(ctx, build_docker_plan(ctx))
    ctx.feedback.success("Docker installation completed")

    ctx.feedback.info("Start docker-compose installation")
    _run_plan(ctx, build_compose_plan(ctx))
    ctx.feedback.success("docker-compose installation completed")

"""Real Docker operations via the docker and docker-compose CLIs."""

from pathlib import Path

from graylog_installer.core.commands import ExternalCommand
from graylog_installer.core.step_runner import StepRunner
from graylog_installer.ops.docker import ContainerStatus, Docker


class RealDocker(Docker):
    """Docker operations executed through the StepRunner.

    None of these commands are elevated: the invoking user is expected to be
    in the docker group. Failures abort the installation.
    """

    def __init__(self, steps: StepRunner) -> None:
        self._steps = steps

    def pull(self, project_dir: Path) -> None:
        self._steps.run(
            ExternalCommand(
                argv=("docker-compose", "pull"),
                cwd=project_dir,
                description="pull Graylog stack images",
            )
        )

    def up(self, project_dir: Path) -> None:
        self._steps.run(
            ExternalCommand(
                argv=("docker-compose", "up", "-d"),
                cwd=project_dir,
                description="start Graylog stack",
            )
        )

    def container_status(self, name_filter: str) -> ContainerStatus:
        output = self._steps.capture(
            ExternalCommand(
                argv=("docker", "ps", "--format", "{{.Status}}", f"--filter=name={name_filter}"),
                description=f"query status of container {name_filter}",
            )
        )
        return ContainerStatus.parse(output)

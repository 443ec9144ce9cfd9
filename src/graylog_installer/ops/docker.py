"""Docker operations interface for deploying the compose project.

This module defines the abstract interface for the container runtime and
compose tool, following the ABC-based dependency injection used for every
external program, so the readiness poll can be tested over a fake.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

RUNNING_STATE = "Up"
HEALTHY_MARKER = "(healthy)"


@dataclass(frozen=True)
class ContainerStatus:
    """Status of a container as shown by `docker ps --format '{{.Status}}'`.

    Attributes:
        state: First token of the status text (e.g. "Up", "Exited"), "" if
            no container matched
        detail: Last token of the status text (e.g. "(healthy)", "starting)")
    """

    state: str
    detail: str

    @property
    def is_running(self) -> bool:
        return self.state == RUNNING_STATE

    @property
    def is_healthy(self) -> bool:
        return self.detail == HEALTHY_MARKER

    @staticmethod
    def parse(status_text: str) -> "ContainerStatus":
        """Split raw status text into its first and last tokens.

        Example:
            >>> ContainerStatus.parse("Up 2 minutes (health: starting)")
            ContainerStatus(state='Up', detail='starting)')
        """
        tokens = status_text.split()
        if not tokens:
            return ContainerStatus(state="", detail="")
        return ContainerStatus(state=tokens[0], detail=tokens[-1])


class Docker(ABC):
    """Abstract interface for Docker and docker-compose operations.

    Real implementations run the docker CLIs as the invoking user, relying
    on docker group membership. Fakes are pure in-memory.
    """

    @abstractmethod
    def pull(self, project_dir: Path) -> None:
        """Pull every image referenced by the compose file in project_dir.

        Raises:
            ExternalCommandFailure: If the pull fails
        """
        ...

    @abstractmethod
    def up(self, project_dir: Path) -> None:
        """Start every service of the compose project in detached mode.

        Raises:
            ExternalCommandFailure: If the services cannot be started
        """
        ...

    @abstractmethod
    def container_status(self, name_filter: str) -> ContainerStatus:
        """Return the status of the container whose name matches name_filter.

        Raises:
            ExternalCommandFailure: If docker ps fails
        """
        ...

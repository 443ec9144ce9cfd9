"""Host facts interface.

Identity, distribution, platform and network facts about the machine being
provisioned. Real implementations read /etc files and query the kernel;
fakes return values given at construction time.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Host(ABC):
    """Abstract read-only view of the local machine."""

    @abstractmethod
    def is_elevated(self) -> bool:
        """Return True if the process runs with effective uid 0."""
        ...

    @abstractmethod
    def uid(self) -> int:
        """Return the real uid of the invoking user."""
        ...

    @abstractmethod
    def username(self) -> str:
        """Return the login name of the invoking user."""
        ...

    @abstractmethod
    def home_dir(self) -> Path:
        """Return the invoking user's home directory."""
        ...

    @abstractmethod
    def which(self, binary: str) -> str | None:
        """Return the absolute path of binary on PATH, or None if absent."""
        ...

    @abstractmethod
    def os_identifier(self) -> str:
        """Return the first token of /etc/issue ("" if unreadable)."""
        ...

    @abstractmethod
    def distribution_codename(self) -> str:
        """Return the release codename (e.g. "buster") used in apt sources."""
        ...

    @abstractmethod
    def platform(self) -> tuple[str, str]:
        """Return (kernel name, machine), i.e. `uname -s` and `uname -m`."""
        ...

    @abstractmethod
    def ipv4_addresses(self) -> list[str]:
        """Return every IPv4 address assigned to a local interface, in order."""
        ...

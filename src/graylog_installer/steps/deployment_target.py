"""Values accumulated while deploying the Graylog stack."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any


@dataclass
class DeploymentTarget:
    """Deployment results, filled in progressively by the stack deployer.

    Each field may be written exactly once; a second assignment raises
    AttributeError. Values are only meaningful once deploy_stack() returns.
    """

    external_address: str | None = None
    root_password: str | None = None
    root_password_digest: str | None = None
    password_secret: str | None = None
    install_directory: Path | None = None
    password_defaulted: bool | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, name, None) is not None:
            raise AttributeError(f"DeploymentTarget.{name} is already set")
        super().__setattr__(name, value)

    @property
    def is_complete(self) -> bool:
        return all(getattr(self, f.name) is not None for f in fields(self))

    @property
    def web_url(self) -> str:
        return f"http://{self.external_address}:9000/"

"""Kernel parameters required by Elasticsearch."""

from dataclasses import dataclass
from pathlib import Path

from graylog_installer.core.commands import ExternalCommand
from graylog_installer.core.context import InstallerContext

SYSCTL_DIR = Path("/etc/sysctl.d")


@dataclass(frozen=True)
class KernelParameter:
    key: str
    value: str
    fragment_name: str

    @property
    def assignment(self) -> str:
        return f"{self.key}={self.value}"

    @property
    def fragment_path(self) -> Path:
        return SYSCTL_DIR / self.fragment_name


MAX_MAP_COUNT = KernelParameter("vm.max_map_count", "262144", "999-graylog-max_map_count.cfg")
SWAPPINESS = KernelParameter("vm.swappiness", "1", "999-graylog-swappiness.cfg")


def apply_live(param: KernelParameter) -> ExternalCommand:
    return ExternalCommand(
        argv=("sysctl", "-w", param.assignment),
        requires_elevation=True,
        description=f"set {param.key}",
    )


def persist(param: KernelParameter) -> ExternalCommand:
    # tee runs as root; the line arrives on stdin
    return ExternalCommand(
        argv=("tee", str(param.fragment_path)),
        requires_elevation=True,
        input_text=param.assignment + "\n",
        description=f"persist {param.key} to {param.fragment_path}",
    )


def configure_kernel(ctx: InstallerContext) -> None:
    """Apply vm.max_map_count and vm.swappiness now and on every boot."""
    ctx.feedback.info("Configuring kernel")

    ctx.feedback.info(f"Set {MAX_MAP_COUNT.key} to {MAX_MAP_COUNT.value}")
    ctx.steps.run(apply_live(MAX_MAP_COUNT))
    ctx.steps.run(persist(MAX_MAP_COUNT))

    ctx.feedback.info(f"Set {SWAPPINESS.key} to {SWAPPINESS.value}")
    ctx.steps.run(persist(SWAPPINESS))
    ctx.steps.run(apply_live(SWAPPINESS))

    ctx.feedback.success("Kernel configuration completed")

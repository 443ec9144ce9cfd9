"""Real host facts read from the running system."""

import getpass
import os
import platform
import re
import shutil
from pathlib import Path

from graylog_installer.core.host.abc import Host
from graylog_installer.core.subprocess import run_subprocess_with_context

_INET_PATTERN = re.compile(r"\binet (\d{1,3}(?:\.\d{1,3}){3})/")


def parse_os_release(text: str) -> dict[str, str]:
    """Parse KEY=value lines of an os-release file, unquoting values."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        values[key] = value.strip().strip("'\"")
    return values


def parse_ip_addr_output(output: str) -> list[str]:
    """Extract IPv4 addresses from `ip -o -4 addr show` output."""
    return _INET_PATTERN.findall(output)


class RealHost(Host):
    """Host facts from os, platform and /etc files."""

    def __init__(self, etc_dir: Path = Path("/etc")) -> None:
        self._etc_dir = etc_dir

    def is_elevated(self) -> bool:
        return os.geteuid() == 0

    def uid(self) -> int:
        return os.getuid()

    def username(self) -> str:
        return os.environ.get("USER") or getpass.getuser()

    def home_dir(self) -> Path:
        return Path.home()

    def which(self, binary: str) -> str | None:
        return shutil.which(binary)

    def os_identifier(self) -> str:
        issue = self._etc_dir / "issue"
        if not issue.exists():
            return ""
        tokens = issue.read_text(encoding="utf-8", errors="replace").split()
        return tokens[0] if tokens else ""

    def distribution_codename(self) -> str:
        os_release = self._etc_dir / "os-release"
        if os_release.exists():
            values = parse_os_release(os_release.read_text(encoding="utf-8"))
            codename = values.get("VERSION_CODENAME")
            if codename:
                return codename

        # Older Debian releases ship no VERSION_CODENAME
        result = run_subprocess_with_context(
            ["lsb_release", "-cs"], operation_context="detect distribution codename"
        )
        return result.stdout.strip()

    def platform(self) -> tuple[str, str]:
        return (platform.system(), platform.machine())

    def ipv4_addresses(self) -> list[str]:
        result = run_subprocess_with_context(
            ["ip", "-o", "-4", "addr", "show"], operation_context="list IPv4 addresses"
        )
        return parse_ip_addr_output(result.stdout)

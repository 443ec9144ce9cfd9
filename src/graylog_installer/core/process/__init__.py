from graylog_installer.core.process.abc import CommandResult, CommandRunner
from graylog_installer.core.process.real import RealCommandRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "RealCommandRunner",
]

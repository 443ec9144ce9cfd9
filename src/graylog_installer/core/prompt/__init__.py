from graylog_installer.core.prompt.abc import Prompter
from graylog_installer.core.prompt.real import RealPrompter

__all__ = [
    "Prompter",
    "RealPrompter",
]

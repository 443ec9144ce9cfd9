from graylog_installer.core.host.abc import Host
from graylog_installer.core.host.real import RealHost

__all__ = [
    "Host",
    "RealHost",
]

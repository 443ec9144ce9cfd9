from graylog_installer.core.time.abc import Time
from graylog_installer.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]

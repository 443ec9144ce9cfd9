"""Binary dependency checks."""

from graylog_installer.core.errors import MissingDependencyError
from graylog_installer.core.host.abc import Host
from graylog_installer.core.user_feedback import UserFeedback


def check_binary(host: Host, feedback: UserFeedback, binary: str, *, fatal: bool = False) -> bool:
    """Check a binary exists in the search path.

    Args:
        host: Host used for the PATH lookup
        feedback: Where the verbose found/missing message goes
        binary: Name of the binary to look for
        fatal: Raise instead of returning False when the binary is missing

    Returns:
        True if found, False if missing and not fatal

    Raises:
        MissingDependencyError: If missing and fatal
    """
    if host.which(binary) is None:
        if fatal:
            raise MissingDependencyError(f"Missing dependency: Couldn't locate {binary}.")
        feedback.verbose(f"Missing dependency: {binary}")
        return False

    feedback.verbose(f"Found dependency: {binary}")
    return True

"""Fake UserFeedback that records messages instead of printing them."""

from graylog_installer.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records (level, message) pairs for test assertions."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []
        self.closed = False

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def prompt(self, message: str) -> None:
        self.messages.append(("prompt", message))

    def close(self) -> None:
        self.closed = True

    def texts(self, level: str | None = None) -> list[str]:
        return [message for lvl, message in self.messages if level is None or lvl == level]

"""Fake UserFeedback capturing messages for assertions."""

from ffecho.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records every message as (level, message) without printing."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def texts(self) -> list[str]:
        return [message for _, message in self.messages]

"""Interactive confirmation gate."""

import re

from graylog_installer.core.errors import EXIT_FAILURE, UserDeclinedError
from graylog_installer.core.prompt.abc import Prompter
from graylog_installer.core.run_config import RunConfig
from graylog_installer.core.user_feedback import UserFeedback

_AFFIRMATIVE = re.compile(r"^(y|yes)$", re.IGNORECASE)


def is_affirmative(answer: str) -> bool:
    """Return True for "y" or "yes" in any case, ignoring surrounding whitespace."""
    return _AFFIRMATIVE.match(answer.strip()) is not None


class ConsentGate:
    """Asks yes/no questions; --yes answers them all affirmatively."""

    def __init__(self, run_config: RunConfig, feedback: UserFeedback, prompter: Prompter) -> None:
        self._run_config = run_config
        self._feedback = feedback
        self._prompter = prompter

    def confirm(self, prompt: str) -> bool:
        self._feedback.prompt(prompt)
        if self._run_config.assume_yes:
            self._feedback.info("yes")
            return True
        return is_affirmative(self._prompter.read_line())

    def require(self, prompt: str, decline_message: str, exit_code: int = EXIT_FAILURE) -> None:
        """Confirm or abort.

        Raises:
            UserDeclinedError: If the answer is not affirmative
        """
        if not self.confirm(prompt):
            raise UserDeclinedError(decline_message, exit_code)

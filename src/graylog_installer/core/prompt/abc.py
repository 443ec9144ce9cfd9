"""Interactive line input interface."""

from abc import ABC, abstractmethod


class Prompter(ABC):
    """Reads operator answers one line at a time.

    Emitting the prompt text is the caller's job (see UserFeedback.prompt);
    this interface only blocks for input.
    """

    @abstractmethod
    def read_line(self) -> str:
        """Read one line of input without its trailing newline.

        Returns:
            The line read, or "" at end of input
        """
        ...

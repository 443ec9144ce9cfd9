"""Real line input from the process's stdin."""

import click

from graylog_installer.core.prompt.abc import Prompter


class RealPrompter(Prompter):
    """Reads answers from stdin via click's text stream."""

    def read_line(self) -> str:
        line = click.get_text_stream("stdin").readline()
        return line.rstrip("\r\n")

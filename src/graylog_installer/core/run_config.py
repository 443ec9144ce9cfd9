"""Command-line derived run configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    """Immutable run options resolved from the command line.

    Created once at the CLI entry point, before any step executes.
    """

    verbose: bool
    color_disabled: bool
    assume_yes: bool
    package_manager_yes_flag: str | None

    @staticmethod
    def from_flags(*, verbose: bool, no_colour: bool, assume_yes: bool) -> "RunConfig":
        """Build a RunConfig; --yes also auto-confirms package manager prompts."""
        return RunConfig(
            verbose=verbose,
            color_disabled=no_colour,
            assume_yes=assume_yes,
            package_manager_yes_flag="-y" if assume_yes else None,
        )

import signal
import sys
from dataclasses import replace
from types import FrameType

import click

from graylog_installer.cli.output import user_output
from graylog_installer.core.context import (
    SCRIPT_NAME,
    InstallerContext,
    configure_debug_logging,
    create_context,
)
from graylog_installer.core.errors import EXIT_FAILURE, InstallerError
from graylog_installer.core.lock import InstanceLock, instance_lock_path
from graylog_installer.core.run_config import RunConfig
from graylog_installer.core.settings import default_settings_path, load_settings
from graylog_installer.steps.workflow import run_installation

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _exit_on_signal(signum: int, frame: FrameType | None) -> None:
    # Unwind through finally blocks so the lock and log file are removed
    raise SystemExit(128 + signum)


def install_signal_handlers() -> None:
    for sig in (signal.SIGINT, signal.SIGTERM, signal.SIGHUP):
        signal.signal(sig, _exit_on_signal)


def _error_color(run_config: RunConfig) -> bool | None:
    return False if run_config.color_disabled else None


def abort(ctx: InstallerContext, message: str, exit_code: int) -> None:
    """Print the error (and any captured unattended output) and exit.

    Raises:
        SystemExit: Always, with exit_code
    """
    user_output(
        click.style("Error: ", fg="red") + message, color=_error_color(ctx.run_config)
    )

    captured = ctx.feedback.captured_output()
    if captured is not None:
        user_output("***** Abnormal termination of script *****")
        user_output(f"Script Path:            {sys.argv[0]}")
        user_output(f"Script Parameters:      {' '.join(sys.argv[1:])}")
        user_output(f"Script Exit Code:       {exit_code}")
        user_output(f"Script Output:\n\n{captured}")

    raise SystemExit(exit_code)


def execute(ctx: InstallerContext) -> None:
    """Run the installation under the single-instance lock.

    Every InstallerError is turned into its exit code here; this is the only
    error boundary.
    """
    settings = ctx.settings
    lock = InstanceLock(
        instance_lock_path(settings.lock_dir, SCRIPT_NAME, settings.lock_scope, ctx.host.uid())
    )
    try:
        with lock:
            ctx.feedback.verbose(f"Acquired script lock: {lock.path}")
            run_installation(ctx)
    except InstallerError as e:
        abort(ctx, e.message, e.exit_code)


@click.command(SCRIPT_NAME, context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Displays verbose output")
@click.option("-nc", "--no-colour", "no_colour", is_flag=True, help="Disables colour output")
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Automatic yes to prompts")
@click.pass_context
def cli(click_ctx: click.Context, verbose: bool, no_colour: bool, assume_yes: bool) -> None:
    """Install Docker, tune the kernel and start a Graylog stack on Debian."""
    run_config = RunConfig.from_flags(verbose=verbose, no_colour=no_colour, assume_yes=assume_yes)

    # Tests provide a context built from fakes
    if click_ctx.obj is None:
        configure_debug_logging()
        install_signal_handlers()
        try:
            settings = load_settings(default_settings_path())
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e), color=_error_color(run_config))
            raise SystemExit(EXIT_FAILURE) from e
        ctx = create_context(run_config, settings)
    else:
        ctx = replace(click_ctx.obj, run_config=run_config)

    try:
        execute(ctx)
    finally:
        ctx.feedback.close()


def main() -> None:
    """CLI entry point used by the `graylog-installer` console script."""
    cli()

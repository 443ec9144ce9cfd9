"""Connection summary printed after a successful deployment."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from graylog_installer.core.context import InstallerContext
from graylog_installer.steps.deployment_target import DeploymentTarget

ADMIN_USERNAME = "admin"
OPENED_PORTS = ("514 (TCP/UDP)", "12201 (TCP/UDP)", "9000 (TCP)")


def format_admin_password(target: DeploymentTarget) -> str:
    """Show the password only when the installer chose it.

    A password typed by the operator is never echoed back.
    """
    if target.password_defaulted:
        return f"{target.root_password} (default, change it after first login)"
    return "the password you entered"


def format_connection_summary(target: DeploymentTarget) -> Panel:
    """Format the connection parameters as a Rich panel."""
    lines: list[Text] = [
        Text(f"External IP(s) : {target.external_address}", style="blue"),
        Text(f"Web access : {target.web_url}", style="blue"),
        Text(f"Admin username : {ADMIN_USERNAME}", style="blue"),
        Text(f"Admin password : {format_admin_password(target)}", style="blue"),
        Text(""),
        Text("Opened port :", style="blue"),
    ]
    lines.extend(Text(f" - {port}", style="green") for port in OPENED_PORTS)

    return Panel(
        Text("\n").join(lines),
        title="Connexion information",
        border_style="green",
        padding=(1, 2),
    )


def report(ctx: InstallerContext, target: DeploymentTarget, console: Console | None = None) -> None:
    """Print the connection summary to stdout."""
    if console is None:
        console = Console(no_color=ctx.run_config.color_disabled, highlight=False)
    console.print(format_connection_summary(target))

"""Display components for CLI using Rich."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from buildinfo.core.logger import get_console
from buildinfo.models.build_info import BuildInfo

# stdout is reserved for the rendered JSON document
console = get_console()


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    console.print()
    console.print(
        Panel(
            f"[bold green]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="green",
        )
    )


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_build_summary(build_info: BuildInfo) -> None:
    """Display the main fields of a build-info record in a table.

    Args:
        build_info: Assembled build-info record.
    """
    console.print()

    table = Table(title="[bold]Build Info[/]", show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Name", escape(build_info.name))
    table.add_row("Number", escape(build_info.number))
    table.add_row("Started", escape(build_info.started))
    if build_info.version:
        table.add_row("Version", escape(build_info.version))
    if build_info.project:
        table.add_row("Project", escape(build_info.project))
    if build_info.agent and build_info.agent.name:
        table.add_row("Agent", escape(f"{build_info.agent.name} {build_info.agent.version or ''}".strip()))
    if build_info.url:
        table.add_row("URL", escape(build_info.url))

    table.add_section()
    table.add_row("Modules", str(len(build_info.modules or [])))
    table.add_row("VCS Entries", str(len(build_info.vcs or [])))
    table.add_row("Properties", str(len(build_info.properties or {})))
    if build_info.statuses:
        table.add_row("Last Status", escape(build_info.statuses[-1].status))

    console.print(Panel(table, border_style="cyan"))

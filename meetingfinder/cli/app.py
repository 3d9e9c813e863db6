"""
Main CLI application using Typer.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, List, Optional

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..adapters.file_event_source import FileEventSource
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import ConfigError, InvalidRequest, MeetingFinderError
from ..domain.models import END_OF_DAY, MeetingRequest, TimeRange
from ..services.meeting_finder import MeetingFinderService

app = typer.Typer(
    name="meetingfinder",
    help="Find meeting windows in a day of busy events",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)


def format_minute(minute: int) -> str:
    """Render minutes since midnight as HH:mm (the end of the day is 24:00)."""
    if minute >= END_OF_DAY:
        return "24:00"
    return pendulum.time(minute // 60, minute % 60).format("HH:mm")


def format_length(time_range: TimeRange) -> str:
    """Render the length of a range in words."""
    return pendulum.duration(minutes=time_range.duration).in_words(locale="en")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the config file, falling back to defaults when no file exists.

    An explicitly given path must exist.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)

    config_path = get_default_config_path()
    if not config_path.exists():
        return AppConfig()
    return AppConfig.load_from_yaml(config_path)


@app.command()
def find(
    events_file: Annotated[Path, typer.Argument(help="YAML or JSON file with the day's events.")],
    attendees: Annotated[Optional[List[str]], typer.Option("--attendee", "-a", help="Mandatory attendee (name or email). Repeatable.")] = None,
    optional_attendees: Annotated[Optional[List[str]], typer.Option("--optional", "-o", help="Optional attendee (name or email). Repeatable.")] = None,
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="Meeting duration in minutes")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the windows as JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Find meeting windows for mandatory and optional attendees.

    Examples:

        meetingfinder find day.yaml -a alice -a bob --duration 60

        meetingfinder find day.yaml -a alice -o carol --json
    """
    try:
        config = _load_config(config_file)
    except (FileNotFoundError, ConfigError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else config.log_level)

    try:
        mandatory = config.resolve_participants(attendees or [])
        optional = config.resolve_participants(optional_attendees or [])
        request = MeetingRequest(
            duration=duration if duration is not None else config.defaults.duration_minutes,
            attendees=frozenset(mandatory),
            optional_attendees=frozenset(optional),
        )
    except InvalidRequest as e:
        err_console.print(f"[bold red]Invalid request:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    service = MeetingFinderService(event_source=FileEventSource(events_file, config=config))

    try:
        windows = asyncio.run(service.find_meeting_times(request))
    except MeetingFinderError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps([
            {"start": window.start, "end": window.end, "duration": window.duration}
            for window in windows
        ]))
        return

    if not windows:
        console.print(
            "[yellow]⚠ No meeting windows found.[/yellow]\n"
            "Try a shorter duration or fewer attendees."
        )
        return

    table = Table(
        title=f"{len(windows)} window(s) for a {request.duration} minute meeting",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Start", style="bold green")
    table.add_column("End", style="bold green")
    table.add_column("Length", style="dim")

    for window in windows:
        table.add_row(format_minute(window.start), format_minute(window.end), format_length(window))

    console.print()
    console.print(table)
    console.print()


@app.command()
def list_people(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    List all configured people.
    """
    try:
        config = _load_config(config_file)
    except (FileNotFoundError, ConfigError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not config.people:
        console.print("[yellow]No people defined in the config file.[/yellow]")
        return

    table = Table(
        title="Configured people",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name (Alias)", style="bold yellow")
    table.add_column("E-Mail", style="dim")

    for person in config.people:
        table.add_row(person.display_name(), person.email)

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]meetingfinder[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()

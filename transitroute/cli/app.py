"""
Developer CLI for transitroute
Resolves routes from the terminal and inspects encoded geometry
"""

import asyncio
import logging
import re
from datetime import tzinfo
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from transitroute.config.models import DirectionsSettings
from transitroute.config.parser import ConfigParser, ConfigParserError
from transitroute.core.landmarks import VIENNA_LANDMARKS, find_landmark
from transitroute.core.models import Coordinate, RankingPreference, RouteResult
from transitroute.core.polyline import FormatError, PolylineCodec
from transitroute.directions.client import DirectionsClient
from transitroute.directions.resolver import DirectionsResolver

# Initialize Typer app
app = typer.Typer(
    name="transitroute",
    help="transitroute - Transit route resolution with offline fallback",
    add_completion=False,
)

# Console for rich output
console = Console()

_TAG_RE = re.compile(r"<[^>]+>")


def parse_endpoint(value: str) -> Tuple[Coordinate, str]:
    """
    Parse a route endpoint

    Args:
        value: "lat,lng" pair, landmark id or landmark name

    Returns:
        Coordinate and display name
    """
    parts = [part.strip() for part in value.split(",")]
    if len(parts) == 2:
        try:
            lat, lng = float(parts[0]), float(parts[1])
        except ValueError:
            pass
        else:
            try:
                return Coordinate.from_lat_lng(lat, lng), value
            except ValueError:
                raise typer.BadParameter(f"Coordinate out of range: {value}")

    landmark = find_landmark(value)
    if landmark is None:
        raise typer.BadParameter(f"Not a lat,lng pair or known landmark: {value}")
    return landmark.coordinate, landmark.name


def load_settings(config: Optional[Path], language: Optional[str]) -> DirectionsSettings:
    """Settings from a config file or the environment"""
    if config is None:
        return DirectionsSettings.from_env(language=language)

    settings = ConfigParser.load_settings(config)
    env_settings = DirectionsSettings.from_env()
    updates = {}
    if not settings.api_key and env_settings.api_key:
        updates["api_key"] = env_settings.api_key
    if language:
        updates["language"] = language
    return settings.model_copy(update=updates) if updates else settings


def display_route(
    result: RouteResult,
    origin_name: str,
    destination_name: str,
    tz: Optional[tzinfo] = None,
) -> None:
    """Print a resolved route, with clock times in tz (system local if None)"""
    departure = result.departure_time.astimezone(tz)
    arrival = result.arrival_time.astimezone(tz)
    title = "Fallback route (estimate)" if result.is_fallback else "Transit route"
    style = "red" if result.is_fallback else "blue"

    summary_lines = [
        f"[green]From:[/green] {origin_name}",
        f"[red]To:[/red] {destination_name}",
        f"[bold]{result.duration}[/bold] • {result.distance}",
        f"Departure {departure:%H:%M} • Arrival {arrival:%H:%M}",
    ]
    if result.summary:
        summary_lines.append(f"Via {result.summary}")
    console.print(Panel("\n".join(summary_lines), title=title, border_style=style))

    table = Table(title="Steps")
    table.add_column("#", justify="right", width=3)
    table.add_column("Mode", style="cyan", width=10)
    table.add_column("Line", width=14)
    table.add_column("Instructions", width=50)
    table.add_column("Time", justify="right", width=10)
    table.add_column("Distance", justify="right", width=10)

    for index, step in enumerate(result.steps, 1):
        line = "-"
        if step.transit:
            line = f"[{step.transit.display_color}]{escape(step.transit.vehicle_label)} {escape(step.transit.line)}[/]"
        table.add_row(
            str(index),
            step.travel_mode or "-",
            line,
            escape(_TAG_RE.sub("", step.instructions)),
            step.duration or "-",
            step.distance or "-",
        )

    console.print(table)

    if result.alternatives:
        alternatives = Table(title="Alternatives")
        alternatives.add_column("Option", width=8)
        alternatives.add_column("Duration", justify="right", width=12)
        alternatives.add_column("Distance", justify="right", width=12)
        alternatives.add_column("Transfers", justify="center", width=10)

        for index, candidate in enumerate(result.candidates, 1):
            alternatives.add_row(
                str(index),
                candidate.duration,
                candidate.distance,
                str(candidate.transfer_count),
            )

        console.print(alternatives)


@app.command()
def route(
    origin: str = typer.Argument(..., help="Origin as lat,lng or landmark id/name"),
    destination: str = typer.Argument(..., help="Destination as lat,lng or landmark id/name"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings file (YAML/JSON)"),
    rank: str = typer.Option("provider", "--rank", help="Ranking (provider/fastest/fewest_transfers)"),
    language: Optional[str] = typer.Option(None, "--language", help="Label language (pl/en)"),
    ready_timeout: Optional[float] = typer.Option(None, "--ready-timeout", help="Provider readiness ceiling in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show log output"),
):
    """
    Resolve a public transport route between two points

    Examples:
        transitroute route 48.2082,16.3738 48.1845,16.3122
        transitroute route Ratusz "Belvedere" --rank fastest
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, rich_tracebacks=True)],
        )

    try:
        ranking = RankingPreference(rank.lower())
    except ValueError:
        console.print(f"[red]Invalid ranking: {rank}[/red]")
        console.print("Valid options: provider, fastest, fewest_transfers")
        raise typer.Exit(1)

    origin_coord, origin_name = parse_endpoint(origin)
    destination_coord, destination_name = parse_endpoint(destination)

    try:
        settings = load_settings(config, language)
    except ConfigParserError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    async def resolve_route() -> RouteResult:
        client = DirectionsClient(settings)
        await client.initialize()
        resolver = DirectionsResolver(client, ready_timeout=ready_timeout, ranking=ranking)
        return await resolver.resolve(
            origin_coord,
            destination_coord,
            origin_name=origin_name,
            destination_name=destination_name,
        )

    try:
        result = asyncio.run(resolve_route())
    except KeyboardInterrupt:
        console.print("\n[yellow]Route lookup cancelled by user[/yellow]")
        raise typer.Exit(0)

    display_route(result, origin_name, destination_name, settings.zone())


@app.command()
def decode(
    polyline: str = typer.Argument(..., help="Encoded polyline string"),
):
    """Decode an encoded polyline into coordinates"""
    try:
        coordinates = PolylineCodec.decode(polyline)
    except FormatError as e:
        console.print(f"[red]Invalid polyline: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{len(coordinates)} coordinates")
    table.add_column("#", justify="right", width=4)
    table.add_column("Latitude", justify="right", width=12)
    table.add_column("Longitude", justify="right", width=12)

    for index, point in enumerate(coordinates, 1):
        table.add_row(str(index), f"{point.lat:.5f}", f"{point.lng:.5f}")

    console.print(table)


@app.command()
def landmarks():
    """List the built-in Vienna landmarks"""
    table = Table(title="Vienna landmarks")
    table.add_column("ID", justify="right", width=4)
    table.add_column("Name", style="cyan", width=40)
    table.add_column("Address", width=36)
    table.add_column("Lat,Lng", width=22)

    for landmark in VIENNA_LANDMARKS:
        table.add_row(
            str(landmark.id),
            landmark.name,
            landmark.address,
            landmark.coordinate.as_lat_lng(),
        )

    console.print(table)


@app.callback()
def callback():
    """
    transitroute - Transit route resolution

    Resolves public transport routes through the directions provider and
    falls back to an estimated route when the provider has no answer.
    """
    pass


def main():
    """Main entry point for CLI"""
    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    app()


if __name__ == "__main__":
    main()

"""
Command-line interface for venue status.
Provides commands to list venues, show current status, and watch for changes.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import click

from .models import ParseError, StatusResult, UnknownVenueError
from .presentation import status_icon
from .schemas import AppConfig, Settings
from .service import VenueStatusService
from .util.time_utils import parse_time


logger = logging.getLogger(__name__)


@click.group()
@click.option('--config', default=None, help='Configuration file path (default: $VENUE_STATUS_CONFIG or config/params.yaml)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def main(ctx, config: Optional[str], verbose: bool):
    """Venue Status CLI."""
    # Setup logging
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Store config path in context
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config or Settings().config_path


def _load_service(ctx) -> VenueStatusService:
    """Build the service; without a config file only ad-hoc --hours works."""
    config_path = ctx.obj['config_path']
    try:
        if Path(config_path).exists():
            return VenueStatusService(config_path)
        logger.warning(f"Config file {config_path} not found, using defaults")
        return VenueStatusService(config=AppConfig())
    except Exception as e:
        raise click.ClickException(f"Invalid configuration: {e}")


def _resolve_hours(svc: VenueStatusService, venue: Optional[str], hours: Optional[str]) -> str:
    if hours:
        return hours
    if not venue:
        raise click.UsageError("Give a VENUE name or --hours")
    try:
        return svc.get_venue(venue).hours
    except UnknownVenueError:
        raise click.ClickException(f"Unknown venue: {venue}")


def _format_status(result: StatusResult) -> str:
    line = f"{status_icon(result.is_open)} {result.message}"
    if result.time_until_close:
        line += f" ({result.time_until_close})"
    return line


@main.command()
@click.pass_context
def venues(ctx):
    """List configured venues."""
    svc = _load_service(ctx)
    if not svc.venues():
        click.echo("No venues configured")
        return
    for venue in svc.venues():
        click.echo(f"{venue.name}: {venue.hours}")


@main.command()
@click.argument('venue', required=False)
@click.option('--hours', help="Opening hours 'HH:MM - HH:MM' instead of a configured venue")
@click.option('--at', 'at_time', help='Evaluate at this local time (HH:MM) instead of now')
@click.pass_context
def status(ctx, venue: Optional[str], hours: Optional[str], at_time: Optional[str]):
    """Show whether a venue is open right now."""
    svc = _load_service(ctx)
    hours = _resolve_hours(svc, venue, hours)

    now = svc.clock.now()
    if at_time:
        try:
            minutes = parse_time(at_time)
        except ParseError as e:
            raise click.BadParameter(str(e), param_hint='--at')
        now = now.replace(hour=minutes // 60, minute=minutes % 60, second=0, microsecond=0)

    try:
        result = svc.evaluate(hours, now)
    except ParseError as e:
        raise click.ClickException(str(e))

    click.echo(_format_status(result))


@main.command()
@click.argument('venue', required=False)
@click.option('--hours', help="Opening hours 'HH:MM - HH:MM' instead of a configured venue")
@click.option('--interval', type=click.FloatRange(min=0, min_open=True),
              help='Seconds between refreshes (default: from config)')
@click.option('--count', type=int, help='Stop after this many updates')
@click.pass_context
def watch(ctx, venue: Optional[str], hours: Optional[str], interval: Optional[float], count: Optional[int]):
    """Print the status now and on every refresh until interrupted."""
    svc = _load_service(ctx)
    hours = _resolve_hours(svc, venue, hours)
    kwargs = {"interval_seconds": interval} if interval is not None else {}

    async def _watch():
        done = asyncio.Event()
        published = 0

        def publish(result: StatusResult) -> None:
            nonlocal published
            published += 1
            click.echo(_format_status(result))
            if count and published >= count:
                done.set()

        def report(error: Exception) -> None:
            click.echo(f"Error: {error}", err=True)

        async with svc.watch(hours, publish, on_error=report, **kwargs):
            await done.wait()

    try:
        asyncio.run(_watch())
    except KeyboardInterrupt:
        click.echo("Stopped")


@main.command()
@click.option('--host', default='0.0.0.0', help='Bind address')
@click.option('--port', default=8000, type=int, help='Bind port')
@click.pass_context
def serve(ctx, host: str, port: int):
    """Start the FastAPI server."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException("uvicorn not installed. Run: pip install uvicorn")

    from .api import create_app

    click.echo("Starting Venue Status API server...")
    click.echo(f"API documentation: http://localhost:{port}/docs")
    uvicorn.run(create_app(_load_service(ctx)), host=host, port=port)


if __name__ == '__main__':
    main()

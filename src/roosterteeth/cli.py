"""Command-line interface for roosterteeth."""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

import click
from dotenv import load_dotenv
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from roosterteeth import __version__
from roosterteeth.api import ORDERS, Order, RoosterTeethError, VideoUnavailable
from roosterteeth.client import RoosterTeethClient
from roosterteeth.config import build_client, get_config, load_config
from roosterteeth.models import Channel, Episode, Season, Series, Video, encode

# Load environment variables from .env file
load_dotenv()

console = Console()

FORMATS = ["text", "json"]

format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMATS),
    default=None,
    help="Output format (default: from config or text)",
)
order_option = click.option(
    "--order", "-o", type=click.Choice(ORDERS), default=None, help="Sort order"
)
channel_option = click.option("--channel", "-c", default=None, help="Restrict to a channel slug")


@click.group()
@click.version_option(version=__version__, prog_name="roosterteeth")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests")
@click.option("-u", "--username", envvar="RT_USERNAME", default=None, help="Account username")
@click.option("-p", "--password", envvar="RT_PASSWORD", default=None, help="Account password")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: search standard locations)",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    username: str | None,
    password: str | None,
    config_file: Path | None,
) -> None:
    """roosterteeth - Browse the Rooster Teeth video-on-demand catalog."""
    ctx.ensure_object(dict)
    ctx.obj["username"] = username
    ctx.obj["password"] = password
    if config_file is not None:
        load_config(config_file)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@contextmanager
def _client(ctx: click.Context) -> Iterator[RoosterTeethClient]:
    """Build a client from options/config and report API errors."""
    try:
        with build_client(
            get_config(),
            username=ctx.obj.get("username"),
            password=ctx.obj.get("password"),
        ) as client:
            yield client
    except VideoUnavailable as e:
        console.print(f"[yellow]Unavailable:[/yellow] {e}")
        console.print("[dim]Log in with --username/--password for sponsor content.[/dim]")
        sys.exit(2)
    except RoosterTeethError as e:
        console.print(f"[red]Rooster Teeth error:[/red] {e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid argument:[/red] {e}")
        sys.exit(1)


def _resolve_format(output_format: str | None) -> str:
    return output_format or get_config().output.format


def _output_json(records: BaseModel | Sequence[BaseModel]) -> None:
    if isinstance(records, BaseModel):
        console.print_json(json.dumps(encode(records)))
    else:
        console.print_json(json.dumps([encode(r) for r in records]))


def _output_channels_text(channels: list[Channel]) -> None:
    table = Table(title="Channels")
    table.add_column("Name", style="bold")
    table.add_column("Slug")
    table.add_column("ID", justify="right")
    for channel in channels:
        table.add_row(channel.name, channel.slug, str(channel.id))
    console.print(table)


def _output_episodes_text(episodes: list[Episode], title: str) -> None:
    table = Table(title=title)
    table.add_column("Code")
    table.add_column("Title", style="bold")
    table.add_column("Show")
    table.add_column("Slug", style="dim")
    table.add_column("Public")
    for ep in episodes:
        attrs = ep.attributes
        sponsor = " [yellow](FIRST)[/yellow]" if attrs.is_sponsors_only else ""
        table.add_row(
            ep.episode_code,
            attrs.title + sponsor,
            attrs.show_title,
            ep.slug,
            attrs.public_golive_at.isoformat(),
        )
    console.print(table)


def _output_series_text(series_list: list[Series]) -> None:
    table = Table(title="Series")
    table.add_column("Title", style="bold")
    table.add_column("Slug", style="dim")
    table.add_column("Channel")
    table.add_column("Seasons", justify="right")
    table.add_column("Episodes", justify="right")
    table.add_column("Category")
    for series in series_list:
        attrs = series.attributes
        table.add_row(
            attrs.title,
            series.slug,
            attrs.channel_slug,
            str(attrs.season_count),
            str(attrs.episode_count),
            attrs.category,
        )
    console.print(table)


def _output_seasons_text(seasons: list[Season], series_slug: str) -> None:
    table = Table(title=f"Seasons of {series_slug}")
    table.add_column("#", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Slug", style="dim")
    table.add_column("Published")
    for season in seasons:
        table.add_row(
            str(season.number),
            season.attributes.title,
            season.slug,
            season.attributes.published_at.isoformat(),
        )
    console.print(table)


def _print_fields(title: str, fields: list[tuple[str, object]]) -> None:
    console.print()
    console.print(f"[bold blue]{title}[/bold blue]")
    for label, value in fields:
        if value is None:
            value = "[dim](none)[/dim]"
        console.print(f"[dim]{label}:[/dim] {value}")
    console.print()


def _output_show_text(series: Series) -> None:
    attrs = series.attributes
    _print_fields(
        attrs.title,
        [
            ("ID", series.uuid),
            ("Slug", series.slug),
            ("Category", attrs.category),
            ("Channel", attrs.channel_slug),
            ("Genres", ", ".join(attrs.genres)),
            ("Seasons", attrs.season_count),
            ("Episodes", attrs.episode_count),
            ("Sponsors only", attrs.is_sponsors_only),
            ("Published", attrs.published_at.isoformat()),
            ("Latest episode", attrs.last_episode_golive_at.isoformat()),
            ("Summary", attrs.summary),
        ],
    )


def _output_episode_text(episode: Episode) -> None:
    attrs = episode.attributes
    _print_fields(
        attrs.display_title,
        [
            ("ID", episode.uuid),
            ("Slug", episode.slug),
            ("Show", f"{attrs.show_title} ({attrs.show_slug})"),
            ("Season", attrs.season_slug),
            ("Code", episode.episode_code),
            ("Length", episode.duration),
            ("Public go-live", attrs.public_golive_at.isoformat()),
            ("Sponsor go-live", attrs.sponsor_golive_at.isoformat()),
            ("Sponsors only", attrs.is_sponsors_only),
            ("Description", attrs.description),
        ],
    )


def _output_video_text(video: Video) -> None:
    attrs = video.attributes
    _print_fields(
        attrs.content_slug,
        [
            ("Video ID", video.uuid),
            ("Episode ID", attrs.content_uuid),
            ("Media type", attrs.media_type),
            ("Member tier", attrs.member_tier),
            ("URL", attrs.url),
            ("Thumbnails", attrs.image_pattern_url),
            ("BIF", attrs.bif_url),
        ],
    )


@main.command()
@format_option
@click.pass_context
def channels(ctx: click.Context, output_format: str | None) -> None:
    """List all channels."""
    with _client(ctx) as client:
        result = client.list_channels()

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_channels_text(result)


@main.command()
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number (100 per page)")
@channel_option
@order_option
@format_option
@click.pass_context
def episodes(
    ctx: click.Context,
    page: int,
    channel: str | None,
    order: Order | None,
    output_format: str | None,
) -> None:
    """List the latest episodes, 100 per page."""
    with _client(ctx) as client:
        result = client.list_episodes(page, channel=channel, order=order)

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_episodes_text(result, f"Episodes (page {page})")


@main.command()
@channel_option
@order_option
@format_option
@click.pass_context
def series(
    ctx: click.Context,
    channel: str | None,
    order: Order | None,
    output_format: str | None,
) -> None:
    """List series."""
    with _client(ctx) as client:
        result = client.list_series(channel=channel, order=order)

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_series_text(result)


@main.command()
@click.argument("slug")
@order_option
@format_option
@click.pass_context
def seasons(
    ctx: click.Context,
    slug: str,
    order: Order | None,
    output_format: str | None,
) -> None:
    """List the seasons of the series SLUG."""
    with _client(ctx) as client:
        result = client.get_seasons(slug, order=order)

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_seasons_text(result, slug)


@main.command(name="season-episodes")
@click.argument("slug")
@order_option
@format_option
@click.pass_context
def season_episodes(
    ctx: click.Context,
    slug: str,
    order: Order | None,
    output_format: str | None,
) -> None:
    """List the episodes of the season SLUG (oldest first by default)."""
    with _client(ctx) as client:
        result = client.get_season_episodes(slug, order=order)

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_episodes_text(result, slug)


@main.command()
@click.argument("slug")
@format_option
@click.pass_context
def show(ctx: click.Context, slug: str, output_format: str | None) -> None:
    """Show details of the series SLUG."""
    with _client(ctx) as client:
        result = client.get_series(slug)

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_show_text(result)


@main.command()
@click.argument("slug")
@format_option
@click.pass_context
def episode(ctx: click.Context, slug: str, output_format: str | None) -> None:
    """Show details of the episode SLUG."""
    with _client(ctx) as client:
        result = client.get_episode(slug)

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_episode_text(result)


@main.command()
@click.argument("slug")
@format_option
@click.pass_context
def video(ctx: click.Context, slug: str, output_format: str | None) -> None:
    """Show playback information of the episode SLUG."""
    with _client(ctx) as client:
        result = client.get_video(slug)

    if _resolve_format(output_format) == "json":
        _output_json(result)
    else:
        _output_video_text(result)


@main.group()
def config() -> None:
    """Manage roosterteeth configuration."""
    pass


@config.command(name="show")
def config_show() -> None:
    """Show current configuration."""
    from roosterteeth.config import get_config_path

    cfg = get_config()
    config_file = get_config_path()

    console.print("[bold]Current Configuration[/bold]")
    console.print()

    if config_file:
        console.print(f"[dim]Config file:[/dim] {config_file}")
    else:
        console.print("[dim]Config file:[/dim] (none - using defaults)")
    console.print()

    console.print("[bold]API:[/bold]")
    console.print(f"  URL: {cfg.api.base_url}")
    console.print(f"  Auth URL: {cfg.api.auth_url}")
    console.print(f"  Timeout: {cfg.api.timeout}s")
    console.print()

    console.print("[bold]Account:[/bold]")
    console.print(f"  Username: {cfg.account.username or '(anonymous)'}")
    if cfg.account.password:
        password = "(set)"
    elif os.environ.get("RT_PASSWORD"):
        password = "(from RT_PASSWORD env)"
    else:
        password = "(not set)"
    console.print(f"  Password: {password}")


@config.command(name="path")
def config_path() -> None:
    """Show configuration file paths."""
    from roosterteeth.config import find_config_file, get_config_paths

    console.print("[bold]Configuration paths (in priority order):[/bold]")
    config_file = find_config_file()

    for path in get_config_paths():
        if path.exists():
            if path == config_file:
                console.print(f"  [green]{path}[/green] (active)")
            else:
                console.print(f"  {path} (exists)")
        else:
            console.print(f"  [dim]{path}[/dim]")

    console.print()
    console.print("[bold]Other paths:[/bold]")
    console.print(f"  .env file: {Path.cwd() / '.env'}")


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite existing config file")
def config_init(force: bool) -> None:
    """Create a default configuration file."""
    from roosterteeth.config import get_config_dir, save_default_config

    config_path = get_config_dir() / "roosterteeth.ini"

    if config_path.exists() and not force:
        console.print(f"[yellow]Config file already exists:[/yellow] {config_path}")
        console.print("Use --force to overwrite.")
        sys.exit(1)

    save_default_config(config_path)
    console.print(f"[green]Created config file:[/green] {config_path}")
    console.print("Edit this file to customize your settings.")


if __name__ == "__main__":
    main()

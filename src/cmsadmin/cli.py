"""CLI interface for cms-admin."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from cmsadmin.app import AdminApp, build_app
from cmsadmin.config import CmsAdminConfig, load_config, merge_cli_overrides
from cmsadmin.content.dashboard import DashboardStats, entry_title, recent_entries
from cmsadmin.preferences.models import Direction, Preferences, Theme

app = typer.Typer(
    name="cms-admin",
    help="Manage content types, entries and admin preferences.",
    no_args_is_help=True,
)
prefs_app = typer.Typer(help="Show or change persisted display preferences.")
app.add_typer(prefs_app, name="prefs")

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from cmsadmin import __version__

        console.print(f"cms-admin {__version__}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .cms-admin.toml file."),
    ] = None,
    preferences_file: Annotated[
        Optional[Path],
        typer.Option("--preferences-file", help="Where theme and direction are stored."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """cms-admin - content type and entry management."""
    config = load_config(config_path)
    config = merge_cli_overrides(
        config,
        preferences_file=str(preferences_file) if preferences_file else None,
        log_level="DEBUG" if verbose else None,
    )
    _configure_logging(config.logging.level)
    ctx.obj = config


def _admin(ctx: typer.Context) -> AdminApp:
    config = ctx.obj if isinstance(ctx.obj, CmsAdminConfig) else load_config()
    return build_app(config)


@app.command()
def dashboard(ctx: typer.Context) -> None:
    """Show entry counts and the most recent entries."""
    admin = _admin(ctx)
    state = admin.domain.snapshot
    stats = DashboardStats.from_state(state)

    summary = Table(title="Dashboard")
    summary.add_column("Total Entries", justify="right")
    summary.add_column("Published", justify="right")
    summary.add_column("Drafts", justify="right")
    summary.add_column("Content Types", justify="right")
    summary.add_row(
        str(stats.total_entries),
        str(stats.published),
        str(stats.drafts),
        str(stats.content_types),
    )
    console.print(summary)

    recent = recent_entries(state)
    if not recent:
        console.print("[yellow]No entries yet.[/yellow]")
        return
    table = Table(title="Recent Entries")
    table.add_column("Title")
    table.add_column("Content Type")
    table.add_column("Status")
    table.add_column("Updated")
    for entry in recent:
        colour = "green" if entry.status == "published" else "yellow"
        table.add_row(
            entry_title(entry),
            entry.content_type,
            f"[{colour}]{entry.status.value}[/{colour}]",
            entry.updated_at.date().isoformat(),
        )
    console.print(table)


@app.command()
def schemas(ctx: typer.Context) -> None:
    """List content types and their fields."""
    admin = _admin(ctx)
    if not admin.domain.schemas:
        console.print("[yellow]No content types defined.[/yellow]")
        return
    for schema in admin.domain.schemas:
        table = Table(title=f"{schema.name} ({len(schema.fields)} fields)")
        table.add_column("Field")
        table.add_column("Type")
        table.add_column("Required")
        for field in schema.fields:
            table.add_row(field.name, field.kind.value, "yes" if field.required else "")
        console.print(table)


def _print_prefs(prefs: Preferences) -> None:
    console.print(f"theme: {prefs.theme.value}")
    console.print(f"direction: {prefs.direction.value}")


@prefs_app.command("show")
def prefs_show(ctx: typer.Context) -> None:
    """Print the persisted theme and direction."""
    _print_prefs(_admin(ctx).preferences.snapshot)


@prefs_app.command("theme")
def prefs_theme(
    ctx: typer.Context,
    value: Annotated[Theme, typer.Argument(help="light or dark")],
) -> None:
    """Set the colour theme."""
    _print_prefs(_admin(ctx).preferences.set_theme(value))


@prefs_app.command("direction")
def prefs_direction(
    ctx: typer.Context,
    value: Annotated[Direction, typer.Argument(help="ltr or rtl")],
) -> None:
    """Set the text direction."""
    _print_prefs(_admin(ctx).preferences.set_direction(value))


@prefs_app.command("toggle-theme")
def prefs_toggle_theme(ctx: typer.Context) -> None:
    """Switch between light and dark."""
    _print_prefs(_admin(ctx).preferences.toggle_theme())


@prefs_app.command("toggle-direction")
def prefs_toggle_direction(ctx: typer.Context) -> None:
    """Switch between left-to-right and right-to-left."""
    _print_prefs(_admin(ctx).preferences.toggle_direction())


@app.command()
def serve(
    ctx: typer.Context,
    host: Annotated[Optional[str], typer.Option(help="Bind address.")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port.")] = None,
) -> None:
    """Run the health-check HTTP service."""
    import uvicorn

    from cmsadmin.health import create_health_app

    config = ctx.obj if isinstance(ctx.obj, CmsAdminConfig) else load_config()
    config = merge_cli_overrides(config, server_host=host, server_port=port)
    console.print(
        f"Serving health check on http://{config.server.host}:{config.server.port}/"
    )
    uvicorn.run(
        create_health_app(),
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )

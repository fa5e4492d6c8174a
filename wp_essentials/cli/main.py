"""Command line interface for wp-essentials."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from wp_essentials._version import __version__
from wp_essentials.config import ConfigurationError, Settings
from wp_essentials.context import RequestContext
from wp_essentials.core.logging import get_logger, setup_logging_from_settings
from wp_essentials.exceptions import RequestTerminated
from wp_essentials.hooks import HookEvent, HookManager, HookRegistry
from wp_essentials.plugin import register_essentials
from wp_essentials.svg import Sanitizer


console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="wp-essentials",
    help="Inspect and exercise the essentials hook pipeline.",
    rich_markup_mode="rich",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"wp-essentials {__version__}")
        raise typer.Exit()


def _settings(ctx: typer.Context) -> Settings:
    settings = ctx.obj
    if not isinstance(settings, Settings):
        settings = Settings.from_config()
    return settings


def _pipeline(settings: Settings) -> HookManager:
    registry = HookRegistry()
    manager = HookManager(registry)
    registered = register_essentials(registry, settings, manager=manager)
    logger.debug("pipeline_built", hooks=len(registered))
    return manager


@app.callback()
def app_main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML configuration file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """wp-essentials command line interface."""
    try:
        settings = Settings.from_config(config)
    except ConfigurationError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise typer.Exit(2) from e

    setup_logging_from_settings(settings.logging.level, settings.logging.format)
    ctx.obj = settings


@app.command()
def hooks(ctx: typer.Context) -> None:
    """List the callbacks registered with the current configuration."""
    manager = _pipeline(_settings(ctx))

    table = Table(title="Registered callbacks")
    table.add_column("Extension point", style="cyan", no_wrap=True)
    table.add_column("Callback", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Prio", justify="right")

    for hook in manager.registry.all_hooks():
        table.add_row(
            hook.event.value,
            hook.name,
            hook.kind.value,
            str(hook.priority),
        )

    console.print(table)


@app.command("sanitize-svg")
def sanitize_svg(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ..., exists=True, file_okay=True, dir_okay=False, readable=True
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write sanitized markup here instead of stdout"
    ),
    minify: bool = typer.Option(
        True, "--minify/--no-minify", help="Drop whitespace between elements"
    ),
) -> None:
    """Sanitize an SVG file the way uploads are sanitized."""
    settings = _settings(ctx)
    sanitizer = Sanitizer(
        minify=minify,
        remove_remote_references=settings.svg.remove_remote_references,
    )

    clean = sanitizer.sanitize(path.read_bytes())
    if not clean:
        err_console.print(f"[bold red]Rejected:[/bold red] {settings.svg.error_message}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(clean)
    else:
        output.write_text(clean, encoding="utf-8")
        console.print(f"Sanitized SVG written to {output}")


@app.command("check-request")
def check_request(
    ctx: typer.Context,
    uri: str = typer.Option("/", "--uri", "-u", help="Requested path and query string"),
    admin: bool = typer.Option(False, "--admin", help="Treat as an administrative request"),
) -> None:
    """Run the user-enumeration guards against a request URI."""
    manager = _pipeline(_settings(ctx))
    context = RequestContext.from_uri(uri, is_admin=admin)

    try:
        manager.do_action(HookEvent.INIT, context=context)
        # the host never issues canonical redirects for admin requests
        if not admin:
            manager.apply_filters(
                HookEvent.REDIRECT_CANONICAL, uri, uri, context=context
            )
    except RequestTerminated as e:
        console.print(f"[bold red]terminated[/bold red] ({e.reason})")
        raise typer.Exit(1) from e

    console.print("[green]allowed[/green]")


def main() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()

"""Command-line interface for ejruns."""

import getpass
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .client import ContestIdError, EjudgeClient
from .config import GlobalConfig, ReportSettings, parse_contest_ids
from .report import collect_rows
from .utils.terminal import print_tables, render_json, render_text


console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def cli():
    """ejruns - collect submissions from ejudge contests."""
    pass


@cli.command()
@click.option("--base-url", default=None, help="Base ejudge URL, e.g. https://your-host")
def configure(base_url: Optional[str]):
    """Save the ejudge server address and token for future use."""
    config = GlobalConfig.load()

    if base_url is None:
        base_url = input(f"Base URL [{config.base_url}]: ").strip() or config.base_url
    token = getpass.getpass("Token (leave empty to keep current): ") or config.token

    config.base_url = base_url
    config.token = token
    config.save()

    server = config.base_url if config.has_server() else "(no server)"
    console.print(f"[green]Saved settings for {server}[/green]")


@cli.command()
@click.option(
    "--base-url",
    envvar="EJUDGE_BASE_URL",
    default=None,
    help="Base ejudge URL, e.g. https://your-host (env EJUDGE_BASE_URL)",
)
@click.option(
    "--token",
    envvar="EJUDGE_TOKEN",
    default=None,
    help="Authorization token (env EJUDGE_TOKEN)",
)
@click.option("--contests", default="", help="Comma separated contest IDs")
@click.option(
    "--contest-file",
    type=click.Path(path_type=Path),
    help="Path to file with contest IDs (one per line)",
)
@click.option(
    "--contest-dir",
    type=click.Path(path_type=Path),
    help="Directory with contest folders named by numeric ID (e.g. /home/judges)",
)
@click.option("--filter", "filter_expr", default="", help="Filter expression passed to list-runs")
@click.option("--page-size", type=int, default=200, show_default=True, help="Page size for run listing")
@click.option("--field-mask", type=int, default=0, help="Optional field mask for list-runs")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["json", "text", "table"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
def runs(
    base_url: Optional[str],
    token: Optional[str],
    contests: str,
    contest_file: Optional[Path],
    contest_dir: Optional[Path],
    filter_expr: str,
    page_size: int,
    field_mask: int,
    output_format: str,
    debug: bool,
):
    """Fetch runs of the given contests, newest first."""
    try:
        ids = parse_contest_ids(contests, contest_file, contest_dir)
    except ContestIdError as e:
        raise click.UsageError(str(e))

    saved = GlobalConfig.load()
    settings = ReportSettings(
        base_url=base_url if base_url is not None else saved.base_url,
        token=token if token is not None else saved.token,
        filter_expr=filter_expr,
        page_size=page_size,
        field_mask=field_mask,
    )
    if not settings.base_url:
        raise click.UsageError(
            "base URL is required; use --base-url, EJUDGE_BASE_URL or 'ejruns configure'"
        )

    if debug:
        err_console.print(f"[cyan]DEBUG: contests = {ids}[/cyan]")

    client = EjudgeClient(settings.base_url, settings.token, debug=debug)
    rows = collect_rows(
        client,
        ids,
        filter_expr=settings.filter_expr,
        page_size=settings.page_size,
        field_mask=settings.field_mask,
    )

    if debug:
        err_console.print(
            f"[cyan]DEBUG: collected {len(rows)} rows from {len(ids)} contests[/cyan]"
        )

    if output_format == "json":
        click.echo(render_json(rows))
    elif output_format == "text":
        if rows:
            click.echo(render_text(rows))
    else:
        print_tables(rows)


@cli.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]ejruns[/bold cyan] version [green]{__version__}[/green]")
    console.print("Submission report for ejudge contests")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

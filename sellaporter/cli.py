"""Sellaporter CLI.

Resolve and render pages from the page store without running the server::

    sellaporter phase spring-launch --at 2024-05-24T12:00:00Z
    sellaporter render spring-launch --phase sale
    sellaporter choices spring-launch
    sellaporter server --port 8000
"""

import os

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sellaporter.core.logger import setup_logger
from sellaporter.core.settings import settings
from sellaporter.pages.errors import PageStoreError
from sellaporter.pages.models import Page
from sellaporter.pages.rendering import render_page
from sellaporter.pages.repository import PageRepository
from sellaporter.pages.source import PagePhaseSource, parse_test_instant
from sellaporter.phases.resolver import PhaseResolver
from sellaporter.phases.visibility import visibility_choices
from sellaporter.shortcodes.handlers import PhaseShortcodes

console = Console()

app = typer.Typer(
    name="sellaporter",
    help="Sellaporter CLI - resolve sales phases and render time-aware pages",
    add_completion=False,
)

DEFAULT_HOST = os.getenv("SERVER_HOST", "127.0.0.1")

PAGES_FILE_OPTION = typer.Option(None, "--pages-file", "-f", help="Page store YAML (default: SELLAPORTER_PAGES_FILE)")
AT_OPTION = typer.Option(None, "--at", help="Instant to classify (ISO 8601 or epoch seconds)")
PHASE_OPTION = typer.Option(None, "--phase", help="Force a phase, skipping all date logic")


def _load_page(slug: str, pages_file: str | None) -> Page:
    try:
        repository = PageRepository.from_file(pages_file or settings.pages_file)
    except PageStoreError as e:
        console.print(f"[bold red]✗ Cannot load page store:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    page = repository.get_by_slug(slug)
    if page is None:
        console.print(f"[red]Error:[/red] no page with slug '{slug}'")
        raise typer.Exit(code=1)
    return page


def _request_args(at: str | None, phase: str | None) -> dict[str, str]:
    args: dict[str, str] = {}
    if at:
        if parse_test_instant(at) is None:
            console.print(f"[red]Error:[/red] cannot parse --at value '{at}'")
            raise typer.Exit(code=1)
        args["now"] = at
    if phase is not None:
        args["phase"] = phase
    return args


def _resolver(page: Page, at: str | None, phase: str | None) -> PhaseResolver:
    return PhaseResolver(PagePhaseSource(page, _request_args(at, phase)), tz_name=settings.timezone)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    setup_logger(level="DEBUG" if debug else None)


@app.command()
def phase(
    slug: str = typer.Argument(..., help="Page slug"),
    pages_file: str | None = PAGES_FILE_OPTION,
    at: str | None = AT_OPTION,
    phase_override: str | None = PHASE_OPTION,
) -> None:
    """Print the current phase of a page."""
    page = _load_page(slug, pages_file)
    current = _resolver(page, at, phase_override).resolve_phase()

    if not current:
        console.print(Panel(Text(f"'{slug}' is not a time-aware page", style="yellow"), border_style="yellow"))
        return
    console.print(Panel(Text(current, style="bold green"), title=page.title or slug, border_style="green"))


@app.command()
def render(
    slug: str = typer.Argument(..., help="Page slug"),
    pages_file: str | None = PAGES_FILE_OPTION,
    at: str | None = AT_OPTION,
    phase_override: str | None = PHASE_OPTION,
) -> None:
    """Render the content blocks visible in the current phase."""
    page = _load_page(slug, pages_file)
    resolver = _resolver(page, at, phase_override)
    shortcodes = PhaseShortcodes(current_phase=resolver.resolve_phase)
    shortcodes.register()

    current = resolver.resolve_phase()
    blocks = render_page(page, current, shortcodes)
    console.print(f"[cyan]Phase:[/cyan] {current or '(none)'} - {len(blocks)} visible block(s)\n")
    for html in blocks:
        console.print(html, markup=False)
        console.print()


@app.command()
def choices(
    slug: str = typer.Argument(..., help="Page slug"),
    pages_file: str | None = PAGES_FILE_OPTION,
) -> None:
    """List the phases a content block on this page can be tagged with."""
    page = _load_page(slug, pages_file)
    phases = page.custom_fields.launch_phases if page.custom_fields else []

    table = Table(title=f"Visibility choices for {slug}")
    table.add_column("Phase", style="cyan")
    for choice in visibility_choices(phases):
        table.add_row(choice)
    console.print(table)


@app.command()
def server(
    host: str = typer.Option(DEFAULT_HOST, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("sellaporter.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()

"""Main Typer application for linkkeeper."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from linkkeeper.cli.errorhandler import handle_cli_errors
from linkkeeper.config.settings import load_linkkeeper_config
from linkkeeper.content.loader import load_corpus
from linkkeeper.logging_setup import configure_logging
from linkkeeper.output_adapters.registry import PageRegistry
from linkkeeper.output_adapters.writer import SiteWriter
from linkkeeper.redirects.pipeline import build_redirects, generate_redirects
from linkkeeper.rendering.layouts import JinjaLayoutRenderer
from linkkeeper.rendering.scaffolding import scaffold_site

app = typer.Typer(
    name="linkkeeper",
    help="Generate redirect pages that keep legacy post URLs alive",
    add_completion=False,
)

console = Console()

SiteRootArg = Annotated[
    Path,
    typer.Argument(help="Site root directory", exists=True, file_okay=False, resolve_path=True),
]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Log at DEBUG level and show full tracebacks on errors")]


@app.callback()
def _initialize_cli() -> None:
    """Initialize CLI (logging is configured per command)."""


def _setup_logging(debug: bool) -> None:
    configure_logging(logging.DEBUG if debug else None)


@app.command()
def build(site_root: SiteRootArg, debug: DebugOpt = False) -> None:
    """Render and write a redirect page for every legacy post."""
    _setup_logging(debug)
    with handle_cli_errors(debug=debug):
        config = load_linkkeeper_config(site_root)
        corpus = load_corpus(site_root / config.paths.posts_dir, config.site)
        renderer = JinjaLayoutRenderer(site_root / config.paths.layouts_dir)
        writer = SiteWriter(site_root / config.paths.output_dir)

        registry = PageRegistry()
        registry.extend(build_redirects(corpus, config, renderer, writer))

    if not config.redirects.enabled:
        console.print("[yellow]Redirects are disabled[/yellow] (set redirects.enabled = true)")
        return
    console.print(f"[green]Wrote {len(registry)} redirect page(s)[/green] to {writer.output_dir}")


@app.command()
def plan(site_root: SiteRootArg, debug: DebugOpt = False) -> None:
    """List the redirect pages a build would write, without writing them.

    A site without a config file is planned with the defaults; no file is created.
    """
    _setup_logging(debug)
    with handle_cli_errors(debug=debug):
        config = load_linkkeeper_config(site_root, create_missing=False)
        corpus = load_corpus(site_root / config.paths.posts_dir, config.site)
        pages = generate_redirects(corpus, config)

    if not config.redirects.enabled:
        console.print("[yellow]Redirects are disabled[/yellow] (set redirects.enabled = true)")
        return

    table = Table(title=f"Legacy redirects (cutoff {config.cutoff.isoformat()})")
    table.add_column("Legacy URL", style="cyan")
    table.add_column("Target", style="green")
    for page in pages:
        table.add_row(page.url, page.target_item_id)
    console.print(table)
    console.print(f"{len(pages)} redirect page(s)")


@app.command()
def init(
    site_root: Annotated[Path, typer.Argument(help="Site root directory", file_okay=False, resolve_path=True)],
    force: Annotated[bool, typer.Option("--force", help="Overwrite an existing redirect layout")] = False,
    debug: DebugOpt = False,
) -> None:
    """Install the default redirect layout and configuration file."""
    _setup_logging(debug)
    with handle_cli_errors(debug=debug):
        _, layout_path, written = scaffold_site(site_root, force=force)

    if written:
        console.print(f"[green]Created redirect layout[/green] {layout_path}")
    else:
        console.print(f"[yellow]Layout already exists[/yellow] {layout_path} (use --force to replace it)")


def main() -> None:
    """Entry point for the ``linkkeeper`` console script."""
    app()


__all__ = ["app", "main"]

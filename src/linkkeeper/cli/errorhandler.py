"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from linkkeeper.config.exceptions import ConfigError
from linkkeeper.content.exceptions import ContentLoadError
from linkkeeper.exceptions import LinkkeeperError
from linkkeeper.output_adapters.exceptions import OutputAdapterError
from linkkeeper.rendering.exceptions import RenderingError
from linkkeeper.utils.paths import PathTraversalError

console = Console()


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Configuration:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ContentLoadError as e:
        if debug:
            raise
        console.print(f"[bold red]Content Error:[/bold red] {e}")
        console.print("Fix the post's front matter and run the build again.")
        raise typer.Exit(1) from e
    except RenderingError as e:
        if debug:
            raise
        console.print(f"[bold red]Layout Error:[/bold red] {e}")
        console.print("Run [bold]linkkeeper init[/bold] to install the default redirect layout.")
        raise typer.Exit(1) from e
    except (OutputAdapterError, PathTraversalError) as e:
        if debug:
            raise
        console.print(f"[bold red]Write Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except LinkkeeperError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e

from contextlib import contextmanager

import typer
from rich.console import Console

from .errors import PrivatizeError

# stdout carries filtered file content, so everything else goes to stderr
err_console = Console(stderr=True)

settings = {"verbose": False}


def ok(msg: str):
    if settings["verbose"]:
        err_console.print(f"[green]✓[/green] {msg}")


@contextmanager
def reported_errors():
    """Turn any failure into a red message on stderr and exit status 1."""
    try:
        yield
    except (PrivatizeError, OSError, UnicodeError) as e:
        typer.secho(f"Error: {e}", fg="red", err=True)
        raise typer.Exit(1) from e

import typing as t
from pathlib import Path

import typer

from gitprivatize.git import git_dir
from gitprivatize.keystore import KeyStore
from gitprivatize.output import ok, reported_errors


def export(
    filename: t.Optional[Path] = typer.Argument(None, help="Where to write the key"),
):
    """Export this repo's symmetric key to the given file."""
    with reported_errors():
        KeyStore.for_git_dir(git_dir()).export(filename)
    ok(f"Exported key to {filename}")

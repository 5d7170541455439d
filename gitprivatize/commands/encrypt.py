import typing as t
from pathlib import Path

import typer

from gitprivatize.blocks import Mode, privatize_stream
from gitprivatize.keystore import load_key_file
from gitprivatize.output import reported_errors


def encrypt(
    key_file: t.Optional[Path] = typer.Argument(None, help="Key file to use"),
):
    """Encrypt private blocks from stdin to stdout with an explicit key."""
    with reported_errors():
        key = load_key_file(key_file)
        privatize_stream(
            Mode.ENCRYPT,
            key,
            typer.get_binary_stream("stdin"),
            typer.get_binary_stream("stdout"),
        )

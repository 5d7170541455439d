import typing as t
from pathlib import Path

import typer

from gitprivatize.blocks import Mode, privatize, privatize_stream
from gitprivatize.errors import PrivatizeError
from gitprivatize.git import git_dir
from gitprivatize.keystore import KeyStore
from gitprivatize.output import reported_errors


def _filter_stdin(mode: Mode):
    with reported_errors():
        key = KeyStore.for_git_dir(git_dir()).load()
        privatize_stream(
            mode,
            key,
            typer.get_binary_stream("stdin"),
            typer.get_binary_stream("stdout"),
        )


def clean():
    """(git filter) Encrypt private blocks read from stdin."""
    _filter_stdin(Mode.ENCRYPT)


def smudge():
    """(git filter) Decrypt private blocks read from stdin."""
    _filter_stdin(Mode.DECRYPT)


def diff(
    file: t.Optional[Path] = typer.Argument(None, help="File to render"),
):
    """(git textconv) Render FILE for diffing, no key needed."""
    with reported_errors():
        if file is None:
            raise PrivatizeError("diff file not provided")
        out = typer.get_binary_stream("stdout")
        out.write(privatize(file.read_bytes(), Mode.REDACT_FOR_DIFF, None))
        out.flush()

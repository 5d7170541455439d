import typing as t
from pathlib import Path

import typer

from gitprivatize.git import add_git_filters, git_dir, reset_head_hard
from gitprivatize.keystore import KeyStore, load_key_file
from gitprivatize.output import ok, reported_errors


def unlock(
    key_file: t.Optional[Path] = typer.Argument(
        None, help="Key exported from an initialized clone"
    ),
):
    """Decrypt this repo using the given symmetric key."""
    with reported_errors():
        store = KeyStore.for_git_dir(git_dir())
        store.assert_not_initialized()
        key = load_key_file(key_file)
        add_git_filters()
        store.install(key)
        # re-checkout so the smudge filter runs over every tracked file
        reset_head_hard()
    ok(f"Unlocked with {key_file}")

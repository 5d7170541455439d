from importlib.metadata import version, PackageNotFoundError
import typing as t

import typer
from rich import print
from typer.core import TyperGroup

import gitprivatize.commands as commands
from gitprivatize.constants import USAGE
from gitprivatize.output import settings

try:
    __version__ = version("git-privatize")
except PackageNotFoundError:
    __version__ = "unknown"


class PrivatizeGroup(TyperGroup):
    """Unknown commands fall back to printing usage."""

    def get_command(self, ctx, cmd_name):
        cmd = super().get_command(ctx, cmd_name)
        if cmd is None:
            cmd = super().get_command(ctx, "help")
        return cmd


app = typer.Typer(
    cls=PrivatizeGroup,
    add_completion=False,
    # unknown root options fall through to usage like unknown commands
    context_settings={"ignore_unknown_options": True},
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Confirm successful commands on stderr"
    ),
):
    settings["verbose"] = verbose
    if ctx.invoked_subcommand is None:
        typer.echo(USAGE)


for cmd in commands.__all__:
    app.command()(cmd)

for name, cmd in commands.ALIASES.items():
    app.command(name, hidden=True)(cmd)


@app.command(
    "help",
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def usage(args: t.Optional[t.List[str]] = typer.Argument(None, hidden=True)):
    """Print usage."""
    typer.echo(USAGE)


@app.command("version")
def version():
    """Print version."""
    print(f"git-privatize version: {__version__}")


if __name__ == "__main__":
    app()

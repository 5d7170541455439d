import subprocess
import typing as t
from pathlib import Path

from .constants import FILTER_NAME, GIT, PROGRAM
from .errors import GitError


def run_git(*args: str, program: str = GIT) -> str:
    try:
        p = subprocess.run(
            [program, *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )
    except FileNotFoundError as e:
        raise GitError(f"{program} not found in PATH") from e
    if p.returncode != 0:
        msg = p.stderr.strip() or f"{program} {' '.join(args)} exited with {p.returncode}"
        raise GitError(msg)
    return p.stdout


def git_dir() -> Path:
    """The repository's private metadata directory (usually .git)."""
    return Path(run_git("rev-parse", "--git-dir").strip())


def filter_config(program: str = PROGRAM) -> t.List[t.Tuple[str, str]]:
    cmd = f'"{program}"'
    return [
        (f"filter.{FILTER_NAME}.smudge", f"{cmd} smudge"),
        (f"filter.{FILTER_NAME}.clean", f"{cmd} clean"),
        (f"diff.{FILTER_NAME}.textconv", f"{cmd} diff"),
        # checkout fails loudly if the tool is missing
        (f"filter.{FILTER_NAME}.required", "true"),
    ]


def add_git_filters(program: str = PROGRAM):
    for name, value in filter_config(program):
        run_git("config", name, value)


def reset_head_hard():
    run_git("reset", "--hard")

"""Default host collaborators.

Thin async wrappers that give the plugin real file reads, shell
commands, terminal prompts and console output, plus output formatting
helpers for the CLI.
"""

from __future__ import annotations

import asyncio
import subprocess
from pathlib import Path

import click

from .collaborators import Collaborators, Log
from .models import Choice


async def read_text(path: str) -> str:
    """Read a text file without blocking the event loop.

    Raises:
        OSError: If the file is missing or unreadable.
    """
    return await asyncio.to_thread(Path(path).read_text)


async def run(command: str) -> None:
    """Run a shell command line.

    Output is not captured - it streams directly to the terminal so
    users can see build and publish progress.

    Raises:
        subprocess.CalledProcessError: If the command exits non-zero.
    """
    proc = await asyncio.create_subprocess_shell(command)
    returncode = await proc.wait()
    if returncode != 0:
        raise subprocess.CalledProcessError(returncode, command)


async def dry_run(command: str) -> None:
    """Print the command line instead of running it."""
    click.echo(f"  Would run: {command}")


async def select(question: str, choices: list[Choice], default: str) -> str:
    """Ask the operator to pick one of the choices on the terminal.

    Only the offered values are accepted. An empty default means the
    operator must type an answer. The prompt blocks on terminal input, so
    it runs in a worker thread.
    """
    for choice in choices:
        click.echo(f"  {choice.value:<12} {choice.description}")
    return await asyncio.to_thread(
        click.prompt,
        question,
        type=click.Choice([c.value for c in choices]),
        default=default or None,
        show_choices=False,
    )


def prefixed_echo(prefix: str) -> Log:
    """Return a logger that echoes messages as ``[prefix] message``."""

    def log(message: str) -> None:
        click.echo(f"[{prefix}] {message}")

    return log


def terminal_collaborators(name: str, *, dry: bool = False) -> Collaborators:
    """Collaborators backed by the filesystem, a shell and the terminal."""
    return Collaborators(
        read=read_text,
        exec=dry_run if dry else run,
        prompt_select=select,
        log=prefixed_echo(name),
    )


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the lifecycle hooks in terminal output.
    """
    click.echo(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")

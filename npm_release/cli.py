"""CLI entry point for npm-release."""

from __future__ import annotations

import asyncio
import subprocess
from collections.abc import Iterable
from pathlib import Path

import click
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from .config import load_config
from .errors import ReleasePluginError
from .plugin import HOOKS, NpmPlugin
from .shell import step, terminal_collaborators

# CLI spelling → plugin method
HOOK_COMMANDS = {hook.replace("_", "-"): hook for hook in HOOKS}

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML config file. (default: ./npm-release.toml if present)",
)
dry_run_option = click.option(
    "--dry-run", is_flag=True, help="Print commands instead of running them."
)


def build_plugin(config_path: Path | None, dry_run: bool = False) -> NpmPlugin:
    """Load config and wire the plugin to terminal collaborators."""
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        raise click.ClickException(f"Config file not found: {config_path}") from None
    except (ValidationError, TOMLKitError) as exc:
        raise click.ClickException(f"Invalid config: {exc}") from exc
    return NpmPlugin(terminal_collaborators(NpmPlugin.name, dry=dry_run), config)


async def run_hooks(plugin: NpmPlugin, hooks: Iterable[str]) -> None:
    """Await each hook in turn, stopping at the first failure."""
    for hook in hooks:
        step(hook.replace("_", "-"))
        await getattr(plugin, hook)()


def execute(plugin: NpmPlugin, hooks: Iterable[str]) -> None:
    """Run hooks and turn failures into CLI errors.

    Each failure class gets its own message so a broken manifest, an
    unreadable file, a bad selection and a failing command can be told
    apart.
    """
    try:
        asyncio.run(run_hooks(plugin, hooks))
    except ReleasePluginError as exc:
        raise click.ClickException(str(exc)) from exc
    except subprocess.CalledProcessError as exc:
        raise click.ClickException(
            f"Command failed (exit {exc.returncode}): {exc.cmd}"
        ) from exc
    except OSError as exc:
        if exc.filename:
            raise click.ClickException(
                f"Cannot read {exc.filename}: {exc.strerror}"
            ) from exc
        raise click.ClickException(f"I/O error: {exc}") from exc


@click.group()
@click.version_option(package_name="npm-release")
def cli() -> None:
    """Version bump and publish hooks for npm packages."""


@cli.command()
@config_option
@dry_run_option
def release(config_path: Path | None, dry_run: bool) -> None:
    """Run every hook: pre-bump, bump, pre-publish, publish."""
    plugin = build_plugin(config_path, dry_run)
    execute(plugin, HOOKS)
    click.echo(f"\n{'=' * 60}\nDone!\n{'=' * 60}")


@cli.command()
@click.argument("name", type=click.Choice(list(HOOK_COMMANDS)))
@config_option
@dry_run_option
def hook(name: str, config_path: Path | None, dry_run: bool) -> None:
    """Run a single lifecycle hook."""
    plugin = build_plugin(config_path, dry_run)
    execute(plugin, [HOOK_COMMANDS[name]])


@cli.command()
@config_option
def choices(config_path: Path | None) -> None:
    """List the bump kinds the bump hook will offer."""
    plugin = build_plugin(config_path)
    for choice in plugin.bump_choices():
        marker = "*" if choice.value == plugin.config.default_choice else " "
        click.echo(f"{marker} {choice.value:<12} {choice.description}")

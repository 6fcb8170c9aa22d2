#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import shlex
import sys
from dataclasses import dataclass

import click
import rich.console
import rich.logging

from .cmd import command_exists, execute_command_silent, sh, shell_invocation
from .errors import CommandFailedError, ExecutionError

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        rich.logging.RichHandler(
            console=rich.console.Console(stderr=True), rich_tracebacks=True
        )
    ],
)
logger = logging.getLogger("shexec")


@dataclass
class Context:
    dry_run: bool = False


def show_invocation(command_line: str) -> None:
    click.echo("Would execute command:")
    argv = shell_invocation(command_line)
    click.echo(f"  {' '.join(shlex.quote(arg) for arg in argv)}")


def run(command_line: str) -> int:
    """
    Run a command line and print its output.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        output = sh(command_line)
    except CommandFailedError as e:
        click.secho(e.stderr.rstrip("\n"), err=True, fg="red")
        return 1
    except ExecutionError as e:
        click.secho(f"Error: {e}", err=True, fg="red")
        return 1

    click.echo(output, nl=False)
    return 0


def check_exists(names: list[str]) -> int:
    """
    Print whether each command name resolves in the shell.

    Returns:
        Exit code (0 if all commands were found, 1 otherwise)
    """
    found = {name: command_exists(name) for name in names}

    max_name_len = max(len(name) for name in names)
    for name, exists in found.items():
        if exists:
            click.echo(f"{name:<{max_name_len}} ... found")
        else:
            click.secho(f"{name:<{max_name_len}} ... missing", fg="yellow")

    return 0 if all(found.values()) else 1


@click.group()
@click.option("-v", "--verbose", count=True, help="increase verbosity")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the shell command that would be executed without running it",
)
@click.pass_context
def shexec(ctx: click.Context, dry_run: bool, verbose: int) -> None:
    """shexec: Run shell command lines and report how they failed."""

    verbose_levels = {0: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}
    logger.setLevel(verbose_levels.get(verbose, logging.DEBUG))
    logger.debug(f"Verbose level set {logger.getEffectiveLevel()}")
    ctx.obj = Context(dry_run=dry_run)


@shexec.command("run")
@click.argument("command_line")
@click.pass_context
def cmd_run(ctx: click.Context, command_line: str) -> None:
    """
    Run COMMAND_LINE and print its output.

    If the command fails, its stderr is printed instead and the exit
    code is 1.
    """
    if ctx.obj.dry_run:
        show_invocation(command_line)
        return

    ctx.exit(run(command_line))


@shexec.command("check")
@click.argument("command_line")
@click.option(
    "--log-stderr/--no-log-stderr",
    default=False,
    help="Print the command's stderr if it fails (default: --no-log-stderr)",
)
@click.pass_context
def cmd_check(ctx: click.Context, command_line: str, log_stderr: bool) -> None:
    """
    Run COMMAND_LINE silently, exiting 0 if it succeeded and 1 otherwise.
    """
    if ctx.obj.dry_run:
        show_invocation(command_line)
        return

    succeeded = execute_command_silent(command_line, log_stderr=log_stderr)
    logger.info(f"{command_line}: {'succeeded' if succeeded else 'failed'}")
    ctx.exit(0 if succeeded else 1)


@shexec.command("exists")
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def cmd_exists(ctx: click.Context, names: tuple[str, ...]) -> None:
    """
    Check whether each of NAMES resolves to a command in the shell.
    """
    if any(not name.strip() for name in names):
        raise click.BadParameter(
            "command names must not be empty", param_hint="NAMES"
        )

    if ctx.obj.dry_run:
        for name in names:
            show_invocation(f"command -v {name}")
        return

    ctx.exit(check_exists(list(names)))


if __name__ == "__main__":
    sys.exit(shexec())

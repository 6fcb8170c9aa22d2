#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later

"""Command execution utilities."""

import enum
import logging
import subprocess
from dataclasses import dataclass

import click

from .errors import CommandFailedError, DecodingError, ExecutionError, SpawnError

logger = logging.getLogger("shexec.cmd")

SHELL = "sh"


class Status(enum.StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class CommandResult:
    """
    Decoded output of a single command invocation.

    Attributes:
        text: stdout if the command succeeded, stderr otherwise
        status: Whether the command exited successfully
    """

    text: str
    status: Status

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS


def shell_invocation(command_line: str) -> list[str]:
    """Return the argv used to hand command_line to the shell."""
    return [SHELL, "-c", command_line]


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError(str(e)) from e


def execute_command(command_line: str) -> CommandResult:
    """
    Run a command line through the shell and capture its output.

    A command that exits non-zero is not an error here: its stderr is
    returned with a FAILURE status.

    Args:
        command_line: The literal command line, interpreted by ``sh -c``

    Returns:
        CommandResult with decoded stdout on success, stderr on failure

    Raises:
        SpawnError: If the shell could not be started or waited on
        DecodingError: If the selected output stream is not valid UTF-8
    """
    logger.debug(f"Running: {command_line}")
    try:
        result = subprocess.run(
            shell_invocation(command_line),
            check=False,
            capture_output=True,
        )
    except OSError as e:
        raise SpawnError(str(e)) from e

    logger.debug(f"Exit status {result.returncode}: {command_line}")
    if result.returncode != 0:
        return CommandResult(text=_decode(result.stderr), status=Status.FAILURE)
    return CommandResult(text=_decode(result.stdout), status=Status.SUCCESS)


def sh(command_line: str) -> str:
    """
    Run a command line and return its stdout.

    Raises:
        CommandFailedError: If the command exits non-zero, with its stderr
        SpawnError: If the shell could not be started or waited on
        DecodingError: If the output is not valid UTF-8
    """
    result = execute_command(command_line)
    if not result.ok:
        raise CommandFailedError(result.text)
    return result.text


def execute_command_silent(command_line: str, log_stderr: bool = False) -> bool:
    """
    Run a command line and report whether it succeeded.

    Spawn and decoding errors are always written to stderr. The command's
    own stderr is only written if log_stderr is set.
    """
    try:
        result = execute_command(command_line)
    except ExecutionError as e:
        click.secho(str(e), err=True, fg="red")
        return False

    if not result.ok:
        if log_stderr:
            click.secho(result.text.rstrip("\n"), err=True, fg="red")
        return False
    return True


def command_exists(command: str) -> bool:
    """
    Check whether command resolves in the shell via ``command -v``.

    The name is not quoted or validated: an empty name yields a bare
    ``command -v``, which succeeds.
    """
    return execute_command_silent(f"command -v {command}", log_stderr=False)

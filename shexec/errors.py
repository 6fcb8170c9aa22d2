#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later

"""Errors raised while running shell commands."""


class ExecutionError(Exception):
    """Base exception for all shexec failures."""


class DecodingError(ExecutionError):
    """Captured output was not valid UTF-8."""


class SpawnError(ExecutionError):
    """The shell could not be spawned or waited on."""


class CommandFailedError(ExecutionError):
    """
    The command ran but exited with a non-zero status.

    Attributes:
        stderr: The decoded standard error of the command
    """

    def __init__(self, stderr: str) -> None:
        super().__init__(stderr)
        self.stderr = stderr

    def __str__(self) -> str:
        return f"ERROR: {self.stderr}"

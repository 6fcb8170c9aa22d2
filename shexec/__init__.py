#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later

"""shexec: Run shell command lines and classify how they fail."""

__version__ = "0.1.0"

from .cmd import (
    CommandResult,
    Status,
    command_exists,
    execute_command,
    execute_command_silent,
    sh,
)
from .errors import CommandFailedError, DecodingError, ExecutionError, SpawnError

__all__ = [
    "CommandFailedError",
    "CommandResult",
    "DecodingError",
    "ExecutionError",
    "SpawnError",
    "Status",
    "command_exists",
    "execute_command",
    "execute_command_silent",
    "sh",
]

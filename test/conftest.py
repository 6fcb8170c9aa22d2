#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_log_level():
    """Undo any -v level the CLI set on the shexec logger."""
    logger = logging.getLogger("shexec")
    level = logger.level
    yield
    logger.setLevel(level)

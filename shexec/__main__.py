#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later

"""Entry point for running shexec as a module: python -m shexec"""

import sys

from .cli import shexec

if __name__ == "__main__":
    sys.exit(shexec())

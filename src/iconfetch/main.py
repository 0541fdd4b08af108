#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 19:40:52 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/main.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.main

(c) 2026 Benjamin Walkenhorst
"""


import logging
import os
import sys
from typing import Final

from iconfetch import common
from iconfetch.common import IconFetchError
from iconfetch.config import Config
from iconfetch.fetcher import IconFetcher
from iconfetch.gate import Interrupted, InterruptGate
from iconfetch.parser import Parser
from iconfetch.scanner import Scanner

exit_ok: Final[int] = 0
exit_error: Final[int] = 1
exit_interrupt: Final[int] = 130


def run(gate: InterruptGate) -> int:
    """Restore the icons for the shortcuts in the current directory."""
    lg: logging.Logger = common.get_logger("main")
    try:
        cfg: Config = Config.from_env()
        cfg.check_icon_dir()

        with IconFetcher(cfg) as fetcher:
            scanner = Scanner(cfg, Parser(cfg), fetcher, gate)
            scanner.run(os.getcwd())
    except Interrupted as err:
        lg.warning("Interrupted: %s", err)
        return exit_interrupt
    except IconFetchError as err:
        lg.error("%s: %s", err.__class__.__name__, err)
        return exit_error

    return exit_ok


def main() -> None:
    """Run the icon fetcher."""
    gate: InterruptGate = InterruptGate()
    gate.install()
    try:
        status = run(gate)
    finally:
        gate.uninstall()
    sys.exit(status)


if __name__ == '__main__':
    main()


# Local Variables: #
# python-indent: 4 #
# End: #

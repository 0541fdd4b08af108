#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 16:02:57 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/gate.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.gate

(c) 2026 Benjamin Walkenhorst

InterruptGate turns SIGINT into a flag the main loop can check whenever it
is convenient to stop.
"""


import logging
import signal
from threading import Event
from typing import Any, Optional

from iconfetch import common
from iconfetch.common import IconFetchError


class Interrupted(IconFetchError):
    """Interrupted is raised when the user asked us to stop."""


class InterruptGate:
    """InterruptGate is a one-shot cancellation flag set by SIGINT.

    Once set, the flag stays set for the rest of the run.
    """

    __slots__ = [
        "log",
        "_flag",
        "_previous",
    ]

    log: logging.Logger
    _flag: Event
    _previous: Optional[Any]

    def __init__(self) -> None:
        self.log = common.get_logger("gate")
        self._flag = Event()
        self._previous = None

    @property
    def is_set(self) -> bool:
        """Return True if an interrupt has been received."""
        return self._flag.is_set()

    def install(self) -> None:
        """Register the SIGINT handler. Must be called from the main thread."""
        self.log.info("Press `Ctrl` + `c` at any time to exit")
        self._previous = signal.signal(signal.SIGINT, self._handle)

    def uninstall(self) -> None:
        """Restore whatever SIGINT handler was active before install()."""
        if self._previous is not None:
            signal.signal(signal.SIGINT, self._previous)
            self._previous = None

    def _handle(self, _signum: int, _frame: Any) -> None:
        self.trigger()

    def trigger(self) -> None:
        """Set the flag."""
        if not self._flag.is_set():
            self.log.info("SIGINT (`Ctrl` + `c`) received, exiting...")
            self._flag.set()

    def check(self) -> None:
        """Raise Interrupted if the flag has been set."""
        if self._flag.is_set():
            raise Interrupted("Stopping due to SIGINT")


# Local Variables: #
# python-indent: 4 #
# End: #

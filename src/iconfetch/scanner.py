#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 19:03:30 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/scanner.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.scanner

(c) 2026 Benjamin Walkenhorst

Scanner walks a directory of shortcuts and fetches the icons that are missing.
The first error stops the whole run, on purpose: a broken shortcut should be
looked at, not skipped.
"""


import logging
import os
import pathlib
from dataclasses import dataclass
from typing import Final, Optional, Union

from iconfetch import common
from iconfetch.common import IconFetchError
from iconfetch.config import Config
from iconfetch.fetcher import IconFetcher
from iconfetch.gate import InterruptGate
from iconfetch.model import ParsedShortcut, ShortcutEntry
from iconfetch.parser import Parser


class ScanError(IconFetchError):
    """ScanError indicates a problem with the directory or one of its entries."""


@dataclass(kw_only=True, slots=True)
class ScanSummary:
    """ScanSummary counts what happened during a successful run."""

    examined: int = 0
    skipped: int = 0
    present: int = 0
    downloaded: int = 0


class Scanner:
    """Scanner drives the processing of a directory full of shortcuts."""

    __slots__ = [
        "log",
        "cfg",
        "parser",
        "fetcher",
        "gate",
    ]

    log: logging.Logger
    cfg: Config
    parser: Parser
    fetcher: IconFetcher
    gate: InterruptGate

    def __init__(self,
                 cfg: Config,
                 parser: Parser,
                 fetcher: IconFetcher,
                 gate: InterruptGate) -> None:
        self.log = common.get_logger("scanner")
        self.cfg = cfg
        self.parser = parser
        self.fetcher = fetcher
        self.gate = gate

    def _list(self, folder: pathlib.Path) -> list[os.DirEntry]:
        try:
            with os.scandir(folder) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as err:
            raise ScanError(f"Failed to list directory {folder}: {err}") from err

    def _entry(self, dentry: os.DirEntry) -> ShortcutEntry:
        try:
            dentry.name.encode("utf-8")
        except UnicodeEncodeError as err:
            raise ScanError(
                f"Filename contains invalid unicode data: {dentry.name!r}") from err

        try:
            return ShortcutEntry.from_dir_entry(dentry)
        except OSError as err:
            raise ScanError(f"Failed to read metadata of {dentry.name}: {err}") from err

    def run(self, folder: Union[str, pathlib.Path]) -> ScanSummary:
        """Process all entries in the given directory."""
        path: Final[pathlib.Path] = pathlib.Path(folder)
        summary: ScanSummary = ScanSummary()

        self.log.info("Processing shortcuts in %s", path)

        for dentry in self._list(path):
            self.gate.check()

            summary.examined += 1
            entry: ShortcutEntry = self._entry(dentry)
            shortcut: Optional[ParsedShortcut] = self.parser.parse(entry)
            if shortcut is None:
                summary.skipped += 1
                continue

            if self.fetcher.fetch(shortcut):
                summary.downloaded += 1
            else:
                summary.present += 1

        self.log.info("Examined %d entries: %d skipped, %d icons present, %d downloaded",
                      summary.examined,
                      summary.skipped,
                      summary.present,
                      summary.downloaded)
        return summary


# Local Variables: #
# python-indent: 4 #
# End: #

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 17:11:38 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/parser.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.parser

(c) 2026 Benjamin Walkenhorst

Parser extracts the game ID and the icon filename from Internet Shortcut
(.url) files. A shortcut looks roughly like this:

    [{000214A0-0000-0000-C000-000000000046}]
    Prop3=19,0
    [InternetShortcut]
    IDList=
    IconIndex=0
    URL=steam://rungameid/730
    IconFile=C:\\Program Files (x86)\\Steam\\steam\\games\\8dbc71957312bbd3baea65848b545be9eae2a355.ico

Only the InternetShortcut section is looked at. Anything that claims to be
a shortcut but is incomplete or inconsistent is an error, not something to
skip quietly.

The one exception: a non-empty .url file that never contains the
InternetShortcut section is not a Steam shortcut at all. It is skipped with a
warning instead of failing the run. Earlier versions of this tool treated it
as an error. An empty file is still an error.
"""


import logging
from typing import Final, Iterable, Optional

from iconfetch import common
from iconfetch.common import IconFetchError
from iconfetch.config import Config
from iconfetch.model import EntryKind, ParsedShortcut, ShortcutEntry


class ParseError(IconFetchError):
    """Base class for errors encountered while parsing a shortcut."""


class DuplicateKeyError(ParseError):
    """The shortcut declares the game ID more than once."""


class DuplicateIconError(ParseError):
    """The shortcut declares the icon file more than once."""


class IconDirectoryError(ParseError):
    """The shortcut's icon lives somewhere other than the configured icon directory."""


class IncompleteShortcutError(ParseError):
    """The shortcut lacks the game ID or the icon file."""


class ShortcutReadError(ParseError):
    """The shortcut could not be read or decoded."""


class Parser:
    """Parser turns shortcut files into ParsedShortcuts."""

    __slots__ = [
        "log",
        "cfg",
    ]

    log: logging.Logger
    cfg: Config

    def __init__(self, cfg: Config) -> None:
        self.log = common.get_logger("parser")
        self.cfg = cfg

    def eligible(self, entry: ShortcutEntry) -> bool:
        """Return True if the entry is a regular file with the shortcut extension."""
        match entry.kind:
            case EntryKind.Directory:
                self.log.warning("Skipping directory `%s`", entry.name)
                return False
            case EntryKind.Symlink:
                self.log.warning("Skipping symlink `%s`", entry.name)
                return False
            case EntryKind.Other:
                self.log.warning("Skipping non-file `%s`", entry.name)
                return False

        if not entry.name.endswith(self.cfg.extension):
            self.log.warning("Skipping non-shortcut file `%s`", entry.name)
            return False

        return True

    def parse(self, entry: ShortcutEntry) -> Optional[ParsedShortcut]:
        """Parse the entry if it is eligible, otherwise return None."""
        if not self.eligible(entry):
            return None
        return self.parse_file(entry)

    def parse_file(self, entry: ShortcutEntry) -> Optional[ParsedShortcut]:
        """Read and parse a shortcut file."""
        self.log.debug("Parse shortcut %s", entry.path)
        try:
            with open(entry.path, "r", encoding="utf-8-sig") as fh:
                lines: Final[list[str]] = fh.readlines()
        except (OSError, UnicodeDecodeError) as err:
            cname: Final[str] = err.__class__.__name__
            raise ShortcutReadError(
                f"{cname} reading shortcut {entry.name}: {err}") from err

        return self.parse_lines(lines, entry.name)

    def parse_lines(self, lines: Iterable[str], name: str) -> Optional[ParsedShortcut]:
        """Extract the game ID and icon filename from the lines of a shortcut.

        Returns None if the lines never enter the shortcut section at all.
        Raises a ParseError if the shortcut is inconsistent or incomplete.
        """
        key: Optional[str] = None
        icon: Optional[str] = None
        in_section: bool = False
        seen_section: bool = False
        cnt: int = 0

        for raw in lines:
            cnt += 1
            line = raw.rstrip("\r\n")

            if line == self.cfg.section:
                in_section = seen_section = True
            elif not in_section:
                continue
            elif line.startswith("["):
                in_section = False
            elif (m := self.cfg.key_rx.match(line)) is not None:
                if key is not None:
                    raise DuplicateKeyError(f"Game ID already set for shortcut: {name}")
                key = m["key"]
            elif (m := self.cfg.icon_rx.match(line)) is not None:
                if icon is not None:
                    raise DuplicateIconError(
                        f"Icon path and/or name already set for shortcut: {name}")
                folder: str = m["dir"]
                if folder != self.cfg.icon_dir:
                    raise IconDirectoryError(
                        f"Unrecognized icon directory `{folder}` for shortcut: {name}")
                icon = m["icon"]

        if key is not None and icon is not None:
            shortcut = ParsedShortcut(key=key, icon=icon)
            self.log.debug("Shortcut %s: %s", name, shortcut.string)
            return shortcut

        if cnt > 0 and not seen_section:
            self.log.warning("Skipping `%s`, it has no %s section",
                             name,
                             self.cfg.section)
            return None

        raise IncompleteShortcutError(
            f"Shortcut could not be parsed or was not a Steam shortcut file: {name}")


# Local Variables: #
# python-indent: 4 #
# End: #

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 14:40:06 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/model.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.model

(c) 2026 Benjamin Walkenhorst
"""


import os
import pathlib
from dataclasses import dataclass
from enum import Enum, auto


class EntryKind(Enum):
    """EntryKind describes what kind of file system object a directory entry is."""

    File = auto()
    Directory = auto()
    Symlink = auto()
    Other = auto()

    @classmethod
    def of(cls, entry: os.DirEntry) -> 'EntryKind':
        """Determine the kind of a directory entry without following symlinks."""
        if entry.is_symlink():
            return cls.Symlink
        if entry.is_dir(follow_symlinks=False):
            return cls.Directory
        if entry.is_file(follow_symlinks=False):
            return cls.File
        return cls.Other


@dataclass(kw_only=True, slots=True, frozen=True)
class ShortcutEntry:
    """ShortcutEntry is a directory entry that might be a shortcut file."""

    name: str
    path: pathlib.Path
    kind: EntryKind

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry) -> 'ShortcutEntry':
        """Create a ShortcutEntry from an entry returned by os.scandir."""
        return cls(name=entry.name,
                   path=pathlib.Path(entry.path),
                   kind=EntryKind.of(entry))


@dataclass(kw_only=True, slots=True, frozen=True)
class ParsedShortcut:
    """ParsedShortcut is what we extract from a shortcut file: a game ID and an icon filename."""

    key: str
    icon: str

    @property
    def string(self) -> str:
        """Return a minimal string representation of the ParsedShortcut."""
        return f"ParsedShortcut(key={self.key}, icon='{self.icon}')"


# Local Variables: #
# python-indent: 4 #
# End: #

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 20:31:05 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/test_parser.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.test_parser

(c) 2026 Benjamin Walkenhorst
"""

import os
import pathlib
import shutil
import unittest
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Optional

from iconfetch import common
from iconfetch.config import Config
from iconfetch.model import EntryKind, ParsedShortcut, ShortcutEntry
from iconfetch.parser import (DuplicateIconError, DuplicateKeyError,
                              IconDirectoryError, IncompleteShortcutError,
                              Parser, ParseError, ShortcutReadError)

test_dir: Final[str] = os.path.join(
    "/tmp",
    datetime.now().strftime(f"{common.AppName.lower()}_test_parser_%Y%m%d_%H%M%S"))

icon_dir: Final[str] = "C:\\icons\\"
header: Final[str] = "[InternetShortcut]"


@dataclass(slots=True)
class ParseTestCase:
    """A test case for the Parser."""

    lines: list[str]
    res: Optional[ParsedShortcut] = None
    err: Optional[type[ParseError]] = None


parse_cases: Final[list[ParseTestCase]] = [
    # 0: the canonical case
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "IconFile=C:\\icons\\730.ico"],
                  ParsedShortcut(key="730", icon="730.ico")),
    # 1: realistic file with extra sections and keys, CRLF line endings
    ParseTestCase(["[{000214A0-0000-0000-C000-000000000046}]\r\n",
                   "Prop3=19,0\r\n",
                   f"{header}\r\n",
                   "IDList=\r\n",
                   "IconIndex=0\r\n",
                   "URL=steam://rungameid/1245620\r\n",
                   "IconFile=C:\\icons\\b6e290527743d5c6bbc1b7c5a48a3c5e41b5b3a1.ico\r\n"],
                  ParsedShortcut(key="1245620",
                                 icon="b6e290527743d5c6bbc1b7c5a48a3c5e41b5b3a1.ico")),
    # 2: no section at all
    ParseTestCase(["[Desktop Entry]",
                   "URL=steam://rungameid/5",
                   "IconFile=C:\\icons\\5.ico"]),
    # 3: header is case-sensitive
    ParseTestCase(["[internetshortcut]",
                   "URL=steam://rungameid/5",
                   "IconFile=C:\\icons\\5.ico"]),
    # 4: header must not carry whitespace
    ParseTestCase([" [InternetShortcut]",
                   "URL=steam://rungameid/5",
                   "IconFile=C:\\icons\\5.ico"]),
    # 5: empty file
    ParseTestCase([], err=IncompleteShortcutError),
    # 6: header, but nothing we recognize
    ParseTestCase([header, "URL=https://www.example.org/", "IconIndex=0"],
                  err=IncompleteShortcutError),
    # 7: key only
    ParseTestCase([header, "URL=steam://rungameid/730"], err=IncompleteShortcutError),
    # 8: icon only
    ParseTestCase([header, "IconFile=C:\\icons\\730.ico"], err=IncompleteShortcutError),
    # 9: duplicate key
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "URL=steam://rungameid/731",
                   "IconFile=C:\\icons\\730.ico"],
                  err=DuplicateKeyError),
    # 10: duplicate icon, even if it is the same one
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "IconFile=C:\\icons\\730.ico",
                   "IconFile=C:\\icons\\730.ico"],
                  err=DuplicateIconError),
    # 11: foreign icon directory
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "IconFile=D:\\elsewhere\\730.ico"],
                  err=IconDirectoryError),
    # 12: subdirectory of the icon directory is foreign, too
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "IconFile=C:\\icons\\sub\\730.ico"],
                  err=IconDirectoryError),
    # 13: matches before the section are ignored
    ParseTestCase(["URL=steam://rungameid/5",
                   "IconFile=C:\\icons\\5.ico",
                   header,
                   "URL=steam://rungameid/730",
                   "IconFile=C:\\icons\\730.ico"],
                  ParsedShortcut(key="730", icon="730.ico")),
    # 14: matches in a later section are ignored
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "IconFile=C:\\icons\\730.ico",
                   "[Other]",
                   "URL=steam://rungameid/5",
                   "IconFile=D:\\elsewhere\\5.ico"],
                  ParsedShortcut(key="730", icon="730.ico")),
    # 15: re-entering the section still counts as the same shortcut
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "[Other]",
                   header,
                   "URL=steam://rungameid/731"],
                  err=DuplicateKeyError),
    # 16: trailing content is not tolerated
    ParseTestCase([header,
                   "URL=steam://rungameid/730 ",
                   "IconFile=C:\\icons\\730.ico"],
                  err=IncompleteShortcutError),
    # 17: the icon basename must not contain a dot
    ParseTestCase([header,
                   "URL=steam://rungameid/730",
                   "IconFile=C:\\icons\\730.old.ico"],
                  err=IncompleteShortcutError),
    # 18: the key must be digits only
    ParseTestCase([header,
                   "URL=steam://rungameid/73a",
                   "IconFile=C:\\icons\\730.ico"],
                  err=IncompleteShortcutError),
    # 19: the directory is checked even if the key is missing
    ParseTestCase([header, "IconFile=C:\\Icons\\730.ico"], err=IconDirectoryError),
]


class TestParser(unittest.TestCase):
    """Test parsing shortcuts."""

    _parser: Optional[Parser] = None

    @classmethod
    def setUpClass(cls) -> None:
        """Prepare the testing environment."""
        common.set_basedir(test_dir)

    @classmethod
    def tearDownClass(cls) -> None:
        """Clean up afterwards."""
        shutil.rmtree(test_dir, ignore_errors=True)

    @classmethod
    def parser(cls) -> Parser:
        """Get the Parser."""
        if cls._parser is None:
            cls._parser = Parser(Config(icon_dir=icon_dir, separator="\\"))

        return cls._parser

    def test_01_parse_lines(self) -> None:
        """Test parsing lines of text."""
        p: Parser = self.parser()

        for i, c in enumerate(parse_cases):
            with self.subTest(i=i):
                if c.err is not None:
                    with self.assertRaises(c.err):
                        p.parse_lines(c.lines, f"case{i:02d}.url")
                else:
                    res = p.parse_lines(c.lines, f"case{i:02d}.url")
                    self.assertEqual(res, c.res)

    def test_02_error_names_file(self) -> None:
        """Test that error messages name the offending file and directory."""
        p: Parser = self.parser()

        with self.assertRaises(IconDirectoryError) as ctx:
            p.parse_lines([header,
                           "URL=steam://rungameid/730",
                           "IconFile=D:\\elsewhere\\730.ico"],
                          "Counter-Strike.url")

        msg: Final[str] = str(ctx.exception)
        self.assertIn("Counter-Strike.url", msg)
        self.assertIn("D:\\elsewhere\\", msg)

    def test_03_eligible(self) -> None:
        """Test the eligibility filter."""
        p: Parser = self.parser()
        cases: Final[list[tuple[str, EntryKind, bool]]] = [
            ("Game.url", EntryKind.File, True),
            ("Game.url", EntryKind.Directory, False),
            ("Game.url", EntryKind.Symlink, False),
            ("Game.url", EntryKind.Other, False),
            ("Game.lnk", EntryKind.File, False),
            ("Game.URL", EntryKind.File, False),
            ("Game.url.txt", EntryKind.File, False),
        ]

        for i, (name, kind, res) in enumerate(cases):
            with self.subTest(i=i):
                entry = ShortcutEntry(name=name,
                                      path=pathlib.Path(test_dir, name),
                                      kind=kind)
                self.assertEqual(p.eligible(entry), res)
                if not res:
                    # Ineligible entries are never opened, so the missing file is no problem.
                    self.assertIsNone(p.parse(entry))

    def test_04_parse_file(self) -> None:
        """Test parsing actual files."""
        p: Parser = self.parser()
        folder: Final[pathlib.Path] = pathlib.Path(test_dir, "files")
        folder.mkdir(parents=True, exist_ok=True)

        good = folder.joinpath("Good.url")
        good.write_bytes(b"\xef\xbb\xbf[InternetShortcut]\r\n"
                         b"URL=steam://rungameid/440\r\n"
                         b"IconFile=C:\\icons\\440.ico\r\n")
        res = p.parse(ShortcutEntry(name=good.name, path=good, kind=EntryKind.File))
        self.assertEqual(res, ParsedShortcut(key="440", icon="440.ico"))

        bad = folder.joinpath("Bad.url")
        bad.write_bytes(b"[InternetShortcut]\nURL=steam://rungameid/\xff\xfe\n")
        with self.assertRaises(ShortcutReadError):
            p.parse(ShortcutEntry(name=bad.name, path=bad, kind=EntryKind.File))

        gone = folder.joinpath("Gone.url")
        with self.assertRaises(ShortcutReadError):
            p.parse_file(ShortcutEntry(name=gone.name, path=gone, kind=EntryKind.File))

    def test_05_other_separator(self) -> None:
        """Test a Parser configured for slash-separated paths."""
        p: Parser = Parser(Config(icon_dir="/srv/icons", separator="/"))
        res = p.parse_lines([header,
                             "URL=steam://rungameid/570",
                             "IconFile=/srv/icons/570.ico"],
                            "Dota.url")
        self.assertEqual(res, ParsedShortcut(key="570", icon="570.ico"))

        with self.assertRaises(IncompleteShortcutError):
            p.parse_lines([header,
                           "URL=steam://rungameid/570",
                           "IconFile=C:\\icons\\570.ico"],
                          "Dota.url")


# Local Variables: #
# python-indent: 4 #
# End: #

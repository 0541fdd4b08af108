#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 14:02:11 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/common.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.common

(c) 2026 Benjamin Walkenhorst

Constants, paths and the logging setup shared by all modules.
"""


import logging
import logging.handlers
import os
import pathlib
import sys
from threading import Lock
from typing import Final, Optional, Union

AppName: Final[str] = "IconFetch"
AppVersion: Final[str] = "0.1.0"
TimeFmt: Final[str] = "%Y-%m-%d %H:%M:%S"
LogEnv: Final[str] = "ICONFETCH_LOG"

log_levels: Final[dict[str, int]] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 1,
}


class IconFetchError(Exception):
    """Base class for application-specific exceptions."""


class Path:
    """Holds the paths of folders and files used by the application"""

    __base: pathlib.Path

    def __init__(self, root: Union[str, pathlib.Path] = "") -> None:
        if root == "":
            root = pathlib.Path.home().joinpath(f".{AppName.lower()}")
        self.__base = pathlib.Path(root)

    def base(self, path: Optional[Union[str, pathlib.Path]] = None) -> pathlib.Path:
        """Return, and optionally set, the base directory."""
        if path is not None:
            self.__base = pathlib.Path(path)
        return self.__base

    @property
    def log(self) -> pathlib.Path:
        """Return the path to the log file."""
        return self.__base.joinpath(f"{AppName.lower()}.log")


path: Path = Path()

_lock: Final[Lock] = Lock()
_cache: dict[str, logging.Logger] = {}


def set_basedir(folder: Union[str, pathlib.Path]) -> None:
    """Set the base directory. Loggers created afterwards log to the new location."""
    with _lock:
        path.base(folder)
        init_app()


def init_app() -> None:
    """Make sure the base directory exists."""
    folder: Final[pathlib.Path] = path.base()
    if not folder.is_dir():
        print(f"Create base directory {folder}", file=sys.stderr)
        folder.mkdir(parents=True, exist_ok=True)


def console_level() -> int:
    """Return the console log level requested via the environment, default INFO."""
    name: Final[str] = os.environ.get(LogEnv, "info").strip().lower()
    return log_levels.get(name, logging.INFO)


def get_logger(name: str, terminal: bool = True) -> logging.Logger:
    """Create and return a logger with the given name.

    The logger writes everything to the log file in the base directory,
    and, if terminal is True, messages at the level configured via
    ICONFETCH_LOG to stderr.
    """
    with _lock:
        key: Final[str] = f"{path.base()}/{name}"
        if key in _cache:
            return _cache[key]

        init_app()

        log_format: Final[logging.Formatter] = logging.Formatter(
            "%(asctime)s (%(name)-8s / line %(lineno)-4d) - %(levelname)-8s %(message)s",
            datefmt=TimeFmt)

        log_obj = logging.getLogger(f"{AppName.lower()}.{name}")
        log_obj.setLevel(logging.DEBUG)
        log_obj.propagate = False
        for h in list(log_obj.handlers):
            log_obj.removeHandler(h)
            h.close()

        log_file = logging.handlers.RotatingFileHandler(path.log,
                                                        maxBytes=4 * 1024 * 1024,
                                                        backupCount=3,
                                                        encoding="utf-8")
        log_file.setFormatter(log_format)
        log_file.setLevel(logging.DEBUG)
        log_obj.addHandler(log_file)

        if terminal:
            log_console = logging.StreamHandler()
            log_console.setFormatter(log_format)
            log_console.setLevel(console_level())
            log_obj.addHandler(log_console)

        _cache[key] = log_obj
        return log_obj


# Local Variables: #
# python-indent: 4 #
# End: #

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 18:25:14 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/fetcher.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.fetcher

(c) 2026 Benjamin Walkenhorst

IconFetcher downloads missing icons from the CDN.
"""


import logging
import pathlib
from typing import Final, Optional

import requests

from iconfetch import common
from iconfetch.common import IconFetchError
from iconfetch.config import Config
from iconfetch.model import ParsedShortcut


class FetchError(IconFetchError):
    """FetchError indicates a failed download."""


class IconWriteError(IconFetchError):
    """IconWriteError indicates a downloaded icon could not be saved."""


class IconFetcher:
    """IconFetcher downloads icons and stores them in the icon directory."""

    __slots__ = [
        "log",
        "cfg",
        "session",
    ]

    log: logging.Logger
    cfg: Config
    session: requests.Session

    def __init__(self, cfg: Config, session: Optional[requests.Session] = None) -> None:
        self.log = common.get_logger("fetcher")
        self.cfg = cfg
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = f"{common.AppName.lower()}/{common.AppVersion}"
        self.session = session

    def __enter__(self) -> 'IconFetcher':
        return self

    def __exit__(self, ex_type, ex_val, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def url_for(self, shortcut: ParsedShortcut) -> str:
        """Return the CDN URL of the shortcut's icon."""
        return self.cfg.url_template.format(key=shortcut.key, icon=shortcut.icon)

    def target_for(self, shortcut: ParsedShortcut) -> pathlib.Path:
        """Return the local path the shortcut's icon is stored at."""
        return self.cfg.icon_path.joinpath(shortcut.icon)

    def fetch(self, shortcut: ParsedShortcut) -> bool:
        """Download the icon for a shortcut unless it is already present.

        Return True if an icon was downloaded, False if it existed already.
        """
        target: Final[pathlib.Path] = self.target_for(shortcut)
        if target.exists():
            self.log.info("Icon already exists for game #%s", shortcut.key)
            return False

        url: Final[str] = self.url_for(shortcut)
        self.log.debug("Download icon for game #%s from %s", shortcut.key, url)

        try:
            res = self.session.get(url, timeout=self.cfg.timeout)
            res.raise_for_status()
            body: Final[bytes] = res.content
        except requests.RequestException as err:
            cname: Final[str] = err.__class__.__name__
            raise FetchError(
                f"{cname} downloading icon for game #{shortcut.key} from {url}: {err}") from err

        try:
            with open(target, "xb") as fh:
                fh.write(body)
        except FileExistsError as err:
            raise IconWriteError(f"Icon file {target} appeared while downloading it") from err
        except OSError as err:
            target.unlink(missing_ok=True)
            raise IconWriteError(f"Failed to save icon file {target}: {err}") from err

        self.log.info("Saved icon for game #%s to %s (%d bytes)",
                      shortcut.key,
                      target,
                      len(body))
        return True


# Local Variables: #
# python-indent: 4 #
# End: #

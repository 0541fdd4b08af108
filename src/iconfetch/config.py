#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 15:20:43 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/config.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch.config

(c) 2026 Benjamin Walkenhorst

Config describes where icons live, what a shortcut looks like, and where
icons are downloaded from. Everything can be overridden through environment
variables, so the tool can be pointed at shortcuts from other platforms.
"""


import math
import os
import pathlib
import re
import sys
from dataclasses import dataclass, field
from typing import Final, Mapping, Optional

from iconfetch.common import IconFetchError

default_icon_dir: Final[str] = r"C:\Program Files (x86)\Steam\steam\games" + "\\"
default_section: Final[str] = "[InternetShortcut]"
default_extension: Final[str] = ".url"
default_key_pattern: Final[str] = r"^URL=steam://rungameid/(?P<key>\d+)$"
default_url_template: Final[str] = \
    "https://cdn.cloudflare.steamstatic.com/steamcommunity/public/images/apps/{key}/{icon}"
default_timeout: Final[float] = 30.0

env_prefix: Final[str] = "ICONFETCH_"


class ConfigError(IconFetchError):
    """ConfigError indicates a missing or invalid setting."""


def icon_pattern_for(sep: str) -> str:
    """Build the IconFile pattern for the given path separator."""
    esc: Final[str] = re.escape(sep)
    return rf"^IconFile=(?P<dir>.*{esc})(?P<icon>[^.{esc}]+\.ico)$"


def _compile(pattern: str, groups: tuple[str, ...], what: str) -> re.Pattern:
    try:
        pat = re.compile(pattern)
    except re.error as err:
        raise ConfigError(f"Invalid {what} pattern {pattern!r}: {err}") from err
    for g in groups:
        if g not in pat.groupindex:
            raise ConfigError(f"The {what} pattern {pattern!r} lacks the named group '{g}'")
    return pat


@dataclass(kw_only=True, slots=True)
class Config:
    """Config holds the settings for one run."""

    icon_dir: str
    separator: str = "\\"
    section: str = default_section
    extension: str = default_extension
    key_pattern: str = default_key_pattern
    icon_pattern: Optional[str] = None
    url_template: str = default_url_template
    timeout: float = default_timeout
    key_rx: re.Pattern = field(init=False, repr=False)
    icon_rx: re.Pattern = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.separator == "":
            raise ConfigError("Path separator must not be empty")
        if self.icon_dir == "":
            raise ConfigError("Icon directory must not be empty")
        if not self.icon_dir.endswith(self.separator):
            self.icon_dir += self.separator
        if self.section == "":
            raise ConfigError("Section header must not be empty")
        if self.icon_pattern is None:
            self.icon_pattern = icon_pattern_for(self.separator)
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigError(f"Timeout must be a positive, finite number, not {self.timeout}")
        for placeholder in ("{key}", "{icon}"):
            if placeholder not in self.url_template:
                raise ConfigError(
                    f"URL template {self.url_template!r} does not reference {placeholder}")

        try:
            self.url_template.format(key="0", icon="x.ico")
        except (KeyError, IndexError, ValueError) as err:
            cname: Final[str] = err.__class__.__name__
            raise ConfigError(
                f"URL template {self.url_template!r} cannot be filled in: {cname} {err}") from err

        self.key_rx = _compile(self.key_pattern, ("key", ), "key")
        self.icon_rx = _compile(self.icon_pattern, ("dir", "icon"), "icon")

    @property
    def icon_path(self) -> pathlib.Path:
        """Return the icon directory as a Path."""
        return pathlib.Path(self.icon_dir)

    def check_icon_dir(self) -> None:
        """Raise ConfigError unless the icon directory exists and is a directory."""
        if not self.icon_path.is_dir():
            raise ConfigError(
                f"Icon directory {self.icon_dir} does not exist or is not a directory")

    @classmethod
    def from_env(cls,
                 environ: Optional[Mapping[str, str]] = None,
                 platform: str = sys.platform) -> 'Config':
        """Create a Config from ICONFETCH_* environment variables.

        On Windows, the Steam defaults apply. On any other platform, the
        icon directory must be given explicitly.
        """
        env: Final[Mapping[str, str]] = os.environ if environ is None else environ
        windows: Final[bool] = platform == "win32"

        def get(name: str, default: Optional[str] = None) -> Optional[str]:
            val = env.get(env_prefix + name)
            if val is None or val == "":
                return default
            return val

        icon_dir = get("ICON_DIR", default_icon_dir if windows else None)
        if icon_dir is None:
            raise ConfigError(
                f"Platform {platform} has no default icon directory, "
                f"please set {env_prefix}ICON_DIR")

        raw_timeout = get("TIMEOUT", str(default_timeout))
        try:
            timeout = float(raw_timeout)  # type: ignore
        except ValueError as err:
            raise ConfigError(f"Invalid timeout {raw_timeout!r}") from err

        return cls(
            icon_dir=icon_dir,
            separator=get("PATH_SEP", "\\" if windows else os.sep),  # type: ignore
            section=get("SECTION", default_section),  # type: ignore
            extension=get("EXTENSION", default_extension),  # type: ignore
            key_pattern=get("KEY_PATTERN", default_key_pattern),  # type: ignore
            icon_pattern=get("ICON_PATTERN"),
            url_template=get("URL_TEMPLATE", default_url_template),  # type: ignore
            timeout=timeout,
        )


# Local Variables: #
# python-indent: 4 #
# End: #

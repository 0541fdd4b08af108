#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 14:00:02 krylon>
#
# /data/code/python/iconfetch/src/iconfetch/__init__.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the iconfetch shortcut icon restorer. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
iconfetch

Restore missing icons of Steam game shortcuts.
"""

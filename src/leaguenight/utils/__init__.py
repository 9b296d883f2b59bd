"""Shared utilities for League Night."""

# League Night
# Copyright (C) 2025  League Night developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os

from leaguenight.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

ROOT_LOGGER_NAME = "leaguenight"


def _configure_root_logger() -> logging.Logger:
    """Install a single stream handler on the package logger."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

        level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
        level = getattr(logging, level_name, None)
        if not isinstance(level, int):
            level = logging.WARNING
        root.setLevel(level)
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package logger hierarchy.

    Args:
        name: Usually the calling module's ``__name__``

    Returns:
        A configured logger. Calling this repeatedly never adds extra handlers.
    """
    _configure_root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the level of every League Night logger at once."""
    _configure_root_logger().setLevel(level)


def ordinal(n: int) -> str:
    """Format a place as an English ordinal: 1 -> "1st", 12 -> "12th"."""
    if not n:
        return str(n)
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"

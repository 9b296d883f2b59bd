"""Testing module for League Night.

This module provides the Random Event Generator (REG), which plays synthetic
league nights for tests and for the ``leaguenight generate`` command.
"""

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

from leaguenight.testing.reg import RandomEventGenerator, REGConfig, ScorePattern

__all__ = [
    "RandomEventGenerator",
    "REGConfig",
    "ScorePattern",
]

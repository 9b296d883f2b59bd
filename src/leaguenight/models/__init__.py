"""Data models for League Night."""

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

from leaguenight.models.court import Court, CourtDetail, MatchScore
from leaguenight.models.event_config import EventConfig, load_event, save_event
from leaguenight.models.player_stats import FinalPosition, PlayerStats, SeedTotals
from leaguenight.models.season import (
    AllTimeStanding,
    NightResult,
    Season,
    SeasonStanding,
)

__all__ = [
    "Court",
    "CourtDetail",
    "MatchScore",
    "EventConfig",
    "load_event",
    "save_event",
    "FinalPosition",
    "PlayerStats",
    "SeedTotals",
    "AllTimeStanding",
    "NightResult",
    "Season",
    "SeasonStanding",
]

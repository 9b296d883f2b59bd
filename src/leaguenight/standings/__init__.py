"""Standings for League Night rounds.

This package aggregates match scores, ranks players and moves them into the
next round's courts, and rolls finished nights up into season standings.
It depends on ``leaguenight.seeding`` and never the other way round.
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

from leaguenight.standings.aggregator import MatchAggregator
from leaguenight.standings.final_positions import (
    calculate_final_positions,
    points_for_rank,
)
from leaguenight.standings.next_round import (
    NextRoundAssigner,
    generate_next_round_courts,
)
from leaguenight.standings.ranking_engine import RankingEngine, has_scores
from leaguenight.standings.season import all_time_standings, season_standings

__all__ = [
    "MatchAggregator",
    "calculate_final_positions",
    "points_for_rank",
    "NextRoundAssigner",
    "generate_next_round_courts",
    "RankingEngine",
    "has_scores",
    "all_time_standings",
    "season_standings",
]

"""Season and all-time standings rolled up from completed nights."""

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

from typing import Dict, List, Sequence, Tuple

from leaguenight.constants import PLAYERS_PER_COURT
from leaguenight.models.season import (
    AllTimeStanding,
    NightResult,
    Season,
    SeasonStanding,
)
from leaguenight.utils import setup_logger

logger = setup_logger(__name__)


def season_key(standing: SeasonStanding) -> Tuple[int, int, int]:
    """Sort key of season standings: points, then wins, then differential."""
    return (-standing.points, -standing.wins, -standing.point_differential)


def season_standings(nights: Sequence[NightResult]) -> List[SeasonStanding]:
    """Roll completed nights up into season standings, best first.

    Each completed night adds its league points, wins and point differential
    to every player who finished it, counts one appearance and records the
    night's rank. Finishing in ranks 1-4 counts as a champ court night.
    Players level on all three keys keep the order they first appeared in.
    """
    totals: Dict[str, SeasonStanding] = {}

    for night in nights:
        if not night.is_completed:
            logger.debug("Skipping night %r: not completed", night.name)
            continue

        for fp in night.positions:
            standing = totals.setdefault(fp.name, SeasonStanding(name=fp.name))
            standing.points += fp.points
            standing.appearances += 1
            standing.wins += fp.wins
            standing.point_differential += fp.point_differential
            standing.weekly_ranks.append(fp.rank)
            if fp.rank <= PLAYERS_PER_COURT:
                standing.champ_court += 1

    ranked = sorted(totals.values(), key=season_key)
    for rank, standing in enumerate(ranked, start=1):
        standing.rank = rank
    return ranked


def all_time_standings(seasons: Sequence[Season]) -> List[AllTimeStanding]:
    """Sum season points per player across ``seasons``, best first.

    A season with stored standings uses them as they are. Any other season
    is derived from its nights.
    """
    totals: Dict[str, AllTimeStanding] = {}

    for season in seasons:
        standings = season.standings or season_standings(season.nights)
        for standing in standings:
            entry = totals.setdefault(standing.name, AllTimeStanding(name=standing.name))
            entry.points += standing.points
            entry.seasons += 1

    ranked = sorted(totals.values(), key=lambda s: -s.points)
    for rank, entry in enumerate(ranked, start=1):
        entry.rank = rank

    logger.debug("All-time standings over %d seasons: %d players", len(seasons), len(ranked))
    return ranked

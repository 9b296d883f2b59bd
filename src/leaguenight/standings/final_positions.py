"""Final positions and league points after the last round."""

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

from typing import List, Optional, Sequence, Tuple

from leaguenight.constants import DEFAULT_POINTS_TABLE, PLAYERS_PER_COURT
from leaguenight.exceptions import EmptyInputError
from leaguenight.models.player_stats import FinalPosition, PlayerStats
from leaguenight.standings.ranking_engine import display_key
from leaguenight.type_hints import PointsTable


def points_for_rank(rank: int, points_table: Optional[PointsTable] = None) -> int:
    """League points earned by the player finishing ``rank`` overall.

    Rank 1..4 finished on court 1, 5..8 on court 2 and so on. Ranks the table
    does not cover earn nothing.
    """
    table = DEFAULT_POINTS_TABLE if points_table is None else points_table
    if rank < 1:
        return 0
    court, position = final_court_and_position(rank)
    court_points = table.get(court, [])
    if position > len(court_points):
        return 0
    return court_points[position - 1]


def final_court_and_position(rank: int) -> Tuple[int, int]:
    """(court, position) for an overall rank: 6 -> (2, 2)."""
    court = (rank - 1) // PLAYERS_PER_COURT + 1
    position = (rank - 1) % PLAYERS_PER_COURT + 1
    return court, position


def calculate_final_positions(
    players: Sequence[PlayerStats],
    points_table: Optional[PointsTable] = None,
) -> List[FinalPosition]:
    """Overall finish of every player, best first.

    The night's standings are the final round's display order: court 1's
    players by court place, then court 2's, and so on.

    Raises:
        EmptyInputError: If no players are given
    """
    if not players:
        raise EmptyInputError("Cannot compute final positions: no players given")

    results = []
    for rank, player in enumerate(sorted(players, key=display_key), start=1):
        court, position = final_court_and_position(rank)
        results.append(
            FinalPosition(
                name=player.name,
                rank=rank,
                court=court,
                position=position,
                points=points_for_rank(rank, points_table),
                wins=player.wins,
                point_differential=player.point_differential,
            )
        )
    return results

"""Calculator entry points used by the surrounding event application.

These combine the seeding and standings components into the calls an event
screen needs: court details for a round, player rankings with next-round
placement, a night's final standings and the season tables built from them.
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

from typing import List, Optional, Sequence

from leaguenight.constants import FINAL_ROUND
from leaguenight.exceptions import EmptyInputError
from leaguenight.models.court import Court, CourtDetail
from leaguenight.models.event_config import EventConfig
from leaguenight.models.player_stats import FinalPosition, PlayerStats
from leaguenight.models.season import (
    AllTimeStanding,
    NightResult,
    Season,
    SeasonStanding,
)
from leaguenight.seeding.layout import event_seed_layout
from leaguenight.seeding.tiers import tier_labels_for_layout
from leaguenight.standings.final_positions import calculate_final_positions
from leaguenight.standings.next_round import (
    NextRoundAssigner,
    generate_next_round_courts,
)
from leaguenight.standings.ranking_engine import RankingEngine, has_scores
from leaguenight.standings.season import all_time_standings, season_standings
from leaguenight.type_hints import PointsTable
from leaguenight.utils import setup_logger

logger = setup_logger(__name__)


def calculate_court_details(
    courts: Sequence[Court],
    round_number: int,
    player_count: Optional[int] = None,
    use_legacy_layouts: bool = True,
) -> List[CourtDetail]:
    """Seeds and tier label of every court in a round.

    A court the layout leaves empty has seeds ``[0, 0, 0, 0]`` and tier ``""``.

    Raises:
        EmptyInputError: If no courts are given
        InvalidRoundError: If the round is not 1, 2 or 3
    """
    if not courts:
        logger.error("Cannot calculate court details: no courts given")
        raise EmptyInputError("Cannot calculate court details: no courts given")

    layout = event_seed_layout(len(courts), round_number, player_count, use_legacy_layouts)
    labels = tier_labels_for_layout(layout, round_number)

    return [
        CourtDetail(
            round=round_number,
            seeds=layout[index],
            tier=labels[index],
            court_number=court.court_number or index + 1,
            player_names=list(court.player_names),
        )
        for index, court in enumerate(courts)
    ]


def calculate_player_rankings(
    courts: Sequence[Court],
    round_number: int,
    player_count: Optional[int] = None,
    use_legacy_layouts: bool = True,
) -> List[PlayerStats]:
    """Rank a round's players and place them into the next round.

    Args:
        courts: The round's courts, court 1 first
        round_number: Round being ranked (1..3)
        player_count: Total players in the event, defaults to four per court
        use_legacy_layouts: Consult the historical 12/16 player tables

    Returns:
        PlayerStats in display order with round place, next court and next
        tier filled in.

    Raises:
        EmptyInputError: If no courts are given
        InvalidRoundError: If the round is not 1, 2 or 3
    """
    players = RankingEngine().rank(
        courts,
        round_number,
        player_count=player_count,
        use_legacy_layouts=use_legacy_layouts,
    )
    return NextRoundAssigner(use_legacy_layouts).assign(
        players,
        round_number,
        len(courts),
        player_count=player_count,
        scores_entered=has_scores(courts),
    )


def calculate_event_rankings(config: EventConfig) -> List[PlayerStats]:
    """Rankings for the current round of an event snapshot."""
    return calculate_player_rankings(
        config.courts,
        config.round,
        player_count=config.total_players,
        use_legacy_layouts=config.use_legacy_layouts,
    )


def calculate_next_round_courts(
    courts: Sequence[Court],
    round_number: int,
    player_count: Optional[int] = None,
    use_legacy_layouts: bool = True,
) -> List[Court]:
    """Courts of the round after ``round_number``, filled from its ranking."""
    players = RankingEngine().rank(
        courts,
        round_number,
        player_count=player_count,
        use_legacy_layouts=use_legacy_layouts,
    )
    return generate_next_round_courts(
        players,
        round_number,
        len(courts),
        scores_entered=has_scores(courts),
        player_count=player_count,
        use_legacy_layouts=use_legacy_layouts,
    )


def calculate_final_standings(
    courts: Sequence[Court],
    round_number: int,
    points_table: Optional[PointsTable] = None,
    player_count: Optional[int] = None,
    use_legacy_layouts: bool = True,
) -> List[FinalPosition]:
    """Overall finish and league points from a round's courts.

    Meant for the final round; on earlier rounds it reports the standings
    as they stand.
    """
    players = RankingEngine().rank(
        courts,
        round_number,
        player_count=player_count,
        use_legacy_layouts=use_legacy_layouts,
    )
    return calculate_final_positions(players, points_table)


def calculate_night_result(config: EventConfig) -> NightResult:
    """Final positions of an event snapshot, ready to add to a season.

    The night counts as completed once its snapshot is at the final round.
    """
    positions = calculate_final_standings(
        config.courts,
        config.round,
        config.points_table,
        player_count=config.total_players,
        use_legacy_layouts=config.use_legacy_layouts,
    )
    return NightResult(
        name=config.name,
        positions=positions,
        is_completed=config.round == FINAL_ROUND,
    )


def calculate_season_standings(season: Season) -> List[SeasonStanding]:
    """Season standings from a season's completed nights."""
    return season_standings(season.nights)


def calculate_all_time_standings(
    current_season: Season, past_seasons: Sequence[Season] = ()
) -> List[AllTimeStanding]:
    """All-time standings over the current season and any past seasons.

    The current season is always derived from its nights; past seasons use
    their stored standings when they have them.
    """
    current = Season(name=current_season.name, nights=current_season.nights)
    return all_time_standings([current, *past_seasons])

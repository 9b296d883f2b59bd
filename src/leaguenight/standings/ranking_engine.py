"""Ranking of a round's players.

This module turns the courts of a round into a fully ordered list of
``PlayerStats``. Two orders are produced:

- ``round_place``: the field-wide ranking (wins, then point differential,
  then seed) that seeds the next round.
- the returned list order: a display order grouped by tier and court place.
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

from typing import Dict, List, Optional, Sequence, Tuple

from leaguenight.constants import EMPTY_PLAYER_NAME
from leaguenight.exceptions import EmptyInputError, InvalidCourtCountError
from leaguenight.models.court import Court
from leaguenight.models.player_stats import PlayerStats, SeedTotals
from leaguenight.seeding.layout import event_seed_layout
from leaguenight.seeding.tiers import tier_labels_for_layout, tier_ordinal
from leaguenight.standings.aggregator import MatchAggregator
from leaguenight.utils import setup_logger
from leaguenight.utils.validation import validate_round_strict

logger = setup_logger(__name__)


def performance_key(wins: int, point_differential: int, seed: int) -> Tuple[int, int, int]:
    """Sort key shared by court and round rankings. Lower sorts first."""
    return (-wins, -point_differential, seed)


def display_key(player: PlayerStats) -> Tuple[int, int, int, int, int]:
    """Sort key of the returned display order."""
    return (
        player.tier,
        player.court_place,
        -player.wins,
        -player.point_differential,
        player.seed,
    )


def has_scores(courts: Sequence[Court]) -> bool:
    """True once any match on any court has contributed wins or points."""
    for court in courts:
        for score in court.matches:
            if score.is_complete and (score.team_a or score.team_b):
                return True
    return False


class RankingEngine:
    """Ranks every player of a round.

    The engine holds no state between calls: each ranking is recomputed from
    the courts it is given.
    """

    def __init__(self, aggregator: Optional[MatchAggregator] = None):
        self.aggregator = aggregator or MatchAggregator()

    def rank(
        self,
        courts: Sequence[Court],
        round_number: int,
        *,
        court_count: Optional[int] = None,
        player_count: Optional[int] = None,
        use_legacy_layouts: bool = True,
    ) -> List[PlayerStats]:
        """Rank all players of a round.

        The round comes right after the courts; the remaining arguments are
        keyword-only, since each of them is optional and derived from
        ``courts`` when left out.

        Args:
            courts: The round's courts, court 1 first
            round_number: Round being ranked (1..3)
            court_count: Expected number of courts, defaults to ``len(courts)``
            player_count: Total players in the event, defaults to four per court
            use_legacy_layouts: Consult the historical 12/16 player tables

        Returns:
            PlayerStats in display order (tier, court place, wins, point
            differential, seed), with ``round_place`` set from the field-wide
            ranking. Courts the layout leaves empty contribute no players.
            ``next_court``/``next_tier`` are left unset.

        Raises:
            EmptyInputError: If no courts are given
            InvalidRoundError: If the round is not 1, 2 or 3
            InvalidCourtCountError: If ``court_count`` does not match the courts
        """
        if not courts:
            logger.error("Cannot rank players: no courts given")
            raise EmptyInputError("Cannot rank players: no courts given")
        validate_round_strict(round_number)

        if court_count is None:
            court_count = len(courts)
        if court_count != len(courts):
            message = f"Court count {court_count} does not match {len(courts)} courts given"
            logger.error(message)
            raise InvalidCourtCountError(message)

        layout = event_seed_layout(
            court_count, round_number, player_count, use_legacy_layouts
        )
        labels = tier_labels_for_layout(layout, round_number)

        players: List[PlayerStats] = []
        for court_index, court in enumerate(courts):
            seeds = layout[court_index]
            if not labels[court_index]:
                continue
            totals = self.aggregator.aggregate(court, seeds)
            players.extend(
                self._rank_court(
                    court, court_index + 1, seeds, totals, tier_ordinal(labels[court_index])
                )
            )

        self._assign_round_places(players)
        players.sort(key=display_key)

        logger.debug(
            "Ranked %d players for round %d: %s",
            len(players),
            round_number,
            [(p.name, p.round_place) for p in players],
        )
        return players

    def _rank_court(
        self,
        court: Court,
        court_number: int,
        seeds: Sequence[int],
        totals: Dict[int, SeedTotals],
        tier: int,
    ) -> List[PlayerStats]:
        """Build a court's PlayerStats with court places 1..4."""
        court_players = [
            PlayerStats(
                name=name or EMPTY_PLAYER_NAME,
                seed=seed,
                tier=tier,
                wins=totals[seed].wins,
                losses=totals[seed].losses,
                point_differential=totals[seed].point_differential,
                court_number=court_number,
            )
            for name, seed in zip(court.player_names, seeds)
        ]

        court_players.sort(
            key=lambda p: performance_key(p.wins, p.point_differential, p.seed)
        )
        for place, player in enumerate(court_players, start=1):
            player.court_place = place
        return court_players

    def _assign_round_places(self, players: List[PlayerStats]) -> None:
        ranked = sorted(
            players,
            key=lambda p: performance_key(p.wins, p.point_differential, p.seed),
        )
        for place, player in enumerate(ranked, start=1):
            player.round_place = place

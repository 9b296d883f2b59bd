"""Next-round court and tier assignment.

A player's round place becomes their seed for the next round, and the next
round's seed layout says which court that seed plays on.
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

from typing import Dict, List, Optional, Sequence

from leaguenight.constants import (
    EMPTY_PLAYER_NAME,
    EMPTY_SEED,
    FINAL_ROUND,
    FIRST_ROUND,
    PLAYERS_PER_COURT,
)
from leaguenight.exceptions import EmptyInputError, InvalidRoundError
from leaguenight.models.court import Court
from leaguenight.models.player_stats import PlayerStats
from leaguenight.seeding.layout import event_seed_layout, seed_to_court_map
from leaguenight.seeding.tiers import tier_labels_for_layout
from leaguenight.utils import setup_logger
from leaguenight.utils.validation import (
    validate_court_count_strict,
    validate_round_strict,
)

logger = setup_logger(__name__)


def _lookup_key(player: PlayerStats, round_number: int, scores_entered: bool) -> int:
    # Before any play in round 1 every player is tied, so keep entry seeds
    if not scores_entered and round_number == FIRST_ROUND:
        return player.seed
    return player.round_place


class NextRoundAssigner:
    """Fills in ``next_court`` and ``next_tier`` on ranked players."""

    def __init__(self, use_legacy_layouts: bool = True):
        self.use_legacy_layouts = use_legacy_layouts

    def assign(
        self,
        players: List[PlayerStats],
        round_number: int,
        court_count: int,
        player_count: Optional[int] = None,
        scores_entered: bool = True,
    ) -> List[PlayerStats]:
        """Assign every player a court and tier for the following round.

        Args:
            players: Ranked players with ``round_place`` set
            round_number: Round just ranked (1..3)
            court_count: Courts in the event
            player_count: Total players, defaults to ``4 * court_count``
            scores_entered: False while no match has a score yet

        Returns:
            The same list, updated in place. After the final round every
            player keeps ``next_court == 0`` and ``next_tier == ""``.

        Raises:
            InvalidRoundError: If the round is not 1, 2 or 3
            InvalidCourtCountError: If ``court_count`` is not positive
        """
        validate_round_strict(round_number)
        validate_court_count_strict(court_count)

        if round_number == FINAL_ROUND:
            for player in players:
                player.next_court = 0
                player.next_tier = ""
            return players

        if player_count is None:
            player_count = court_count * PLAYERS_PER_COURT

        next_round = min(FINAL_ROUND, round_number + 1)
        layout = event_seed_layout(
            court_count, next_round, player_count, self.use_legacy_layouts
        )
        labels = tier_labels_for_layout(layout, next_round)
        seed_to_court = seed_to_court_map(layout)

        for player in players:
            key = _lookup_key(player, round_number, scores_entered)
            next_court = seed_to_court.get(key, 0)
            if next_court:
                player.next_court = next_court
                player.next_tier = labels[next_court - 1]
            else:
                if key != EMPTY_SEED:
                    logger.warning(
                        "No round %d court for %s (key %d)", next_round, player.name, key
                    )
                player.next_court = 0
                player.next_tier = ""

        return players


def generate_next_round_courts(
    players: Sequence[PlayerStats],
    round_number: int,
    court_count: Optional[int] = None,
    scores_entered: bool = True,
    player_count: Optional[int] = None,
    use_legacy_layouts: bool = True,
) -> List[Court]:
    """Build the next round's courts from a ranking.

    Each court's slots follow the next round's seed layout, filled with the
    player whose round place equals that seed. Courts the layout leaves
    empty are filled with placeholder names.

    Raises:
        EmptyInputError: If no players are given
        InvalidRoundError: If ``round_number`` is the final round or invalid
    """
    if not players:
        raise EmptyInputError("Cannot build next round courts: no players given")
    validate_round_strict(round_number)
    if round_number == FINAL_ROUND:
        message = f"Round {FINAL_ROUND} is the final round, there is no next round"
        logger.error(message)
        raise InvalidRoundError(message)

    if court_count is None:
        court_count = -(-len(players) // PLAYERS_PER_COURT)

    next_round = round_number + 1
    by_key: Dict[int, str] = {
        _lookup_key(p, round_number, scores_entered): p.name for p in players
    }
    layout = event_seed_layout(court_count, next_round, player_count, use_legacy_layouts)

    courts = []
    for court_number, seeds in enumerate(layout, start=1):
        names = [by_key.get(seed, EMPTY_PLAYER_NAME) for seed in seeds]
        courts.append(Court(player_names=names, court_number=court_number))

    logger.info(
        "Built %d courts for round %d from %d players",
        len(courts),
        next_round,
        len(players),
    )
    return courts

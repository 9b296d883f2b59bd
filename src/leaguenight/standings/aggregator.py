"""Match aggregation for a single court.

Turns a court's three fixed-pairing scores into per-seed totals.
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

from typing import Dict, Sequence

from leaguenight.constants import MATCH_PAIRINGS, PLAYERS_PER_COURT
from leaguenight.exceptions import InvalidCourtError
from leaguenight.models.court import Court
from leaguenight.models.player_stats import SeedTotals
from leaguenight.type_hints import TeamSlots
from leaguenight.utils import setup_logger

logger = setup_logger(__name__)


class MatchAggregator:
    """Aggregates a court's match scores into per-seed totals.

    Every call rebuilds the totals from the full court state, so editing or
    clearing a score and aggregating again always gives the right answer.
    """

    def aggregate(self, court: Court, seeds: Sequence[int]) -> Dict[int, SeedTotals]:
        """Totals for each seed on ``court``.

        Args:
            court: The court, players in slot order
            seeds: Seed held by each of the court's four slots

        Returns:
            Dictionary of seed -> SeedTotals, one entry per slot

        Raises:
            InvalidCourtError: If ``seeds`` does not cover four distinct slots
        """
        if len(seeds) != PLAYERS_PER_COURT or len(set(seeds)) != PLAYERS_PER_COURT:
            raise InvalidCourtError(
                f"Court {court.court_number} needs {PLAYERS_PER_COURT} distinct seeds, "
                f"got {list(seeds)}"
            )

        totals = {seed: SeedTotals() for seed in seeds}

        for match_index, (team_a, team_b) in enumerate(MATCH_PAIRINGS):
            score = court.score_for(match_index)
            if not score.is_complete:
                continue

            self._add_team(totals, seeds, team_a, score.team_a, score.team_b)
            self._add_team(totals, seeds, team_b, score.team_b, score.team_a)

            if score.team_a > score.team_b:
                self._add_win(totals, seeds, team_a)
            elif score.team_b > score.team_a:
                self._add_win(totals, seeds, team_b)

        logger.debug("Court %d totals: %s", court.court_number, totals)
        return totals

    def _add_team(
        self,
        totals: Dict[int, SeedTotals],
        seeds: Sequence[int],
        team: TeamSlots,
        points_for: int,
        points_against: int,
    ) -> None:
        for slot in team:
            entry = totals[seeds[slot]]
            entry.points_for += points_for
            entry.points_against += points_against
            entry.played += 1

    def _add_win(
        self, totals: Dict[int, SeedTotals], seeds: Sequence[int], team: TeamSlots
    ) -> None:
        for slot in team:
            totals[seeds[slot]].wins += 1

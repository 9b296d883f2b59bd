"""Per-player results derived from a round's courts."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass
class SeedTotals:
    """Raw match totals for one seed on one court."""

    points_for: int = 0
    points_against: int = 0
    wins: int = 0
    played: int = 0

    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against

    @property
    def losses(self) -> int:
        # A tied match is played but not won, so it counts here
        return max(0, self.played - self.wins)


@dataclass
class PlayerStats:
    """A player's standing after (or during) a round.

    Attributes
    ----------
    name : str
        Player name from the court slot.
    seed : int
        Seed the player held entering this round.
    tier : int
        0-based division of the player's court (A=0, B=1, ...).
    court_place : int
        1..4 finish among the player's own court.
    wins, losses : int
        Match record for the round.
    point_differential : int
        Points for minus points against.
    round_place : int
        1-based rank across the whole field.
    next_court : int
        Court for the next round, 0 after the final round.
    next_tier : str
        Tier label of ``next_court``, empty after the final round.
    court_number : int
        Court the player is on this round.
    """

    name: str
    seed: int
    tier: int = 0
    court_place: int = 0
    wins: int = 0
    losses: int = 0
    point_differential: int = 0
    round_place: int = 0
    next_court: int = 0
    next_tier: str = ""
    court_number: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player stats to dictionary."""
        return asdict(self)


@dataclass
class FinalPosition:
    """Where a player finished the night and the league points earned."""

    name: str
    rank: int
    court: int
    position: int
    points: int = 0
    wins: int = 0
    point_differential: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize final position to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinalPosition":
        """Deserialize final position from dictionary."""
        return cls(
            name=data["name"],
            rank=data["rank"],
            court=data["court"],
            position=data["position"],
            points=data.get("points", 0),
            wins=data.get("wins", 0),
            point_differential=data.get("point_differential", 0),
        )

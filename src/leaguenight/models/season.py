"""Season records: completed nights and the standings rolled up from them."""

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

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from leaguenight.models.player_stats import FinalPosition


@dataclass
class NightResult:
    """Final positions of one league night.

    Only completed nights count towards a season.
    """

    name: str
    positions: List[FinalPosition] = field(default_factory=list)
    is_completed: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize night result to dictionary."""
        return {
            "name": self.name,
            "positions": [p.to_dict() for p in self.positions],
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NightResult":
        """Deserialize night result from dictionary."""
        return cls(
            name=data.get("name", ""),
            positions=[FinalPosition.from_dict(p) for p in data.get("positions", [])],
            is_completed=data.get("is_completed", True),
        )


@dataclass
class SeasonStanding:
    """A player's season totals.

    Attributes
    ----------
    name : str
        Player name.
    points : int
        League points summed over completed nights.
    appearances : int
        Completed nights the player finished.
    wins, point_differential : int
        Final-round record summed over those nights.
    weekly_ranks : list of int
        Overall rank of each night, in night order.
    champ_court : int
        Nights finished on court 1 (ranks 1-4).
    rank : int
        1-based place in the season standings.
    """

    name: str
    points: int = 0
    appearances: int = 0
    wins: int = 0
    point_differential: int = 0
    weekly_ranks: List[int] = field(default_factory=list)
    champ_court: int = 0
    rank: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize season standing to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SeasonStanding":
        """Deserialize season standing from dictionary."""
        return cls(
            name=data["name"],
            points=data.get("points", 0),
            appearances=data.get("appearances", 0),
            wins=data.get("wins", 0),
            point_differential=data.get("point_differential", 0),
            weekly_ranks=list(data.get("weekly_ranks", [])),
            champ_court=data.get("champ_court", 0),
            rank=data.get("rank", 0),
        )


@dataclass
class Season:
    """A season of league nights.

    ``standings`` holds stored final standings of a closed season. When it is
    empty the standings are derived from ``nights``.
    """

    name: str
    nights: List[NightResult] = field(default_factory=list)
    standings: List[SeasonStanding] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize season to dictionary."""
        return {
            "name": self.name,
            "nights": [n.to_dict() for n in self.nights],
            "standings": [s.to_dict() for s in self.standings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Season":
        """Deserialize season from dictionary."""
        return cls(
            name=data.get("name", ""),
            nights=[NightResult.from_dict(n) for n in data.get("nights", [])],
            standings=[SeasonStanding.from_dict(s) for s in data.get("standings", [])],
        )


@dataclass
class AllTimeStanding:
    """Season points summed over every season a player took part in."""

    name: str
    points: int = 0
    seasons: int = 0
    rank: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize all-time standing to dictionary."""
        return asdict(self)

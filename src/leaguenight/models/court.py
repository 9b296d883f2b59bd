"""Court and match score data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from leaguenight.constants import MATCHES_PER_COURT, PLAYERS_PER_COURT
from leaguenight.exceptions import InvalidCourtError
from leaguenight.utils.validation import validate_score_strict

# Key pairs accepted for a score written as a mapping
_SCORE_KEY_STYLES = (
    ("team_a", "team_b"),
    ("scoreA", "scoreB"),
    ("a", "b"),
)


@dataclass(frozen=True)
class MatchScore:
    """Points for one of a court's three fixed pairings.

    Attributes
    ----------
    team_a : int or None
        Points scored by the first team of the pairing.
    team_b : int or None
        Points scored by the second team of the pairing.

    A match only counts once both sides are set.
    """

    team_a: Optional[int] = None
    team_b: Optional[int] = None

    def __post_init__(self) -> None:
        validate_score_strict(self.team_a)
        validate_score_strict(self.team_b)

    @property
    def is_complete(self) -> bool:
        """True when both teams have a score."""
        return self.team_a is not None and self.team_b is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match score to dictionary."""
        return {"team_a": self.team_a, "team_b": self.team_b}

    @classmethod
    def from_dict(cls, data: Any) -> "MatchScore":
        """Build a score from any of the shapes callers store.

        Accepts ``None`` (unplayed), a ``(a, b)`` pair, an existing
        ``MatchScore`` or a mapping keyed ``team_a``/``team_b``,
        ``scoreA``/``scoreB`` or ``a``/``b``.
        """
        if data is None:
            return cls()
        if isinstance(data, MatchScore):
            return data
        if isinstance(data, dict):
            for key_a, key_b in _SCORE_KEY_STYLES:
                if key_a in data or key_b in data:
                    return cls(team_a=data.get(key_a), team_b=data.get(key_b))
            return cls()
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return cls(team_a=data[0], team_b=data[1])
        raise InvalidCourtError(f"Unrecognised match score: {data!r}")


@dataclass
class Court:
    """One court of four players and their three fixed-pairing matches.

    Attributes
    ----------
    player_names : list of str
        Names in slot order 0..3. Slots are fixed for the whole round.
    matches : list of MatchScore
        Up to three scores, in pairing order. Missing entries are unplayed.
    court_number : int
        1-based position among the event's courts, 0 when not yet known.
    """

    player_names: List[str]
    matches: List[MatchScore] = field(default_factory=list)
    court_number: int = 0

    def __post_init__(self) -> None:
        if len(self.player_names) != PLAYERS_PER_COURT:
            raise InvalidCourtError(
                f"A court needs exactly {PLAYERS_PER_COURT} player slots, "
                f"got {len(self.player_names)}"
            )
        if len(self.matches) > MATCHES_PER_COURT:
            raise InvalidCourtError(
                f"A court has at most {MATCHES_PER_COURT} matches, "
                f"got {len(self.matches)}"
            )
        self.matches = [MatchScore.from_dict(m) for m in self.matches]

    def score_for(self, match_index: int) -> MatchScore:
        """Return the score of pairing ``match_index``, unplayed if absent."""
        if match_index < len(self.matches):
            return self.matches[match_index]
        return MatchScore()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize court to dictionary."""
        return {
            "court_number": self.court_number,
            "player_names": list(self.player_names),
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Court":
        """Deserialize court from dictionary."""
        names = data.get("player_names", data.get("playerNames"))
        if names is None:
            raise InvalidCourtError("Court data is missing 'player_names'")
        return cls(
            player_names=list(names),
            matches=list(data.get("matches") or []),
            court_number=data.get("court_number", data.get("courtNumber", 0)),
        )


@dataclass
class CourtDetail:
    """Seeds and tier label of one court for a given round.

    Attributes
    ----------
    round : int
        Round the detail describes.
    seeds : list of int
        Seed of each of the court's four slots.
    tier : str
        Tier label such as ``"A"`` or ``"A–C"``.
    court_number : int
        1-based court number.
    player_names : list of str
        Names passed through from the court.
    """

    round: int
    seeds: List[int]
    tier: str
    court_number: int
    player_names: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize court detail to dictionary."""
        return {
            "round": self.round,
            "seeds": list(self.seeds),
            "tier": self.tier,
            "court_number": self.court_number,
            "player_names": list(self.player_names),
        }

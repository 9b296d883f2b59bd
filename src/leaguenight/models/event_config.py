"""EventConfig data class and JSON snapshot loading."""

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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from leaguenight.constants import (
    DEFAULT_POINTS_TABLE,
    EMPTY_PLAYER_NAME,
    PLAYERS_PER_COURT,
)
from leaguenight.exceptions import (
    FileLoadException,
    FileSaveException,
    InvalidConfigurationException,
    LeagueNightException,
    MissingConfigurationException,
)
from leaguenight.models.court import Court
from leaguenight.type_hints import PointsTable
from leaguenight.utils import setup_logger
from leaguenight.utils.validation import validate_round

logger = setup_logger(__name__)


def _default_points_table() -> PointsTable:
    return {court: list(points) for court, points in DEFAULT_POINTS_TABLE.items()}


@dataclass
class EventConfig:
    """State snapshot of one league night, as handed to the engine.

    Attributes
    ----------
    name : str
        Event name.
    round : int
        Round currently being played (1..3).
    courts : list of Court
        Courts of the current round in court-number order.
    points_table : dict of int to list of int
        League points by final court, then finishing position on that court.
    use_legacy_layouts : bool
        Seat the field with the historical 12/16 player seed tables when
        ``player_count`` has one.
    player_count : int or None
        Players signed up for the night. ``None`` means four per court.
        Twelve players on four courts leave court 4 empty.
    """

    name: str
    round: int = 1
    courts: List[Court] = field(default_factory=list)
    points_table: PointsTable = field(default_factory=_default_points_table)
    use_legacy_layouts: bool = True
    player_count: Optional[int] = None

    @property
    def court_count(self) -> int:
        return len(self.courts)

    @property
    def total_players(self) -> int:
        if self.player_count is None:
            return self.court_count * PLAYERS_PER_COURT
        return self.player_count

    @property
    def player_names(self) -> List[str]:
        return [name for court in self.courts for name in court.player_names]

    def validate(self) -> None:
        """Check the snapshot before it reaches the engine.

        Raises:
            InvalidConfigurationException: If the round or player count is
                invalid, names repeat or the points table is malformed
        """
        round_check = validate_round(self.round)
        if not round_check:
            raise InvalidConfigurationException(round_check.error_message)

        named = [
            n for n in self.player_names if n and n.strip() and n != EMPTY_PLAYER_NAME
        ]
        duplicates = sorted({n for n in named if named.count(n) > 1})
        if duplicates:
            raise InvalidConfigurationException(
                f"Players appear on more than one slot: {', '.join(duplicates)}"
            )

        if self.player_count is not None:
            capacity = self.court_count * PLAYERS_PER_COURT
            if (
                not isinstance(self.player_count, int)
                or isinstance(self.player_count, bool)
                or not 1 <= self.player_count <= capacity
            ):
                raise InvalidConfigurationException(
                    f"Player count must be between 1 and {capacity} "
                    f"for {self.court_count} courts, got {self.player_count!r}"
                )
            if len(named) > self.player_count:
                raise InvalidConfigurationException(
                    f"{len(named)} players named but player count is {self.player_count}"
                )

        for court, points in self.points_table.items():
            if not isinstance(court, int) or court < 1:
                raise InvalidConfigurationException(
                    f"Points table court must be a positive integer, got {court!r}"
                )
            if any(not isinstance(p, int) for p in points):
                raise InvalidConfigurationException(
                    f"Points for court {court} must be whole numbers"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "round": self.round,
            "courts": [c.to_dict() for c in self.courts],
            "points_table": {str(k): v for k, v in self.points_table.items()},
            "use_legacy_layouts": self.use_legacy_layouts,
            "player_count": self.player_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventConfig":
        """Deserialize configuration from dictionary."""
        if "courts" not in data:
            raise MissingConfigurationException("Event data is missing 'courts'")

        try:
            courts = [Court.from_dict(c) for c in data["courts"]]
            for index, court in enumerate(courts, start=1):
                if not court.court_number:
                    court.court_number = index

            raw_points = data.get("points_table")
            points_table = (
                {int(k): list(v) for k, v in raw_points.items()}
                if raw_points
                else _default_points_table()
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidConfigurationException(f"Malformed event data: {e}") from e
        except LeagueNightException as e:
            raise InvalidConfigurationException(str(e)) from e

        return cls(
            name=data.get("name", "Untitled Event"),
            round=data.get("round", 1),
            courts=courts,
            points_table=points_table,
            use_legacy_layouts=data.get("use_legacy_layouts", True),
            player_count=data.get("player_count"),
        )


def load_event(path: Union[str, Path]) -> EventConfig:
    """Load and validate an event snapshot from a JSON file.

    Raises:
        FileLoadException: If the file is missing or not valid JSON
        ConfigurationException: If the snapshot content is invalid
    """
    event_path = Path(path)
    try:
        with open(event_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Failed to load event file %s: %s", event_path, e)
        raise FileLoadException(f"Cannot load event file {event_path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Event file {event_path} must contain a JSON object"
        )

    config = EventConfig.from_dict(data)
    config.validate()
    logger.info(
        "Loaded event %r: %d courts, round %d",
        config.name,
        config.court_count,
        config.round,
    )
    return config


def save_event(config: EventConfig, path: Union[str, Path]) -> Path:
    """Write an event snapshot as JSON and return the path written."""
    event_path = Path(path)
    try:
        with open(event_path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error("Failed to save event file %s: %s", event_path, e)
        raise FileSaveException(f"Cannot save event file {event_path}: {e}") from e
    logger.info("Saved event %r to %s", config.name, event_path)
    return event_path

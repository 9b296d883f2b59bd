"""Seed layouts: which seeds play on which court in each round."""

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

import math
from typing import Dict, Optional

from leaguenight.constants import EMPTY_SEED, LEGACY_SEED_LAYOUTS, PLAYERS_PER_COURT
from leaguenight.exceptions import InvalidCourtCountError
from leaguenight.seeding.groups import group_sizes
from leaguenight.type_hints import SeedLayoutTable
from leaguenight.utils import setup_logger
from leaguenight.utils.validation import (
    validate_court_count_strict,
    validate_round_strict,
)

logger = setup_logger(__name__)


def snake_block(courts_in_group: int, start_seed: int = 1) -> SeedLayoutTable:
    """Snake-draw one tier group's seed block across its courts.

    Court ``i`` of a ``g``-court group gets local seeds
    ``[i, 2g+1-i, 2g+i, 4g+1-i]``, shifted so the block starts at
    ``start_seed``. Three courts from seed 1:

        [1, 6, 7, 12], [2, 5, 8, 11], [3, 4, 9, 10]
    """
    g = courts_in_group
    offset = start_seed - 1
    return [
        [
            offset + i,
            offset + 2 * g + 1 - i,
            offset + 2 * g + i,
            offset + 4 * g + 1 - i,
        ]
        for i in range(1, g + 1)
    ]


def seed_layout(court_count: int, round_number: int) -> SeedLayoutTable:
    """Seeds for every court of a round, court 1 first.

    Each tier group takes the next contiguous block of ``4 * size`` seeds
    and snake-draws it across its own courts.

    Raises:
        InvalidRoundError: If the round is not 1, 2 or 3
        InvalidCourtCountError: If ``court_count`` is not positive
    """
    layout: SeedLayoutTable = []
    next_seed = 1
    for size in group_sizes(court_count, round_number):
        layout.extend(snake_block(size, next_seed))
        next_seed += size * PLAYERS_PER_COURT

    logger.debug("Seed layout for %d courts, round %d: %s", court_count, round_number, layout)
    return layout


def legacy_seed_layout(player_count: int, round_number: int) -> Optional[SeedLayoutTable]:
    """Historical hard-coded table for ``player_count``, or None if there is none."""
    validate_round_strict(round_number)
    table = LEGACY_SEED_LAYOUTS.get(player_count)
    if table is None:
        return None
    return [list(seeds) for seeds in table[round_number]]


def seed_layout_for_players(player_count: int, round_number: int) -> SeedLayoutTable:
    """Seed layout keyed by player count rather than court count.

    The 12 and 16 player tables are served as stored, including the
    12 player table's zero-padded fourth court. Other counts use
    ``seed_layout`` over ``ceil(player_count / 4)`` courts.

    Raises:
        InvalidCourtCountError: If ``player_count`` is not positive
    """
    if player_count < 1:
        raise InvalidCourtCountError(
            f"Invalid player count: {player_count} (must be at least 1)"
        )

    legacy = legacy_seed_layout(player_count, round_number)
    if legacy is not None:
        return legacy
    return seed_layout(math.ceil(player_count / PLAYERS_PER_COURT), round_number)


def event_seed_layout(
    court_count: int,
    round_number: int,
    player_count: Optional[int] = None,
    use_legacy_layouts: bool = True,
) -> SeedLayoutTable:
    """Seed layout for an event's ``court_count`` courts in a round.

    When ``player_count`` has a historical table whose real courts fit the
    event, that table is used and trimmed or padded with empty courts to
    ``court_count`` rows. Twelve players on four courts therefore play on
    courts 1-3 and leave court 4 empty. Otherwise this is ``seed_layout``.

    Raises:
        InvalidRoundError: If the round is not 1, 2 or 3
        InvalidCourtCountError: If ``court_count`` is not positive
    """
    validate_court_count_strict(court_count)
    if use_legacy_layouts and player_count is not None:
        legacy = legacy_seed_layout(player_count, round_number)
        if legacy is not None and active_court_count(legacy) <= court_count:
            empty = [EMPTY_SEED] * PLAYERS_PER_COURT
            padded = legacy + [list(empty) for _ in range(court_count - len(legacy))]
            return padded[:court_count]
    return seed_layout(court_count, round_number)


def active_court_count(layout: SeedLayoutTable) -> int:
    """Number of courts in ``layout`` that hold at least one real seed."""
    return sum(1 for seeds in layout if any(s != EMPTY_SEED for s in seeds))


def seed_to_court_map(layout: SeedLayoutTable) -> Dict[int, int]:
    """Map every real seed in ``layout`` to its 1-based court number."""
    mapping: Dict[int, int] = {}
    for court_number, seeds in enumerate(layout, start=1):
        for seed in seeds:
            if seed != EMPTY_SEED:
                mapping[seed] = court_number
    return mapping

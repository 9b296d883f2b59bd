"""Seed layouts and tier labels for League Night rounds.

These are leaf functions: they depend only on the court count and round,
never on results, so any round's courts can be drawn before play starts.
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

from leaguenight.seeding.groups import (
    group_bounds,
    group_count,
    group_index_for_court,
    group_sizes,
)
from leaguenight.seeding.layout import (
    active_court_count,
    event_seed_layout,
    legacy_seed_layout,
    seed_layout,
    seed_layout_for_players,
    seed_to_court_map,
    snake_block,
)
from leaguenight.seeding.tiers import (
    compare_tiers,
    tier_label,
    tier_labels,
    tier_labels_for_layout,
    tier_letter,
    tier_ordinal,
)

__all__ = [
    "group_bounds",
    "group_count",
    "group_index_for_court",
    "group_sizes",
    "active_court_count",
    "event_seed_layout",
    "legacy_seed_layout",
    "seed_layout",
    "seed_layout_for_players",
    "seed_to_court_map",
    "snake_block",
    "compare_tiers",
    "tier_label",
    "tier_labels",
    "tier_labels_for_layout",
    "tier_letter",
    "tier_ordinal",
]

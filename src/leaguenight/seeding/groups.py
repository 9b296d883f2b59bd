"""Tier groups: how a round's courts split into independent seed blocks."""

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

from typing import List, Tuple

from leaguenight.constants import SINGLE_GROUP_MAX_COURTS, SPLIT_GROUP_COUNT
from leaguenight.utils.validation import (
    validate_court_count_strict,
    validate_court_number_strict,
    validate_round_strict,
)


def group_count(court_count: int, round_number: int) -> int:
    """Number of tier groups in a round.

    Round 1 plays the whole field as one group, round 2 splits it in two once
    there are more than three courts, and round 3 makes every court its own
    tier.

    Raises:
        InvalidRoundError: If the round is not 1, 2 or 3
        InvalidCourtCountError: If ``court_count`` is not positive
    """
    validate_round_strict(round_number)
    validate_court_count_strict(court_count)

    if round_number == 1:
        return 1
    if round_number == 2:
        return 1 if court_count <= SINGLE_GROUP_MAX_COURTS else SPLIT_GROUP_COUNT
    return court_count


def group_sizes(court_count: int, round_number: int) -> List[int]:
    """Courts per tier group, in court order.

    Leftover courts go to the leading groups, so an odd field in round 2 puts
    the larger half on top: 5 courts -> [3, 2].
    """
    groups = group_count(court_count, round_number)
    base, remainder = divmod(court_count, groups)
    return [base + (1 if index < remainder else 0) for index in range(groups)]


def group_bounds(court_count: int, round_number: int) -> List[Tuple[int, int]]:
    """First and last 0-based court index of every tier group."""
    bounds = []
    start = 0
    for size in group_sizes(court_count, round_number):
        bounds.append((start, start + size - 1))
        start += size
    return bounds


def group_index_for_court(court_count: int, round_number: int, court_number: int) -> int:
    """0-based tier group holding the 1-based ``court_number``.

    Raises:
        InvalidCourtError: If ``court_number`` is outside 1..court_count
    """
    bounds = group_bounds(court_count, round_number)
    validate_court_number_strict(court_number, court_count)
    court_index = court_number - 1
    for index, (first, last) in enumerate(bounds):
        if first <= court_index <= last:
            return index
    # unreachable: bounds cover every court
    raise AssertionError(f"court {court_number} not covered by {bounds}")

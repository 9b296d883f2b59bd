"""Tier labels for courts ("A", "A–C", ...)."""

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

from typing import List

from leaguenight.constants import FIRST_TIER_LETTER, TIER_RANGE_SEPARATOR
from leaguenight.seeding.groups import group_bounds, group_index_for_court
from leaguenight.seeding.layout import active_court_count
from leaguenight.type_hints import SeedLayoutTable


def tier_letter(court_index: int) -> str:
    """Letter of a 0-based court index: 0 -> "A", 2 -> "C"."""
    return chr(ord(FIRST_TIER_LETTER) + court_index)


def tier_range(first_index: int, last_index: int) -> str:
    """Label for a span of 0-based court indices."""
    if first_index == last_index:
        return tier_letter(first_index)
    return f"{tier_letter(first_index)}{TIER_RANGE_SEPARATOR}{tier_letter(last_index)}"


def tier_label(court_count: int, round_number: int, court_number: int) -> str:
    """Tier label of the 1-based ``court_number`` in a round.

    The label spans the courts of the court's tier group, e.g. court 2 of 4
    in round 2 sits in "A–B".

    Raises:
        InvalidRoundError: If the round is not 1, 2 or 3
        InvalidCourtCountError: If ``court_count`` is not positive
        InvalidCourtError: If ``court_number`` is outside 1..court_count
    """
    index = group_index_for_court(court_count, round_number, court_number)
    first, last = group_bounds(court_count, round_number)[index]
    return tier_range(first, last)


def tier_labels(court_count: int, round_number: int) -> List[str]:
    """Tier label of every court in a round, court 1 first."""
    labels = []
    for first, last in group_bounds(court_count, round_number):
        labels.extend([tier_range(first, last)] * (last - first + 1))
    return labels


def tier_ordinal(label: str) -> int:
    """0-based division of a label, taken from its first letter (A=0)."""
    if not label:
        return 0
    return ord(label[0]) - ord(FIRST_TIER_LETTER)


def _average_letter_code(label: str) -> float:
    if TIER_RANGE_SEPARATOR in label:
        first, last = label.split(TIER_RANGE_SEPARATOR, 1)
        return (ord(first) + ord(last)) / 2
    return float(ord(label))


def compare_tiers(a: str, b: str) -> float:
    """Order tier labels by the midpoint of their span.

    Negative when ``a`` ranks above ``b``. "A" < "A–B" < "B" == "A–C".
    """
    return _average_letter_code(a) - _average_letter_code(b)


def tier_labels_for_layout(layout: SeedLayoutTable, round_number: int) -> List[str]:
    """Tier labels for a layout that may end in empty courts.

    Only courts holding real seeds are lettered; empty courts get ``""``.
    """
    active = active_court_count(layout)
    if not active:
        return [""] * len(layout)
    return tier_labels(active, round_number) + [""] * (len(layout) - active)

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

# --- Constants ---

# Event format
PLAYERS_PER_COURT = 4
MATCHES_PER_COURT = 3
FIRST_ROUND = 1
FINAL_ROUND = 3
VALID_ROUNDS = (1, 2, 3)

# Round 2 splits the field only once there are more courts than this
SINGLE_GROUP_MAX_COURTS = 3
SPLIT_GROUP_COUNT = 2

# Fixed doubles pairings, as slot indices into a court's four players:
# (team A, team B) for match 1, 2 and 3
MATCH_PAIRINGS = (
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
)

# Tier labels
FIRST_TIER_LETTER = "A"
TIER_RANGE_SEPARATOR = "–"  # en dash, e.g. "A–C"

# Seed 0 pads a court slot that has no player
EMPTY_SEED = 0
EMPTY_PLAYER_NAME = "-"

# Historical layouts, keyed by player count then round
LEGACY_SEED_LAYOUTS = {
    16: {
        1: [
            [1, 8, 9, 16],
            [2, 7, 10, 15],
            [3, 6, 11, 14],
            [4, 5, 12, 13],
        ],
        2: [
            [1, 4, 5, 8],
            [2, 3, 6, 7],
            [9, 12, 13, 16],
            [10, 11, 14, 15],
        ],
        3: [
            [1, 2, 3, 4],
            [5, 6, 7, 8],
            [9, 10, 11, 12],
            [13, 14, 15, 16],
        ],
    },
    12: {
        1: [
            [1, 6, 7, 12],
            [2, 5, 8, 11],
            [3, 4, 9, 10],
            [0, 0, 0, 0],
        ],
        2: [
            [1, 6, 7, 12],
            [2, 5, 8, 11],
            [3, 4, 9, 10],
            [0, 0, 0, 0],
        ],
        3: [
            [1, 2, 3, 4],
            [5, 6, 7, 8],
            [9, 10, 11, 12],
            [0, 0, 0, 0],
        ],
    },
}

# League points awarded after the final round, by final court then position
DEFAULT_POINTS_TABLE = {
    1: [1000, 800, 600, 500],
    2: [400, 350, 300, 250],
    3: [200, 175, 150, 125],
    4: [100, 75, 50, 25],
}

# Logging
LOG_LEVEL_ENV_VAR = "LEAGUENIGHT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

"""Validation utilities for League Night.

This module provides reusable validation functions with consistent error handling.
Each check comes in two flavours: a soft one returning a ``ValidationResult``
for callers that want to show a message, and a strict one that logs and raises.
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

from typing import Any, Optional

from leaguenight.constants import VALID_ROUNDS
from leaguenight.exceptions import (
    InvalidCourtCountError,
    InvalidCourtError,
    InvalidRoundError,
    InvalidScoreError,
)
from leaguenight.utils import setup_logger

logger = setup_logger(__name__)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ========== Round Validation ==========


def validate_round(round_number: Any) -> ValidationResult:
    """Check that ``round_number`` is one of the event's rounds (1, 2 or 3).

    Example:
        >>> bool(validate_round(2))
        True
        >>> validate_round(4).error_message
        'Invalid round number: 4 (must be one of 1, 2, 3)'
    """
    if _is_int(round_number) and round_number in VALID_ROUNDS:
        return ValidationResult(is_valid=True, sanitized_value=round_number)

    allowed = ", ".join(str(r) for r in VALID_ROUNDS)
    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid round number: {round_number!r} (must be one of {allowed})",
    )


def validate_round_strict(round_number: Any) -> int:
    """Validate a round and return it, or raise.

    Raises:
        InvalidRoundError: If the round is not 1, 2 or 3
    """
    result = validate_round(round_number)
    if not result.is_valid:
        logger.error(result.error_message)
        raise InvalidRoundError(result.error_message)
    return result.sanitized_value


# ========== Court Validation ==========


def validate_court_count(court_count: Any) -> ValidationResult:
    """Check that ``court_count`` is a positive integer."""
    if _is_int(court_count) and court_count >= 1:
        return ValidationResult(is_valid=True, sanitized_value=court_count)

    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid court count: {court_count!r} (must be at least 1)",
    )


def validate_court_count_strict(court_count: Any) -> int:
    """Validate a court count and return it, or raise.

    Raises:
        InvalidCourtCountError: If the court count is not a positive integer
    """
    result = validate_court_count(court_count)
    if not result.is_valid:
        logger.error(result.error_message)
        raise InvalidCourtCountError(result.error_message)
    return result.sanitized_value


def validate_court_number_strict(court_number: Any, court_count: int) -> int:
    """Validate a 1-based court number against the event's court count.

    Raises:
        InvalidCourtError: If the court number is outside 1..court_count
    """
    if not _is_int(court_number) or not 1 <= court_number <= court_count:
        message = (
            f"Invalid court number: {court_number!r} "
            f"(event has courts 1..{court_count})"
        )
        logger.error(message)
        raise InvalidCourtError(message)
    return court_number


# ========== Score Validation ==========


def validate_score(score: Any) -> ValidationResult:
    """Check a single team score. ``None`` means not yet played and is valid."""
    if score is None:
        return ValidationResult(is_valid=True, sanitized_value=None)

    if not _is_int(score):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a whole number, got {score!r}",
        )

    if score < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score cannot be negative: {score}",
        )

    return ValidationResult(is_valid=True, sanitized_value=score)


def validate_score_strict(score: Any) -> Optional[int]:
    """Validate a team score and return it, or raise.

    Raises:
        InvalidScoreError: If the score is negative or not an integer
    """
    result = validate_score(score)
    if not result.is_valid:
        logger.error(result.error_message)
        raise InvalidScoreError(result.error_message)
    return result.sanitized_value

"""Exceptions for use in League Night"""

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


# ========== Base Application Exception ==========


class LeagueNightException(Exception):
    """Base exception for all League Night errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Seeding Exceptions ==========


class SeedingException(LeagueNightException):
    """Base exception for seed layout and tier errors."""

    pass


class InvalidRoundError(SeedingException, ValueError):
    """Raised when a round outside 1..3 is requested."""

    pass


class InvalidCourtCountError(SeedingException, ValueError):
    """Raised when the court count is not a positive integer or does not match the courts given."""

    pass


class InvalidCourtError(SeedingException, ValueError):
    """Raised when a court number or court shape is invalid."""

    pass


# ========== Standings Exceptions ==========


class StandingsException(LeagueNightException):
    """Base exception for aggregation and ranking errors."""

    pass


class EmptyInputError(StandingsException, ValueError):
    """Raised when player data is required but no courts were given."""

    pass


class InvalidScoreError(StandingsException, ValueError):
    """Raised when a match score is negative or not an integer."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(LeagueNightException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(LeagueNightException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass

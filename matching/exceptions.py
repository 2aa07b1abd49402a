"""
Errors and process exit codes for fuzzy matching.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes reported by the CLI."""
    SUCCESS = 0
    NO_MATCH = 1
    INVALID_ARGS = 2
    RUNTIME_ERROR = 3


class FuzzyMatchError(Exception):
    """Base class for fuzzy matching errors."""


class InvalidArgumentError(FuzzyMatchError, ValueError):
    """Raised when match inputs are rejected before scoring starts."""

"""Enumerations shared across the grading toolkit."""

from enum import Enum, auto


class _CapitalizedEnum(Enum):
    """Enum whose automatic values are the capitalized member names."""

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name.capitalize()


class AssertionType(Enum):
    """Kinds of assertion a scored case can defer."""

    TRUE = "True"
    FALSE = "False"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    EXCEPTION = "Exception"
    NO_EXCEPTION = "NoException"


class LogEntryType(_CapitalizedEnum):
    """Categories of log entries."""

    NONE = auto()
    ANY = auto()
    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    PASS = auto()
    FAIL = auto()


class LeaderboardSortDirection(Enum):
    """Sort directions for a leaderboard."""

    DEFAULT = "Default"
    ASCENDING = "Ascending"
    DESCENDING = "Descending"
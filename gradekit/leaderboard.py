"""Leaderboards reported alongside graded results."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from gradekit.enums import LeaderboardSortDirection

_DIRECTION_NAMES = {
    LeaderboardSortDirection.ASCENDING: "Ascending",
    LeaderboardSortDirection.DEFAULT: "Default",
    LeaderboardSortDirection.DESCENDING: "Descending",
}

_GRADESCOPE_DIRECTIONS = {
    LeaderboardSortDirection.ASCENDING: "asc",
    LeaderboardSortDirection.DEFAULT: "desc",
    LeaderboardSortDirection.DESCENDING: "desc",
}


@dataclass
class LeaderboardEntry:
    """A named value on a leaderboard."""

    name: str = ""
    value: Any = None

    def to_gradescope_json(self) -> dict[str, Any]:
        """Describe this entry in the shape Gradescope expects."""
        return {"name": self.name, "value": self.value}


class Leaderboard:
    """A set of leaderboard entries keyed by name, with one entry used for sorting."""

    def __init__(self) -> None:
        self._entries: dict[str, LeaderboardEntry] = {}
        self.sort_key = ""
        self._sort_direction = LeaderboardSortDirection.DEFAULT

    @property
    def entries(self) -> dict[str, LeaderboardEntry]:
        """Entries ordered by name."""
        return {name: self._entries[name] for name in sorted(self._entries)}

    def add_entry(self, name: str | LeaderboardEntry, value: Any = None) -> None:
        """Add or replace an entry; the first entry added becomes the sort key."""
        entry = name if isinstance(name, LeaderboardEntry) else LeaderboardEntry(name, value)
        self._entries[entry.name] = entry
        if not self.sort_key:
            self.sort_key = entry.name

    @staticmethod
    def sort_direction_to_string(d: LeaderboardSortDirection) -> str:
        """Return the printable name of a sort direction."""
        try:
            return _DIRECTION_NAMES[d]
        except (KeyError, TypeError):
            raise ValueError("Unsupported Leaderboard sort direction") from None

    @staticmethod
    def sort_direction_to_gradescope_string(d: LeaderboardSortDirection) -> str:
        """Return the Gradescope order keyword for a sort direction."""
        try:
            return _GRADESCOPE_DIRECTIONS[d]
        except (KeyError, TypeError):
            raise ValueError("Unsupported Leaderboard sort direction") from None

    @property
    def sort_direction(self) -> LeaderboardSortDirection:
        return self._sort_direction

    @sort_direction.setter
    def sort_direction(self, d: LeaderboardSortDirection) -> None:
        if not isinstance(d, LeaderboardSortDirection):
            raise ValueError(f"Unsupported Leaderboard sort direction: {d!r}")
        self._sort_direction = d

    @property
    def sort_direction_as_string(self) -> str:
        return self.sort_direction_to_string(self._sort_direction)

    @property
    def sort_direction_as_gradescope_string(self) -> str:
        return self.sort_direction_to_gradescope_string(self._sort_direction)

    def to_gradescope_json(self) -> list[dict[str, Any]]:
        """Describe every entry, ordered by name, marking the sort key with its order."""
        result = []
        found_sort_key = False
        for name, entry in self.entries.items():
            item = entry.to_gradescope_json()
            if name == self.sort_key:
                found_sort_key = True
                item["order"] = self.sort_direction_as_gradescope_string
            result.append(item)
        if not found_sort_key:
            raise ValueError("Did not find sort key while rendering Leaderboard entries")
        return result

    def copy(self) -> Leaderboard:
        """Return an independent copy of this leaderboard."""
        other = Leaderboard()
        other._entries = {name: replace(entry) for name, entry in self._entries.items()}
        other.sort_key = self.sort_key
        other._sort_direction = self._sort_direction
        return other
"""Log entries and labelled log collections."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from gradekit.enums import LogEntryType


@dataclass(frozen=True)
class LogEntry:
    """A single log message with its category."""

    message: str
    entry_type: LogEntryType = LogEntryType.INFO

    @staticmethod
    def type_to_string(t: LogEntryType) -> str:
        """Return the printable name of a log entry type."""
        if not isinstance(t, LogEntryType):
            raise ValueError(f"Unsupported log entry type: {t!r}")
        return t.value

    def __str__(self) -> str:
        name = self.type_to_string(self.entry_type)
        if self.entry_type in (LogEntryType.ERROR, LogEntryType.FAIL):
            name = f"***{name}***"
        return f"[{name}] {self.message}"


class Logs:
    """An ordered collection of log entries under one label."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    def log(self, entry: LogEntry | str) -> None:
        """Record an entry (a plain string becomes an Info entry) and echo it."""
        if not isinstance(entry, LogEntry):
            entry = LogEntry(str(entry), LogEntryType.INFO)
        self._entries.append(entry)
        print(f"[{self.label}]{entry}")

    def entries_as_string(
        self,
        log_types: LogEntryType | Iterable[LogEntryType] = (LogEntryType.ANY,),
        label_room: int = 0,
    ) -> str:
        """Render the entries of the given types as newline-terminated lines."""
        if isinstance(log_types, LogEntryType):
            wanted = {log_types}
        else:
            wanted = set(log_types)
        padding = " " * max(0, label_room - len(self.label))
        show_all = LogEntryType.ANY in wanted
        return "".join(
            f"[{self.label}{padding}]{entry}\n"
            for entry in self._entries
            if show_all or entry.entry_type in wanted
        )

    def pass_fail_entries_as_string(self, label_room: int = 0) -> str:
        """Render only the Pass and Fail entries."""
        return self.entries_as_string((LogEntryType.PASS, LogEntryType.FAIL), label_room)

    def entries_as_json(self) -> list[str]:
        """Return every entry rendered as a string, in order."""
        return [str(entry) for entry in self._entries]

    def copy(self) -> Logs:
        """Return an independent copy of this collection."""
        other = Logs(self.label)
        other._entries = list(self._entries)
        return other
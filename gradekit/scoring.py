"""Scored test cases built from deferred assertions."""

from __future__ import annotations

import copy as _copy
import math
from collections.abc import Callable
from typing import Any

from gradekit.deferred import DeferredAssertion
from gradekit.enums import AssertionType, LogEntryType
from gradekit.logs import LogEntry, Logs

DEFAULT_LABEL = "NOLABEL"


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class ScoredCase:
    """One test case: a group of deferred assertions and the points they award."""

    DEFAULT_LABEL = DEFAULT_LABEL

    def __init__(self, label: str, points: int = 0, points_possible: int = 0) -> None:
        self.label = label
        self.points = points
        self.dynamic_points_possible = points_possible
        self.fixed_points_possible = 0
        self.is_points_possible_fixed = False
        self._normalized_target = 0
        self.is_using_normalized_points = False
        self.fail_fast = True
        self._assertions: list[DeferredAssertion] = []
        self.logs = Logs(label)

    @property
    def assertions(self) -> tuple[DeferredAssertion, ...]:
        return tuple(self._assertions)

    @property
    def computed_points_possible(self) -> int:
        """Points possible, fixed if a fixed value was set, otherwise accumulated."""
        if self.is_points_possible_fixed:
            return self.fixed_points_possible
        return self.dynamic_points_possible

    @property
    def normalized_points_possible_target(self) -> int:
        if self.is_using_normalized_points:
            return self._normalized_target
        return self.computed_points_possible

    def _defer(self, assertion_type: AssertionType, points: int, label: str, *args: Any) -> None:
        self.adjust_points_possible(points, label)
        self._assertions.append(DeferredAssertion(label, points, assertion_type, *args))

    def assert_true(self, b: Any, points: int = 0, label: str = DEFAULT_LABEL) -> None:
        """Award points if b is true."""
        self._defer(AssertionType.TRUE, points, label, b)

    def assert_false(self, b: Any, points: int = 0, label: str = DEFAULT_LABEL) -> None:
        """Award points if b is false."""
        self._defer(AssertionType.FALSE, points, label, b)

    def assert_equal(self, a: Any, b: Any, points: int = 0, label: str = DEFAULT_LABEL) -> None:
        """Award points if a equals b."""
        self._defer(AssertionType.EQUAL, points, label, a, b)

    def assert_not_equal(self, a: Any, b: Any, points: int = 0, label: str = DEFAULT_LABEL) -> None:
        """Award points if a does not equal b."""
        self._defer(AssertionType.NOT_EQUAL, points, label, a, b)

    def assert_exception(
        self, func: Callable[[], Any], points: int = 0, label: str = DEFAULT_LABEL
    ) -> None:
        """Award points if calling func raises."""
        self._defer(AssertionType.EXCEPTION, points, label, func)

    def assert_no_exception(
        self, func: Callable[[], Any], points: int = 0, label: str = DEFAULT_LABEL
    ) -> None:
        """Award points if calling func does not raise."""
        self._defer(AssertionType.NO_EXCEPTION, points, label, func)

    def run(self) -> bool:
        """Run every assertion not yet run; return True if none of them failed."""
        any_failed = False
        for assertion in self._assertions:
            if assertion.has_ran:
                continue
            self.log(LogEntry(f"Running: {assertion.label}", LogEntryType.INFO))
            passed = bool(assertion.run())
            any_failed |= not passed

            verdict = "Award" if passed else "Unable to award"
            log_message = f"{assertion.label} :: {verdict} {assertion.points} points"
            if assertion.message:
                log_message += f" :: {assertion.message}"

            if passed:
                self.adjust_points(assertion.points, log_message, LogEntryType.PASS)
            else:
                self.log(LogEntry(log_message, LogEntryType.FAIL))

            if self.fail_fast and not passed:
                self.log(
                    LogEntry(
                        "Test failed and fail_fast_ is true; Abort remaining tests.",
                        LogEntryType.WARNING,
                    )
                )
                break
        return not any_failed

    def log(self, entry: LogEntry | str) -> None:
        """Write a log entry; a plain string becomes an Info entry."""
        self.logs.log(entry)

    def adjust_points(
        self, adjustment: int, reason: str, log_type: LogEntryType = LogEntryType.NONE
    ) -> int:
        """Add to the earned points, capped at the points possible, and log it."""
        points_old = self.points
        self.points += adjustment

        if self.points > self.computed_points_possible:
            points_oob = self.points
            self.points = self.computed_points_possible
            self.log(
                LogEntry(
                    f"Earned points ({points_oob}) have exceeded maximum possible points;"
                    f" Adjusting to stay within bounds: {self.points}",
                    LogEntryType.INFO,
                )
            )

        if log_type is LogEntryType.NONE:
            if adjustment > 0:
                log_type = LogEntryType.PASS
            elif adjustment < 0:
                log_type = LogEntryType.FAIL
        self.log(
            LogEntry(
                f"Points {points_old} ==> {self.points} ({adjustment}): {reason}",
                log_type,
            )
        )
        return self.points

    def adjust_points_possible(self, points: int, label: str) -> int:
        """Grow the points possible by a positive amount unless it is fixed."""
        if self.is_points_possible_fixed:
            return self.fixed_points_possible
        if points > 0:
            old = self.dynamic_points_possible
            self.dynamic_points_possible += points
            self.log(
                f"Adjusting points possible from {old} to {self.dynamic_points_possible}"
                f" ({points}) for label: {label}"
            )
        return self.dynamic_points_possible

    def set_fixed_points_possible(self, points: int) -> None:
        """Fix the points possible to a given value."""
        self.fixed_points_possible = points
        self.is_points_possible_fixed = True
        self.log(LogEntry(f"Setting fixed points possible to {points}", LogEntryType.INFO))

    def set_normalized_points_possible_target(self, target: int) -> None:
        """Scale the final score to the given target."""
        self._normalized_target = target
        self.is_using_normalized_points = True

    def compute_normalized_points(self, target: int | None = None) -> int:
        """Return the earned points scaled to target (the configured one by default)."""
        if target is None:
            target = self._normalized_target
        if not self.is_using_normalized_points:
            return self.points
        if target == 0:
            raise ValueError("Cannot normalize to a target of 0")
        ratio = self.points / self.computed_points_possible
        return _round_half_away(target * ratio)

    def pass_fail_logs_as_string(self, label_room: int = 0) -> str:
        """Render only the Pass and Fail log entries."""
        return self.logs.pass_fail_entries_as_string(label_room)

    def to_json(self) -> dict[str, Any]:
        """Describe this case as a JSON-compatible dictionary."""
        return {
            "label": self.label,
            "logs": self.logs.entries_as_string(),
            "points": self.points,
            "points_possible": self.dynamic_points_possible,
        }

    def to_gradescope_json(self) -> dict[str, Any]:
        """Describe this case in the shape Gradescope expects."""
        if self.is_using_normalized_points:
            score = self.compute_normalized_points()
            max_score = self.normalized_points_possible_target
        else:
            score = self.points
            max_score = self.computed_points_possible
        return {
            "score": score,
            "max_score": max_score,
            "output": self.logs.entries_as_string(),
            "name": self.label,
        }

    def copy(self) -> ScoredCase:
        """Return an independent copy, including assertions and logs."""
        other = ScoredCase(self.label, self.points, self.dynamic_points_possible)
        other.fixed_points_possible = self.fixed_points_possible
        other.is_points_possible_fixed = self.is_points_possible_fixed
        other._normalized_target = self._normalized_target
        other.is_using_normalized_points = self.is_using_normalized_points
        other.fail_fast = self.fail_fast
        other._assertions = [_copy.copy(a) for a in self._assertions]
        other.logs = self.logs.copy()
        return other
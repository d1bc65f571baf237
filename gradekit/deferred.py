"""Assertions that are described now and evaluated later."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from gradekit import assertions
from gradekit.enums import AssertionType

_ONE_VALUE = {
    AssertionType.TRUE: assertions.assert_true,
    AssertionType.FALSE: assertions.assert_false,
}
_TWO_VALUES = {
    AssertionType.EQUAL: assertions.assert_equal,
    AssertionType.NOT_EQUAL: assertions.assert_not_equal,
}
_CALLABLE = {
    AssertionType.EXCEPTION: assertions.assert_exception,
    AssertionType.NO_EXCEPTION: assertions.assert_no_exception,
}


class DeferredAssertion:
    """An assertion that is not evaluated until run() is called."""

    def __init__(self, label: str, points: int, assertion_type: AssertionType, *args: Any) -> None:
        self.label = label
        self.points = points
        self.type = assertion_type
        self.message = ""
        self.result = False
        self.has_ran = False
        self._check: Callable[[], tuple[bool, str]] = self._build(assertion_type, args)

    @staticmethod
    def _build(assertion_type: AssertionType, args: tuple[Any, ...]) -> Callable[[], tuple[bool, str]]:
        name = assertions.type_to_string(assertion_type)
        if len(args) == 1:
            (value,) = args
            if assertion_type in _ONE_VALUE:
                check = _ONE_VALUE[assertion_type]
                return lambda: check(value)
            if assertion_type in _CALLABLE:
                if not callable(value):
                    raise TypeError(f"DeferredAssertion() type {name} needs a callable")
                check = _CALLABLE[assertion_type]
                return lambda: check(value)
            kind = "a lambda" if callable(value) else "one value"
            raise ValueError(f"DeferredAssertion() does not support type {name} with {kind}")
        if len(args) == 2:
            first, second = args
            if assertion_type in _TWO_VALUES:
                check = _TWO_VALUES[assertion_type]
                return lambda: check(first, second)
            raise ValueError(f"DeferredAssertion() does not support type {name} with two values")
        raise TypeError(f"DeferredAssertion() takes one or two values, got {len(args)}")

    def run(self) -> bool:
        """Evaluate the assertion, record its outcome and return whether it passed."""
        try:
            passed, message = self._check()
            self.message = message
        except Exception:  # noqa: BLE001 - a crashing check is a failed check
            passed = False
            self.message += "Encountered exception; Assertion failed"
        self.result = bool(passed)
        self.has_ran = True
        return self.result
"""Immediate assertions that report a pass flag and an explanatory message."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from gradekit.enums import AssertionType
from gradekit.tostring import to_string


def type_to_string(t: AssertionType) -> str:
    """Return the printable name of an assertion type."""
    if not isinstance(t, AssertionType):
        raise ValueError("Unsupported assertion type")
    return t.value


def assert_exception(func: Callable[[], Any]) -> tuple[bool, str]:
    """Run func; pass if it raises."""
    try:
        func()
    except Exception as exc:  # noqa: BLE001 - any failure counts
        return True, f"Caught exception :: {exc}"
    return False, "Did not catch exception"


def assert_no_exception(func: Callable[[], Any]) -> tuple[bool, str]:
    """Run func; pass if it does not raise."""
    caught, message = assert_exception(func)
    return not caught, message


def assert_true(b: Any) -> tuple[bool, str]:
    """Pass if b is truthy."""
    b = bool(b)
    return b, "TRUE" if b else "NOT TRUE"


def assert_false(b: Any) -> tuple[bool, str]:
    """Pass if b is falsy."""
    b = bool(b)
    return not b, "NOT FALSE" if b else "FALSE"


def _comparison_message(a: Any, b: Any, is_equal: bool) -> str:
    label = " == " if is_equal else " != "
    return f"<<<{to_string(a)}>>>{label}<<<{to_string(b)}>>>"


def assert_equal(a: Any, b: Any) -> tuple[bool, str]:
    """Pass if a == b; the message describes the values only on failure."""
    is_equal = bool(a == b)
    if is_equal:
        return True, ""
    return False, _comparison_message(a, b, is_equal)


def assert_not_equal(a: Any, b: Any) -> tuple[bool, str]:
    """Pass if a != b; the message describes the values only on failure."""
    is_equal = bool(a == b)
    if not is_equal:
        return True, ""
    return False, _comparison_message(a, b, is_equal)
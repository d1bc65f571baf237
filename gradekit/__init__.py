"""Point-based assertions, scored test cases, leaderboards, timing and capture helpers for grading, plus a capacity-tracking vector and a palindrome detector."""

__version__ = "0.1.0"
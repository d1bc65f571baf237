"""Palindrome detection over the letters of a string, with an interactive prompt."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO


def is_palindrome(s: str) -> bool:
    """True if the ASCII letters of s, ignoring case, read the same both ways."""
    letters = [c.lower() for c in s if c.isascii() and c.isalpha()]
    return letters == letters[::-1]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Prompt for whitespace-separated words and report whether each is a palindrome."""
    print("Welcome to my Palindrome Detector!")
    print()
    words = _tokens(sys.stdin)
    while True:
        print("Please enter a string (q to quit): ", end="", flush=True)
        word = next(words, None)
        if word is None:
            print()
            break
        if word in ("q", "Q"):
            break
        print(f"Your input: {word}")
        if is_palindrome(word):
            print("You have entered a palindrome!")
        else:
            print(
                "You have not entered a palindrome. "
                "How boring and sad; and sad and boring."
            )
        print()
    print("Thank you for using this program. Goodbyte!")
    return 0
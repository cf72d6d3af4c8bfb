"""A small automaton that spots a single word, ignoring case, one character at a time."""

from __future__ import annotations


class WordMatcher:
    """Matches a word fed character by character, case-insensitively."""

    def __init__(self, needle: str) -> None:
        if not needle:
            raise ValueError("needle must not be empty")
        self._word = needle.upper()
        self._position = 0

    def match(self, char: str) -> bool:
        """Feed one character; return True when the whole word has just been seen."""
        if self._word[self._position] == char.upper():
            if self._position == len(self._word) - 1:
                self._position = 0
                return True
            self._position += 1
        else:
            self._position = 0
        return False


def contains_word(haystack: str, needle: str) -> bool:
    """Return True if the matcher for needle fires anywhere in haystack."""
    matcher = WordMatcher(needle)
    return any(matcher.match(char) for char in haystack)
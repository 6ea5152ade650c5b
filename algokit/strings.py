"""Small text-processing algorithms."""

import string
from collections import Counter
from typing import NamedTuple

_VOWELS = frozenset("aeiou")
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_LETTERS = frozenset(string.ascii_letters)
_BRACKETS = {")": "(", "]": "[", "}": "{"}


class CharCounts(NamedTuple):
    """Vowels, non-space characters and spaces in a text."""

    vowels: int
    characters: int
    spaces: int


def count_vowels_consonants(text: str) -> CharCounts:
    """Count vowels, non-space characters and spaces, ignoring case."""
    lowered = text.lower()
    vowels = sum(1 for ch in lowered if ch in _VOWELS)
    spaces = lowered.count(" ")
    return CharCounts(vowels, len(lowered) - spaces, spaces)


def letters_only(text: str) -> str:
    """Return ``text`` with everything except ASCII letters removed."""
    return "".join(ch for ch in text if ch in _LETTERS)


def is_palindrome(text: str) -> bool:
    """Tell whether the ASCII letters and digits of ``text`` read the same reversed."""
    cleaned = [ch.lower() for ch in text if ch in _ALPHANUMERIC]
    return cleaned == cleaned[::-1]


def char_frequencies(text: str) -> dict[str, int]:
    """Return how often each character occurs, ordered by character."""
    return dict(sorted(Counter(text).items()))


def count_words(text: str) -> int:
    """Count words as the number of single spaces plus one."""
    return text.count(" ") + 1


def most_frequent_char(text: str) -> str:
    """Return the character that first reaches the highest count."""
    if not text:
        raise ValueError("most_frequent_char() needs a non-empty text")
    counts: Counter[str] = Counter()
    best, best_count = text[0], 0
    for ch in text:
        counts[ch] += 1
        if counts[ch] > best_count:
            best, best_count = ch, counts[ch]
    return best


def remove_duplicate_chars(text: str) -> str:
    """Keep only the first occurrence of each character."""
    return "".join(dict.fromkeys(text))


def is_valid_parentheses(text: str) -> bool:
    """Tell whether every closing bracket matches the most recent open one."""
    stack: list[str] = []
    for ch in text:
        if ch in _BRACKETS:
            if not stack or stack.pop() != _BRACKETS[ch]:
                return False
        else:
            stack.append(ch)
    return not stack
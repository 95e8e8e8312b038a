"""String problems: palindromes, lexicographic numbering, prefixes and reductions."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def _matched_prefix(s: str) -> int:
    """Length of the prefix of ``s`` matched while scanning ``s`` backwards."""
    matched = 0
    for char in reversed(s):
        if char == s[matched]:
            matched += 1
    return matched


def shortest_palindrome(s: str) -> str:
    """Shortest palindrome made by adding characters in front of ``s``."""
    heads: list[str] = []
    tails: list[str] = []
    while True:
        matched = _matched_prefix(s)
        if matched == len(s):
            break
        rest = s[matched:]
        heads.append(rest[::-1])
        tails.append(rest)
        s = s[:matched]
    return "".join(heads) + s + "".join(reversed(tails))


def lexical_order(n: int) -> list[int]:
    """The numbers ``1..n`` in the order of their decimal strings."""
    order: list[int] = []
    current = 1
    for _ in range(max(n, 0)):
        order.append(current)
        if current * 10 <= n:
            current *= 10
            continue
        while current % 10 == 9 or current + 1 > n:
            current //= 10
        current += 1
    return order


def _count_under(prefix: int, n: int) -> int:
    """How many numbers in ``1..n`` start with the digits of ``prefix``."""
    count = 0
    low, high = prefix, prefix + 1
    while low <= n:
        count += min(n + 1, high) - low
        low *= 10
        high *= 10
    return count


def find_kth_number(n: int, k: int) -> int:
    """The ``k``-th number of ``1..n`` in the order of their decimal strings."""
    number = 1
    position = 1
    while position < k:
        below = _count_under(number, n)
        if position + below <= k:
            position += below
            number += 1
        else:
            position += 1
            number *= 10
    return number


def is_prefix_of_word(sentence: str, search_word: str) -> int:
    """1-based index of the first word starting with ``search_word``, or -1."""
    return next(
        (
            index
            for index, word in enumerate(sentence.split(), start=1)
            if word.startswith(search_word)
        ),
        -1,
    )


def max_unique_split(s: str) -> int:
    """Most pieces ``s`` can be cut into with no piece repeated."""
    seen: set[str] = set()

    def split_from(start: int) -> int:
        if start == len(s):
            return 0
        best = 0
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece in seen:
                continue
            seen.add(piece)
            best = max(best, 1 + split_from(end))
            seen.remove(piece)
        return best

    return split_from(0)


def are_sentences_similar(sentence1: str, sentence2: str) -> bool:
    """Whether inserting one run of words into one sentence gives the other."""
    longer = [word for word in sentence1.split(" ") if word]
    shorter = [word for word in sentence2.split(" ") if word]
    if len(longer) < len(shorter):
        longer, shorter = shorter, longer
    size = len(shorter)
    start = 0
    while start < size and longer[start] == shorter[start]:
        start += 1
    end = 0
    while end < size and longer[-end - 1] == shorter[-end - 1]:
        end += 1
    return start + end >= size


def remove_occurrences(s: str, part: str) -> str:
    """Remove the leftmost ``part`` from ``s`` until none is left.

    Raises ValueError for an empty ``part``.
    """
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def min_swaps(s: str) -> int:
    """Fewest swaps to balance a string of ``[`` and ``]`` brackets."""
    imbalance = 0
    for char in s:
        if char == "]" and imbalance:
            imbalance -= 1
        else:
            imbalance += 1
    return (imbalance + 1) // 2


def sum_prefix_scores(words: Iterable[str]) -> list[int]:
    """For each word, the sum over its non-empty prefixes of how many words share it."""
    word_list = list(words)
    prefixes = Counter(
        word[:end] for word in word_list for end in range(1, len(word) + 1)
    )
    return [
        sum(prefixes[word[:end]] for end in range(1, len(word) + 1))
        for word in word_list
    ]


def min_length(s: str) -> int:
    """Length left after repeatedly deleting ``"AB"`` and ``"CD"``."""
    stack: list[str] = []
    for char in s:
        if stack and (stack[-1], char) in (("A", "B"), ("C", "D")):
            stack.pop()
        else:
            stack.append(char)
    return len(stack)


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Longest decimal prefix shared by a number of ``arr1`` and one of ``arr2``."""
    prefixes = {
        text[:end]
        for text in map(str, arr1)
        for end in range(1, len(text) + 1)
    }
    return max(
        (
            end
            for text in map(str, arr2)
            for end in range(1, len(text) + 1)
            if text[:end] in prefixes
        ),
        default=0,
    )
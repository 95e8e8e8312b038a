"""Dynamic-programming solutions over sequences, strings and counts."""

from __future__ import annotations

import operator
import re
from bisect import bisect_left, bisect_right
from collections import defaultdict
from functools import lru_cache
from typing import Iterable, Sequence

MOD = 10**9 + 7

_OPERATORS = {"+": operator.add, "-": operator.sub, "*": operator.mul}
_EXPRESSION = re.compile(r"[0-9+\-*]*")
_LEXEME = re.compile(r"\d+|[+\-*]")


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def _rob_line(values: Iterable[int]) -> int:
    take_next, best_after = 0, 0
    for value in reversed(list(values)):
        take_next, best_after = best_after, max(value + take_next, best_after)
    return best_after


def rob(nums: Sequence[int]) -> int:
    """Largest sum of elements with no two neighbours taken."""
    return _rob_line(nums)


def rob_circular(nums: Sequence[int]) -> int:
    """Like :func:`rob`, but the first and last elements are neighbours."""
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        return max(nums)
    return max(_rob_line(nums[:-1]), _rob_line(nums[1:]))


def diff_ways_to_compute(expression: str) -> list[int]:
    """Every value the expression takes under every way of parenthesising it.

    Results are grouped by the operator that is applied last, left to right.
    A malformed but well-charactered expression yields an empty list.
    """
    if not _EXPRESSION.fullmatch(expression):
        raise ValueError(f"unexpected character in expression {expression!r}")
    pieces = _LEXEME.findall(expression)
    operands = pieces[0::2]
    operators = pieces[1::2]
    if (
        len(pieces) % 2 == 0
        or not all(piece.isdigit() for piece in operands)
        or not all(piece in _OPERATORS for piece in operators)
    ):
        return []
    numbers = [int(piece) for piece in operands]

    @lru_cache(maxsize=None)
    def solve(low: int, high: int) -> tuple[int, ...]:
        if low == high:
            return (numbers[low],)
        results = []
        for split in range(low, high):
            apply = _OPERATORS[operators[split]]
            for left in solve(low, split):
                for right in solve(split + 1, high):
                    results.append(apply(left, right))
        return tuple(results)

    return list(solve(0, len(numbers) - 1))


def length_of_lis(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def largest_divisible_subset(nums: Iterable[int]) -> list[int]:
    """Largest subset in which every pair divides one way; largest value first."""
    values = sorted(nums)
    if not values:
        return []
    sizes = [1] * len(values)
    previous: list[int | None] = [None] * len(values)
    for i, value in enumerate(values):
        for j, smaller in enumerate(values[:i]):
            if value % smaller == 0:
                if sizes[i] <= sizes[j] + 1:
                    previous[i] = j
                sizes[i] = max(sizes[i], sizes[j] + 1)
    index: int | None = max(range(len(values)), key=lambda i: (sizes[i], i))
    subset = []
    while index is not None:
        subset.append(values[index])
        index = previous[index]
    return subset


def find_longest_chain(pairs: Iterable[Sequence[int]]) -> int:
    """Longest chain of pairs where each pair starts after the previous one ends."""
    ordered = sorted(tuple(pair) for pair in pairs)
    if not ordered:
        return 0
    lengths: list[int] = []
    for i, (start, _) in enumerate(ordered):
        lengths.append(
            max(
                (
                    lengths[j] + 1
                    for j, (_, end) in enumerate(ordered[:i])
                    if start > end
                ),
                default=1,
            )
        )
    return lengths[-1]


def longest_str_chain(words: Iterable[str]) -> int:
    """Longest chain of words, each made from the last by inserting one letter."""
    best: dict[str, int] = {}
    for word in sorted(words, key=len):
        best[word] = max(
            (best.get(word[:i] + word[i + 1 :], 0) + 1 for i in range(len(word))),
            default=1,
        )
    return max(best.values(), default=0)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    row = [0] * (len(text2) + 1)
    for char1 in text1:
        diagonal = 0
        for j, char2 in enumerate(text2, start=1):
            above = row[j]
            row[j] = diagonal + 1 if char1 == char2 else max(above, row[j - 1])
            diagonal = above
    return row[-1]


def num_of_arrays(n: int, m: int, k: int) -> int:
    """Arrays of length ``n`` over ``1..m`` whose running maximum changes ``k`` times.

    The count is taken modulo 10**9 + 7.
    """
    states: dict[tuple[int, int], int] = {(0, 0): 1}
    for _ in range(n):
        following: dict[tuple[int, int], int] = defaultdict(int)
        for (highest, cost), count in states.items():
            if highest:
                following[highest, cost] = (
                    following[highest, cost] + count * highest
                ) % MOD
            if cost < k:
                for value in range(highest + 1, m + 1):
                    following[value, cost + 1] = (
                        following[value, cost + 1] + count
                    ) % MOD
        states = following
    return sum(
        count for (_, cost), count in states.items() if cost == k
    ) % MOD


def max_alternating_sum(nums: Iterable[int]) -> int:
    """Best sum of a subsequence read as +a0 -a1 +a2 -a3 ..."""
    adding, subtracting = 0, 0
    for value in reversed(list(nums)):
        adding, subtracting = (
            max(subtracting + value, adding),
            max(adding - value, subtracting),
        )
    return adding


def min_extra_char(s: str, dictionary: Iterable[str]) -> int:
    """Fewest characters left over when ``s`` is cut into dictionary words."""
    words = set(dictionary)
    size = len(s)
    extra = [0] * (size + 1)
    for start in reversed(range(size)):
        extra[start] = min(
            [1 + extra[start + 1]]
            + [extra[end] for end in range(start + 1, size + 1) if s[start:end] in words]
        )
    return extra[0]


def max_balanced_subsequence_sum(nums: Sequence[int]) -> int:
    """Largest sum of a subsequence with nums[j] - nums[i] >= j - i between neighbours.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("sequence is empty")
    keys: list[int] = []
    totals: list[int] = []
    answer: int | None = None
    for index, value in enumerate(nums):
        key = value - index
        position = bisect_right(keys, key)
        current = value + (totals[position - 1] if position else 0)
        if position and keys[position - 1] == key:
            slot = position - 1
            totals[slot] = max(totals[slot], current)
        else:
            slot = position
            keys.insert(slot, key)
            totals.insert(slot, max(0, current))
        end = slot + 1
        while end < len(keys) and totals[end] <= current:
            end += 1
        del keys[slot + 1 : end]
        del totals[slot + 1 : end]
        answer = current if answer is None else max(answer, current)
    return answer
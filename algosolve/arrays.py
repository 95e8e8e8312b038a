"""Array problems: reachability, sliding windows, counting and regrouping."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from typing import Iterable, Sequence


def can_reach(arr: Sequence[int], start: int) -> bool:
    """Whether jumps of ``±arr[i]`` from ``start`` can land on a zero."""
    seen = {start}
    stack = [start]
    while stack:
        index = stack.pop()
        if arr[index] == 0:
            return True
        for following in (index + arr[index], index - arr[index]):
            if 0 <= following < len(arr) and following not in seen:
                seen.add(following)
                stack.append(following)
    return False


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each value with the sum of the next ``k`` (or previous ``-k``) values."""
    n = len(code)
    if k == 0 or n == 0:
        return [0] * n
    result = []
    if k > 0:
        window = sum(code[j % n] for j in range(1, k + 1))
        for i in range(n):
            result.append(window)
            window += code[(i + k + 1) % n] - code[(i + 1) % n]
    else:
        width = -k
        window = sum(code[-j % n] for j in range(1, width + 1))
        for i in range(n):
            result.append(window)
            window += code[i] - code[(i - width) % n]
    return result


def count_bad_pairs(nums: Iterable[int]) -> int:
    """Pairs ``i < j`` with ``j - i != nums[j] - nums[i]``."""
    seen: Counter[int] = Counter()
    bad = 0
    for position, value in enumerate(nums):
        difference = position - value
        bad += position - seen[difference]
        seen[difference] += 1
    return bad


def lexicographically_smallest_array(nums: Sequence[int], limit: int) -> list[int]:
    """Smallest arrangement reachable by swapping values that differ by at most ``limit``."""
    group_of: dict[int, int] = {}
    groups: list[deque[int]] = []
    previous = None
    for value in sorted(nums):
        if previous is None or abs(value - previous) > limit:
            groups.append(deque())
        group_of.setdefault(value, len(groups) - 1)
        groups[-1].append(value)
        previous = value
    return [groups[group_of[value]].popleft() for value in nums]


def query_results(limit: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Number of distinct colours in use after each ``[ball, colour]`` query."""
    colour_of: dict[int, int] = {}
    in_use: defaultdict[int, int] = defaultdict(int)
    counts = []
    for ball, colour in queries:
        old = colour_of.get(ball)
        if old is not None:
            in_use[old] -= 1
            if in_use[old] == 0:
                del in_use[old]
        colour_of[ball] = colour
        in_use[colour] += 1
        counts.append(len(in_use))
    return counts


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """For each window of size ``k``: its last value if it climbs by one, else -1."""
    if k < 1:
        raise ValueError("window size must be positive")
    result = []
    run = 0
    for index, value in enumerate(nums):
        run = run + 1 if index and nums[index - 1] + 1 == value else 1
        if index >= k - 1:
            result.append(value if run >= k else -1)
    return result
"""Graph algorithms: ordering, connectivity, shortest paths and colouring."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from typing import Iterable, Sequence

from algosolve.dynamic import MOD


class DisjointSet:
    """Union-find over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        """The representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if they were already one set."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        elif self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        else:
            self._parent[root_x] = root_y
            self._rank[root_y] += 1
        return True


def _topological_order(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[int]:
    followers: dict[int, list[int]] = defaultdict(list)
    indegree: dict[int, int] = defaultdict(int)
    for course, required in prerequisites:
        followers[required].append(course)
        indegree[course] += 1
    queue = deque(c for c in range(num_courses) if indegree[c] == 0)
    order = []
    while queue:
        course = queue.popleft()
        order.append(course)
        for follower in followers[course]:
            indegree[follower] -= 1
            if indegree[follower] == 0:
                queue.append(follower)
    return order


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether every course can be taken; ``[a, b]`` means ``b`` comes before ``a``."""
    return len(_topological_order(num_courses, prerequisites)) == num_courses


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order in which to take all courses, or an empty list if there is none."""
    order = _topological_order(num_courses, prerequisites)
    return order if len(order) == num_courses else []


def find_min_height_trees(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """The roots that give the tree its least height."""
    if n == 1:
        return [0]
    neighbours: dict[int, list[int]] = defaultdict(list)
    degree = [0] * n
    for u, v in edges:
        neighbours[u].append(v)
        neighbours[v].append(u)
        degree[u] += 1
        degree[v] += 1
    layer = [node for node in range(n) if degree[node] == 1]
    result: list[int] = []
    while layer:
        result = layer
        following = []
        for node in layer:
            for neighbour in neighbours[node]:
                degree[neighbour] -= 1
                if degree[neighbour] == 1:
                    following.append(neighbour)
        layer = following
    return result


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    size = len(is_connected)
    seen = [False] * size
    groups = 0
    for origin in range(size):
        if seen[origin]:
            continue
        groups += 1
        seen[origin] = True
        queue = deque([origin])
        while queue:
            node = queue.popleft()
            for other, linked in enumerate(is_connected[node]):
                if linked == 1 and not seen[other]:
                    seen[other] = True
                    queue.append(other)
    return groups


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal from ``k`` to reach nodes ``1..n``; -1 if some never hear it."""
    outgoing: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for source, target, weight in times:
        outgoing[source].append((target, weight))
    dist = {node: math.inf for node in range(1, n + 1)}
    dist[k] = 0
    heap = [(0, k)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist.get(node, math.inf):
            continue
        for target, weight in outgoing[node]:
            candidate = distance + weight
            if candidate < dist.get(target, math.inf):
                dist[target] = candidate
                heapq.heappush(heap, (candidate, target))
    longest = max((dist[node] for node in range(1, n + 1)), default=-1)
    return -1 if longest == math.inf else int(longest)


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Every path from node 0 to the last node of a directed acyclic graph."""
    target = len(graph) - 1
    paths: list[list[int]] = []

    def walk(path: list[int]) -> None:
        node = path[-1]
        if node == target:
            paths.append(list(path))
            return
        for following in graph[node]:
            path.append(following)
            walk(path)
            path.pop()

    if graph:
        walk([0])
    return paths


def possible_bipartition(n: int, dislikes: Iterable[Sequence[int]]) -> bool:
    """Whether people ``1..n`` split in two groups with no dislike inside a group."""
    neighbours: dict[int, list[int]] = defaultdict(list)
    for a, b in dislikes:
        neighbours[a].append(b)
        neighbours[b].append(a)
    colour: dict[int, int] = {}
    for origin in range(1, n + 1):
        if origin in colour:
            continue
        colour[origin] = 1
        queue = deque([origin])
        while queue:
            person = queue.popleft()
            for other in neighbours[person]:
                if colour.get(other) == colour[person]:
                    return False
                if other not in colour:
                    colour[other] = 1 - colour[person]
                    queue.append(other)
    return True


def _parse_equation(equation: str) -> tuple[int, bool, int]:
    if (
        len(equation) != 4
        or equation[1:3] not in ("==", "!=")
        or not all("a" <= c <= "z" for c in (equation[0], equation[3]))
    ):
        raise ValueError(f"malformed equation {equation!r}")
    return ord(equation[0]) - ord("a"), equation[1] == "=", ord(equation[3]) - ord("a")


def equations_possible(equations: Iterable[str]) -> bool:
    """Whether equations like ``"a==b"`` and ``"b!=c"`` can all hold at once."""
    parsed = [_parse_equation(equation) for equation in equations]
    sets = DisjointSet(26)
    for left, equal, right in parsed:
        if equal:
            sets.union(left, right)
    return all(
        sets.find(left) != sets.find(right)
        for left, equal, right in parsed
        if not equal
    )


def smallest_equivalent_string(s1: str, s2: str, base_str: str) -> str:
    """``base_str`` with each letter replaced by the least letter equivalent to it."""
    if len(s1) != len(s2):
        raise ValueError("s1 and s2 must have the same length")
    parent: dict[str, str] = {}

    def find(c: str) -> str:
        while parent.get(c, c) != c:
            c = parent[c]
        return c

    for a, b in zip(s1, s2):
        root_a, root_b = find(a), find(b)
        if root_a != root_b:
            low, high = sorted((root_a, root_b))
            parent[high] = low
    return "".join(find(c) for c in base_str)


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Cables to move so all ``n`` computers connect; -1 if there are too few."""
    if n - 1 > len(connections):
        return -1
    sets = DisjointSet(n)
    components = n
    for x, y in connections:
        if sets.union(x, y):
            components -= 1
    return components - 1


def count_paths(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Number of shortest routes from 0 to ``n - 1``, modulo 10**9 + 7."""
    neighbours: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, weight in roads:
        neighbours[u].append((v, weight))
        neighbours[v].append((u, weight))
    dist = [math.inf] * n
    ways = [0] * n
    dist[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for other, weight in neighbours[node]:
            candidate = distance + weight
            if candidate < dist[other]:
                dist[other] = candidate
                ways[other] = ways[node]
                heapq.heappush(heap, (candidate, other))
            elif candidate == dist[other]:
                ways[other] = (ways[other] + ways[node]) % MOD
    return ways[n - 1]


def find_champion(n: int, edges: Iterable[Sequence[int]]) -> int:
    """The only team nobody beats, or -1 if several teams are unbeaten."""
    beaten = [False] * n
    for _, loser in edges:
        beaten[loser] = True
    unbeaten = [team for team in range(n) if not beaten[team]]
    if len(unbeaten) > 1:
        return -1
    return unbeaten[-1] if unbeaten else 0
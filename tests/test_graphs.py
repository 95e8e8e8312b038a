from collections import deque

import pytest

from algosolve.graphs import (
    DisjointSet,
    all_paths_source_target,
    can_finish,
    count_paths,
    equations_possible,
    find_champion,
    find_circle_num,
    find_min_height_trees,
    find_order,
    make_connected,
    network_delay_time,
    possible_bipartition,
    smallest_equivalent_string,
)


def _height(n, edges, root):
    adjacency = {node: [] for node in range(n)}
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    depth = {root: 0}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for other in adjacency[node]:
            if other not in depth:
                depth[other] = depth[node] + 1
                queue.append(other)
    return max(depth.values())


def test_disjoint_set_starts_separate():
    sets = DisjointSet(5)
    assert [sets.find(x) for x in range(5)] == list(range(5))


def test_disjoint_set_union_merges_once():
    sets = DisjointSet(4)
    assert sets.union(0, 1) is True
    assert sets.union(1, 2) is True
    assert sets.union(0, 2) is False
    assert sets.find(0) == sets.find(2)
    assert sets.find(3) != sets.find(0)


def test_disjoint_set_rejects_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_can_finish_chain_and_cycle():
    assert can_finish(3, [[1, 0], [2, 1]]) is True
    assert can_finish(2, [[1, 0], [0, 1]]) is False


def test_find_order_respects_prerequisites():
    prerequisites = [[1, 0], [2, 0], [3, 1], [3, 2]]
    order = find_order(4, prerequisites)
    assert sorted(order) == [0, 1, 2, 3]
    position = {course: i for i, course in enumerate(order)}
    for course, required in prerequisites:
        assert position[required] < position[course]


def test_find_order_empty_on_cycle():
    assert find_order(3, [[0, 1], [1, 2], [2, 1]]) == []


def test_min_height_single_node():
    assert find_min_height_trees(1, []) == [0]


@pytest.mark.parametrize(
    "n, edges",
    [
        (4, [[1, 0], [1, 2], [1, 3]]),
        (6, [[3, 0], [3, 1], [3, 2], [3, 4], [5, 4]]),
        (5, [[0, 1], [1, 2], [2, 3], [3, 4]]),
    ],
)
def test_min_height_roots_are_minimal(n, edges):
    roots = find_min_height_trees(n, edges)
    heights = [_height(n, edges, node) for node in range(n)]
    best = min(heights)
    assert sorted(roots) == [node for node in range(n) if heights[node] == best]


def test_find_circle_num_identity_and_full():
    size = 4
    identity = [[int(i == j) for j in range(size)] for i in range(size)]
    assert find_circle_num(identity) == size
    assert find_circle_num([[1] * size for _ in range(size)]) == 1


def test_network_delay_chain_sums_weights():
    weights = [3, 4, 6]
    times = [[i + 1, i + 2, w] for i, w in enumerate(weights)]
    assert network_delay_time(times, len(weights) + 1, 1) == sum(weights)


def test_network_delay_prefers_shorter_route():
    times = [[1, 2, 10], [1, 3, 1], [3, 2, 1]]
    assert network_delay_time(times, 3, 1) == 2


def test_network_delay_unreachable():
    assert network_delay_time([[1, 2, 1]], 3, 1) == -1


def test_all_paths_linear_graph():
    graph = [[1], [2], [3], []]
    assert all_paths_source_target(graph) == [[0, 1, 2, 3]]


def test_all_paths_are_valid_and_distinct():
    graph = [[1, 2, 3], [2, 3], [3], []]
    paths = all_paths_source_target(graph)
    assert len({tuple(p) for p in paths}) == len(paths)
    for path in paths:
        assert path[0] == 0 and path[-1] == len(graph) - 1
        for a, b in zip(path, path[1:]):
            assert b in graph[a]


def test_possible_bipartition_even_and_odd_cycles():
    assert possible_bipartition(4, [[1, 2], [2, 3], [3, 4], [4, 1]]) is True
    assert possible_bipartition(3, [[1, 2], [2, 3], [3, 1]]) is False


def test_equations_possible():
    assert equations_possible(["a==b", "b!=a"]) is False
    assert equations_possible(["a==b", "b==c", "a!=d"]) is True


def test_equations_possible_rejects_malformed():
    with pytest.raises(ValueError):
        equations_possible(["a<b"])


def test_smallest_equivalent_string_example():
    assert smallest_equivalent_string("parker", "morris", "parser") == "makkek"


def test_smallest_equivalent_string_invariants():
    base = "leetcode"
    result = smallest_equivalent_string("hello", "world", base)
    assert len(result) == len(base)
    assert all(r <= b for r, b in zip(result, base))
    assert smallest_equivalent_string("abc", "abc", base) == base


def test_smallest_equivalent_string_length_mismatch():
    with pytest.raises(ValueError):
        smallest_equivalent_string("ab", "a", "x")


def test_make_connected():
    assert make_connected(4, [[0, 1], [0, 2], [1, 2]]) == 1
    assert make_connected(3, [[0, 1], [1, 2]]) == 0
    assert make_connected(5, [[0, 1]]) == -1


@pytest.mark.parametrize("routes", [1, 2, 5])
def test_count_paths_parallel_routes(routes):
    end = routes + 1
    roads = []
    for middle in range(1, routes + 1):
        roads += [[0, middle, 3], [middle, end, 3]]
    assert count_paths(end + 1, roads) == routes


def test_count_paths_single_node():
    assert count_paths(1, []) == 1


def test_find_champion():
    assert find_champion(3, [[0, 1], [1, 2]]) == 0
    assert find_champion(4, [[0, 2], [1, 3], [1, 2]]) == -1
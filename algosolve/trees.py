"""Binary-tree and rooted-tree problems."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

_MISSING = object()


@dataclass
class TreeNode:
    """A binary-tree node."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, ``None`` marking an absent child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.left = TreeNode(value)
            queue.append(node.left)
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.right = TreeNode(value)
            queue.append(node.right)
    return root


def tree_values(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Level-order values of a tree, the inverse of :func:`build_tree`."""
    values: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            values.append(None)
            continue
        values.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while values and values[-1] is None:
        values.pop()
    return values


def flip_equiv(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Whether swapping children at some nodes turns one tree into the other."""
    if root1 is None and root2 is None:
        return True
    if root1 is None or root2 is None or root1.val != root2.val:
        return False
    return (
        flip_equiv(root1.left, root2.left) or flip_equiv(root1.left, root2.right)
    ) and (
        flip_equiv(root1.right, root2.right) or flip_equiv(root1.right, root2.left)
    )


def _children(node: TreeNode) -> list[TreeNode]:
    return [child for child in (node.left, node.right) if child is not None]


def deepest_leaves_sum(root: Optional[TreeNode]) -> int:
    """Sum of the values on the deepest level."""
    if root is None:
        return 0
    level = [root]
    while True:
        following = [child for node in level for child in _children(node)]
        if not following:
            return sum(node.val for node in level)
        level = following


def replace_value_in_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Set every value to the sum of its cousins' values, in place; returns ``root``."""
    if root is None:
        return None
    root.val = 0
    level = [root]
    while level:
        families = [_children(node) for node in level]
        total = sum(child.val for family in families for child in family)
        for family in families:
            siblings = sum(child.val for child in family)
            for child in family:
                child.val = total - siblings
        level = [child for family in families for child in family]
    return root


def _adjacency(edges: Iterable[Sequence[int]]) -> dict[int, list[int]]:
    neighbours: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        neighbours[u].append(v)
        neighbours[v].append(u)
    return neighbours


def _preorder(neighbours: dict[int, list[int]], root: int = 0) -> list[tuple[int, int]]:
    """(node, parent) pairs with every parent before its children."""
    order = []
    stack = [(root, -1)]
    while stack:
        node, parent = stack.pop()
        order.append((node, parent))
        stack.extend((child, node) for child in neighbours[node] if child != parent)
    return order


def min_time(n: int, edges: Iterable[Sequence[int]], has_apple: Sequence[bool]) -> int:
    """Steps to walk from node 0, collect every apple and return."""
    if n == 0:
        return 0
    cost = [0] * n
    for node, parent in reversed(_preorder(_adjacency(edges))):
        if parent >= 0 and (cost[node] or has_apple[node]):
            cost[parent] += cost[node] + 2
    return cost[0]


def count_sub_trees(n: int, edges: Iterable[Sequence[int]], labels: str) -> list[int]:
    """For each node, how many nodes of its subtree share its label (root 0)."""
    answer = [0] * n
    if n == 0:
        return answer
    neighbours = _adjacency(edges)
    counts: Counter[str] = Counter()
    stack = [(0, -1, False)]
    while stack:
        node, parent, leaving = stack.pop()
        label = labels[node]
        if leaving:
            answer[node] = counts[label] - answer[node]
            continue
        answer[node] = counts[label]
        counts[label] += 1
        stack.append((node, parent, True))
        stack.extend(
            (child, node, False) for child in neighbours[node] if child != parent
        )
    return answer


def longest_path(parent: Sequence[int], s: str) -> int:
    """Nodes on the longest path in which neighbouring nodes carry different letters."""
    n = len(parent)
    if n == 0:
        return 0
    children: dict[int, list[int]] = defaultdict(list)
    for node, above in enumerate(parent[1:], start=1):
        children[above].append(node)
    order = []
    stack = [0]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(children[node])
    chain = [1] * n
    best = 1
    for node in reversed(order):
        first, second = (
            heapq.nlargest(
                2, (chain[child] for child in children[node] if s[child] != s[node])
            )
            + [0, 0]
        )[:2]
        best = max(best, 1 + first + second)
        chain[node] = 1 + first
    return best
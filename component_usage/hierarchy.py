from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional, Tuple

from .model import HierarchyNode, Location
from .usage_graph import UsageGraph


def _users_and_locations(graph: UsageGraph, name: str) -> Tuple[List[str], List[Location]]:
    """Distinct using components in first-seen order, plus every site `name` is rendered at."""
    users: Dict[str, None] = {}
    locations: List[Location] = []
    for edge in graph.usages_of(name):
        users.setdefault(edge.using_component, None)
        locations.append(Location(file=edge.file, line=edge.line))
    return list(users), locations


def resolve(root: str, graph: UsageGraph, max_depth: Optional[int] = None) -> HierarchyNode:
    """Unroll the "used by" graph into a tree rooted at `root`.

    Each node's children are the components that render it. A component that is
    already on the path from the root is emitted once more as a terminal node with
    ``circular=True`` instead of being expanded again. A root the graph knows
    nothing about yields a single childless node.
    """
    tree = HierarchyNode(name=root)
    # (node to fill, path names, depth); each branch carries its own copy of the path
    stack: List[Tuple[HierarchyNode, FrozenSet[str], int]] = [(tree, frozenset([root]), 1)]

    while stack:
        node, visited, depth = stack.pop()
        node.defined_in = graph.definition_of(node.name)
        users, node.locations = _users_and_locations(graph, node.name)

        if max_depth is not None and depth >= max_depth:
            node.truncated = bool(users)
            continue

        pending = []
        for user in users:
            if user in visited:
                child = HierarchyNode(name=user, circular=True)
            else:
                child = HierarchyNode(name=user)
                pending.append((child, visited | {user}, depth + 1))
            node.children.append(child)
        # Reversed so the first user is expanded first
        stack.extend(reversed(pending))

    return tree

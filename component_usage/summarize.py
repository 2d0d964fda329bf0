from __future__ import annotations

from typing import List, Set, Tuple

from .model import HierarchyNode, UsageStats


def summarize(tree: HierarchyNode) -> UsageStats:
	# Circular terminal nodes count under their own component name and as leaves
	names: Set[str] = set()
	files: Set[str] = set()
	max_depth = 0
	leaves = 0

	stack: List[Tuple[HierarchyNode, int]] = [(tree, 1)]
	while stack:
		node, depth = stack.pop()
		names.add(node.name)
		max_depth = max(max_depth, depth)
		if node.defined_in:
			files.add(node.defined_in)
		if not node.children:
			leaves += 1
		for child in node.children:
			stack.append((child, depth + 1))

	return UsageStats(
		total_components=len(names),
		max_depth=max_depth,
		leaf_count=leaves,
		unique_files=len(files),
	)


def format_summary(stats: UsageStats) -> str:
	parts: List[str] = []
	parts.append("Summary:")
	parts.append(f"• Total unique components: {stats.total_components}")
	parts.append(f"• Maximum depth: {stats.max_depth}")
	parts.append(f"• Leaf usages: {stats.leaf_count}")
	parts.append(f"• Files involved: {stats.unique_files}")
	return "\n".join(parts)

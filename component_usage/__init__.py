"""Find every component that renders a given UI component and show it as a tree.

Modules:
- fs_scan.py: Source file discovery and filtering.
- jsx_parse.py: tree-sitter based extraction of component definitions and JSX usages.
- usage_graph.py: The "used by" graph accumulated from every scanned file.
- hierarchy.py: Cycle-safe resolution of the graph into a usage tree.
- summarize.py: Statistics over a usage tree.
- render.py: Text renderings of a usage tree.
- analysis.py: Scan, resolve and summarize in one call.
"""

__all__ = [
	"fs_scan",
	"jsx_parse",
	"usage_graph",
	"hierarchy",
	"summarize",
	"render",
	"analysis",
	"model",
	"errors",
]

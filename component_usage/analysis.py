from __future__ import annotations

import logging
import os
from typing import Optional

from .fs_scan import scan_repository
from .hierarchy import resolve
from .model import AnalyzeResult, ScanConfig
from .summarize import summarize
from .usage_graph import build_usage_graph


logger = logging.getLogger(__name__)


def analyze_component(
    root: str,
    component: str,
    config: Optional[ScanConfig] = None,
    max_depth: Optional[int] = None,
    workers: int = 1,
) -> AnalyzeResult:
    """Scan `root`, then resolve and summarize the usage tree of `component`.

    Raises AnalysisError when `root` cannot be read. Unreadable or unparsable files
    are skipped and listed in the result's scan report.
    """
    root = os.path.abspath(root)
    files = scan_repository(root, config)
    graph, report = build_usage_graph(files, workers=workers)

    if component not in graph.definitions and not graph.usages_of(component):
        logger.info("Component %s was not found under %s", component, root)

    hierarchy = resolve(component, graph, max_depth=max_depth)
    return AnalyzeResult(
        root=root,
        component=component,
        hierarchy=hierarchy,
        stats=summarize(hierarchy),
        scan=report,
    )

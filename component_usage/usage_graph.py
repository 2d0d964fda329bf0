from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .errors import FileReadError, ParseError
from .jsx_parse import extract_facts, is_pascal_case
from .model import Definition, FileFacts, FileFailure, FileInfo, ScanReport, UsageEdge


logger = logging.getLogger(__name__)


class UsageGraph:
    """Index of which components render which, keyed by the *used* component."""
    def __init__(self):
        self.definitions: Dict[str, Definition] = {}
        self.edges: List[UsageEdge] = []  # every recorded edge, in recording order
        self._usages: Dict[str, Dict[UsageEdge, None]] = {}  # used name -> ordered edge set
        self._lock = threading.Lock()

    def record_definition(self, name: str, file: str) -> None:
        """Record where `name` is defined; a later definition replaces an earlier one."""
        if not is_pascal_case(name):
            raise ValueError(f"Not a component name: {name!r}")
        with self._lock:
            previous = self.definitions.get(name)
            if previous is not None and previous.file_path != file:
                logger.debug("%s redefined in %s (was %s)", name, file, previous.file_path)
            self.definitions[name] = Definition(component_name=name, file_path=file)

    def record_usage(self, used: str, using: Optional[str], file: str, line: int) -> bool:
        """Record that `using` renders `used` at file:line.

        References made outside any component (`using` is None) are dropped.
        Returns True when a new edge was stored.
        """
        if using is None:
            return False
        if not is_pascal_case(used) or not is_pascal_case(using):
            raise ValueError(f"Not a component name: {used!r} / {using!r}")
        edge = UsageEdge(used_component=used, using_component=using, file=file, line=line)
        with self._lock:
            bucket = self._usages.setdefault(used, {})
            if edge in bucket:
                return False
            bucket[edge] = None
            self.edges.append(edge)
        return True

    def add_facts(self, facts: FileFacts) -> None:
        for definition in facts.definitions:
            self.record_definition(definition.component_name, definition.file_path)
        for ref in facts.references:
            self.record_usage(ref.used_component, ref.using_component, ref.file, ref.line)

    def definition_of(self, name: str) -> Optional[str]:
        definition = self.definitions.get(name)
        return definition.file_path if definition else None

    def usages_of(self, name: str) -> Tuple[UsageEdge, ...]:
        return tuple(self._usages.get(name, ()))

    @property
    def components(self) -> List[str]:
        names = set(self.definitions)
        for edge in self.edges:
            names.add(edge.used_component)
            names.add(edge.using_component)
        return sorted(names)


def _read_and_extract(info: FileInfo) -> Union[FileFacts, FileFailure]:
    try:
        with open(info.path, "r", encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        err = FileReadError(info.path, str(e))
        return FileFailure(path=info.path, kind="read", message=str(err))
    try:
        return extract_facts(info.path, text, info.language)
    except ParseError as e:
        return FileFailure(path=info.path, kind="parse", message=str(e))


def build_usage_graph(files: Iterable[FileInfo], workers: int = 1) -> Tuple[UsageGraph, ScanReport]:
    """Read and parse every file, then record facts in file order."""
    files = list(files)
    graph = UsageGraph()
    report = ScanReport()

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(_read_and_extract, files))
    else:
        results = [_read_and_extract(f) for f in files]

    for result in results:
        report.files_scanned += 1
        if isinstance(result, FileFailure):
            logger.warning("Skipping %s (%s error): %s", result.path, result.kind, result.message)
            report.failures.append(result)
            continue
        graph.add_facts(result)

    logger.info(
        "Scanned %d files: %d definitions, %d usage edges, %d skipped",
        report.files_scanned, len(graph.definitions), len(graph.edges), report.files_failed,
    )
    return graph, report

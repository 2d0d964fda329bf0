from __future__ import annotations


class ComponentUsageError(Exception):
    """Base class for errors raised by the analyzer."""


class AnalysisError(ComponentUsageError):
    """The analysis cannot run at all (e.g. the root directory is unreadable)."""


class FileReadError(ComponentUsageError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(ComponentUsageError):
    def __init__(self, path: str, line: int, reason: str = "syntax error"):
        super().__init__(f"{path}:{line}: {reason}")
        self.path = path
        self.line = line
        self.reason = reason

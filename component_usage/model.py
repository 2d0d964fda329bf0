from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, PositiveInt


CIRCULAR_REFERENCE = "Circular Reference"


class ScanConfig(BaseModel):
	ignored_dirs: List[str] = ["node_modules", "build", "dist", ".git"]
	extensions: List[str] = [".js", ".jsx", ".ts", ".tsx"]
	excluded_suffixes: List[str] = [".d.ts"]
	excluded_markers: List[str] = [".test.", ".spec.", ".stories.", ".story."]


class FileInfo(BaseModel):
	path: str
	rel_path: str
	language: str


class Definition(BaseModel):
	component_name: str
	file_path: str


class Reference(BaseModel):
	used_component: str
	using_component: Optional[str] = None
	file: str
	line: PositiveInt


class UsageEdge(BaseModel):
	model_config = ConfigDict(frozen=True)

	used_component: str
	using_component: str
	file: str
	line: PositiveInt


class FileFacts(BaseModel):
	path: str
	definitions: List[Definition] = []
	references: List[Reference] = []


class Location(BaseModel):
	file: str
	line: PositiveInt


class HierarchyNode(BaseModel):
	name: str
	defined_in: Optional[str] = None
	children: List["HierarchyNode"] = []
	locations: List[Location] = []
	circular: bool = False
	truncated: bool = False

	@property
	def used_in(self) -> List[str]:
		if self.circular:
			return [CIRCULAR_REFERENCE]
		return [child.name for child in self.children]


HierarchyNode.model_rebuild()


class UsageStats(BaseModel):
	total_components: int
	max_depth: int
	leaf_count: int
	unique_files: int


class FileFailure(BaseModel):
	path: str
	kind: str  # "read" or "parse"
	message: str


class ScanReport(BaseModel):
	files_scanned: int = 0
	failures: List[FileFailure] = []

	@property
	def files_failed(self) -> int:
		return len(self.failures)


class AnalyzeResult(BaseModel):
	root: str
	component: str
	hierarchy: HierarchyNode
	stats: UsageStats
	scan: ScanReport

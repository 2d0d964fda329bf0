from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from .errors import AnalysisError
from .model import FileInfo, ScanConfig


logger = logging.getLogger(__name__)

EXTENSION_LANGUAGE: Dict[str, str] = {
	".ts": "typescript",
	".tsx": "tsx",
	".js": "tsx",
	".jsx": "tsx",
}


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext.lower(), "unknown")


def is_ignored_dir(rel_dir: str, config: ScanConfig) -> bool:
	# Substring match on the path below the root, so "src/build-tools" is skipped too
	normalized = rel_dir.replace(os.sep, "/")
	return any(fragment in normalized for fragment in config.ignored_dirs)


def is_component_file(filename: str, config: ScanConfig) -> bool:
	if not filename.endswith(tuple(config.extensions)):
		return False
	if filename.endswith(tuple(config.excluded_suffixes)):
		return False
	return not any(marker in filename for marker in config.excluded_markers)


def scan_repository(root: str, config: Optional[ScanConfig] = None) -> List[FileInfo]:
	config = config or ScanConfig()
	try:
		os.listdir(root)
	except OSError as e:
		raise AnalysisError(f"Cannot read root directory {root}: {e}") from e

	def _on_error(err: OSError) -> None:
		logger.warning("Skipping unreadable directory %s: %s", err.filename, err.strerror)

	files: List[FileInfo] = []
	for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
		dirnames[:] = sorted(
			d for d in dirnames
			if not is_ignored_dir(os.path.relpath(os.path.join(dirpath, d), root), config)
		)
		for filename in filenames:
			if not is_component_file(filename, config):
				continue
			path = os.path.join(dirpath, filename)
			files.append(
				FileInfo(
					path=path,
					rel_path=os.path.relpath(path, root).replace(os.sep, "/"),
					language=detect_language(filename),
				)
			)
	files.sort(key=lambda f: f.rel_path)
	logger.debug("Discovered %d component files under %s", len(files), root)
	return files

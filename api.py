from __future__ import annotations

import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, PositiveInt

from component_usage.analysis import analyze_component
from component_usage.errors import AnalysisError
from component_usage.model import AnalyzeResult, ScanConfig


logger = logging.getLogger(__name__)

app = FastAPI(title="Component Usage Analyzer")


class UsageRequest(BaseModel):
	root_path: str
	component: str
	max_depth: Optional[PositiveInt] = None
	exclude: List[str] = []


@app.post("/usage", response_model=AnalyzeResult)
def usage(req: UsageRequest) -> AnalyzeResult:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	config = ScanConfig()
	config.ignored_dirs = config.ignored_dirs + req.exclude
	try:
		return analyze_component(root, req.component, config=config, max_depth=req.max_depth)
	except AnalysisError as e:
		logger.warning("Analysis of %s failed: %s", root, e)
		raise HTTPException(status_code=400, detail=str(e))


def create_app() -> FastAPI:
	return app

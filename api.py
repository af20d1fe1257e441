from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from config import get_settings
from logging_setup import configure_logging, get_logger
from usegraph.errors import RootNotFoundError, SourceReadError
from usegraph.model import DependencyReport
from usegraph.pipeline import analyze_repository

configure_logging(get_settings().log_level)
logger = get_logger("usegraph.api")

app = FastAPI(title="usegraph dependency analyzer")


class AnalyzeRequest(BaseModel):
	root_path: str
	known_modules_only: bool = False


@app.post("/analyze", response_model=DependencyReport)
def analyze(req: AnalyzeRequest) -> DependencyReport:
	root = os.path.abspath(req.root_path)
	settings = get_settings().with_overrides(known_modules_only=req.known_modules_only or None)
	try:
		return analyze_repository(root, settings)
	except RootNotFoundError as e:
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {e.path}")
	except SourceReadError as e:
		logger.error("Analysis of %s aborted: %s", root, e.detail)
		raise HTTPException(status_code=500, detail=e.detail)


def create_app() -> FastAPI:
	return app

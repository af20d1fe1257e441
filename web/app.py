from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from config import get_settings
from logging_setup import configure_logging, get_logger
from usegraph.aggregate import items_by_module
from usegraph.errors import RootNotFoundError, SourceReadError
from usegraph.model import DependencyReport
from usegraph.pipeline import analyze_repository

configure_logging(get_settings().log_level)
logger = get_logger("usegraph.web")

app = FastAPI(title="usegraph report")

templates = Jinja2Templates(directory=os.path.join(os.path.dirname(__file__), "templates"))


def _build_report(root_path: Optional[str]) -> DependencyReport:
    settings = get_settings()
    root = root_path or settings.root
    if not root:
        raise HTTPException(status_code=400, detail="No root_path given and USEGRAPH_ROOT is not set")
    try:
        return analyze_repository(os.path.abspath(root), settings)
    except RootNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Not a directory: {e.path}")
    except SourceReadError as e:
        logger.error("Report for %s aborted: %s", root, e.detail)
        raise HTTPException(status_code=500, detail=e.detail)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, root_path: Optional[str] = None):
    """Render the dependency report as an HTML page."""
    report = _build_report(root_path)
    return templates.TemplateResponse(
        request,
        "report.html",
        {
            "report": report,
            "items_by_module": items_by_module(report.items),
        },
    )


@app.get("/report.json", response_model=DependencyReport)
async def report_json(root_path: Optional[str] = None) -> DependencyReport:
    return _build_report(root_path)


def create_app() -> FastAPI:
    return app

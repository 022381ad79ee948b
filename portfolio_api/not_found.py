# portfolio_api/not_found.py
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from fastapi import HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
NOT_FOUND_BODY = {"error": "not found"}


class PathClass(str, Enum):
    API = "api"
    OTHER = "other"


def classify(path: str) -> PathClass:
    """
    Literal, case-sensitive compare of the first four characters.
    No trailing "/" is required, so "/api" and "/apiextra" are both API.
    """
    if len(path) >= len(API_PREFIX) and path[: len(API_PREFIX)] == API_PREFIX:
        return PathClass.API
    return PathClass.OTHER


def json_not_found() -> JSONResponse:
    return JSONResponse(NOT_FOUND_BODY, status_code=404)


def api_only_not_found(request: Request, full_path: str):
    """No bundled frontend: every unmatched path is a JSON 404."""
    logger.info("Route not found: %s %s", request.method, request.url.path)
    return json_not_found()


def spa_not_found(index: Path):
    """API paths get JSON 404, everything else gets index.html for the client router."""

    def handler(request: Request, full_path: str):
        path = request.url.path
        if classify(path) is PathClass.API:
            logger.info("API route not found: %s %s", request.method, path)
            return json_not_found()
        if not index.is_file():
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(index)

    return handler

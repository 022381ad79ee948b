# portfolio_api/routing.py
"""
Declarative route table.

Starlette matches routes in registration order, so the table is an ordered
list: exact paths and the /assets mount first, the catch-all fallback last.
``install_routes`` registers the list on a FastAPI app exactly as given.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .not_found import api_only_not_found, spa_not_found
from .static_site import StaticSite

FALLBACK_PATH = "/{full_path:path}"
ALL_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")


class RouteKind(str, Enum):
    ROUTE = "route"
    MOUNT = "mount"
    ROUTER = "router"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RouteSpec:
    kind: RouteKind
    path: str
    target: Any
    methods: Tuple[str, ...] = ()
    name: Optional[str] = None


# === handlers ==================================================
def health():
    return {"ok": True}


def static_file(path: Path) -> Callable[[], FileResponse]:
    def handler():
        if not path.is_file():
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(path)

    return handler


# === table =====================================================
def health_routes() -> List[RouteSpec]:
    return [RouteSpec(RouteKind.ROUTE, "/health", health, ("GET",), "health")]


def api_routes(router: APIRouter) -> List[RouteSpec]:
    return [RouteSpec(RouteKind.ROUTER, router.prefix, router, name="api")]


def static_routes(site: StaticSite) -> List[RouteSpec]:
    """Static/SPA wiring; always ends with the terminal fallback."""
    if not site.enabled:
        return [RouteSpec(RouteKind.FALLBACK, FALLBACK_PATH, api_only_not_found, ALL_METHODS, "not_found")]

    return [
        RouteSpec(
            RouteKind.MOUNT,
            "/assets",
            StaticFiles(directory=site.assets, check_dir=False),
            name="assets",
        ),
        RouteSpec(RouteKind.ROUTE, "/", static_file(site.index), ("GET", "HEAD"), "index"),
        RouteSpec(RouteKind.ROUTE, "/favicon.ico", static_file(site.favicon), ("GET", "HEAD"), "favicon"),
        RouteSpec(RouteKind.FALLBACK, FALLBACK_PATH, spa_not_found(site.index), ALL_METHODS, "spa_fallback"),
    ]


def install_routes(app: FastAPI, table: Sequence[RouteSpec]) -> None:
    for spec in table:
        if spec.kind is RouteKind.MOUNT:
            app.mount(spec.path, spec.target, name=spec.name)
        elif spec.kind is RouteKind.ROUTER:
            app.include_router(spec.target)
        else:
            app.add_api_route(
                spec.path,
                spec.target,
                methods=list(spec.methods),
                name=spec.name,
                include_in_schema=spec.kind is RouteKind.ROUTE,
            )

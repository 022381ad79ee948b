# portfolio_api/main.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, config
from .auth import create_router
from .database import create_store_engine
from .routing import RouteSpec, api_routes, health_routes, install_routes, static_routes
from .schema import ensure_schema
from .static_site import probe_static_dir
from .store import StoreGateway

logger = logging.getLogger(__name__)


# =========================================================
# App
# =========================================================
def create_app(store: StoreGateway, static_dir: Optional[str | Path] = None) -> FastAPI:
    """
    Wire the route table in its fixed order:
      1) /health
      2) schema bootstrap (non-fatal)
      3) /api/auth/* (only gets the store gateway)
      4) /assets, /, /favicon.ico and the terminal fallback
    """
    app = FastAPI(
        title="Portfolio API",
        version=os.getenv("APP_VERSION", __version__),
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url=None,
        swagger_ui_oauth2_redirect_url="/api/docs/oauth2-redirect",
    )

    origins = config.cors_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    table: List[RouteSpec] = health_routes()
    app.state.schema = ensure_schema(store)
    table += api_routes(create_router(store))

    site = probe_static_dir(static_dir if static_dir is not None else config.static_dir())
    table += static_routes(site)

    install_routes(app, table)
    app.state.route_table = tuple(table)
    app.state.static_site = site
    return app


def configure_runtime() -> None:
    """.env, root logging and startup warnings; shared by main() and build_app()."""
    config.load_env()
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config.warn_insecure_defaults()


def build_app() -> FastAPI:
    """Factory for `uvicorn portfolio_api.main:build_app --factory`."""
    configure_runtime()
    store = StoreGateway(create_store_engine(config.database_url()))
    return create_app(store)


# =========================================================
# Entry point
# =========================================================
def main() -> None:
    configure_runtime()

    port = config.resolve_port()
    try:
        engine = create_store_engine(config.database_url())
    except Exception:
        logger.exception("Could not create the database pool")
        raise SystemExit(1)

    app = create_app(StoreGateway(engine))

    logger.info("Starting server on :%s", port)
    try:
        uvicorn.run(app, host="0.0.0.0", port=int(port), log_level=config.log_level().lower())
    except (OSError, ValueError):
        logger.exception("Could not listen on port %s", port)
        raise SystemExit(1)


if __name__ == "__main__":
    main()

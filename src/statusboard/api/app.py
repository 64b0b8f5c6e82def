"""FastAPI application factory for Statusboard."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from statusboard.api.routes import groups
from statusboard.config.loader import load_config
from statusboard.config.models import StatusboardConfig

logger = logging.getLogger(__name__)


def create_app(config: StatusboardConfig | None = None) -> FastAPI:
    app = FastAPI(title="Statusboard", version="0.1.0", description="PagerDuty service dashboard groups")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config is None:
        try:
            config = load_config()
        except (FileNotFoundError, ValueError) as exc:
            # Subdomain can still be supplied per request
            logger.warning("Using default configuration: %s", exc)
            config = StatusboardConfig()

    app.state.config = config

    @app.get("/health", tags=["meta"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(groups.router, prefix="/api")

    return app

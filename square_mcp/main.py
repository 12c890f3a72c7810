"""Square MCP gateway FastAPI application entry point."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from square_mcp.config import Settings, settings as default_settings
from square_mcp.core.logging import setup_logging
from square_mcp.core.security import install_security_middleware, mask_secret
from square_mcp.dispatcher import Dispatcher
from square_mcp.mcp.protocol import ProtocolAdapter
from square_mcp.mcp.router import router as mcp_router
from square_mcp.registry.builder import build_registry
from square_mcp.registry.models import ServiceRegistry
from square_mcp.registry.type_map import TYPE_MAP, TypeMap

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(
    settings: Settings | None = None,
    registry: ServiceRegistry | None = None,
    type_map: TypeMap | None = None,
) -> FastAPI:
    """Wire settings, registry, dispatcher and protocol adapter into an app."""
    settings = settings or default_settings
    registry = registry if registry is not None else build_registry(settings)

    dispatcher = Dispatcher(
        registry=registry,
        credential=lambda: settings.ACCESS_TOKEN,
        writes_disabled=lambda: settings.DISALLOW_WRITES,
        type_map=TYPE_MAP if type_map is None else type_map,
    )
    adapter = ProtocolAdapter(
        dispatcher,
        server_name=settings.SERVER_NAME,
        server_version=settings.SERVER_VERSION,
    )

    # -- Lifespan – startup / shutdown hooks --------------------------------

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        setup_logging(settings.LOG_LEVEL, service=settings.SERVER_NAME)
        base = f"http://localhost:{settings.PORT}"
        logger.info("Square MCP Server running on port %s", settings.PORT)
        logger.info("Health check available at %s/health", base)
        logger.info("MCP endpoint available at %s/mcp", base)
        logger.info(
            "Registry: %s mode, %d services; writes %s; access token %s",
            settings.REGISTRY_MODE,
            len(registry),
            "disabled" if settings.DISALLOW_WRITES else "enabled",
            mask_secret(settings.ACCESS_TOKEN) if settings.ACCESS_TOKEN else "not set",
        )
        yield
        logger.info("Shutting down Square MCP Server")

    app = FastAPI(
        title="Square MCP Server",
        summary="JSON-RPC gateway from MCP tool calls to the Square REST API",
        version=settings.SERVER_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.adapter = adapter

    # -- CORS ----------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- Security middleware (after CORS, so pre-flight OPTIONS work) --------
    install_security_middleware(app)

    # -- Routers -------------------------------------------------------------
    app.include_router(mcp_router, tags=["mcp"])

    # -- Health endpoint -----------------------------------------------------

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Liveness check."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.SERVER_NAME,
        }

    return app


app = create_app()

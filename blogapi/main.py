"""Main server application."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.ext.asyncio import async_sessionmaker

from .core.database import dispose_engine, init_models
from .core.environment import ConfigurationService, get_config_service
from .core.middleware import AuthMiddleware, DatabaseMiddleware, PrometheusMiddleware
from .core.security import TokenManager
from .graphql import create_graphql_router

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app."""
    logger.info("Starting up blog API server...")
    try:
        await init_models()
        logger.info("Blog API server startup complete!")
        yield
    finally:
        logger.info("Shutting down blog API server...")
        await dispose_engine()


def create_app(
    config_service: Optional[ConfigurationService] = None,
    session_maker: Optional[async_sessionmaker] = None,
    token_manager: Optional[TokenManager] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config_service: Settings source, defaults to the environment
        session_maker: Session factory for request sessions, defaults to the
            process-wide engine
        token_manager: Token issuer/verifier, defaults to one built from the
            auth settings

    Returns:
        The configured application
    """
    config_service = config_service or get_config_service()
    service_settings = config_service.get_service_settings()

    app = FastAPI(
        title=service_settings.service_name,
        debug=service_settings.debug,
        version=VERSION,
        lifespan=lifespan if session_maker is None else None,
    )
    app.state.token_manager = token_manager or TokenManager.from_settings(
        config_service.get_auth_settings()
    )

    logger.info(f"Environment: {service_settings.environment.value}")

    # Starlette runs the last added middleware first.
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(AuthMiddleware)
    app.add_middleware(DatabaseMiddleware, session_maker=session_maker)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint for Docker and monitoring."""
        return {
            "status": "healthy",
            "service": service_settings.service_name,
            "version": VERSION,
        }

    @app.get("/metrics", tags=["metrics"])
    async def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(
        create_graphql_router(graphiql=config_service.is_development()),
        prefix="/graphql",
    )

    return app


if __name__ == "__main__":
    import uvicorn

    api_settings = get_config_service().get_api_settings()
    debug = get_config_service().get_service_settings().debug

    uvicorn.run(
        "blogapi.main:create_app",
        factory=True,
        host=api_settings.api_host,
        port=api_settings.api_port,
        reload=api_settings.reload,
        log_level="debug" if debug else "info",
    )

"""
Main FastAPI application for the listings gateway
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..cache import ResponseCache, create_response_cache
from ..config import Settings, settings as default_settings
from ..errors import StartupError
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    cache: ResponseCache | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment-loaded settings)
        transport: Optional httpx transport for the upstream client
        cache: Optional pre-built response cache shared by all requests

    Raises:
        StartupError: If the GraphQL schema fails validation
    """
    settings = settings or default_settings
    configure_logging(debug=settings.debug, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting listings gateway...", upstream=settings.upstream_base_url)

        response_cache = cache
        if response_cache is None:
            try:
                response_cache = create_response_cache(settings)
            except Exception as e:
                logger.error("Failed to create response cache", error=str(e))
                raise StartupError(f"Failed to create response cache: {e}") from e

        try:
            await response_cache.ping()
        except Exception as e:
            logger.error("Response cache backend unreachable", error=str(e))
            raise StartupError(f"Response cache backend unreachable: {e}") from e

        http_client = httpx.AsyncClient(
            timeout=settings.upstream_timeout,
            transport=transport,
            headers={"User-Agent": f"listings-gateway/{__version__}"},
        )

        app.state.settings = settings
        app.state.response_cache = response_cache
        app.state.http_client = http_client

        try:
            yield
        finally:
            logger.info("Shutting down listings gateway...")
            await http_client.aclose()
            if cache is None:
                await response_cache.close()

    app = FastAPI(
        title="Listings Gateway",
        description="GraphQL gateway for featured listings and amenities",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        create_app(),
        host=default_settings.api_host,
        port=default_settings.api_port,
        log_level=default_settings.log_level.lower(),
    )

"""
Main FastAPI application for blogql
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import require_mongo_url, settings
from ..database import close_database, create_document_store, init_database
from ..database.store import DocumentStore
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Opens the MongoDB client once and publishes the store on ``app.state`` for
    the GraphQL context getter. A store injected through create_app is used as-is.
    """
    logger.info("Starting blogql API...")

    owns_database = app.state.store is None
    if owns_database:
        # Fatal when missing: nothing can be served without a database
        init_database(require_mongo_url())
        store = create_document_store()
        app.state.store = store
        logger.info("Connected to MongoDB", database=settings.mongo_database)

        from ..validation import validate_startup_configuration

        await validate_startup_configuration(store)

    yield

    logger.info("Shutting down blogql API...")
    if owns_database:
        await close_database()
        app.state.store = None


def create_app(store: DocumentStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Document store to serve from. When omitted, one backed by the
            configured MongoDB is created at startup.
    """
    app = FastAPI(
        title="blogql API",
        description="GraphQL API over users, posts and comments",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        current: DocumentStore | None = request.app.state.store
        database = "unavailable"
        if current is not None:
            try:
                await current.ping()
                database = "connected"
            except Exception as e:
                logger.warning("Health check database ping failed", error=str(e))
        status = "healthy" if database == "connected" else "degraded"
        return {"status": status, "version": __version__, "database": database}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Server should not start with a broken schema
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blogql.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from shortlink_app.api import shortener
from shortlink_app.config import settings
from shortlink_app.database.connection import init_db
from shortlink_app.logging_config import setup_logging
from shortlink_app.middleware.logging import LoggingMiddleware

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger("shortlink_app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    if settings.store_backend == "sqlalchemy":
        init_db()
        logger.info("Database schema ready")
    yield


# Create FastAPI app, docs live under the API prefix
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Maps long urls to short random ids and redirects back",
    debug=settings.debug,
    docs_url=f"{settings.api_prefix}/docs",
    redoc_url=f"{settings.api_prefix}/redoc",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    lifespan=lifespan,
)
app.add_middleware(LoggingMiddleware)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(shortener.router, prefix=settings.api_prefix)

# Static frontend goes last so it never shadows the API
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
else:
    logger.info("Static directory %r not found, frontend not served", settings.static_dir)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
